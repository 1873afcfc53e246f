"""Request validation helpers.

Request payloads reach the services as raw JSON values so that every
malformed field is reported with its own error code instead of a generic
schema failure. These helpers run before any store access.
"""

import re
from typing import Any

from travel_companion.domain.errors import ErrorCode, GatewayError

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)


def _parse_integer(value: Any) -> int | None:
    """Return ``value`` as an int, or None if it is not an integer."""
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.match(text):
            return int(text)
    return None


def parse_identifier(raw: Any, code: ErrorCode, message: str) -> int:
    """Parse a path identifier.

    Args:
        raw: Identifier as received (usually a path segment string).
        code: Error code raised when the identifier is malformed.
        message: Human-readable error message.

    Returns:
        The identifier as an integer.

    Raises:
        GatewayError: If ``raw`` is not an integer.
    """
    if isinstance(raw, float):
        raise GatewayError(code, message)
    value = _parse_integer(raw)
    if value is None:
        raise GatewayError(code, message)
    return value


def parse_optional_integer(value: Any, code: ErrorCode, message: str) -> int | None:
    """Parse an optional integer body field.

    ``None`` passes through. Integral numbers and integer strings are
    converted; anything else is rejected.
    """
    if value is None:
        return None
    parsed = _parse_integer(value)
    if parsed is None:
        raise GatewayError(code, message)
    return parsed


def require_text(value: Any, code: ErrorCode, message: str) -> str:
    """Require a string that is non-empty after trimming.

    Returns:
        The trimmed text.

    Raises:
        GatewayError: If the value is missing, not a string, or blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise GatewayError(code, message)
    return value.strip()


def optional_text(value: Any, code: ErrorCode, message: str) -> str | None:
    """Normalize an optional string field.

    Returns:
        The trimmed text, or None when the value is absent or blank.

    Raises:
        GatewayError: If the value is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise GatewayError(code, message)
    return value.strip() or None
