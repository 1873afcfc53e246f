"""Gateway error taxonomy.

Every failure the group gateway reports carries an ``ErrorCode``. Codes are
a closed set and each belongs to exactly one ``ErrorKind``, which in turn
fixes the HTTP status. The string values of ``ErrorCode`` are part of the
wire contract and must not change.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a gateway failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTEGRITY = "integrity"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _KIND_STATUS[self]


_KIND_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTEGRITY: 400,
    ErrorKind.INTERNAL: 500,
}


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in the ``code`` field."""

    MISSING_NAME = "MISSING_NAME"
    INVALID_TRIP_ID = "INVALID_TRIP_ID"
    INVALID_GROUP_ID = "INVALID_GROUP_ID"
    MISSING_MEMBER_NAME = "MISSING_MEMBER_NAME"
    INVALID_MEMBER_EMAIL = "INVALID_MEMBER_EMAIL"
    INVALID_MESSAGE = "INVALID_MESSAGE"
    INVALID_SENDER_NAME = "INVALID_SENDER_NAME"
    INVALID_MESSAGE_ID = "INVALID_MESSAGE_ID"
    INVALID_REQUEST_BODY = "INVALID_REQUEST_BODY"
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"
    MESSAGE_NOT_FOUND = "MESSAGE_NOT_FOUND"
    MESSAGE_NOT_IN_GROUP = "MESSAGE_NOT_IN_GROUP"
    DELETE_FAILED = "DELETE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def kind(self) -> ErrorKind:
        return _CODE_KIND[self]


_CODE_KIND = {
    ErrorCode.MISSING_NAME: ErrorKind.VALIDATION,
    ErrorCode.INVALID_TRIP_ID: ErrorKind.VALIDATION,
    ErrorCode.INVALID_GROUP_ID: ErrorKind.VALIDATION,
    ErrorCode.MISSING_MEMBER_NAME: ErrorKind.VALIDATION,
    ErrorCode.INVALID_MEMBER_EMAIL: ErrorKind.VALIDATION,
    ErrorCode.INVALID_MESSAGE: ErrorKind.VALIDATION,
    ErrorCode.INVALID_SENDER_NAME: ErrorKind.VALIDATION,
    ErrorCode.INVALID_MESSAGE_ID: ErrorKind.VALIDATION,
    ErrorCode.INVALID_REQUEST_BODY: ErrorKind.VALIDATION,
    ErrorCode.GROUP_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.MESSAGE_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.MESSAGE_NOT_IN_GROUP: ErrorKind.INTEGRITY,
    ErrorCode.DELETE_FAILED: ErrorKind.INTERNAL,
    ErrorCode.INTERNAL_ERROR: ErrorKind.INTERNAL,
}


class GatewayError(Exception):
    """Raised when a group gateway operation cannot complete.

    Attributes:
        code: The machine-readable error code.
        message: Human-readable description.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> ErrorKind:
        return self.code.kind

    @property
    def status_code(self) -> int:
        return self.code.kind.status_code

    def to_dict(self) -> dict[str, str]:
        """Render the error as the JSON envelope sent to clients."""
        return {"error": self.message, "code": self.code.value}

    @classmethod
    def group_not_found(cls) -> "GatewayError":
        return cls(ErrorCode.GROUP_NOT_FOUND, "Group not found")

    @classmethod
    def internal(cls, description: str) -> "GatewayError":
        return cls(ErrorCode.INTERNAL_ERROR, f"Internal server error: {description}")

    def __repr__(self) -> str:
        return f"<GatewayError(code={self.code.value}, message={self.message!r})>"
