"""Unit tests for the gateway error taxonomy."""

import pytest

from travel_companion.domain.errors import ErrorCode, ErrorKind, GatewayError


@pytest.mark.parametrize(
    "code,status",
    [
        (ErrorCode.MISSING_NAME, 400),
        (ErrorCode.INVALID_MESSAGE_ID, 400),
        (ErrorCode.INVALID_REQUEST_BODY, 400),
        (ErrorCode.GROUP_NOT_FOUND, 404),
        (ErrorCode.MESSAGE_NOT_FOUND, 404),
        (ErrorCode.MESSAGE_NOT_IN_GROUP, 400),
        (ErrorCode.DELETE_FAILED, 500),
        (ErrorCode.INTERNAL_ERROR, 500),
    ],
)
def test_status_code_follows_kind(code, status):
    assert GatewayError(code, "boom").status_code == status


def test_every_code_has_a_kind():
    for code in ErrorCode:
        assert isinstance(code.kind, ErrorKind)


def test_wire_values_are_stable():
    assert ErrorCode.MESSAGE_NOT_IN_GROUP.value == "MESSAGE_NOT_IN_GROUP"
    assert ErrorCode.MESSAGE_NOT_IN_GROUP.kind is ErrorKind.INTEGRITY


def test_to_dict_envelope():
    error = GatewayError(ErrorCode.MISSING_NAME, "Name is required")

    assert error.to_dict() == {"error": "Name is required", "code": "MISSING_NAME"}


def test_internal_includes_description():
    error = GatewayError.internal("disk I/O error")

    assert error.code is ErrorCode.INTERNAL_ERROR
    assert error.message == "Internal server error: disk I/O error"


def test_group_not_found():
    error = GatewayError.group_not_found()

    assert error.to_dict() == {"error": "Group not found", "code": "GROUP_NOT_FOUND"}
    assert "GROUP_NOT_FOUND" in repr(error)
