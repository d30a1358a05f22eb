import pytest

from stargate_gql.errors import (
    ErrorWithoutExtensions,
    NotFoundError,
    SchemaError,
    ServerError,
)


def test_not_found_extend():
    err = NotFoundError()
    assert err.extend() == {
        "message": "Could not find resource",
        "extensions": {"code": "NOT_FOUND"},
    }


def test_server_error_carries_reason():
    err = ServerError("connection refused")
    result = err.extend()
    assert result["message"] == "ServerError"
    assert result["extensions"] == {"reason": "connection refused"}
    assert err.reason == "connection refused"


def test_error_without_extensions_has_no_extensions_key():
    result = ErrorWithoutExtensions().extend()
    assert result == {"message": "No Extensions"}


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (NotFoundError(), "Could not find resource"),
        (ServerError("boom"), "ServerError"),
        (ErrorWithoutExtensions(), "No Extensions"),
    ],
)
def test_all_are_schema_errors(error, message):
    assert isinstance(error, SchemaError)
    assert str(error) == message
    assert error.extend()["message"] == message


def test_str_matches_message():
    err = ServerError("boom")
    assert str(err) == err.extend()["message"]