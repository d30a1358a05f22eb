"""Errors raised by resolvers, with GraphQL error extensions."""

from __future__ import annotations

from typing import Any


class SchemaError(Exception):
    """Base error for schema resolvers."""

    default_message = "Schema error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def extensions(self) -> dict[str, Any]:
        """Extension values attached to the GraphQL error."""
        return {}

    def extend(self) -> dict[str, Any]:
        """Return the GraphQL error representation of this error."""
        error: dict[str, Any] = {"message": str(self)}
        extensions = self.extensions
        if extensions:
            error["extensions"] = extensions
        return error


class NotFoundError(SchemaError):
    """The requested resource does not exist."""

    default_message = "Could not find resource"

    def __init__(self) -> None:
        super().__init__()

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": "NOT_FOUND"}


class ServerError(SchemaError):
    """A call to the upstream server failed."""

    default_message = "ServerError"

    def __init__(self, reason: str) -> None:
        super().__init__()
        self.reason = reason

    @property
    def extensions(self) -> dict[str, Any]:
        return {"reason": str(self.reason)}


class ErrorWithoutExtensions(SchemaError):
    """An error carrying no extension values."""

    default_message = "No Extensions"

    def __init__(self) -> None:
        super().__init__()