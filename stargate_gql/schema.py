"""A small executable schema tying the query and mutation roots to a context."""

from __future__ import annotations

import re
from typing import Any, Awaitable, Callable, Mapping

import httpx

from .agent import NewAgent
from .context import Context
from .errors import SchemaError
from .mutation_root import MutationRoot
from .query_root import QueryRoot

_Resolver = Callable[["Schema", dict], Awaitable[Any]]


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _reject_extra(args: Mapping[str, Any]) -> None:
    if args:
        names = ", ".join(sorted(args))
        raise SchemaError(f"Unknown argument(s): {names}")


async def _hello_world(schema: Schema, args: dict) -> Any:
    _reject_extra(args)
    return await schema.query_root.hello_world()


async def _get_agent(schema: Schema, args: dict) -> Any:
    _reject_extra(args)
    return await schema.query_root.get_agent(schema.ctx, schema.client)


async def _new_test(schema: Schema, args: dict) -> Any:
    _reject_extra(args)
    return await schema.mutation_root.new_test()


def _as_new_agent(value: Any) -> NewAgent:
    if isinstance(value, NewAgent):
        return value
    if not isinstance(value, Mapping):
        raise SchemaError("Argument userData must be an object")
    fields = {_snake(key): item for key, item in value.items()}
    unknown = set(fields) - {"symbol", "faction", "email"}
    if unknown:
        raise SchemaError(f"Unknown input field(s): {', '.join(sorted(unknown))}")
    try:
        return NewAgent(
            symbol=fields["symbol"], faction=fields["faction"], email=fields.get("email")
        )
    except KeyError as err:
        raise SchemaError(f"Missing input field {err.args[0]}") from err


async def _register_new_user(schema: Schema, args: dict) -> Any:
    if "user_data" not in args:
        raise SchemaError("Missing argument userData")
    user_data = _as_new_agent(args.pop("user_data"))
    _reject_extra(args)
    return await schema.mutation_root.register_new_user(schema.ctx, user_data, schema.client)


_QUERIES: dict[str, _Resolver] = {
    "hello_world": _hello_world,
    "get_agent": _get_agent,
}

_MUTATIONS: dict[str, _Resolver] = {
    "new_test": _new_test,
    "register_new_user": _register_new_user,
}


def _output(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


class Schema:
    """Resolves single query and mutation fields against a context."""

    def __init__(self, ctx: Context, client: httpx.AsyncClient | None = None) -> None:
        self.ctx = ctx
        self.client = client
        self.query_root = QueryRoot()
        self.mutation_root = MutationRoot()

    async def _execute(
        self, type_name: str, resolvers: Mapping[str, _Resolver], field: str, kwargs: dict
    ) -> dict[str, Any]:
        resolver = resolvers.get(_snake(field))
        try:
            if resolver is None:
                raise SchemaError(f'Unknown field "{field}" on type "{type_name}"')
            args = {_snake(key): value for key, value in kwargs.items()}
            value = await resolver(self, args)
        except SchemaError as err:
            return {"data": None, "errors": [err.extend()]}
        return {"data": {field: _output(value)}}

    async def query(self, field: str, **kwargs: Any) -> dict[str, Any]:
        """Resolve one query field and return a GraphQL-style response."""
        return await self._execute("QueryRoot", _QUERIES, field, kwargs)

    async def mutate(self, field: str, **kwargs: Any) -> dict[str, Any]:
        """Resolve one mutation field and return a GraphQL-style response."""
        return await self._execute("MutationRoot", _MUTATIONS, field, kwargs)


def create_schema(ctx: Context) -> Schema:
    """Build a schema bound to the given context."""
    return Schema(ctx)