# stargate_gql

A small async layer over the space trading game's v2 HTTP API
(`https://api.spacetraders.io/v2/`). It provides typed models for agents,
contracts, factions and ships, query and mutation resolvers that call the API
with `httpx` and decode the answers into those models, and a `Schema` that
resolves single fields by name and returns GraphQL-style response dictionaries.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the schema

`create_schema(ctx)` builds a `Schema` bound to a `Context` holding your
account token. `Schema.query(field, **kwargs)` and
`Schema.mutate(field, **kwargs)` resolve one field and return a dictionary.
Field and argument names may be given in snake_case or camelCase
(`"get_agent"` or `"getAgent"`, `user_data=` or `userData=`); the response is
keyed by the field name exactly as given.

```python
import asyncio

from stargate_gql.agent import NewAgent
from stargate_gql.context import Context
from stargate_gql.schema import create_schema


async def main():
    schema = create_schema(Context(account_token="token"))

    print(await schema.query("hello_world"))
    # {'data': {'hello_world': 'Hello world'}}

    result = await schema.query("getAgent")
    agent = result["data"]["getAgent"]["data"]
    print(agent["symbol"], agent["credits"])

    registered = await schema.mutate(
        "register_new_user",
        user_data=NewAgent(symbol="PILOT", faction="COSMIC", email="pilot@example.com"),
    )
    print(registered["data"]["register_new_user"]["data"]["token"])


asyncio.run(main())
```

Available fields:

- queries: `hello_world`, `get_agent`
- mutations: `new_test`, `register_new_user` (argument `user_data`)

`user_data` may be a `NewAgent` or a mapping with the keys `symbol`,
`faction` and optionally `email`. Model results are returned as their
`to_dict()` form.

When a resolver raises a `SchemaError` (an unknown field, an unknown or missing
argument, a failed request or an undecodable answer), the result is
`{"data": None, "errors": [error.extend()]}` instead.

To use your own `httpx.AsyncClient`, construct the schema directly:
`Schema(ctx, client)`. Without one, each upstream call opens and closes its own
client.

## Using the resolvers directly

`QueryRoot.get_agent(ctx, client=None)` and
`MutationRoot.register_new_user(ctx, user_data, client=None)` return model
objects (`GetAgentResponse`, `NewAgentResponse`) and raise `ServerError` on
failure. Each upstream request carries `Authorization: Bearer <account token>`,
as built by `Context.auth_header()`; `context.endpoint(path)` builds the full
URL of an API path.

```python
import httpx

from stargate_gql.context import Context
from stargate_gql.query_root import QueryRoot


async def fetch_agent():
    async with httpx.AsyncClient() as client:
        response = await QueryRoot().get_agent(Context(account_token="token"), client)
        return response.data.symbol
```

## Models

Every model is a dataclass with `from_dict`, which decodes the API's camelCase
JSON, and `to_dict`, which encodes it again. Optional fields that are unset are
left out of `to_dict` output, except `Faction.headquarters`, `ContractTerms.deliver`
and `ShipFuel.consumed`, which are written as `None`.

- `stargate_gql.agent`: `NewAgent` (with `to_payload()`, the registration
  request body), `Agent`, `AgentResponse`, `NewAgentResponse`,
  `GetAgentResponse`
- `stargate_gql.contract`: `ContractType`, `ContractDeliver`, `ContractTerms`,
  `Contract`
- `stargate_gql.faction`: `FactionTrait`, `Faction`
- `stargate_gql.payment`: `Payment`
- `stargate_gql.ship`: `Ship` and its parts: `Registration`, `ShipNav`,
  `ShipNavRoute`, `ShipNavRouteWaypoint`, `ShipCrew`, `ShipRequirements`,
  `ShipFrame`, `ShipReactor`, `ShipEngine`, `Cooldown`, `ShipModule`,
  `ShipMount`, `ShipCargo`, `ShipCargoItem`, `ShipFuel`, `ShipFuelData`

## Errors

`stargate_gql.errors` defines `SchemaError` and its subclasses `NotFoundError`,
`ServerError` and `ErrorWithoutExtensions`. `extend()` returns the GraphQL
error dictionary: the message, plus an `extensions` entry where there is one,
for example `{"message": "Could not find resource", "extensions": {"code": "NOT_FOUND"}}`
for `NotFoundError`, and `{"message": "ServerError", "extensions": {"reason": ...}}`
for `ServerError`.

## What it does not do

- It does not serve GraphQL over HTTP: there is no web server and no command
  to start one.
- It does not parse GraphQL query documents or select sub-fields; the schema
  resolves one named field per call and returns the whole result.
- It stores nothing; every call goes to the upstream API.