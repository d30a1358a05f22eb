"""Query resolvers."""

from __future__ import annotations

import httpx

from .agent import GetAgentResponse
from .context import Context, _open_client, endpoint
from .errors import ServerError


class QueryRoot:
    """Root of all queries."""

    async def hello_world(self) -> str:
        return "Hello world"

    async def get_agent(
        self, ctx: Context, client: httpx.AsyncClient | None = None
    ) -> GetAgentResponse:
        """Fetch the agent that the context's token belongs to."""
        async with _open_client(client) as http:
            try:
                response = await http.get(
                    endpoint("my/agent"),
                    headers={"Authorization": ctx.auth_header()},
                )
            except httpx.HTTPError as err:
                raise ServerError(str(err)) from err
            try:
                return GetAgentResponse.from_dict(response.json())
            except (ValueError, KeyError, TypeError) as err:
                raise ServerError(str(err)) from err