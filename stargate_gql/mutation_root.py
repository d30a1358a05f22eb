"""Mutation resolvers."""

from __future__ import annotations

import httpx

from .agent import NewAgent, NewAgentResponse
from .context import Context, _open_client, endpoint
from .errors import ServerError


class MutationRoot:
    """Root of all mutations."""

    async def new_test(self) -> str:
        return "New text"

    async def register_new_user(
        self,
        ctx: Context,
        user_data: NewAgent,
        client: httpx.AsyncClient | None = None,
    ) -> NewAgentResponse:
        """Register a new agent with the upstream API."""
        async with _open_client(client) as http:
            try:
                response = await http.post(
                    endpoint("register"),
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": ctx.auth_header(),
                    },
                    json=user_data.to_payload(),
                )
            except httpx.HTTPError as err:
                raise ServerError(str(err)) from err
            try:
                return NewAgentResponse.from_dict(response.json())
            except (ValueError, KeyError, TypeError) as err:
                raise ServerError(str(err)) from err