"""Request context shared by resolvers, and the upstream API location."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

import httpx

API_URL = "https://api.spacetraders.io/v2/"


@dataclass(frozen=True)
class Context:
    """Data every resolver may read: the account token for the upstream API."""

    account_token: str

    def auth_header(self) -> str:
        """Return the value of the Authorization header for upstream calls."""
        return f"Bearer {self.account_token}"


def endpoint(path: str) -> str:
    """Return the full URL of an upstream API path."""
    return f"{API_URL}{path}"


@asynccontextmanager
async def _open_client(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the given client, or a fresh one that is closed afterwards."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient() as fresh:
        yield fresh