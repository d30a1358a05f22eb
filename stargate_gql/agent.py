"""Agents and the responses carrying them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .contract import Contract
from .faction import Faction
from .ship import Ship


@dataclass
class NewAgent:
    """Input for registering a new agent."""

    symbol: str
    faction: str
    email: str | None = None

    def to_payload(self) -> dict[str, str]:
        """Return the JSON body of the registration request."""
        payload = {"symbol": self.symbol, "faction": self.faction}
        if self.email is not None:
            payload["email"] = self.email
        return payload


@dataclass
class Agent:
    """A player agent."""

    symbol: str
    headquarters: str
    credits: int
    starting_faction: str
    ship_count: int
    account_id: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Agent:
        return cls(
            symbol=data["symbol"],
            headquarters=data["headquarters"],
            credits=data["credits"],
            starting_faction=data["startingFaction"],
            ship_count=data["shipCount"],
            account_id=data.get("accountId"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.account_id is not None:
            result["accountId"] = self.account_id
        result.update(
            symbol=self.symbol,
            headquarters=self.headquarters,
            credits=self.credits,
            startingFaction=self.starting_faction,
            shipCount=self.ship_count,
        )
        return result


@dataclass
class AgentResponse:
    """Everything returned when an agent is registered."""

    agent: Agent
    contract: Contract
    faction: Faction
    token: str
    ships: list[Ship] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AgentResponse:
        return cls(
            agent=Agent.from_dict(data["agent"]),
            contract=Contract.from_dict(data["contract"]),
            faction=Faction.from_dict(data["faction"]),
            token=data["token"],
            ships=[Ship.from_dict(s) for s in data["ships"]],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "agent": self.agent.to_dict(),
            "contract": self.contract.to_dict(),
            "faction": self.faction.to_dict(),
            "ships": [s.to_dict() for s in self.ships],
            "token": self.token,
        }


@dataclass
class NewAgentResponse:
    """Root object of the registration response."""

    data: AgentResponse

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NewAgentResponse:
        return cls(data=AgentResponse.from_dict(data["data"]))

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data.to_dict()}


@dataclass
class GetAgentResponse:
    """Root object of the agent lookup response."""

    data: Agent

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GetAgentResponse:
        return cls(data=Agent.from_dict(data["data"]))

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data.to_dict()}