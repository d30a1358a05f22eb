"""Factions and their traits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class FactionTrait:
    """A trait of a faction."""

    symbol: str
    name: str
    description: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FactionTrait:
        return cls(
            symbol=data["symbol"],
            name=data["name"],
            description=data["description"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "name": self.name, "description": self.description}


@dataclass
class Faction:
    """A faction of the game universe."""

    symbol: str
    name: str
    description: str
    headquarters: str | None
    traits: list[FactionTrait] = field(default_factory=list)
    is_recruiting: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Faction:
        return cls(
            symbol=data["symbol"],
            name=data["name"],
            description=data["description"],
            headquarters=data.get("headquarters"),
            traits=[FactionTrait.from_dict(item) for item in data["traits"]],
            is_recruiting=data["isRecruiting"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "description": self.description,
            "headquarters": self.headquarters,
            "traits": [t.to_dict() for t in self.traits],
            "isRecruiting": self.is_recruiting,
        }