"""Contract payment terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Payment:
    """Credits paid on acceptance and on fulfilment of a contract."""

    on_accepted: int
    on_fulfilled: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Payment:
        return cls(on_accepted=data["onAccepted"], on_fulfilled=data["onFulfilled"])

    def to_dict(self) -> dict[str, Any]:
        return {"onAccepted": self.on_accepted, "onFulfilled": self.on_fulfilled}