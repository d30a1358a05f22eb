"""Contracts offered by factions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .payment import Payment
from .ship import _from_mapping, _omitted, _spec, _to_mapping


class ContractType(str, Enum):
    """Kind of work a contract asks for."""

    PROCUREMENT = "PROCUREMENT"
    TRANSPORT = "TRANSPORT"
    SHUTTLE = "SHUTTLE"


@dataclass
class ContractDeliver:
    """Goods to deliver under a contract."""

    trade_symbol: str
    destination_symbol: str
    units_required: int
    units_fulfilled: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContractDeliver:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ContractTerms:
    """Deadline, payment and deliveries of a contract."""

    deadline: str
    payment: Payment = _spec(load=Payment.from_dict)
    deliver: list[ContractDeliver] | None = _spec(load=ContractDeliver.from_dict, default=None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContractTerms:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class Contract:
    """A contract between an agent and a faction."""

    id: str
    faction_symbol: str
    contract_type: ContractType = _spec(key="type", load=ContractType)
    terms: ContractTerms = _spec(load=ContractTerms.from_dict)
    accepted: bool = _spec()
    fulfilled: bool = _spec()
    deadline_to_accept: str | None = _omitted()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Contract:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)