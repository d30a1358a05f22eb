"""Ships and their components."""

from __future__ import annotations

from dataclasses import MISSING, Field, dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Mapping


def _spec(
    *,
    key: str | None = None,
    load: Callable[[Any], Any] | None = None,
    omit_none: bool = False,
    default: Any = MISSING,
) -> Any:
    return field(default=default, metadata={"key": key, "load": load, "omit_none": omit_none})


def _omitted() -> Any:
    return _spec(omit_none=True, default=None)


def _key(f: Field) -> str:
    if f.metadata.get("key"):
        return f.metadata["key"]
    head, *rest = f.name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _from_mapping(cls: type, data: Mapping[str, Any]) -> Any:
    """Build a dataclass instance from a JSON object with camelCase keys."""
    values = {}
    for f in fields(cls):
        key = _key(f)
        value = data[key] if f.default is MISSING else data.get(key)
        load = f.metadata.get("load")
        if value is not None and load is not None:
            value = [load(item) for item in value] if isinstance(value, list) else load(value)
        values[f.name] = value
    return cls(**values)


def _to_mapping(obj: Any) -> dict[str, Any]:
    """Turn a dataclass instance into a JSON object with camelCase keys."""
    return {
        _key(f): _dump(getattr(obj, f.name))
        for f in fields(obj)
        if not (f.metadata.get("omit_none") and getattr(obj, f.name) is None)
    }


@dataclass
class Registration:
    """Public registration of a ship."""

    name: str
    faction_symbol: str
    role: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Registration:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipNavRouteWaypoint:
    """A waypoint at one end of a route."""

    symbol: str
    waypoint_type: str = _spec(key="type")
    system_symbol: str = _spec()
    x: int = _spec()
    y: int = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipNavRouteWaypoint:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipNavRoute:
    """The route a ship is flying or last flew."""

    destination: ShipNavRouteWaypoint = _spec(load=ShipNavRouteWaypoint.from_dict)
    origin: ShipNavRouteWaypoint = _spec(load=ShipNavRouteWaypoint.from_dict)
    departure_time: str = _spec()
    arrival: str = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipNavRoute:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipNav:
    """Navigation state of a ship."""

    system_symbol: str
    waypoint_symbol: str
    route: ShipNavRoute = _spec(load=ShipNavRoute.from_dict)
    status: str = _spec()
    flight_mode: str = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipNav:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipCrew:
    """Crew of a ship."""

    current: int
    required: int
    capacity: int
    rotation: str
    morale: int
    wages: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipCrew:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipRequirements:
    """Power, crew and slots a component needs."""

    power: int | None = _omitted()
    crew: int | None = _omitted()
    slots: int | None = _omitted()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipRequirements:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipFrame:
    """The frame of a ship."""

    symbol: str
    name: str
    description: str
    condition: float = _spec(load=float)
    integrity: float = _spec(load=float)
    module_slots: int = _spec()
    mounting_points: int = _spec()
    fuel_capacity: int = _spec()
    requirements: ShipRequirements = _spec(load=ShipRequirements.from_dict)
    quality: int = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipFrame:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipReactor:
    """The reactor of a ship."""

    symbol: str
    name: str
    description: str
    condition: float = _spec(load=float)
    integrity: float = _spec(load=float)
    power_output: int = _spec()
    requirements: ShipRequirements = _spec(load=ShipRequirements.from_dict)
    quality: int = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipReactor:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipEngine:
    """The engine of a ship."""

    symbol: str
    name: str
    description: str
    condition: float = _spec(load=float)
    integrity: float = _spec(load=float)
    speed: int = _spec()
    requirements: ShipRequirements = _spec(load=ShipRequirements.from_dict)
    quality: int = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipEngine:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class Cooldown:
    """Cooldown of a ship after an action."""

    ship_symbol: str
    total_seconds: int
    remaining_seconds: int
    expiration: int | None = _omitted()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cooldown:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipModule:
    """A module installed in a ship."""

    symbol: str
    name: str
    description: str
    requirements: ShipRequirements = _spec(load=ShipRequirements.from_dict)
    capacity: int | None = _omitted()
    range: int | None = _omitted()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipModule:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipMount:
    """A mount fitted to a ship."""

    symbol: str
    name: str
    requirements: ShipRequirements = _spec(load=ShipRequirements.from_dict)
    description: str | None = _omitted()
    strength: int | None = _omitted()
    deposits: list[str] | None = _omitted()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipMount:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipCargoItem:
    """One kind of good in a ship's hold."""

    symbol: str
    name: str
    description: str
    units: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipCargoItem:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipCargo:
    """The hold of a ship."""

    capacity: int
    units: int
    inventory: list[ShipCargoItem] = _spec(load=ShipCargoItem.from_dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipCargo:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipFuelData:
    """Fuel consumed by the last transit."""

    amount: int
    timestamp: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipFuelData:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class ShipFuel:
    """Fuel tank state of a ship."""

    current: int
    capacity: int
    consumed: ShipFuelData | None = _spec(load=ShipFuelData.from_dict, default=None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipFuel:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)


@dataclass
class Ship:
    """A ship owned by an agent."""

    symbol: str
    registration: Registration = _spec(load=Registration.from_dict)
    nav: ShipNav = _spec(load=ShipNav.from_dict)
    crew: ShipCrew = _spec(load=ShipCrew.from_dict)
    frame: ShipFrame = _spec(load=ShipFrame.from_dict)
    reactor: ShipReactor = _spec(load=ShipReactor.from_dict)
    engine: ShipEngine = _spec(load=ShipEngine.from_dict)
    cooldown: Cooldown = _spec(load=Cooldown.from_dict)
    modules: list[ShipModule] = _spec(load=ShipModule.from_dict)
    mounts: list[ShipMount] = _spec(load=ShipMount.from_dict)
    cargo: ShipCargo = _spec(load=ShipCargo.from_dict)
    fuel: ShipFuel = _spec(load=ShipFuel.from_dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ship:
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_mapping(self)