import pytest

from stargate_gql.faction import Faction, FactionTrait

FACTION = {
    "symbol": "COSMIC",
    "name": "Cosmic Engineers",
    "description": "Builders of things.",
    "headquarters": "X1-AB-A1",
    "traits": [
        {"symbol": "INNOVATIVE", "name": "Innovative", "description": "New ideas."},
        {"symbol": "BOLD", "name": "Bold", "description": "Takes risks."},
    ],
    "isRecruiting": True,
}


def test_from_dict_fields():
    faction = Faction.from_dict(FACTION)
    assert faction.symbol == FACTION["symbol"]
    assert faction.is_recruiting is True
    assert [t.symbol for t in faction.traits] == ["INNOVATIVE", "BOLD"]


def test_round_trip():
    assert Faction.from_dict(FACTION).to_dict() == FACTION


def test_missing_headquarters_serialises_as_null():
    data = {k: v for k, v in FACTION.items() if k != "headquarters"}
    faction = Faction.from_dict(data)
    assert faction.headquarters is None
    assert faction.to_dict()["headquarters"] is None


def test_trait_round_trip():
    trait = FACTION["traits"][0]
    assert FactionTrait.from_dict(trait).to_dict() == trait


def test_missing_traits_raises():
    data = {k: v for k, v in FACTION.items() if k != "traits"}
    with pytest.raises(KeyError):
        Faction.from_dict(data)