import pytest

from stargate_gql.agent import (
    Agent,
    AgentResponse,
    GetAgentResponse,
    NewAgent,
    NewAgentResponse,
)
from stargate_gql.contract import ContractType

AGENT = {
    "accountId": "account-abc",
    "symbol": "EXPLORER",
    "headquarters": "X1-AB-A1",
    "credits": 175000,
    "startingFaction": "COSMIC",
    "shipCount": 2,
}

CONTRACT = {
    "id": "contract-one",
    "factionSymbol": "COSMIC",
    "type": "TRANSPORT",
    "terms": {
        "deadline": "2024-01-08T00:00:00Z",
        "payment": {"onAccepted": 100, "onFulfilled": 900},
        "deliver": None,
    },
    "accepted": True,
    "fulfilled": False,
}

FACTION = {
    "symbol": "COSMIC",
    "name": "Cosmic Engineers",
    "description": "Builders.",
    "headquarters": None,
    "traits": [],
    "isRecruiting": False,
}

REQ = {"power": 1}

SHIP = {
    "symbol": "EXPLORER-1",
    "registration": {"name": "EXPLORER-1", "factionSymbol": "COSMIC", "role": "COMMAND"},
    "nav": {
        "systemSymbol": "X1-AB",
        "waypointSymbol": "X1-AB-A1",
        "route": {
            "destination": {"symbol": "W", "type": "MOON", "systemSymbol": "X1-AB", "x": 1, "y": 2},
            "origin": {"symbol": "W", "type": "MOON", "systemSymbol": "X1-AB", "x": 1, "y": 2},
            "departureTime": "t0",
            "arrival": "t1",
        },
        "status": "IN_ORBIT",
        "flightMode": "DRIFT",
    },
    "crew": {"current": 1, "required": 1, "capacity": 2, "rotation": "RELAXED", "morale": 50, "wages": 3},
    "frame": {
        "symbol": "F", "name": "f", "description": "d", "condition": 1.0, "integrity": 1.0,
        "moduleSlots": 1, "mountingPoints": 1, "fuelCapacity": 10, "requirements": REQ, "quality": 1,
    },
    "reactor": {
        "symbol": "R", "name": "r", "description": "d", "condition": 1.0, "integrity": 1.0,
        "powerOutput": 5, "requirements": REQ, "quality": 1,
    },
    "engine": {
        "symbol": "E", "name": "e", "description": "d", "condition": 1.0, "integrity": 1.0,
        "speed": 2, "requirements": REQ, "quality": 1,
    },
    "cooldown": {"shipSymbol": "EXPLORER-1", "totalSeconds": 0, "remainingSeconds": 0},
    "modules": [],
    "mounts": [],
    "cargo": {"capacity": 0, "units": 0, "inventory": []},
    "fuel": {"current": 10, "capacity": 10, "consumed": None},
}

REGISTRATION = {
    "data": {
        "agent": AGENT,
        "contract": CONTRACT,
        "faction": FACTION,
        "ships": [SHIP],
        "token": "token",
    }
}


def test_new_agent_payload_with_email():
    agent = NewAgent(symbol="EXPLORER", faction="COSMIC", email="pilot@example.com")
    assert agent.to_payload() == {
        "symbol": "EXPLORER",
        "faction": "COSMIC",
        "email": "pilot@example.com",
    }


def test_new_agent_payload_without_email():
    agent = NewAgent(symbol="EXPLORER", faction="COSMIC")
    assert agent.to_payload() == {"symbol": "EXPLORER", "faction": "COSMIC"}


def test_agent_round_trip():
    assert Agent.from_dict(AGENT).to_dict() == AGENT


def test_agent_account_id_optional():
    data = {k: v for k, v in AGENT.items() if k != "accountId"}
    agent = Agent.from_dict(data)
    assert agent.account_id is None
    assert agent.to_dict() == data


def test_agent_fields():
    agent = Agent.from_dict(AGENT)
    assert agent.credits == AGENT["credits"]
    assert agent.starting_faction == AGENT["startingFaction"]
    assert agent.ship_count == AGENT["shipCount"]


def test_get_agent_response_round_trip():
    payload = {"data": AGENT}
    response = GetAgentResponse.from_dict(payload)
    assert response.data.symbol == AGENT["symbol"]
    assert response.to_dict() == payload


def test_new_agent_response_round_trip():
    response = NewAgentResponse.from_dict(REGISTRATION)
    assert response.to_dict() == REGISTRATION


def test_new_agent_response_contents():
    response = NewAgentResponse.from_dict(REGISTRATION).data
    assert response.token == "token"
    assert response.contract.contract_type is ContractType.TRANSPORT
    assert [s.symbol for s in response.ships] == ["EXPLORER-1"]
    assert response.faction.headquarters is None


def test_agent_response_missing_token_raises():
    body = {k: v for k, v in REGISTRATION["data"].items() if k != "token"}
    with pytest.raises(KeyError):
        AgentResponse.from_dict(body)


def test_get_agent_response_requires_data():
    with pytest.raises(KeyError):
        GetAgentResponse.from_dict(AGENT)