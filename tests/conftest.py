"""Shared fixtures: sample API payloads and a mocked HTTP session."""

import copy
import json
from unittest.mock import MagicMock

import pytest
import requests

AGENT_PAYLOAD = {
    "accountId": "a1",
    "symbol": "TESTAGENT",
    "headquarters": "X1-DF55-A1",
    "credits": 150000,
}

LOCATION_PAYLOAD = {
    "systemSymbol": "X1-DF55",
    "symbol": "X1-DF55-20250Z",
    "type": "PLANET",
    "x": -12,
    "y": 40,
    "orbitals": [{"symbol": "X1-DF55-20250Y"}],
    "traits": [
        {"symbol": "OVERCROWDED", "name": "Overcrowded", "description": "Too many people."},
    ],
    "chart": {"submittedBy": "COSMIC", "submittedOn": "2023-05-20T00:00:00.000Z"},
    "faction": {"symbol": "COSMIC"},
}

ROUTE_POINT = {
    "symbol": "X1-DF55-A1",
    "type": "PLANET",
    "systemSymbol": "X1-DF55",
    "x": 3,
    "y": -7,
}

SHIP_PAYLOAD = {
    "symbol": "TESTAGENT-1",
    "registration": {"name": "TESTAGENT-1", "factionSymbol": "COSMIC", "role": "COMMAND"},
    "nav": {
        "systemSymbol": "X1-DF55",
        "waypointSymbol": "X1-DF55-A1",
        "route": {
            "departure": ROUTE_POINT,
            "destination": ROUTE_POINT,
            "departureTime": "2023-05-20T00:00:00.000Z",
            "arrival": "2023-05-20T00:00:00.000Z",
        },
        "status": "DOCKED",
        "flightMode": "CRUISE",
    },
    "crew": {"current": 50, "capacity": 80, "required": 50, "rotation": "STRICT", "morale": 100, "wages": 0},
    "fuel": {
        "current": 1200,
        "capacity": 1200,
        "consumed": {"amount": 0, "timestamp": "2023-05-20T00:00:00.000Z"},
    },
    "frame": {
        "symbol": "FRAME_FRIGATE",
        "name": "Frame Frigate",
        "description": "A medium-sized, multi-purpose spacecraft.",
        "condition": 100,
        "moduleSlots": 8,
        "mountingPoints": 5,
        "fuelCapacity": 1200,
        "requirements": {"power": 8, "crew": 25},
    },
    "reactor": {
        "symbol": "REACTOR_FISSION_I",
        "name": "Fission Reactor I",
        "description": "A basic fission power reactor.",
        "condition": 100,
        "powerOutput": 31,
        "requirements": {"crew": 8},
    },
    "engine": {
        "symbol": "ENGINE_ION_DRIVE_II",
        "name": "Ion Drive II",
        "description": "An advanced propulsion system.",
        "condition": 100,
        "speed": 30,
        "requirements": {"power": 6, "crew": 8},
    },
    "modules": [
        {
            "symbol": "MODULE_CARGO_HOLD_I",
            "name": "Cargo Hold",
            "description": "Expands the ship's cargo capacity.",
            "capacity": 30,
            "requirements": {"power": 1, "crew": 0, "slots": 1},
        },
        {
            "symbol": "MODULE_CREW_QUARTERS_I",
            "name": "Crew Quarters",
            "description": "Houses crew.",
            "requirements": {"power": 1, "crew": 2, "slots": 1},
        },
    ],
    "mounts": [
        {
            "symbol": "MOUNT_MINING_LASER_I",
            "name": "Mining Laser I",
            "description": "A basic mining laser.",
            "strength": 10,
            "deposits": ["IRON_ORE", "COPPER_ORE"],
            "requirements": {"crew": 0, "power": 1},
        },
        {
            "symbol": "MOUNT_SENSOR_ARRAY_I",
            "name": "Sensor Array I",
            "description": "A basic sensor array.",
            "strength": 1,
            "requirements": {"crew": 0, "power": 1},
        },
    ],
    "cargo": {
        "capacity": 60,
        "units": 5,
        "inventory": [
            {"symbol": "ANTIMATTER", "name": "Antimatter", "description": "Dense fuel.", "units": 5},
        ],
    },
}

CONTRACT_PAYLOAD = {
    "id": "clhnk2v6a0001s60dq9ckmqs3",
    "factionSymbol": "COSMIC",
    "type": "PROCUREMENT",
    "terms": {
        "deadline": "2023-05-27T00:00:00.000Z",
        "payment": {"onAccepted": 7000, "onFulfilled": 28000},
        "deliver": [
            {
                "tradeSymbol": "ALUMINUM_ORE",
                "destinationSymbol": "X1-DF55-20250Z",
                "unitsRequired": 8600,
                "unitsFulfilled": 0,
            },
        ],
    },
    "accepted": False,
    "fulfilled": False,
    "expiration": "2023-05-21T00:00:00.000Z",
}

FACTION_PAYLOAD = {
    "symbol": "COSMIC",
    "name": "Cosmic Engineers",
    "description": "The Cosmic Engineers are a group of highly advanced scientists.",
    "headquarters": "X1-ZT91-90060F",
    "traits": [
        {"symbol": "INNOVATIVE", "name": "Innovative", "description": "Willing to try new things."},
    ],
}

REGISTRATION_PAYLOAD = {
    "token": "NEW-AGENT-TOKEN",
    "agent": AGENT_PAYLOAD,
    "contract": CONTRACT_PAYLOAD,
    "faction": FACTION_PAYLOAD,
    "ship": SHIP_PAYLOAD,
}


def make_response(body, status_code=200):
    """Build a stand-in for requests.Response around a JSON body or raw text."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = status_code < 400
    if isinstance(body, str):
        resp.text = body
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.text = json.dumps(body)
        resp.json.return_value = body
    return resp


@pytest.fixture
def payloads():
    """Deep copies of the sample payloads, safe to mutate per test."""
    return copy.deepcopy({
        "agent": AGENT_PAYLOAD,
        "location": LOCATION_PAYLOAD,
        "ship": SHIP_PAYLOAD,
        "contract": CONTRACT_PAYLOAD,
        "faction": FACTION_PAYLOAD,
        "registration": REGISTRATION_PAYLOAD,
    })


@pytest.fixture
def session() -> MagicMock:
    """A mocked requests.Session; set ``session.request.return_value`` per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"
