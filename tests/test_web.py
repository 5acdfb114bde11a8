"""Tests for the Flask JSON API."""

import json

import pytest

from cozycat.engine.save import SLOT_KEY, MemoryStorage
from cozycat.web.server import create_app


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def client(storage, clock):
    app = create_app(storage, clock=clock)
    app.config["TESTING"] = True
    return app.test_client()


def test_state_defaults(client):
    data = client.get("/api/state").get_json()
    assert data["pets_raw"] == 0
    assert data["per_click"] == 1.0
    assert data["hearts"] == 0
    assert len(data["upgrades"]) == 9
    assert data["upgrades"][0]["id"] == "softPaws"
    assert data["upgrades"][0]["cost_raw"] == 15


def test_pet(client, storage):
    data = client.post("/api/pet").get_json()
    assert data["pets_raw"] == 1.0
    assert json.loads(storage.slots[SLOT_KEY])["currency"] == 1.0


def test_buy_insufficient_funds(client):
    resp = client.post("/api/buy/softPaws")
    assert resp.status_code == 409
    assert "error" in resp.get_json()


def test_buy_unknown_upgrade(client):
    resp = client.post("/api/buy/laserPointer")
    assert resp.status_code == 404


def test_buy_and_passive_catch_up(client, clock):
    for _ in range(20):
        client.post("/api/pet")
    data = client.post("/api/buy/sunbeam").get_json()
    assert data["per_second"] == 0.5
    assert data["pets_raw"] == 0

    clock.now += 2.05
    data = client.get("/api/state").get_json()
    assert data["pets_raw"] == pytest.approx(1.0)


def test_rebirth_without_gain(client):
    resp = client.post("/api/rebirth")
    assert resp.status_code == 409


def test_rebirth(storage, clock):
    storage.set(SLOT_KEY, json.dumps({"currency": 500, "peakCurrency": 12000}))
    client = create_app(storage, clock=clock).test_client()

    data = client.post("/api/rebirth").get_json()
    assert data["hearts"] == 1
    assert data["rebirths"] == 1
    assert data["pets_raw"] == 0
    assert data["per_click"] == 1.05


def test_notifications_drained(storage, clock):
    storage.set(SLOT_KEY, json.dumps({"currency": 1999.5, "peakCurrency": 1999.5}))
    client = create_app(storage, clock=clock).test_client()

    data = client.post("/api/pet").get_json()
    assert {"kind": "unlock_crossed", "unlock_id": "zeze"} in data["notifications"]
    assert client.get("/api/state").get_json()["notifications"] == []


def test_pixel_mode_toggle(client, storage):
    data = client.post("/api/pixel-mode", json={"enabled": True}).get_json()
    assert data["pixel_mode"] is True
    assert json.loads(storage.slots[SLOT_KEY])["pixelMode"] is True

    data = client.post("/api/pixel-mode").get_json()
    assert data["pixel_mode"] is False


def test_pixel_mode_ignores_non_object_body(client):
    resp = client.post("/api/pixel-mode", json=[1])
    assert resp.status_code == 200
    assert resp.get_json()["pixel_mode"] is True


def test_notifications_from_loading_reach_first_response(storage, clock):
    storage.set(SLOT_KEY, json.dumps({"prestigeCurrency": 5, "peakCurrency": 3000}))
    client = create_app(storage, clock=clock).test_client()

    data = client.get("/api/state").get_json()
    assert data["ending_reached"] is True
    assert {"kind": "unlock_crossed", "unlock_id": "zeze"} in data["notifications"]
    assert {"kind": "ending_reached"} in data["notifications"]
    assert client.get("/api/state").get_json()["notifications"] == []
