"""Test the /turns endpoints end to end on an in-memory database."""
import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from barbershop.booking import now_ms
from barbershop.repositories import TurnRepository
from tests.conftest import DAY_MS


@pytest.fixture
def tomorrow():
    return now_ms() + DAY_MS


def turn_body(shop, date, /, **overrides):
    body = {
        "date": date,
        "service_id": shop["service"],
        "barber_id": shop["barber"],
        "client_id": shop["client"],
    }
    body.update(overrides)
    return body


def test_create_then_get_turn(client, shop, tomorrow):
    response = client.post("/turns", json=turn_body(shop, tomorrow))

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Turn created"

    response = client.get(f"/turns/{data['id']}")
    assert response.status_code == 200
    turn = response.json()["turn"]
    assert turn["date"] == tomorrow
    assert turn["service"]["id"] == shop["service"]
    assert turn["barber"]["id"] == shop["barber"]
    assert turn["client"]["name"] == "Ana"
    # only the expanded associations are exposed
    assert "service_id" not in turn
    assert "barber_id" not in turn
    assert "client_id" not in turn


def test_list_turns_empty(client):
    response = client.get("/turns")

    assert response.status_code == 200
    assert response.json() == {"turns": []}


def test_list_turns_expands_associations(client, shop, tomorrow):
    client.post("/turns", json=turn_body(shop, tomorrow))
    client.post("/turns", json=turn_body(shop, tomorrow + DAY_MS))

    turns = client.get("/turns").json()["turns"]

    assert [t["date"] for t in turns] == [tomorrow, tomorrow + DAY_MS]
    assert all(t["service"]["name"] == "haircut" for t in turns)
    assert all("client_id" not in t for t in turns)


@pytest.mark.parametrize(
    "field, message",
    [
        ("service_id", "Service not found"),
        ("barber_id", "Barber not found"),
        ("client_id", "Client not found"),
    ],
)
def test_create_turn_unknown_reference(client, shop, tomorrow, field, message):
    response = client.post("/turns", json=turn_body(shop, tomorrow, **{field: 999}))

    assert response.status_code == 400
    assert response.json()["detail"] == message
    assert client.get("/turns").json()["turns"] == []


def test_create_turn_in_the_past(client, shop):
    response = client.post("/turns", json=turn_body(shop, now_ms() - 1000))

    assert response.status_code == 400
    assert response.json()["detail"] == "The date must be today or a future date"


def test_structural_errors_are_400(client, shop, tomorrow):
    body = turn_body(shop, tomorrow)
    del body["barber_id"]

    response = client.post("/turns", json=body)

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert any(error["loc"][-1] == "barber_id" for error in errors)


def test_booking_scenario(client, shop, tomorrow):
    created = client.post("/turns", json=turn_body(shop, tomorrow))
    assert created.status_code == 200
    turn_a = created.json()["id"]

    clash = client.post("/turns", json=turn_body(shop, tomorrow))
    assert clash.status_code == 400
    assert clash.json()["detail"] == "There is a turn in the same date"

    moved = client.put(f"/turns/{turn_a}", json=turn_body(shop, tomorrow + DAY_MS))
    assert moved.status_code == 200
    assert moved.json() == {"message": "Turn updated"}

    again = client.post("/turns", json=turn_body(shop, tomorrow))
    assert again.status_code == 200
    assert again.json()["message"] == "Turn created"


def test_update_turn_keeping_its_date(client, shop, tomorrow):
    turn_id = client.post("/turns", json=turn_body(shop, tomorrow)).json()["id"]

    response = client.put(f"/turns/{turn_id}", json=turn_body(shop, tomorrow))

    assert response.status_code == 200


def test_update_turn_not_found(client, shop, tomorrow):
    response = client.put("/turns/404", json=turn_body(shop, tomorrow))

    assert response.status_code == 400
    assert response.json()["detail"] == "Turn not found"


def test_get_turn_not_found(client):
    response = client.get("/turns/12345")

    assert response.status_code == 400
    assert response.json()["detail"] == "Turn not found"


def test_delete_turn_frees_the_date(client, shop, tomorrow):
    turn_id = client.post("/turns", json=turn_body(shop, tomorrow)).json()["id"]

    response = client.delete(f"/turns/{turn_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Turn deleted"}

    assert client.get(f"/turns/{turn_id}").status_code == 400
    assert client.post("/turns", json=turn_body(shop, tomorrow)).status_code == 200


def test_delete_turn_not_found(client):
    response = client.delete("/turns/9")

    assert response.status_code == 400
    assert response.json()["detail"] == "Turn not found"


def test_store_failure_returns_generic_500(client, monkeypatch):
    def _boom(self):
        raise OperationalError("SELECT turn", {}, Exception("disk I/O error"))

    monkeypatch.setattr(TurnRepository, "list_all", _boom)

    response = client.get("/turns")

    assert response.status_code == 500
    assert response.json() == {"detail": "There was a server error"}


@pytest.mark.parametrize("field", ["date", "service_id", "barber_id", "client_id"])
def test_values_beyond_bigint_are_400(client, shop, tomorrow, field):
    response = client.post("/turns", json=turn_body(shop, tomorrow, **{field: 2**64}))

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert any(error["loc"][-1] == field for error in errors)
    assert client.get("/turns").json()["turns"] == []


def test_unhandled_error_is_logged_with_traceback(app, monkeypatch, caplog):
    def _boom(self):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(TurnRepository, "list_all", _boom)
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="barbershop.main"):
        response = client.get("/turns")

    assert response.status_code == 500
    assert response.json() == {"detail": "There was a server error"}
    [record] = [r for r in caplog.records if r.name == "barbershop.main"]
    assert record.exc_info is not None
    assert record.exc_info[0] is RuntimeError
