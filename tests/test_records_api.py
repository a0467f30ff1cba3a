"""Test the client, barber and service endpoints."""
import pytest


@pytest.mark.parametrize(
    "path, body",
    [
        ("/clients", {"name": "Ana", "last_name": "Lopez", "email": "ana@example.com"}),
        ("/barbers", {"name": "Carlos", "last_name": "Diaz"}),
        ("/services", {"name": "fade", "price": 20.0, "duration_minutes": 30}),
    ],
)
def test_create_get_and_list(client, path, body):
    response = client.post(path, json=body)

    assert response.status_code == 201
    created = response.json()
    assert created["id"] > 0
    for key, value in body.items():
        assert created[key] == value

    assert client.get(f"{path}/{created['id']}").json() == created
    assert client.get(path).json() == [created]


@pytest.mark.parametrize(
    "path, message",
    [
        ("/clients/77", "Client not found"),
        ("/barbers/77", "Barber not found"),
        ("/services/77", "Service not found"),
    ],
)
def test_get_missing_record(client, path, message):
    response = client.get(path)

    assert response.status_code == 404
    assert response.json()["detail"] == message


def test_service_price_cannot_be_negative(client):
    response = client.post("/services", json={"name": "shave", "price": -1})

    assert response.status_code == 400
    assert "errors" in response.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
