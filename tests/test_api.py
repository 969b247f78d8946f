import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from app.main import create_app
from config.settings import Settings
from schemas.limits import UINT32_MAX


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'store.db'}",
        snapshot_path=str(tmp_path / "store_data.json"),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client


PRODUCT = {
    "name": "Whole milk 1l",
    "category": "dairy",
    "quantity": 40,
    "bar_code": 8586000123456,
    "cost_price": 0.79,
    "sell_price": 1.19,
}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_employee_crud(client):
    response = client.post("/employees", json={"id": 99, "name": "Jana", "position": "Cashier"})
    assert response.status_code == 201
    assert response.json() == {"id": 1}
    client.post("/employees", json={"name": "Jan", "position": "Manager"})

    listed = client.get("/employees").json()
    assert [e["name"] for e in listed] == ["Jana", "Jan"]

    found = client.post("/employees/search", json={"name": "Jana"}).json()
    assert [e["id"] for e in found] == [1]

    response = client.put("/employees/2", json={"id": 1, "department": "Ops"})
    assert response.status_code == 200
    assert response.json()["id"] == 2
    assert response.json()["department"] == "Ops"
    assert response.json()["position"] == "Manager"

    assert client.delete("/employees/1").status_code == 204
    assert client.delete("/employees/1").status_code == 404
    assert [e["id"] for e in client.get("/employees").json()] == [2]


def test_update_unknown_or_empty_is_not_found(client):
    client.post("/employees", json={"name": "Jana", "position": "Cashier"})

    assert client.put("/employees/5", json={"department": "Ops"}).status_code == 404
    assert client.put("/employees/1", json={}).status_code == 404


def test_create_without_required_field_is_bad_request(client):
    response = client.post("/employees", json={"name": "Jana"})

    assert response.status_code == 400
    assert "position" in response.json()["detail"]


def test_product_crud(client):
    response = client.post("/products", json={**PRODUCT, "date_added": "2024-03-01"})
    assert response.status_code == 201

    found = client.post("/products/search", json={"date_added": "2024-03-01"}).json()
    assert len(found) == 1
    assert found[0]["bar_code"] == PRODUCT["bar_code"]

    response = client.put("/products/1", json={"quantity": 0, "status": False})
    assert response.status_code == 200
    assert response.json()["quantity"] == 0
    assert response.json()["status"] is False

    assert client.post("/products/search", json={"status": True}).json() == []
    assert client.delete("/products/1").status_code == 204


def test_out_of_range_values_are_rejected(client):
    assert client.post("/products", json={**PRODUCT, "quantity": -1}).status_code == 422
    assert client.post("/products", json={**PRODUCT, "employee_id": UINT32_MAX + 1}).status_code == 422
    assert client.put(f"/products/{UINT32_MAX + 1}", json={"quantity": 1}).status_code == 422
    assert client.get("/products").json() == []


def test_store_failure_is_generic_server_error(client):
    with client.app.state.store.engine.begin() as connection:
        connection.execute(text("DROP TABLE products"))

    response = client.get("/products")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_first_start_imports_snapshot_and_shutdown_exports(settings):
    snapshot = {
        "employees": [{"id": 10, "name": "Eva", "position": "Baker"}],
        "products": [{**PRODUCT, "employee_id": 10}],
    }
    with open(settings.snapshot_path, "w", encoding="utf-8") as f:
        json.dump(snapshot, f)

    with TestClient(create_app(settings)) as client:
        employees = client.get("/employees").json()
        assert [(e["id"], e["name"]) for e in employees] == [(1, "Eva")]
        client.post("/employees", json={"name": "Jan", "position": "Manager"})

    with open(settings.snapshot_path, encoding="utf-8") as f:
        saved = json.load(f)
    assert [e["name"] for e in saved["employees"]] == ["Eva", "Jan"]
    assert saved["products"][0]["employee_id"] == 10


def test_existing_store_skips_snapshot_import(settings):
    with TestClient(create_app(settings)) as client:
        client.post("/employees", json={"name": "Jana", "position": "Cashier"})

    with open(settings.snapshot_path, "w", encoding="utf-8") as f:
        json.dump({"employees": [{"name": "Eva", "position": "Baker"}], "products": []}, f)

    with TestClient(create_app(settings)) as client:
        assert [e["name"] for e in client.get("/employees").json()] == ["Jana"]


def test_malformed_snapshot_does_not_abort_startup(settings):
    with open(settings.snapshot_path, "w", encoding="utf-8") as f:
        f.write("[]")

    with TestClient(create_app(settings)) as client:
        assert client.get("/employees").json() == []


def test_corrupted_stored_date_fails_request_but_not_shutdown(settings):
    with TestClient(create_app(settings)) as client:
        client.post("/employees", json={"name": "Jana", "position": "Cashier", "hire_date": "2022-05-02"})
        with client.app.state.store.engine.begin() as connection:
            connection.execute(text("UPDATE employees SET hire_date = 'garbage'"))

        response = client.get("/employees")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    with open(settings.snapshot_path, encoding="utf-8") as f:
        saved = json.load(f)
    assert saved == {"employees": [], "products": []}
