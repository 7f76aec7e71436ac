"""API tests against a small in-memory service. No seeding, no network."""

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from contactbook.application import ContactService
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository


@pytest.fixture
def service():
    repo = InMemoryContactRepository()
    repo.add(Contact(id="a", name="Alice", phone="555-0100", tags=("Work",)))
    repo.add(Contact(id="b", name="Bob", phone="555-0199", is_favorite=True))
    return ContactService(repo)


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert "T" in body["timestamp"]


def test_list_contacts_shape(client):
    r = client.get("/api/contacts")
    assert r.status_code == 200
    body = r.json()
    assert body["totalCount"] == 2
    assert body["page"] == 1
    assert body["hasNextPage"] is False
    assert body["contacts"][0] == {
        "id": "a",
        "name": "Alice",
        "phone": "555-0100",
        "email": None,
        "imageUrl": None,
        "isFavorite": False,
        "tags": ["Work"],
    }


def test_list_contacts_filters(client):
    fav = client.get("/api/contacts", params={"tag": "Favourite"}).json()
    assert [c["name"] for c in fav["contacts"]] == ["Bob"]

    found = client.get("/api/contacts", params={"search": "ali"}).json()
    assert [c["name"] for c in found["contacts"]] == ["Alice"]

    second = client.get("/api/contacts", params={"page": 2, "limit": 1}).json()
    assert [c["name"] for c in second["contacts"]] == ["Bob"]
    assert second["hasNextPage"] is False


def test_list_contacts_malformed_numbers_default(client):
    r = client.get("/api/contacts", params={"page": "x", "limit": "-4"})
    assert r.status_code == 200
    body = r.json()
    assert body["page"] == 1
    assert len(body["contacts"]) == 2


def test_create_contact(client):
    r = client.post(
        "/api/contacts",
        json={"name": "Carol", "phone": "123", "email": "bad", "tags": ["Friend"]},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["id"]
    assert body["email"] is None
    assert body["isFavorite"] is False
    assert body["tags"] == ["Friend"]

    listed = client.get("/api/contacts", params={"search": "carol"}).json()
    assert [c["id"] for c in listed["contacts"]] == [body["id"]]


def test_create_contact_missing_fields(client):
    assert client.post("/api/contacts", json={"name": "X"}).status_code == 400
    assert client.post("/api/contacts", json={"name": " ", "phone": "1"}).status_code == 400
    assert client.get("/api/contacts").json()["totalCount"] == 2


def test_update_contact(client):
    r = client.put("/api/contacts/a", json={"isFavorite": True})
    assert r.status_code == 200
    assert r.json()["isFavorite"] is True
    assert r.json()["tags"] == ["Work"]

    r = client.put("/api/contacts/a", json={"tags": "not-a-list"})
    assert r.status_code == 200
    assert r.json()["tags"] == []
    assert r.json()["isFavorite"] is True


def test_update_unknown_and_bad_favorite(client):
    assert client.put("/api/contacts/nope", json={"isFavorite": True}).status_code == 404
    assert client.put("/api/contacts/a", json={"isFavorite": "yes"}).status_code == 400


def test_delete_contact(client):
    r = client.delete("/api/contacts/b")
    assert r.status_code == 200
    assert r.json()["name"] == "Bob"
    assert client.delete("/api/contacts/b").status_code == 404
    assert client.get("/api/contacts").json()["totalCount"] == 1


def test_tags_endpoints(client):
    assert client.get("/api/tags").json() == ["Family", "Friend", "Work"]

    created = client.post("/api/tags", json={"tagName": " Gym "})
    assert created.status_code == 201
    assert created.json() == ["Family", "Friend", "Gym", "Work"]

    existing = client.post("/api/tags", json={"tagName": "work"})
    assert existing.status_code == 200
    assert existing.json() == ["Family", "Friend", "Gym", "Work"]

    assert client.post("/api/tags", json={"tagName": ""}).status_code == 400
    assert client.post("/api/tags", json={}).status_code == 400


def test_missing_or_malformed_bodies_answer_400(client):
    assert client.post("/api/contacts").status_code == 400
    assert client.post("/api/contacts", json=[]).status_code == 400
    assert client.post("/api/contacts", content="null",
                       headers={"Content-Type": "application/json"}).status_code == 400
    assert client.post("/api/tags").status_code == 400
    assert client.post("/api/tags", json=[]).status_code == 400
    assert client.get("/api/contacts").json()["totalCount"] == 2
    assert client.get("/api/tags").json() == ["Family", "Friend", "Work"]


def test_update_without_body(client):
    assert client.put("/api/contacts/nope").status_code == 404
    assert client.put("/api/contacts/nope", content="null",
                      headers={"Content-Type": "application/json"}).status_code == 404

    r = client.put("/api/contacts/b")
    assert r.status_code == 200
    assert r.json()["isFavorite"] is True
    assert r.json()["tags"] == []
