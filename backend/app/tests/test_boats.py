"""
Tests for fleet and user profile endpoints.
"""
from app.models import UserRole


def register(client, **overrides):
    payload = {"name": "Sea Breeze", "owner_id": "owner-1", "capacity": 8, "license_number": "LIC-9"}
    payload.update(overrides)
    return client.post("/api/boats", json=payload)


def test_register_boat_starts_unvalidated(client):
    response = register(client)

    assert response.status_code == 201
    assert response.json()["is_validated"] is False
    assert response.json()["captain_id"] is None


def test_register_boat_requires_capacity(client):
    assert register(client, capacity=0).status_code == 422


def test_validate_boat(client):
    boat_id = register(client).json()["id"]

    response = client.put(f"/api/boats/{boat_id}/validation", json={"is_validated": True})

    assert response.status_code == 200
    assert response.json()["is_validated"] is True
    assert client.put("/api/boats/999/validation", json={"is_validated": True}).status_code == 404


def test_assign_and_unassign_captain(client, make_user):
    make_user("captain-1", UserRole.CAPTAIN)
    boat_id = register(client).json()["id"]

    assigned = client.put("/api/boats/captain", json={"boat_id": boat_id, "captain_id": "captain-1"})
    assert assigned.status_code == 200
    assert assigned.json()["captain_id"] == "captain-1"

    removed = client.delete(f"/api/boats/{boat_id}/captain")
    assert removed.status_code == 200
    assert removed.json()["captain_id"] is None


def test_assign_non_captain_is_rejected(client, make_user):
    make_user("rider-1", UserRole.RIDER)
    boat_id = register(client).json()["id"]

    response = client.put("/api/boats/captain", json={"boat_id": boat_id, "captain_id": "rider-1"})

    assert response.status_code == 404
    assert response.json()["detail"] == "The selected user is not a valid captain."


def test_list_boats_by_owner(client):
    register(client, name="Alpha", owner_id="owner-1")
    register(client, name="Bravo", owner_id="owner-2")

    assert [b["name"] for b in client.get("/api/boats").json()] == ["Alpha", "Bravo"]
    assert [b["name"] for b in client.get("/api/boats", params={"owner_id": "owner-2"}).json()] == ["Bravo"]


def test_user_profile_lifecycle(client):
    created = client.post("/api/users", json={
        "uid": "uid-1", "name": "Nadia", "email": "nadia@example.com", "role": "owner"
    })
    assert created.status_code == 201
    assert created.json()["role"] == "owner"

    duplicate = client.post("/api/users", json={"uid": "uid-1", "name": "N", "email": "other@example.com"})
    assert duplicate.status_code == 400

    updated = client.put("/api/users/uid-1/role", json={"role": "captain"})
    assert updated.json()["role"] == "captain"
    assert client.get("/api/users/uid-1").json()["name"] == "Nadia"
    assert client.get("/api/users/missing").status_code == 404
