"""
Tests for the admin fleet overview and boat expenses.
"""
from decimal import Decimal
from app.models import UserRole


def test_fleet_overview(client, make_user, make_boat):
    make_user("owner-1", UserRole.OWNER, name="Zawadi")
    make_user("owner-2", UserRole.OWNER, name="Baraka")
    make_user("captain-1", UserRole.CAPTAIN, name="Ahmed")
    make_boat(owner_id="owner-1", captain_id="captain-1", name="Kijani")
    make_boat(owner_id="owner-1", name="Bahari")
    make_boat(owner_id="owner-2", name="Upepo")

    fleet = client.get("/api/erp/fleet").json()

    assert [b["name"] for b in fleet] == ["Upepo", "Bahari", "Kijani"]
    assert fleet[0]["owner"] == {"name": "Baraka", "email": "owner-2@example.com"}
    assert fleet[1]["captain"] is None
    assert fleet[2]["captain"] == {"name": "Ahmed", "email": "captain-1@example.com"}


def test_record_and_list_expenses(client, make_boat):
    first_boat = make_boat(owner_id="owner-1")
    second_boat = make_boat(owner_id="owner-1")
    other_boat = make_boat(owner_id="owner-2")

    for boat, category, amount in (
        (first_boat, "fuel", "1500"),
        (second_boat, "maintenance", "4000"),
        (other_boat, "fuel", "900"),
    ):
        response = client.post("/api/erp/expenses", json={
            "boat_id": boat.id,
            "owner_id": boat.owner_id,
            "category": category,
            "amount": amount,
            "description": f"{category} for {boat.id}",
        })
        assert response.status_code == 201

    owner_expenses = client.get("/api/erp/expenses", params={"owner_id": "owner-1"}).json()
    assert [e["category"] for e in owner_expenses] == ["maintenance", "fuel"]

    boat_expenses = client.get("/api/erp/expenses", params={"boat_id": first_boat.id}).json()
    assert len(boat_expenses) == 1
    assert Decimal(boat_expenses[0]["amount"]) == Decimal("1500")

    assert len(client.get("/api/erp/expenses").json()) == 3


def test_expense_validation(client, make_boat):
    boat = make_boat(owner_id="owner-1")
    payload = {
        "boat_id": boat.id,
        "owner_id": "owner-1",
        "category": "fuel",
        "amount": "100",
        "description": "Diesel",
    }

    assert client.post("/api/erp/expenses", json={**payload, "owner_id": "owner-2"}).status_code == 400
    assert client.post("/api/erp/expenses", json={**payload, "boat_id": 999}).status_code == 404
    assert client.post("/api/erp/expenses", json={**payload, "amount": "0"}).status_code == 422
    missing = {key: value for key, value in payload.items() if key != "description"}
    assert client.post("/api/erp/expenses", json=missing).status_code == 422
