"""
Tests for the investor registry endpoints.
"""
from app.services.settlement_service import settle


def test_create_and_list_investors(client):
    first = client.post("/api/admin/investors", json={"name": "Alice", "share_percentage": "60"})
    second = client.post("/api/admin/investors", json={"name": "Bob", "share_percentage": "15.5"})

    assert first.status_code == 201
    assert second.status_code == 201
    names = [i["name"] for i in client.get("/api/admin/investors").json()]
    assert names == ["Bob", "Alice"]


def test_share_must_be_within_range(client):
    for share in ("0", "-5", "100.01"):
        response = client.post("/api/admin/investors", json={"name": "Eve", "share_percentage": share})
        assert response.status_code == 400


def test_total_share_cannot_exceed_hundred(client):
    client.post("/api/admin/investors", json={"name": "Alice", "share_percentage": "60"})
    client.post("/api/admin/investors", json={"name": "Bob", "share_percentage": "40"})

    response = client.post("/api/admin/investors", json={"name": "Carol", "share_percentage": "1"})

    assert response.status_code == 400
    assert "Current total: 100%" in response.json()["detail"]


def test_full_single_investor_is_allowed(client):
    response = client.post("/api/admin/investors", json={"name": "Alice", "share_percentage": "100"})

    assert response.status_code == 201


def test_delete_investor(client):
    investor_id = client.post(
        "/api/admin/investors", json={"name": "Alice", "share_percentage": "60"}
    ).json()["id"]

    assert client.delete(f"/api/admin/investors/{investor_id}").status_code == 200
    assert client.get("/api/admin/investors").json() == []
    assert client.delete(f"/api/admin/investors/{investor_id}").status_code == 404


def test_deleting_investor_keeps_past_payouts(client, db, make_boat, make_booking, make_investor):
    alice = make_investor("Alice", "50")
    boat = make_boat()
    booking = make_booking(boat, final_fare="1000")
    settle(booking, boat, [alice], db)
    alice_id = alice.id

    client.delete(f"/api/admin/investors/{alice_id}")

    report = client.get(f"/api/erp/investor/{alice_id}").json()
    assert report["trip_count"] == 1
