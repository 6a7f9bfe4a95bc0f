"""
Tests for the route catalogue and fare proposals.
"""
from decimal import Decimal
import pytest
from app.models import FareProposal, Route, UserRole
from app.services.route_service import seed_routes


@pytest.fixture
def routes(db):
    seed_routes(db, [
        ("Likoni Ferry Terminal", "Marina English Point", 70),
        ("Likoni Ferry Terminal", "Shimoni Jetty", 350),
    ])
    return {
        (r.origin, r.destination): r
        for r in db.query(Route).all()
    }


def test_seed_adds_both_directions_once(db, routes):
    assert len(routes) == 4
    assert routes[("Shimoni Jetty", "Likoni Ferry Terminal")].fare_per_person == Decimal("350")

    assert seed_routes(db, [("Likoni Ferry Terminal", "Shimoni Jetty", 999)]) == 0
    assert db.query(Route).count() == 4


def test_pickup_points_and_destinations(client, routes):
    assert client.get("/api/routes").json() == [
        "Likoni Ferry Terminal", "Marina English Point", "Shimoni Jetty"
    ]
    assert client.get("/api/routes", params={"from": "Likoni Ferry Terminal"}).json() == [
        "Marina English Point", "Shimoni Jetty"
    ]
    assert client.get("/api/routes", params={"from": "Nowhere"}).json() == []


def test_route_fares_sorted(client, routes):
    fares = client.get("/api/routes/fares").json()

    assert [(f["origin"], f["destination"]) for f in fares] == [
        ("Likoni Ferry Terminal", "Marina English Point"),
        ("Likoni Ferry Terminal", "Shimoni Jetty"),
        ("Marina English Point", "Likoni Ferry Terminal"),
        ("Shimoni Jetty", "Likoni Ferry Terminal"),
    ]
    assert Decimal(fares[0]["fare_per_person"]) == Decimal("70")


def test_create_route(client):
    payload = {"origin": "Lamu Port", "destination": "Manda Port", "fare_per_person": "350"}

    assert client.post("/api/routes", json=payload).status_code == 201
    assert client.post("/api/routes", json=payload).status_code == 409
    assert client.post("/api/routes", json={**payload, "origin": "Pate", "fare_per_person": "0"}).status_code == 422


def test_submit_and_list_proposals(client, make_user, routes):
    make_user("owner-1", UserRole.OWNER, name="Juma")
    route = routes[("Likoni Ferry Terminal", "Shimoni Jetty")]

    response = client.post("/api/fare-proposals", json={
        "owner_id": "owner-1",
        "proposals": [{"route_id": route.id, "proposed_fare": "400"}],
    })

    assert response.status_code == 201
    listed = client.get("/api/fare-proposals").json()
    assert len(listed) == 1
    assert listed[0]["owner_name"] == "Juma"
    assert listed[0]["status"] == "pending"
    assert listed[0]["origin"] == "Likoni Ferry Terminal"
    assert Decimal(listed[0]["current_fare"]) == Decimal("350")
    assert Decimal(listed[0]["proposed_fare"]) == Decimal("400")


def test_submit_requires_proposals_and_known_routes(client, routes):
    empty = client.post("/api/fare-proposals", json={"owner_id": "owner-1", "proposals": []})
    unknown = client.post("/api/fare-proposals", json={
        "owner_id": "owner-1",
        "proposals": [{"route_id": 9999, "proposed_fare": "100"}],
    })

    assert empty.status_code == 422
    assert unknown.status_code == 404


def test_approving_proposal_updates_route_fare(client, db, routes):
    route = routes[("Likoni Ferry Terminal", "Marina English Point")]
    proposal_id = client.post("/api/fare-proposals", json={
        "owner_id": "owner-1",
        "proposals": [{"route_id": route.id, "proposed_fare": "90"}],
    }).json()[0]["id"]

    response = client.put("/api/fare-proposals", json={"proposal_id": proposal_id, "status": "approved"})

    assert response.status_code == 200
    assert response.json()["status"] == "approved"
    db.expire_all()
    assert db.get(Route, route.id).fare_per_person == Decimal("90")

    again = client.put("/api/fare-proposals", json={"proposal_id": proposal_id, "status": "rejected"})
    assert again.status_code == 409
    assert again.json()["detail"] == "This proposal has already been processed."


def test_rejecting_proposal_keeps_route_fare(client, db, routes):
    route = routes[("Likoni Ferry Terminal", "Marina English Point")]
    proposal_id = client.post("/api/fare-proposals", json={
        "owner_id": "owner-1",
        "proposals": [{"route_id": route.id, "proposed_fare": "90"}],
    }).json()[0]["id"]

    response = client.put("/api/fare-proposals", json={"proposal_id": proposal_id, "status": "rejected"})

    assert response.status_code == 200
    db.expire_all()
    assert db.get(Route, route.id).fare_per_person == Decimal("70")
    assert db.get(FareProposal, proposal_id).status.value == "rejected"


def test_decision_errors(client):
    assert client.put("/api/fare-proposals", json={"proposal_id": 1, "status": "approved"}).status_code == 404
    assert client.put("/api/fare-proposals", json={"proposal_id": 1, "status": "pending"}).status_code == 400
