"""
Shared fixtures: an in-memory SQLite database and a TestClient bound to it.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"

from decimal import Decimal
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.db.base import Base
from app.db.session import get_db
from app.main import app as fastapi_app
from app.models import Boat, Booking, BookingStatus, BookingType, Investor, User, UserRole


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(uid, role=UserRole.RIDER, name=None):
        user = User(uid=uid, name=name or uid.title(), email=f"{uid}@example.com", role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_boat(db):
    def _make_boat(owner_id="owner-1", captain_id=None, capacity=8, is_validated=True, name="Sea Breeze"):
        boat = Boat(
            name=name,
            owner_id=owner_id,
            captain_id=captain_id,
            capacity=capacity,
            license_number="LIC-001",
            is_validated=is_validated
        )
        db.add(boat)
        db.commit()
        db.refresh(boat)
        return boat
    return _make_boat


@pytest.fixture
def make_booking(db):
    def _make_booking(boat, final_fare="1000", status=BookingStatus.CONFIRMED, base_fare="1000"):
        booking = Booking(
            boat_id=boat.id,
            rider_id="rider-1",
            owner_id=boat.owner_id,
            pickup="North Pier",
            destination="Harbour Island",
            booking_type=BookingType.PRIVATE,
            base_fare=Decimal(base_fare),
            final_fare=Decimal(final_fare) if final_fare is not None else None,
            adjustment_percent=Decimal(0),
            status=status
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking
    return _make_booking


@pytest.fixture
def make_investor(db):
    def _make_investor(name, share):
        investor = Investor(name=name, share_percentage=Decimal(share))
        db.add(investor)
        db.commit()
        db.refresh(investor)
        return investor
    return _make_investor
