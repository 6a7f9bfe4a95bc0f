"""
Route catalogue seeding and lookups.
"""
from decimal import Decimal
from typing import List, Tuple
import logging
from sqlalchemy.orm import Session
from app.models.route import Route

logger = logging.getLogger(__name__)

# Each pair is served in both directions at the same per-person fare (KES)
DEFAULT_ROUTES: List[Tuple[str, str, int]] = [
    # Mombasa
    ("Likoni Ferry Terminal", "Marina English Point", 70),
    ("Likoni Ferry Terminal", "Kilifi Jetty", 1000),
    ("Marina English Point", "Kilifi Jetty", 950),
    ("Likoni Ferry Terminal", "Shimoni Jetty", 350),
    ("Marina English Point", "Shimoni Jetty", 380),
    ("Likoni Ferry Terminal", "Lamu Port", 3000),
    ("Marina English Point", "Lamu Port", 2900),
    # Kilifi
    ("Kilifi Jetty", "Bofa Jetty", 150),
    ("Kilifi Jetty", "Malindi Jetty", 800),
    ("Bofa Jetty", "Malindi Jetty", 850),
    ("Kilifi Jetty", "Shimoni Jetty", 1300),
    ("Bofa Jetty", "Shimoni Jetty", 1250),
    ("Malindi Jetty", "Shimoni Jetty", 1350),
    ("Kilifi Jetty", "Lamu Port", 2000),
    ("Bofa Jetty", "Lamu Port", 2050),
    ("Malindi Jetty", "Lamu Port", 2100),
    # Kwale
    ("Shimoni Jetty", "Vanga Port", 500),
    ("Shimoni Jetty", "Wasini Island Jetty", 100),
    ("Wasini Island Jetty", "Gasi Dock", 250),
    ("Shimoni Jetty", "Funzi Island Dock", 300),
    ("Vanga Port", "Funzi Island Dock", 550),
    ("Vanga Port", "Gasi Dock", 400),
    ("Funzi Island Dock", "Gasi Dock", 350),
    ("Vanga Port", "Kilifi Jetty", 1400),
    ("Gasi Dock", "Malindi Jetty", 1550),
    ("Funzi Island Dock", "Malindi Jetty", 1600),
    ("Wasini Island Jetty", "Malindi Jetty", 1500),
    ("Vanga Port", "Lamu Port", 2300),
    # Lamu
    ("Lamu Port", "Kiunga Jetty", 400),
    ("Lamu Port", "Manda Port", 350),
    ("Lamu Port", "Pate Island Jetty", 300),
    ("Kiunga Jetty", "Manda Port", 450),
    ("Kiunga Jetty", "Pate Island Jetty", 400),
    ("Manda Port", "Pate Island Jetty", 250),
    ("Lamu Port", "Shimoni Jetty", 2800),
]


def seed_routes(db: Session, routes: List[Tuple[str, str, int]] = DEFAULT_ROUTES) -> int:
    """
    Insert any catalogue route that is not stored yet, in both directions.
    Existing routes keep their fare. Returns the number of routes added.
    """
    existing = {(r.origin, r.destination) for r in db.query(Route.origin, Route.destination)}
    added = 0
    for first, second, fare in routes:
        for origin, destination in ((first, second), (second, first)):
            if (origin, destination) in existing:
                continue
            db.add(Route(origin=origin, destination=destination, fare_per_person=Decimal(fare)))
            existing.add((origin, destination))
            added += 1
    db.commit()

    logger.info(f"Seeded {added} routes")
    return added


def list_pickup_points(db: Session) -> List[str]:
    rows = db.query(Route.origin).distinct().order_by(Route.origin).all()
    return [row.origin for row in rows]


def list_destinations(origin: str, db: Session) -> List[str]:
    rows = db.query(Route.destination).filter(Route.origin == origin).order_by(Route.destination).all()
    return [row.destination for row in rows]
