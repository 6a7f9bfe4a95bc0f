"""
Financial reports built on stored trip settlements.
"""
from sqlalchemy.orm import Session, aliased
from sqlalchemy import func
from typing import Dict, List, Optional
from datetime import date
from decimal import Decimal
from app.core.utils import day_bounds, day_label, to_decimal
from app.models.boat import Boat
from app.models.settlement import TripSettlement, SettlementInvestorPayout
from app.models.user import User


def _in_range(query, start_date: Optional[date], end_date: Optional[date]):
    bounds = day_bounds(start_date, end_date)
    if bounds:
        query = query.filter(TripSettlement.trip_completed_at.between(*bounds))
    return query


def _sum(value) -> Decimal:
    return to_decimal(value) if value is not None else Decimal(0)


def list_trip_financials(db: Session) -> List[TripSettlement]:
    """All settlements, most recently completed first."""
    return db.query(TripSettlement).order_by(
        TripSettlement.trip_completed_at.desc(),
        TripSettlement.id.desc()
    ).all()


def get_trip_financials(booking_id: int, db: Session) -> Optional[TripSettlement]:
    return db.query(TripSettlement).filter(TripSettlement.booking_id == booking_id).first()


def owner_financial_summary(
    owner_id: str,
    db: Session,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
) -> Dict:
    """Revenue, owner share and captain commission totals for one owner."""
    query = db.query(
        func.sum(TripSettlement.final_fare),
        func.sum(TripSettlement.boat_owner_share),
        func.sum(TripSettlement.captain_commission),
        func.count(TripSettlement.id)
    ).filter(TripSettlement.owner_id == owner_id)
    revenue, owner_share, commission, trip_count = _in_range(query, start_date, end_date).one()

    return {
        "total_revenue": _sum(revenue),
        "total_owner_share": _sum(owner_share),
        "total_captain_commission": _sum(commission),
        "trip_count": trip_count or 0,
    }


def owner_crew_payouts(owner_id: str, db: Session) -> List[Dict]:
    """
    Commission earned by each captain currently crewing the owner's boats,
    counting only that owner's trips.
    """
    captain_ids = [
        row.captain_id
        for row in db.query(Boat.captain_id).filter(
            Boat.owner_id == owner_id,
            Boat.captain_id.isnot(None)
        ).distinct()
    ]
    if not captain_ids:
        return []

    total_commission = func.sum(TripSettlement.captain_commission)
    rows = db.query(
        TripSettlement.captain_id,
        User.name,
        User.email,
        total_commission.label("total_commission"),
        func.count(TripSettlement.id).label("trip_count")
    ).join(
        User, User.uid == TripSettlement.captain_id
    ).filter(
        TripSettlement.owner_id == owner_id,
        TripSettlement.captain_id.in_(captain_ids)
    ).group_by(
        TripSettlement.captain_id, User.name, User.email
    ).order_by(total_commission.desc()).all()

    return [
        {
            "captain_id": row.captain_id,
            "name": row.name,
            "email": row.email,
            "total_commission": _sum(row.total_commission),
            "trip_count": row.trip_count,
        }
        for row in rows
    ]


def investor_payout_report(
    investor_id: int,
    db: Session,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
) -> Dict:
    """Total and per-day payouts received by one investor."""
    query = db.query(
        SettlementInvestorPayout.payout,
        TripSettlement.trip_completed_at
    ).join(
        TripSettlement, SettlementInvestorPayout.settlement_id == TripSettlement.id
    ).filter(SettlementInvestorPayout.investor_id == investor_id)
    rows = _in_range(query, start_date, end_date).all()

    total_payout = Decimal(0)
    daily: Dict[date, Decimal] = {}
    for payout, completed_at in rows:
        amount = to_decimal(payout)
        total_payout += amount
        day = completed_at.date()
        daily[day] = daily.get(day, Decimal(0)) + amount

    return {
        "total_payout": total_payout,
        "trip_count": len(rows),
        "daily_payouts": [
            {"date": day_label(day), "payout": daily[day]}
            for day in sorted(daily)
        ],
    }


def platform_summary(db: Session) -> Dict:
    """Platform-wide totals for the admin financial dashboard."""
    revenue, platform_fee, platform_share, commission, owner_share, trip_count = db.query(
        func.sum(TripSettlement.final_fare),
        func.sum(TripSettlement.platform_fee),
        func.sum(TripSettlement.platform_share),
        func.sum(TripSettlement.captain_commission),
        func.sum(TripSettlement.boat_owner_share),
        func.count(TripSettlement.id)
    ).one()
    investor_total = db.query(func.sum(SettlementInvestorPayout.payout)).scalar()

    return {
        "total_revenue": _sum(revenue),
        "total_platform_fee": _sum(platform_fee),
        "total_investor_payouts": _sum(investor_total),
        "total_platform_share": _sum(platform_share),
        "total_captain_commission": _sum(commission),
        "total_owner_share": _sum(owner_share),
        "trip_count": trip_count or 0,
    }


def fleet_overview(db: Session) -> List[Dict]:
    """Every boat with its owner and captain contact, by owner then boat name."""
    owner = aliased(User)
    captain = aliased(User)
    rows = db.query(Boat, owner, captain).outerjoin(
        owner, owner.uid == Boat.owner_id
    ).outerjoin(
        captain, captain.uid == Boat.captain_id
    ).order_by(owner.name, Boat.name, Boat.id).all()

    return [
        {
            "id": boat.id,
            "name": boat.name,
            "license_number": boat.license_number,
            "capacity": boat.capacity,
            "is_validated": boat.is_validated,
            "owner_id": boat.owner_id,
            "owner": {"name": boat_owner.name, "email": boat_owner.email} if boat_owner else None,
            "captain": {"name": boat_captain.name, "email": boat_captain.email} if boat_captain else None,
        }
        for boat, boat_owner, boat_captain in rows
    ]
