"""
Captain routes for journey progress.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.boat import Boat
from app.models.booking import Booking, BookingStatus
from app.models.user import User
from app.schemas.booking import CaptainTrip, JourneyUpdate, JourneyResponse
from app.services.booking_service import complete_journey
from app.api.dependencies import to_http_exception

router = APIRouter(prefix="/captain", tags=["captain"])


@router.get("/trips", response_model=List[CaptainTrip])
async def list_captain_trips(captain_id: str, db: Session = Depends(get_db)):
    """Paid bookings on the captain's boats, oldest first."""
    boat_ids = [row.id for row in db.query(Boat.id).filter(Boat.captain_id == captain_id)]
    if not boat_ids:
        return []
    
    rows = db.query(Booking, Boat, User.name).join(
        Boat, Boat.id == Booking.boat_id
    ).outerjoin(
        User, User.uid == Booking.rider_id
    ).filter(
        Booking.boat_id.in_(boat_ids),
        Booking.status == BookingStatus.CONFIRMED
    ).order_by(Booking.created_at, Booking.id).all()
    
    return [
        CaptainTrip(
            booking_id=booking.id,
            pickup=booking.pickup,
            destination=booking.destination,
            booking_type=booking.booking_type,
            seats=booking.seats,
            final_fare=booking.final_fare,
            rider_uid=booking.rider_id,
            rider_name=rider_name,
            boat_id=boat.id,
            boat_name=boat.name,
            license_number=boat.license_number,
            created_at=booking.created_at
        )
        for booking, boat, rider_name in rows
    ]


@router.post("/journey", response_model=JourneyResponse)
async def update_journey(update: JourneyUpdate, db: Session = Depends(get_db)):
    """
    Mark all bookings of a journey completed or cancelled.
    Bookings are settled one by one; failures are listed, not fatal.
    """
    try:
        result = complete_journey(update.booking_ids, update.status, db)
    except ValueError as e:
        raise to_http_exception(e)
    
    return JourneyResponse(
        message=f"Journey marked as {update.status.value}",
        settled=result.settled,
        cancelled=result.cancelled,
        failed=result.failed,
        missing=result.missing
    )
