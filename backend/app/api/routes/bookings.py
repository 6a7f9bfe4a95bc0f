"""
Booking routes for riders, owners and captains.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.booking import Booking
from app.schemas.booking import BookingCreate, BookingResponse, BookingStatusUpdate, FareAdjustment
from app.services import booking_service
from app.api.dependencies import to_http_exception

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(booking_data: BookingCreate, db: Session = Depends(get_db)):
    """Request a trip on a validated boat."""
    try:
        return booking_service.create_booking(
            boat_id=booking_data.boat_id,
            rider_id=booking_data.rider_id,
            pickup=booking_data.pickup,
            destination=booking_data.destination,
            booking_type=booking_data.booking_type,
            base_fare=booking_data.base_fare,
            seats=booking_data.seats,
            luggage_weight=booking_data.luggage_weight,
            luggage_fee=booking_data.luggage_fee,
            db=db
        )
    except ValueError as e:
        raise to_http_exception(e)


@router.get("", response_model=List[BookingResponse])
async def list_rider_bookings(rider_id: str, db: Session = Depends(get_db)):
    """List a rider's bookings, newest first."""
    return db.query(Booking).filter(
        Booking.rider_id == rider_id
    ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()


@router.get("/owner/{owner_id}", response_model=List[BookingResponse])
async def list_owner_bookings(owner_id: str, db: Session = Depends(get_db)):
    """List bookings on an owner's boats, newest first."""
    return db.query(Booking).filter(
        Booking.owner_id == owner_id
    ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()


@router.put("/status", response_model=BookingResponse)
async def update_booking_status(update: BookingStatusUpdate, db: Session = Depends(get_db)):
    """Accept, reject or complete a booking. Completion settles the trip."""
    try:
        return booking_service.update_booking_status(
            booking_id=update.booking_id,
            new_status=update.status,
            final_fare=update.final_fare,
            adjustment_percent=update.adjustment_percent,
            db=db
        )
    except ValueError as e:
        raise to_http_exception(e)


@router.put("/adjust", response_model=BookingResponse)
async def adjust_booking_fare(adjustment: FareAdjustment, db: Session = Depends(get_db)):
    """Adjust a completed booking's fare and recompute its settlement."""
    try:
        return booking_service.adjust_fare(
            booking_id=adjustment.booking_id,
            final_fare=adjustment.final_fare,
            adjustment_percent=adjustment.adjustment_percent,
            db=db
        )
    except ValueError as e:
        raise to_http_exception(e)


@router.delete("/{booking_id}")
async def withdraw_booking(booking_id: int, rider_id: str, db: Session = Depends(get_db)):
    """Withdraw a pending booking."""
    try:
        booking_service.cancel_pending_booking(booking_id, rider_id, db)
    except ValueError as e:
        raise to_http_exception(e)
    return {"message": "Booking withdrawn successfully"}
