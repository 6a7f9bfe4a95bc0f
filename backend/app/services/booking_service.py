"""
Booking service for lifecycle transitions and journey completion.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.utils import utcnow
from app.models.boat import Boat
from app.models.booking import Booking, BookingStatus, BookingType
from app.models.investor import Investor
from app.models.user import User
from app.services.settlement_service import settle

logger = logging.getLogger(__name__)

REFUND_PENDING = "pending"

# accepted is transient: it is stored as confirmed straight away
ALLOWED_TRANSITIONS: Dict[BookingStatus, set] = {
    BookingStatus.PENDING: {BookingStatus.ACCEPTED, BookingStatus.REJECTED, BookingStatus.CANCELLED},
    BookingStatus.ACCEPTED: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.COMPLETED: {BookingStatus.COMPLETED},
    BookingStatus.REJECTED: set(),
    BookingStatus.CANCELLED: set(),
}


class BookingNotFoundError(ValueError):
    """Raised when a booking id matches nothing."""


class BookingValidationError(ValueError):
    """Raised when booking input breaks a business rule."""


class InvalidTransitionError(ValueError):
    """Raised when a status change is not allowed from the current status."""


class MissingFareError(ValueError):
    """Raised when a booking must be settled but has no final fare."""


@dataclass
class JourneyResult:
    """Outcome of marking a set of bookings completed or cancelled."""
    settled: List[int] = field(default_factory=list)
    cancelled: List[int] = field(default_factory=list)
    failed: List[dict] = field(default_factory=list)
    missing: List[int] = field(default_factory=list)


def get_booking(booking_id: int, db: Session) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise BookingNotFoundError(f"Booking {booking_id} not found")
    return booking


def get_investor_snapshot(db: Session) -> List[Investor]:
    """Current investor roster in registration order."""
    return db.query(Investor).order_by(Investor.id).all()


def check_transition(booking: Booking, new_status: BookingStatus) -> None:
    if new_status not in ALLOWED_TRANSITIONS.get(booking.status, set()):
        raise InvalidTransitionError(
            f"Cannot move booking {booking.id} from {booking.status.value} to {new_status.value}"
        )


def create_booking(
    boat_id: int,
    rider_id: str,
    pickup: str,
    destination: str,
    booking_type: BookingType,
    base_fare: Decimal,
    seats: Optional[int] = None,
    luggage_weight: Decimal = Decimal(0),
    luggage_fee: Decimal = Decimal(0),
    db: Session = None
) -> Booking:
    """Create a pending booking on a validated boat."""
    if booking_type == BookingType.SEAT and (not seats or seats < 1):
        raise BookingValidationError("Seat booking must specify at least 1 seat")

    boat = db.query(Boat).filter(Boat.id == boat_id, Boat.is_validated.is_(True)).first()
    if not boat:
        raise BookingNotFoundError("The selected boat is not valid or available.")

    rider = db.query(User).filter(User.uid == rider_id).first()
    if not rider:
        raise BookingNotFoundError("Rider profile not found.")

    if booking_type == BookingType.SEAT and seats > boat.capacity:
        raise BookingValidationError(f"Number of seats exceeds boat capacity of {boat.capacity}.")

    booking = Booking(
        boat_id=boat.id,
        rider_id=rider.uid,
        owner_id=boat.owner_id,
        pickup=pickup,
        destination=destination,
        booking_type=booking_type,
        seats=seats if booking_type == BookingType.SEAT else None,
        base_fare=base_fare,
        luggage_weight=luggage_weight or Decimal(0),
        luggage_fee=luggage_fee or Decimal(0),
        adjustment_percent=Decimal(0),
        status=BookingStatus.PENDING
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)

    logger.info(f"Booking {booking.id} created for rider {rider_id} on boat {boat_id}")
    return booking


def complete_booking(booking: Booking, db: Session, completed_at: Optional[datetime] = None):
    """
    Mark a booking completed and settle it.
    Commits the booking and its settlement together.
    """
    check_transition(booking, BookingStatus.COMPLETED)
    if booking.final_fare is None:
        raise MissingFareError(f"Booking {booking.id} has no final fare to settle")

    boat = db.query(Boat).filter(Boat.id == booking.boat_id).first()
    booking.status = BookingStatus.COMPLETED
    if boat and boat.captain_id:
        booking.captain_id = boat.captain_id

    return settle(booking, boat, get_investor_snapshot(db), db, completed_at=completed_at)


def cancel_booking(booking: Booking, db: Session) -> None:
    """Cancel a booking and queue the rider's refund."""
    check_transition(booking, BookingStatus.CANCELLED)
    booking.status = BookingStatus.CANCELLED
    booking.cancelled_at = utcnow()
    booking.refund_status = REFUND_PENDING
    db.commit()


def update_booking_status(
    booking_id: int,
    new_status: BookingStatus,
    final_fare: Optional[Decimal] = None,
    adjustment_percent: Optional[Decimal] = None,
    db: Session = None
) -> Booking:
    """Apply an owner/captain status decision to a booking."""
    booking = get_booking(booking_id, db)

    if new_status == BookingStatus.ACCEPTED:
        if final_fare is None or adjustment_percent is None:
            raise BookingValidationError("Accepted bookings must have a final_fare and adjustment_percent")
        check_transition(booking, new_status)
        booking.final_fare = final_fare
        booking.adjustment_percent = adjustment_percent
        # Rider has paid, so the booking is confirmed
        booking.status = BookingStatus.CONFIRMED
        db.commit()
    elif new_status == BookingStatus.COMPLETED:
        complete_booking(booking, db)
    elif new_status == BookingStatus.CANCELLED:
        cancel_booking(booking, db)
    else:
        check_transition(booking, new_status)
        booking.status = new_status
        db.commit()

    db.refresh(booking)
    logger.info(f"Booking {booking.id} moved to {booking.status.value}")
    return booking


def adjust_fare(
    booking_id: int,
    final_fare: Decimal,
    adjustment_percent: Decimal,
    db: Session
) -> Booking:
    """
    Change the fare of a completed booking and recompute its settlement
    against the current investor roster.
    """
    booking = get_booking(booking_id, db)
    if booking.status != BookingStatus.COMPLETED:
        raise InvalidTransitionError("Booking not found or not in a state that can be adjusted")

    booking.final_fare = final_fare
    booking.adjustment_percent = adjustment_percent

    boat = db.query(Boat).filter(Boat.id == booking.boat_id).first()
    settle(booking, boat, get_investor_snapshot(db), db)
    db.refresh(booking)
    return booking


def cancel_pending_booking(booking_id: int, rider_id: str, db: Session) -> None:
    """Let a rider withdraw their own booking before it is accepted."""
    booking = db.query(Booking).filter(
        Booking.id == booking_id,
        Booking.rider_id == rider_id
    ).first()
    if not booking:
        raise BookingNotFoundError("Booking not found")
    if booking.status != BookingStatus.PENDING:
        raise InvalidTransitionError("Only pending bookings can be withdrawn")

    db.delete(booking)
    db.commit()


def complete_journey(booking_ids: List[int], new_status: BookingStatus, db: Session) -> JourneyResult:
    """
    Mark every booking of a journey completed or cancelled.

    Each booking is handled in its own transaction. A booking that fails to
    settle is rolled back and reported without stopping the others.
    """
    if new_status not in (BookingStatus.COMPLETED, BookingStatus.CANCELLED):
        raise BookingValidationError("Invalid status provided")

    unique_ids = list(dict.fromkeys(booking_ids))
    bookings = db.query(Booking).filter(Booking.id.in_(unique_ids)).all()
    found = {b.id: b for b in bookings}

    result = JourneyResult(missing=[bid for bid in unique_ids if bid not in found])
    if not found:
        raise BookingNotFoundError("No matching bookings found to update")

    for booking_id in unique_ids:
        booking = found.get(booking_id)
        if booking is None:
            continue

        try:
            if new_status == BookingStatus.COMPLETED:
                complete_booking(booking, db)
                result.settled.append(booking_id)
            else:
                cancel_booking(booking, db)
                result.cancelled.append(booking_id)
        except (ValueError, SQLAlchemyError) as e:
            db.rollback()
            logger.error(f"Failed to mark booking {booking_id} {new_status.value}: {e}", exc_info=True)
            result.failed.append({"booking_id": booking_id, "detail": str(e)})

    return result
