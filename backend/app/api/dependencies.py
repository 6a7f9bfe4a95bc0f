"""
Shared helpers for route handlers.
"""
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.models.boat import Boat
from app.services.booking_service import BookingNotFoundError, InvalidTransitionError


def to_http_exception(error: ValueError) -> HTTPException:
    """Map a booking service error to an HTTP error response."""
    if isinstance(error, BookingNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, InvalidTransitionError):
        code = status.HTTP_409_CONFLICT
    else:
        # MissingFareError, BookingValidationError
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(error))


def get_boat_or_404(boat_id: int, db: Session) -> Boat:
    """Load a boat or raise 404."""
    boat = db.query(Boat).filter(Boat.id == boat_id).first()
    if not boat:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Boat not found"
        )
    return boat
