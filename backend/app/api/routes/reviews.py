"""
Rider review routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, aliased
from typing import List
import logging
from app.db.session import get_db
from app.models.boat import Boat
from app.models.booking import Booking, BookingStatus
from app.models.review import Review
from app.models.user import User
from app.schemas.review import ReviewCreate, ReviewResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


def _review_query(db: Session):
    rider = aliased(User)
    owner = aliased(User)
    return db.query(
        Review,
        rider.name.label("rider_name"),
        Boat.name.label("boat_name"),
        owner.name.label("owner_name")
    ).outerjoin(
        rider, rider.uid == Review.rider_id
    ).outerjoin(
        Boat, Boat.id == Review.boat_id
    ).outerjoin(
        owner, owner.uid == Review.owner_id
    )


def _to_response(row) -> ReviewResponse:
    review = row.Review
    return ReviewResponse(
        id=review.id,
        booking_id=review.booking_id,
        boat_id=review.boat_id,
        owner_id=review.owner_id,
        rider_id=review.rider_id,
        rating=review.rating,
        comment=review.comment,
        rider_name=row.rider_name,
        boat_name=row.boat_name,
        owner_name=row.owner_name,
        created_at=review.created_at
    )


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(review_data: ReviewCreate, db: Session = Depends(get_db)):
    """Review a completed trip. Each booking can be reviewed once."""
    booking = db.query(Booking).filter(Booking.id == review_data.booking_id).first()
    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found."
        )
    if booking.status != BookingStatus.COMPLETED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You can only review completed trips."
        )
    if booking.has_been_reviewed:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This trip has already been reviewed."
        )
    
    review = Review(
        booking_id=booking.id,
        boat_id=booking.boat_id,
        owner_id=booking.owner_id,
        rider_id=booking.rider_id,
        rating=review_data.rating,
        comment=review_data.comment
    )
    db.add(review)
    booking.has_been_reviewed = True
    db.commit()
    
    logger.info(f"Booking {booking.id} reviewed with rating {review.rating}")
    return _to_response(_review_query(db).filter(Review.id == review.id).one())


@router.get("", response_model=List[ReviewResponse])
async def list_reviews(db: Session = Depends(get_db)):
    """All reviews, newest first."""
    rows = _review_query(db).order_by(Review.created_at.desc(), Review.id.desc()).all()
    return [_to_response(row) for row in rows]
