"""
Pydantic schemas for trip reviews.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ReviewCreate(BaseModel):
    """Schema for a rider's review of a completed trip."""
    booking_id: int
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    """Review joined with rider, boat and owner names."""
    id: int
    booking_id: int
    boat_id: int
    owner_id: str
    rider_id: str
    rating: int
    comment: Optional[str] = None
    rider_name: Optional[str] = None
    boat_name: Optional[str] = None
    owner_name: Optional[str] = None
    created_at: datetime
