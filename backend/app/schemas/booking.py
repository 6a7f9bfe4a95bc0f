"""
Pydantic schemas for Booking entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from app.models.booking import BookingStatus, BookingType


class BookingBase(BaseModel):
    """Base booking schema."""
    boat_id: int
    rider_id: str
    pickup: str
    destination: str
    booking_type: BookingType
    seats: Optional[int] = None
    base_fare: Decimal = Field(gt=0)
    luggage_weight: Decimal = Decimal(0)
    luggage_fee: Decimal = Decimal(0)


class BookingCreate(BookingBase):
    """Schema for booking creation."""
    pass


class BookingResponse(BookingBase):
    """Schema for booking response."""
    id: int
    owner_id: str
    captain_id: Optional[str] = None
    adjustment_percent: Decimal
    final_fare: Optional[Decimal] = None
    status: BookingStatus
    has_been_reviewed: bool
    cancelled_at: Optional[datetime] = None
    refund_status: Optional[str] = None
    created_at: datetime
    
    class Config:
        from_attributes = True


class BookingStatusUpdate(BaseModel):
    """Schema for owner/captain status decisions."""
    booking_id: int
    status: BookingStatus
    final_fare: Optional[Decimal] = Field(default=None, gt=0)
    adjustment_percent: Optional[Decimal] = None


class FareAdjustment(BaseModel):
    """Schema for adjusting the fare of a completed booking."""
    booking_id: int
    final_fare: Decimal = Field(gt=0)
    adjustment_percent: Decimal


class JourneyUpdate(BaseModel):
    """Schema for completing or cancelling every booking of a journey."""
    booking_ids: List[int] = Field(min_length=1)
    status: BookingStatus


class JourneyFailure(BaseModel):
    """A booking the journey update could not process."""
    booking_id: int
    detail: str


class JourneyResponse(BaseModel):
    """Schema for journey update outcome."""
    message: str
    settled: List[int] = []
    cancelled: List[int] = []
    failed: List[JourneyFailure] = []
    missing: List[int] = []


class CaptainTrip(BaseModel):
    """A paid booking on one of the captain's boats, awaiting its journey."""
    booking_id: int
    pickup: str
    destination: str
    booking_type: BookingType
    seats: Optional[int] = None
    final_fare: Optional[Decimal] = None
    rider_uid: str
    rider_name: Optional[str] = None
    boat_id: int
    boat_name: str
    license_number: str
    created_at: datetime
