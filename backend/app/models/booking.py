"""
Booking model for rider trips.
"""
from sqlalchemy import Column, String, Numeric, Boolean, Integer, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class BookingStatus(str, enum.Enum):
    """Booking lifecycle enumeration."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingType(str, enum.Enum):
    """Seat bookings share the boat; private bookings charter it."""
    SEAT = "seat"
    PRIVATE = "private"


class Booking(BaseModel):
    """A rider's request to travel on a specific boat."""
    __tablename__ = "bookings"
    
    boat_id = Column(Integer, ForeignKey("boats.id"), nullable=False, index=True)
    rider_id = Column(String(128), nullable=False, index=True)
    owner_id = Column(String(128), nullable=False, index=True)  # Copied from boat for owner lookups
    captain_id = Column(String(128), nullable=True)  # Copied from boat on completion
    pickup = Column(String(200), nullable=False)
    destination = Column(String(200), nullable=False)
    booking_type = Column(SQLEnum(BookingType), nullable=False)
    seats = Column(Integer, nullable=True)
    base_fare = Column(Numeric(15, 2), nullable=False)
    luggage_weight = Column(Numeric(10, 2), nullable=False, default=0)
    luggage_fee = Column(Numeric(15, 2), nullable=False, default=0)
    adjustment_percent = Column(Numeric(7, 2), nullable=False, default=0)
    final_fare = Column(Numeric(15, 2), nullable=True)  # Set once the fare is agreed
    status = Column(SQLEnum(BookingStatus), default=BookingStatus.PENDING, nullable=False, index=True)
    has_been_reviewed = Column(Boolean, default=False, nullable=False)
    cancelled_at = Column(DateTime, nullable=True)
    refund_status = Column(String(20), nullable=True)
    
    # Relationships
    boat = relationship("Boat", back_populates="bookings")
    settlement = relationship("TripSettlement", back_populates="booking", uselist=False)
