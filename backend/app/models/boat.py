"""
Boat model for fleet management.
"""
from sqlalchemy import Column, String, Boolean, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Boat(BaseModel):
    """A water taxi registered by an owner, optionally crewed by a captain."""
    __tablename__ = "boats"
    
    name = Column(String(100), nullable=False)
    owner_id = Column(String(128), nullable=False, index=True)  # Owner uid
    captain_id = Column(String(128), nullable=True, index=True)  # Assigned captain uid
    capacity = Column(Integer, nullable=False)
    license_number = Column(String(50), nullable=False)
    is_validated = Column(Boolean, default=False, nullable=False)
    
    # Relationships
    bookings = relationship("Booking", back_populates="boat")
