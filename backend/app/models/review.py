"""
Review model for rider feedback on completed trips.
"""
from sqlalchemy import Column, String, Integer, Text, ForeignKey
from app.db.base import BaseModel


class Review(BaseModel):
    """A rider's rating of one completed booking."""
    __tablename__ = "reviews"
    
    booking_id = Column(Integer, ForeignKey("bookings.id"), unique=True, nullable=False)
    boat_id = Column(Integer, ForeignKey("boats.id"), nullable=False, index=True)
    owner_id = Column(String(128), nullable=False, index=True)
    rider_id = Column(String(128), nullable=False, index=True)
    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)
