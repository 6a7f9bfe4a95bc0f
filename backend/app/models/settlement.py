"""
Settlement models for completed trip revenue splits.
"""
from sqlalchemy import Column, String, Numeric, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class TripSettlement(BaseModel):
    """Financial split of one completed booking. At most one per booking."""
    __tablename__ = "trip_settlements"
    
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    boat_id = Column(Integer, ForeignKey("boats.id"), nullable=False, index=True)
    owner_id = Column(String(128), nullable=False, index=True)
    captain_id = Column(String(128), nullable=True, index=True)
    trip_completed_at = Column(DateTime, nullable=False, index=True)
    
    # Copied from the booking at settlement time
    base_fare = Column(Numeric(15, 2), nullable=False)
    luggage_fee = Column(Numeric(15, 2), nullable=False, default=0)
    adjustment_percent = Column(Numeric(7, 2), nullable=False, default=0)
    final_fare = Column(Numeric(15, 2), nullable=False)
    
    # Split
    platform_fee = Column(Numeric(18, 6), nullable=False)
    platform_share = Column(Numeric(18, 6), nullable=False)  # Platform fee left after investor payouts
    captain_commission = Column(Numeric(18, 6), nullable=False)
    boat_owner_share = Column(Numeric(18, 6), nullable=False)
    
    # Relationships
    booking = relationship("Booking", back_populates="settlement")
    investor_payouts = relationship(
        "SettlementInvestorPayout",
        back_populates="settlement",
        cascade="all, delete-orphan",
        order_by="SettlementInvestorPayout.position"
    )
    
    __table_args__ = (
        UniqueConstraint('booking_id', name='uq_settlement_booking'),
    )


class SettlementInvestorPayout(BaseModel):
    """One investor's cut of a settlement's platform fee."""
    __tablename__ = "settlement_investor_payouts"
    
    settlement_id = Column(Integer, ForeignKey("trip_settlements.id"), nullable=False, index=True)
    investor_id = Column(Integer, nullable=False, index=True)  # No FK: payouts outlive deleted investors
    investor_name = Column(String(100), nullable=False)
    share_percentage = Column(Numeric(5, 2), nullable=False)
    payout = Column(Numeric(18, 6), nullable=False)
    position = Column(Integer, nullable=False, default=0)  # Roster order at settlement time
    
    # Relationships
    settlement = relationship("TripSettlement", back_populates="investor_payouts")
