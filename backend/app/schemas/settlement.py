"""
Pydantic schemas for trip settlements and financial reports.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal


class InvestorPayoutResponse(BaseModel):
    """Schema for one investor's payout within a settlement."""
    investor_id: int
    investor_name: str
    share_percentage: Decimal
    payout: Decimal
    
    class Config:
        from_attributes = True


class TripSettlementResponse(BaseModel):
    """Schema for a stored trip settlement."""
    id: int
    booking_id: int
    boat_id: int
    owner_id: str
    captain_id: Optional[str] = None
    trip_completed_at: datetime
    base_fare: Decimal
    luggage_fee: Decimal
    adjustment_percent: Decimal
    final_fare: Decimal
    platform_fee: Decimal
    platform_share: Decimal  # Platform fee left after investor payouts
    captain_commission: Decimal
    boat_owner_share: Decimal
    investor_payouts: List[InvestorPayoutResponse] = []
    
    class Config:
        from_attributes = True


class OwnerFinancialSummary(BaseModel):
    """Schema for an owner's revenue summary."""
    total_revenue: Decimal
    total_owner_share: Decimal
    total_captain_commission: Decimal
    trip_count: int


class CrewPayout(BaseModel):
    """Schema for one captain's commission on an owner's trips."""
    captain_id: str
    name: str
    email: str
    total_commission: Decimal
    trip_count: int


class DailyPayout(BaseModel):
    """Schema for a chart point of investor payouts."""
    date: str  # e.g. "Oct 17"
    payout: Decimal


class InvestorPayoutReport(BaseModel):
    """Schema for an investor's payout report."""
    total_payout: Decimal
    trip_count: int
    daily_payouts: List[DailyPayout] = []


class PlatformFinancialSummary(BaseModel):
    """Schema for platform-wide financial totals."""
    total_revenue: Decimal
    total_platform_fee: Decimal
    total_investor_payouts: Decimal
    total_platform_share: Decimal
    total_captain_commission: Decimal
    total_owner_share: Decimal
    trip_count: int
