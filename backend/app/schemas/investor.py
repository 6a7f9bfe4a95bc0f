"""
Pydantic schemas for Investor entity.
"""
from pydantic import BaseModel
from datetime import datetime
from decimal import Decimal


class InvestorBase(BaseModel):
    """Base investor schema."""
    name: str
    share_percentage: Decimal  # Percent of every platform fee


class InvestorCreate(InvestorBase):
    """Schema for investor creation."""
    pass


class InvestorResponse(InvestorBase):
    """Schema for investor response."""
    id: int
    created_at: datetime
    
    class Config:
        from_attributes = True
