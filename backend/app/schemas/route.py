"""
Pydantic schemas for routes and fare proposals.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from app.models.route import FareProposalStatus


class RouteBase(BaseModel):
    """Base route schema."""
    origin: str
    destination: str
    fare_per_person: Decimal = Field(gt=0)


class RouteCreate(RouteBase):
    """Schema for adding a route."""
    pass


class RouteResponse(RouteBase):
    """Schema for route response."""
    id: int
    
    class Config:
        from_attributes = True


class ProposedFare(BaseModel):
    """One route fare an owner wants changed."""
    route_id: int
    proposed_fare: Decimal = Field(gt=0)


class FareProposalCreate(BaseModel):
    """Schema for an owner's batch of fare proposals."""
    owner_id: str
    proposals: List[ProposedFare] = Field(min_length=1)


class FareProposalDecision(BaseModel):
    """Schema for an admin decision on a proposal."""
    proposal_id: int
    status: FareProposalStatus


class FareProposalResponse(BaseModel):
    """Proposal joined with its owner and route."""
    id: int
    route_id: int
    owner_id: str
    owner_name: Optional[str] = None
    origin: str
    destination: str
    current_fare: Decimal
    proposed_fare: Decimal
    status: FareProposalStatus
    created_at: datetime
