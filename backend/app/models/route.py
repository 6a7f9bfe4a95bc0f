"""
Route and fare proposal models.
"""
from sqlalchemy import Column, String, Numeric, Integer, ForeignKey, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class FareProposalStatus(str, enum.Enum):
    """Admin decision on a proposed fare."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Route(BaseModel):
    """A docking-point pair with its per-person fare."""
    __tablename__ = "routes"
    
    origin = Column(String(200), nullable=False, index=True)
    destination = Column(String(200), nullable=False)
    fare_per_person = Column(Numeric(15, 2), nullable=False)
    
    # Relationships
    fare_proposals = relationship("FareProposal", back_populates="route")
    
    __table_args__ = (
        UniqueConstraint('origin', 'destination', name='uq_route_origin_destination'),
    )


class FareProposal(BaseModel):
    """An owner's request to change the fare of a route."""
    __tablename__ = "fare_proposals"
    
    route_id = Column(Integer, ForeignKey("routes.id"), nullable=False, index=True)
    owner_id = Column(String(128), nullable=False, index=True)
    proposed_fare = Column(Numeric(15, 2), nullable=False)
    status = Column(SQLEnum(FareProposalStatus), default=FareProposalStatus.PENDING, nullable=False)
    
    # Relationships
    route = relationship("Route", back_populates="fare_proposals")
