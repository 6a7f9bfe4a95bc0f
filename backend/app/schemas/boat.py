"""
Pydantic schemas for Boat entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class BoatBase(BaseModel):
    """Base boat schema."""
    name: str
    capacity: int = Field(ge=1)
    license_number: str


class BoatCreate(BoatBase):
    """Schema for boat registration."""
    owner_id: str


class BoatResponse(BoatBase):
    """Schema for boat response."""
    id: int
    owner_id: str
    captain_id: Optional[str] = None
    is_validated: bool
    created_at: datetime
    
    class Config:
        from_attributes = True


class CaptainAssignment(BaseModel):
    """Schema for assigning a captain to a boat."""
    boat_id: int
    captain_id: str


class BoatValidation(BaseModel):
    """Schema for admin boat validation."""
    is_validated: bool


class FleetContact(BaseModel):
    """Name and email of a boat's owner or captain."""
    name: str
    email: str


class FleetBoat(BaseModel):
    """Admin fleet overview row."""
    id: int
    name: str
    license_number: str
    capacity: int
    is_validated: bool
    owner_id: str
    owner: Optional[FleetContact] = None
    captain: Optional[FleetContact] = None
