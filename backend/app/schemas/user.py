"""
Pydantic schemas for User profiles.
"""
from pydantic import BaseModel, EmailStr
from datetime import datetime
from app.models.user import UserRole


class UserBase(BaseModel):
    """Base user schema."""
    uid: str
    name: str
    email: EmailStr


class UserCreate(UserBase):
    """Schema for profile creation."""
    role: UserRole = UserRole.RIDER


class UserRoleUpdate(BaseModel):
    """Schema for role change."""
    role: UserRole


class UserResponse(UserBase):
    """Schema for user response."""
    id: int
    role: UserRole
    created_at: datetime
    
    class Config:
        from_attributes = True
