"""
User profile model. Identities are issued by the external provider; this
table only keeps the profile fields the marketplace needs.
"""
from sqlalchemy import Column, String, Enum as SQLEnum
from app.db.base import BaseModel
import enum


class UserRole(str, enum.Enum):
    """Marketplace role enumeration."""
    RIDER = "rider"
    OWNER = "owner"
    CAPTAIN = "captain"
    ADMIN = "admin"


class User(BaseModel):
    """User profile keyed by the identity provider uid."""
    __tablename__ = "users"
    
    uid = Column(String(128), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    role = Column(SQLEnum(UserRole), default=UserRole.RIDER, nullable=False)
