"""
Investor model for platform fee distribution.
"""
from sqlalchemy import Column, String, Numeric
from app.db.base import BaseModel


class Investor(BaseModel):
    """Platform investor entitled to a percentage of every platform fee."""
    __tablename__ = "investors"
    
    name = Column(String(100), nullable=False)
    share_percentage = Column(Numeric(5, 2), nullable=False)  # 0 < share <= 100
