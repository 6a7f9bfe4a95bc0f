"""
Expense model for boat operating costs.
"""
from sqlalchemy import Column, String, Numeric, Integer, DateTime, ForeignKey
from app.db.base import BaseModel
from app.core.utils import utcnow


class Expense(BaseModel):
    """A cost recorded by an owner against one of their boats."""
    __tablename__ = "expenses"
    
    boat_id = Column(Integer, ForeignKey("boats.id"), nullable=False, index=True)
    owner_id = Column(String(128), nullable=False, index=True)
    category = Column(String(50), nullable=False)  # fuel, maintenance, payout, ...
    amount = Column(Numeric(15, 2), nullable=False)
    description = Column(String(500), nullable=False)
    expense_date = Column(DateTime, default=utcnow, nullable=False, index=True)
