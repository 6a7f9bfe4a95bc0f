"""
Pydantic schemas for boat expenses.
"""
from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal


class ExpenseBase(BaseModel):
    """Base expense schema."""
    boat_id: int
    owner_id: str
    category: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)
    description: str = Field(min_length=1)


class ExpenseCreate(ExpenseBase):
    """Schema for recording an expense."""
    pass


class ExpenseResponse(ExpenseBase):
    """Schema for expense response."""
    id: int
    expense_date: datetime
    
    class Config:
        from_attributes = True
