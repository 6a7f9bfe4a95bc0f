"""
Investor registry routes (admin).
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List
from decimal import Decimal
import logging
from app.db.session import get_db
from app.models.investor import Investor
from app.schemas.investor import InvestorCreate, InvestorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/investors", tags=["investors"])


@router.get("", response_model=List[InvestorResponse])
async def list_investors(db: Session = Depends(get_db)):
    """List investors, newest first."""
    return db.query(Investor).order_by(Investor.created_at.desc(), Investor.id.desc()).all()


@router.post("", response_model=InvestorResponse, status_code=status.HTTP_201_CREATED)
async def create_investor(investor_data: InvestorCreate, db: Session = Depends(get_db)):
    """Register an investor. Total shares may not exceed 100%."""
    share = investor_data.share_percentage
    if share <= 0 or share > 100:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Share percentage must be a number between 0 and 100"
        )
    
    current_total = db.query(func.sum(Investor.share_percentage)).scalar() or Decimal(0)
    if current_total + share > 100:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                "Adding this investor would exceed 100% of the platform fee share. "
                f"Current total: {current_total.normalize():f}%."
            )
        )
    
    investor = Investor(name=investor_data.name, share_percentage=share)
    db.add(investor)
    db.commit()
    db.refresh(investor)
    
    logger.info(f"Investor {investor.id} registered with {share}% share")
    return investor


@router.delete("/{investor_id}")
async def delete_investor(investor_id: int, db: Session = Depends(get_db)):
    """Remove an investor. Past settlement payouts are kept."""
    investor = db.query(Investor).filter(Investor.id == investor_id).first()
    if not investor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Investor not found"
        )
    
    db.delete(investor)
    db.commit()
    
    return {"message": "Investor deleted successfully"}
