"""
ERP financial reporting routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
import logging
from app.api.dependencies import get_boat_or_404
from app.db.session import get_db
from app.models.expense import Expense
from app.schemas.boat import FleetBoat
from app.schemas.expense import ExpenseCreate, ExpenseResponse
from app.schemas.settlement import (
    TripSettlementResponse, OwnerFinancialSummary, CrewPayout,
    InvestorPayoutReport, PlatformFinancialSummary
)
from app.services import report_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/erp", tags=["erp"])


@router.get("/trip-financials", response_model=List[TripSettlementResponse])
async def list_trip_financials(db: Session = Depends(get_db)):
    """All trip settlements, most recent first."""
    return report_service.list_trip_financials(db)


@router.get("/trip-financials/{booking_id}", response_model=TripSettlementResponse)
async def get_trip_financials(booking_id: int, db: Session = Depends(get_db)):
    """Settlement of a single booking."""
    settlement = report_service.get_trip_financials(booking_id, db)
    if not settlement:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Settlement not found"
        )
    return settlement


@router.get("/platform-summary", response_model=PlatformFinancialSummary)
async def get_platform_summary(db: Session = Depends(get_db)):
    """Platform-wide financial totals."""
    return report_service.platform_summary(db)


@router.get("/owner/{owner_id}/financial-summary", response_model=OwnerFinancialSummary)
async def get_owner_financial_summary(
    owner_id: str,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db)
):
    """Revenue summary for a boat owner. Dates filter only when both are given."""
    return report_service.owner_financial_summary(owner_id, db, start_date, end_date)


@router.get("/owner/{owner_id}/crew-payouts", response_model=List[CrewPayout])
async def get_owner_crew_payouts(owner_id: str, db: Session = Depends(get_db)):
    """Commission per captain on an owner's trips."""
    return report_service.owner_crew_payouts(owner_id, db)


@router.get("/investor/{investor_id}", response_model=InvestorPayoutReport)
async def get_investor_payouts(
    investor_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db)
):
    """Payout history for an investor."""
    return report_service.investor_payout_report(investor_id, db, start_date, end_date)


@router.get("/fleet", response_model=List[FleetBoat])
async def get_fleet(db: Session = Depends(get_db)):
    """Every boat with its owner and captain (admin)."""
    return report_service.fleet_overview(db)


@router.get("/expenses", response_model=List[ExpenseResponse])
async def list_expenses(
    boat_id: Optional[int] = None,
    owner_id: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Expenses, newest first, optionally for one boat or owner."""
    query = db.query(Expense)
    if boat_id is not None:
        query = query.filter(Expense.boat_id == boat_id)
    if owner_id:
        query = query.filter(Expense.owner_id == owner_id)
    return query.order_by(Expense.expense_date.desc(), Expense.id.desc()).all()


@router.post("/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(expense_data: ExpenseCreate, db: Session = Depends(get_db)):
    """Record an expense against one of the owner's boats."""
    boat = get_boat_or_404(expense_data.boat_id, db)
    if boat.owner_id != expense_data.owner_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Boat does not belong to this owner"
        )
    
    expense = Expense(
        boat_id=boat.id,
        owner_id=expense_data.owner_id,
        category=expense_data.category,
        amount=expense_data.amount,
        description=expense_data.description
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    
    logger.info(f"Expense {expense.id} of {expense.amount} recorded for boat {boat.id}")
    return expense
