"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User, UserRole
from app.models.boat import Boat
from app.models.booking import Booking, BookingStatus, BookingType
from app.models.investor import Investor
from app.models.settlement import TripSettlement, SettlementInvestorPayout
from app.models.route import Route, FareProposal, FareProposalStatus
from app.models.expense import Expense
from app.models.review import Review

__all__ = [
    "User",
    "UserRole",
    "Boat",
    "Booking",
    "BookingStatus",
    "BookingType",
    "Investor",
    "TripSettlement",
    "SettlementInvestorPayout",
    "Route",
    "FareProposal",
    "FareProposalStatus",
    "Expense",
    "Review",
]
