"""
Settlement service for completed trip revenue splits.

A settlement divides a booking's final fare four ways:

    platform fee        = final fare * 20%
      investor payouts  = platform fee * share / 100, per investor
      platform share    = platform fee - sum(investor payouts)
    captain commission  = (final fare - platform fee) * 10%
    boat owner share    = final fare - platform fee - captain commission

The arithmetic runs on Decimal, so the four parts always add back up to the
final fare exactly. The investor roster is passed in as a snapshot taken by
the caller right before settling.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional, Sequence
import logging
from sqlalchemy.orm import Session
from app.core.utils import to_decimal, utcnow
from app.models.boat import Boat
from app.models.booking import Booking
from app.models.settlement import TripSettlement, SettlementInvestorPayout

logger = logging.getLogger(__name__)

PLATFORM_FEE_RATE = Decimal("0.20")
CAPTAIN_COMMISSION_RATE = Decimal("0.10")
HUNDRED = Decimal(100)


@dataclass(frozen=True)
class InvestorPayoutLine:
    """An investor's payout for one settlement."""
    investor_id: int
    name: str
    share_percentage: Decimal
    payout: Decimal


@dataclass(frozen=True)
class SettlementBreakdown:
    """Result of splitting a final fare."""
    final_fare: Decimal
    platform_fee: Decimal
    platform_share: Decimal
    captain_commission: Decimal
    boat_owner_share: Decimal
    investor_payouts: List[InvestorPayoutLine] = field(default_factory=list)

    @property
    def total_investor_payout(self) -> Decimal:
        return sum((line.payout for line in self.investor_payouts), Decimal(0))


def calculate_split(final_fare: Any, investors: Sequence[Any]) -> SettlementBreakdown:
    """
    Split a final fare between platform, investors, captain and owner.

    Args:
        final_fare: Fare actually charged for the trip
        investors: Roster snapshot; each item needs id, name and share_percentage

    Returns:
        SettlementBreakdown with payouts in roster order
    """
    fare = to_decimal(final_fare)
    platform_fee = fare * PLATFORM_FEE_RATE

    payouts = []
    total_investor_share = Decimal(0)
    for investor in investors:
        share = to_decimal(investor.share_percentage)
        payout = platform_fee * (share / HUNDRED)
        total_investor_share += payout
        payouts.append(InvestorPayoutLine(
            investor_id=investor.id,
            name=investor.name,
            share_percentage=share,
            payout=payout
        ))

    platform_share = platform_fee - total_investor_share
    captain_commission = (fare - platform_fee) * CAPTAIN_COMMISSION_RATE
    owner_share = fare - platform_fee - captain_commission

    return SettlementBreakdown(
        final_fare=fare,
        platform_fee=platform_fee,
        platform_share=platform_share,
        captain_commission=captain_commission,
        boat_owner_share=owner_share,
        investor_payouts=payouts
    )


def settle(
    booking: Booking,
    boat: Optional[Boat],
    investors: Sequence[Any],
    db: Session,
    completed_at: Optional[datetime] = None
) -> TripSettlement:
    """
    Compute and store the settlement for a completed booking.

    The booking must already carry a final fare. Settling the same booking
    again replaces its previous settlement instead of adding a second one;
    without an explicit completed_at the stored completion time is kept.
    """
    total_share = sum((to_decimal(i.share_percentage) for i in investors), Decimal(0))
    if total_share > HUNDRED:
        logger.warning(
            f"Investor shares total {total_share}% while settling booking {booking.id}; "
            f"platform share will be negative"
        )

    breakdown = calculate_split(booking.final_fare, investors)
    captain_id = boat.captain_id if boat else None

    settlement = db.query(TripSettlement).filter(
        TripSettlement.booking_id == booking.id
    ).first()
    if completed_at is None:
        # re-settling keeps the original completion time
        completed_at = settlement.trip_completed_at if settlement else utcnow()

    values = {
        "boat_id": booking.boat_id,
        "owner_id": booking.owner_id,
        "captain_id": captain_id,
        "trip_completed_at": completed_at,
        "base_fare": booking.base_fare,
        "luggage_fee": booking.luggage_fee or Decimal(0),
        "adjustment_percent": booking.adjustment_percent or Decimal(0),
        "final_fare": breakdown.final_fare,
        "platform_fee": breakdown.platform_fee,
        "platform_share": breakdown.platform_share,
        "captain_commission": breakdown.captain_commission,
        "boat_owner_share": breakdown.boat_owner_share,
    }
    payout_rows = [
        SettlementInvestorPayout(
            investor_id=line.investor_id,
            investor_name=line.name,
            share_percentage=line.share_percentage,
            payout=line.payout,
            position=position
        )
        for position, line in enumerate(breakdown.investor_payouts)
    ]

    if settlement:
        for key, value in values.items():
            setattr(settlement, key, value)
        # delete-orphan cascade drops the previous payout rows
        settlement.investor_payouts = payout_rows
        action = "updated"
    else:
        settlement = TripSettlement(booking_id=booking.id, **values)
        settlement.investor_payouts = payout_rows
        db.add(settlement)
        action = "created"

    db.commit()
    db.refresh(settlement)

    logger.info(
        f"Settlement {action} for booking {booking.id}: fare={breakdown.final_fare}, "
        f"platform_fee={breakdown.platform_fee}, investors={len(payout_rows)}"
    )
    return settlement
