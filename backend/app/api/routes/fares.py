"""
Route catalogue and fare proposal routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging
from app.db.session import get_db
from app.models.route import Route, FareProposal, FareProposalStatus
from app.models.user import User
from app.schemas.route import (
    RouteCreate, RouteResponse, FareProposalCreate, FareProposalDecision, FareProposalResponse
)
from app.services.route_service import list_destinations, list_pickup_points

logger = logging.getLogger(__name__)

router = APIRouter(tags=["fares"])


def _proposal_response(proposal: FareProposal, owner_name: Optional[str]) -> FareProposalResponse:
    return FareProposalResponse(
        id=proposal.id,
        route_id=proposal.route_id,
        owner_id=proposal.owner_id,
        owner_name=owner_name,
        origin=proposal.route.origin,
        destination=proposal.route.destination,
        current_fare=proposal.route.fare_per_person,
        proposed_fare=proposal.proposed_fare,
        status=proposal.status,
        created_at=proposal.created_at
    )


@router.get("/routes", response_model=List[str])
async def get_route_points(
    origin: Optional[str] = Query(None, alias="from"),
    db: Session = Depends(get_db)
):
    """Destinations reachable from a pickup point, or every pickup point."""
    if origin:
        return list_destinations(origin, db)
    return list_pickup_points(db)


@router.get("/routes/fares", response_model=List[RouteResponse])
async def list_route_fares(db: Session = Depends(get_db)):
    """All routes with their per-person fare."""
    return db.query(Route).order_by(Route.origin, Route.destination).all()


@router.post("/routes", response_model=RouteResponse, status_code=status.HTTP_201_CREATED)
async def create_route(route_data: RouteCreate, db: Session = Depends(get_db)):
    """Add a route to the catalogue (admin)."""
    existing = db.query(Route).filter(
        Route.origin == route_data.origin,
        Route.destination == route_data.destination
    ).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Route already exists"
        )
    
    route = Route(
        origin=route_data.origin,
        destination=route_data.destination,
        fare_per_person=route_data.fare_per_person
    )
    db.add(route)
    db.commit()
    db.refresh(route)
    return route


@router.get("/fare-proposals", response_model=List[FareProposalResponse])
async def list_fare_proposals(db: Session = Depends(get_db)):
    """All fare proposals, newest first."""
    rows = db.query(FareProposal, User.name).outerjoin(
        User, User.uid == FareProposal.owner_id
    ).order_by(FareProposal.created_at.desc(), FareProposal.id.desc()).all()
    
    return [_proposal_response(proposal, owner_name) for proposal, owner_name in rows]


@router.post("/fare-proposals", response_model=List[FareProposalResponse], status_code=status.HTTP_201_CREATED)
async def submit_fare_proposals(proposal_data: FareProposalCreate, db: Session = Depends(get_db)):
    """Submit new route fares for admin review."""
    route_ids = {p.route_id for p in proposal_data.proposals}
    found = {r.id for r in db.query(Route.id).filter(Route.id.in_(route_ids))}
    unknown = sorted(route_ids - found)
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Route not found: {', '.join(str(i) for i in unknown)}"
        )
    
    proposals = [
        FareProposal(
            route_id=p.route_id,
            owner_id=proposal_data.owner_id,
            proposed_fare=p.proposed_fare,
            status=FareProposalStatus.PENDING
        )
        for p in proposal_data.proposals
    ]
    db.add_all(proposals)
    db.commit()
    
    owner = db.query(User).filter(User.uid == proposal_data.owner_id).first()
    logger.info(f"Owner {proposal_data.owner_id} submitted {len(proposals)} fare proposals")
    return [_proposal_response(p, owner.name if owner else None) for p in proposals]


@router.put("/fare-proposals", response_model=FareProposalResponse)
async def decide_fare_proposal(decision: FareProposalDecision, db: Session = Depends(get_db)):
    """Approve or reject a pending proposal. Approval updates the route fare."""
    if decision.status == FareProposalStatus.PENDING:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Status must be approved or rejected"
        )
    
    proposal = db.query(FareProposal).filter(FareProposal.id == decision.proposal_id).first()
    if not proposal:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Proposal not found"
        )
    if proposal.status != FareProposalStatus.PENDING:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This proposal has already been processed."
        )
    
    proposal.status = decision.status
    if decision.status == FareProposalStatus.APPROVED:
        proposal.route.fare_per_person = proposal.proposed_fare
    db.commit()
    db.refresh(proposal)
    
    logger.info(f"Fare proposal {proposal.id} {decision.status.value}")
    owner = db.query(User).filter(User.uid == proposal.owner_id).first()
    return _proposal_response(proposal, owner.name if owner else None)
