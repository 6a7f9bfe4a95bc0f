"""
Fleet management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.boat import Boat
from app.models.user import User, UserRole
from app.schemas.boat import BoatCreate, BoatResponse, CaptainAssignment, BoatValidation
from app.api.dependencies import get_boat_or_404

router = APIRouter(prefix="/boats", tags=["boats"])


@router.post("", response_model=BoatResponse, status_code=status.HTTP_201_CREATED)
async def register_boat(boat_data: BoatCreate, db: Session = Depends(get_db)):
    """Register a boat. It stays unavailable until an admin validates it."""
    boat = Boat(
        name=boat_data.name,
        owner_id=boat_data.owner_id,
        capacity=boat_data.capacity,
        license_number=boat_data.license_number,
        is_validated=False
    )
    db.add(boat)
    db.commit()
    db.refresh(boat)
    return boat


@router.get("", response_model=List[BoatResponse])
async def list_boats(owner_id: Optional[str] = None, db: Session = Depends(get_db)):
    """List boats, optionally for one owner."""
    query = db.query(Boat)
    if owner_id:
        query = query.filter(Boat.owner_id == owner_id)
    return query.order_by(Boat.name).all()


@router.put("/captain", response_model=BoatResponse)
async def assign_captain(assignment: CaptainAssignment, db: Session = Depends(get_db)):
    """Assign a captain to a boat."""
    captain = db.query(User).filter(
        User.uid == assignment.captain_id,
        User.role == UserRole.CAPTAIN
    ).first()
    if not captain:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="The selected user is not a valid captain."
        )
    
    boat = get_boat_or_404(assignment.boat_id, db)
    boat.captain_id = captain.uid
    db.commit()
    db.refresh(boat)
    return boat


@router.delete("/{boat_id}/captain", response_model=BoatResponse)
async def unassign_captain(boat_id: int, db: Session = Depends(get_db)):
    """Remove the captain from a boat."""
    boat = get_boat_or_404(boat_id, db)
    boat.captain_id = None
    db.commit()
    db.refresh(boat)
    return boat


@router.put("/{boat_id}/validation", response_model=BoatResponse)
async def set_boat_validation(
    boat_id: int,
    validation: BoatValidation,
    db: Session = Depends(get_db)
):
    """Admin approval of a registered boat."""
    boat = get_boat_or_404(boat_id, db)
    boat.is_validated = validation.is_validated
    db.commit()
    db.refresh(boat)
    return boat
