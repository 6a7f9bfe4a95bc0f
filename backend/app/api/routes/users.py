"""
User profile routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.user import UserCreate, UserResponse, UserRoleUpdate
from app.models.user import User

router = APIRouter(prefix="/users", tags=["users"])


def get_user_or_404(uid: str, db: Session) -> User:
    user = db.query(User).filter(User.uid == uid).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a profile for an identity-provider user."""
    existing = db.query(User).filter(
        (User.uid == user_data.uid) | (User.email == user_data.email)
    ).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User profile already exists"
        )
    
    user = User(
        uid=user_data.uid,
        name=user_data.name,
        email=user_data.email,
        role=user_data.role
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    
    return user


@router.get("/{uid}", response_model=UserResponse)
async def get_user(uid: str, db: Session = Depends(get_db)):
    """Get user profile by uid."""
    return get_user_or_404(uid, db)


@router.put("/{uid}/role", response_model=UserResponse)
async def update_user_role(
    uid: str,
    role_data: UserRoleUpdate,
    db: Session = Depends(get_db)
):
    """Change a user's marketplace role."""
    user = get_user_or_404(uid, db)
    user.role = role_data.role
    db.commit()
    db.refresh(user)
    return user
