"""
User profile routes
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user, get_optional_user
from ..core.exceptions import NotFoundError, AuthorizationError
from ..database import get_db
from ..models.user import User
from ..schemas.user import UserPublic, UserResponse, UserUpdate
from ..schemas.rating import RatingSummaryResponse
from ..services.guards import ensure_can_view
from ..services.ratings import get_rating_summary

router = APIRouter()


@router.get("/{user_id}", response_model=UserPublic)
def get_user(
    user_id: int,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """
    Public profile. Hidden (403) when the viewer and the profile owner
    have blocked each other in either direction.
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")

    if current_user:
        ensure_can_view(db, current_user.id, user_id)

    return user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_update: UserUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Update own profile; password and rating fields cannot be set here"""
    if user_id != current_user.id:
        raise AuthorizationError("Not authorized to update this user")

    for field, value in user_update.model_dump(exclude_unset=True).items():
        # images and preferences are NOT NULL lists; null leaves them as they are
        if value is None and field in ("images", "preferences"):
            continue
        setattr(current_user, field, value)

    current_user.updated_by = current_user.username
    db.commit()
    db.refresh(current_user)
    return current_user


@router.get("/{user_id}/rating", response_model=RatingSummaryResponse)
def get_user_rating(
    user_id: int,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """Aggregate rating info for a user, plus the viewer's own rating of them"""
    viewer_id = current_user.id if current_user else None
    return get_rating_summary(db, user_id, viewer_id)
