"""
Rating routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user
from ..database import get_db
from ..models.user import User
from ..schemas.rating import RatingCreate, RatingResponse
from ..services.ratings import submit_rating

router = APIRouter()


@router.post("", response_model=RatingResponse)
def rate_user(
    rating_data: RatingCreate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Rate another user; rating the same user again overwrites the earlier rating"""
    return submit_rating(db, current_user, rating_data.rated_user_id, rating_data.is_positive)
