"""
Favorite routes
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_user, get_current_active_user
from ..database import get_db
from ..models.user import User
from ..schemas.favorite import FavoriteCreate, FavoriteResponse, FavoriteWithPostResponse
from ..schemas.post import PostWithUserResponse
from ..services import favorites as favorite_service

router = APIRouter()


@router.get("", response_model=List[FavoriteWithPostResponse])
def get_favorites(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Favorites of the current user with the post and its owner embedded"""
    favorites = favorite_service.list_favorites(db, current_user.id)

    result = []
    for favorite in favorites:
        post = PostWithUserResponse.model_validate(favorite.post)
        post.is_favorited = True
        result.append(FavoriteWithPostResponse(
            id=favorite.id,
            user_id=favorite.user_id,
            post_id=favorite.post_id,
            created_at=favorite.created_at,
            post=post
        ))
    return result


@router.post("", response_model=FavoriteResponse)
def add_favorite(
    favorite_data: FavoriteCreate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    return favorite_service.add_favorite(db, current_user, favorite_data.post_id)


@router.delete("/{post_id}")
def remove_favorite(
    post_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    favorite_service.remove_favorite(db, current_user, post_id)
    return {"message": "Favorite removed"}
