"""
Post routes for listings
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_active_user, get_optional_user
from ..core.logging import get_logger
from ..database import get_db
from ..models.post import Post
from ..models.user import User
from ..schemas.post import PostCreate, PostUpdate, PostResponse, PostWithUserResponse
from ..services import posts as post_service
from ..services.favorites import favorited_post_ids

logger = get_logger(__name__)
router = APIRouter()


def serialize_post(post: Post, is_favorited: bool = False) -> PostWithUserResponse:
    response = PostWithUserResponse.model_validate(post)
    response.is_favorited = is_favorited
    return response


@router.get("", response_model=List[PostWithUserResponse])
def get_posts(
    city: Optional[str] = None,
    premium: Optional[bool] = None,
    user_id: Optional[int] = Query(None, alias="userId"),
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """
    Active posts with their owner embedded (public endpoint)
    """
    posts = post_service.list_posts(db, city=city, premium=premium, user_id=user_id)

    favorited = set()
    if current_user:
        favorited = favorited_post_ids(db, current_user.id, [p.id for p in posts])

    return [serialize_post(p, p.id in favorited) for p in posts]


@router.get("/{post_id}", response_model=PostWithUserResponse)
def get_post(
    post_id: int,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """
    Single post by id (public endpoint); counts as a view.
    Soft-deleted posts stay reachable here so favorites and reports can
    still resolve them; the listing is what hides them.
    """
    post = post_service.get_post(db, post_id)
    post = post_service.record_view(db, post)

    is_favorited = False
    if current_user:
        is_favorited = post.id in favorited_post_ids(db, current_user.id, [post.id])

    return serialize_post(post, is_favorited)


@router.post("", response_model=PostResponse)
def create_post(
    post_data: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Create a new post owned by the current user
    """
    post = Post(
        **post_data.model_dump(),
        user_id=current_user.id,
        created_by=current_user.username
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info(f"User {current_user.id} created post {post.id}")
    return post


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    post_update: PostUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Update a post (owner only)
    """
    post = post_service.get_owned_post(db, post_id, current_user)

    for field, value in post_update.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        setattr(post, field, value)

    post.updated_by = current_user.username
    db.commit()
    db.refresh(post)
    return post


@router.delete("/{post_id}")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Delete a post (owner only) - soft delete by clearing is_active
    """
    post = post_service.get_owned_post(db, post_id, current_user)

    post.is_active = False
    post.updated_by = current_user.username
    db.commit()

    logger.info(f"User {current_user.id} soft-deleted post {post_id}")
    return {"message": "Post deleted"}
