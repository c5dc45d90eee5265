"""
Post queries and the view counter
"""

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from ..core.exceptions import NotFoundError, AuthorizationError
from ..models.post import Post
from ..models.user import User


def list_posts(
    db: Session,
    city: Optional[str] = None,
    premium: Optional[bool] = None,
    user_id: Optional[int] = None
) -> List[Post]:
    """Active posts, premium first then newest"""
    query = db.query(Post).options(joinedload(Post.user)).filter(Post.is_active == True)  # noqa: E712

    if city:
        query = query.filter(Post.city == city)
    if premium:
        query = query.filter(Post.is_premium == True)  # noqa: E712
    if user_id:
        query = query.filter(Post.user_id == user_id)

    return query.order_by(Post.is_premium.desc(), Post.created_at.desc(), Post.id.desc()).all()


def get_post(db: Session, post_id: int) -> Post:
    post = db.query(Post).options(joinedload(Post.user)).filter(Post.id == post_id).first()
    if not post:
        raise NotFoundError("Post not found")
    return post


def get_owned_post(db: Session, post_id: int, user: User) -> Post:
    post = get_post(db, post_id)
    if post.user_id != user.id:
        raise AuthorizationError("Not authorized to modify this post")
    return post


def record_view(db: Session, post: Post) -> Post:
    """Bump view_count by one in the database, leaving updated_at untouched"""
    db.query(Post).filter(Post.id == post.id).update(
        {Post.view_count: Post.view_count + 1, Post.updated_at: Post.updated_at},
        synchronize_session=False
    )
    db.commit()
    db.refresh(post)
    return post
