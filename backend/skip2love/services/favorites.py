"""
Favorites and the post favorite_count they drive
"""

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from ..core.exceptions import NotFoundError
from ..models.favorite import Favorite
from ..models.post import Post
from ..models.user import User


def _existing(db: Session, user_id: int, post_id: int):
    return db.query(Favorite).filter(
        Favorite.user_id == user_id,
        Favorite.post_id == post_id
    ).first()


def add_favorite(db: Session, user: User, post_id: int) -> Favorite:
    """
    Favorite an active post. Repeating it is a no-op that returns the existing row,
    so favorite_count moves by at most one per (user, post).
    """
    post = db.query(Post).filter(Post.id == post_id, Post.is_active == True).first()  # noqa: E712
    if not post:
        raise NotFoundError("Post not found")

    existing = _existing(db, user.id, post_id)
    if existing:
        return existing

    favorite = Favorite(user_id=user.id, post_id=post_id, created_by=user.username)
    db.add(favorite)
    try:
        db.flush()
    except IntegrityError:
        # A concurrent request inserted the same pair first
        db.rollback()
        return _existing(db, user.id, post_id)

    db.query(Post).filter(Post.id == post_id).update(
        {Post.favorite_count: Post.favorite_count + 1, Post.updated_at: Post.updated_at},
        synchronize_session=False
    )
    db.commit()
    db.refresh(favorite)
    return favorite


def remove_favorite(db: Session, user: User, post_id: int) -> bool:
    """Returns True when a favorite was actually removed"""
    deleted = db.query(Favorite).filter(
        Favorite.user_id == user.id,
        Favorite.post_id == post_id
    ).delete(synchronize_session=False)

    if deleted:
        db.query(Post).filter(Post.id == post_id).update(
            {Post.favorite_count: Post.favorite_count - 1, Post.updated_at: Post.updated_at},
            synchronize_session=False
        )
    db.commit()
    return bool(deleted)


def list_favorites(db: Session, user_id: int) -> List[Favorite]:
    return db.query(Favorite).options(
        joinedload(Favorite.post).joinedload(Post.user)
    ).filter(Favorite.user_id == user_id).order_by(Favorite.created_at.desc(), Favorite.id.desc()).all()


def favorited_post_ids(db: Session, user_id: int, post_ids: List[int]) -> set:
    if not post_ids:
        return set()
    rows = db.query(Favorite.post_id).filter(
        Favorite.user_id == user_id,
        Favorite.post_id.in_(post_ids)
    ).all()
    return {row[0] for row in rows}
