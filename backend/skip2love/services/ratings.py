"""
Rating upsert and the per-user rating aggregate
"""

from typing import Optional, Tuple

from sqlalchemy import func, case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import SelfRatingError, NotFoundError
from ..core.logging import get_logger, event_level
from ..models.rating import Rating
from ..models.user import User

logger = get_logger(__name__)


def rating_percentage(positive: int, total: int) -> int:
    """round(100 * positive / total) with halves rounded up, 0 when unrated"""
    if total <= 0:
        return 0
    return (200 * positive + total) // (2 * total)


def _rating_counts(db: Session, rated_user_id: int) -> Tuple[int, int]:
    total, positive = db.query(
        func.count(Rating.id),
        func.coalesce(func.sum(case((Rating.is_positive == True, 1), else_=0)), 0)  # noqa: E712
    ).filter(Rating.rated_user_id == rated_user_id).one()
    return int(positive), int(total)


def recompute_user_rating(db: Session, rated_user_id: int) -> Tuple[int, int]:
    """
    Recalculate rating/rating_count from the ratings table and write both
    with one UPDATE. Does not commit; runs inside the caller's transaction.
    """
    positive, total = _rating_counts(db, rated_user_id)
    percentage = rating_percentage(positive, total)
    db.query(User).filter(User.id == rated_user_id).update(
        # Counter writes leave updated_at alone; it tracks profile edits
        {User.rating: percentage, User.rating_count: total, User.updated_at: User.updated_at},
        synchronize_session=False
    )
    return percentage, total


def _upsert_rating(db: Session, rater: User, rated_user_id: int, is_positive: bool) -> Rating:
    rating = db.query(Rating).filter(
        Rating.rater_id == rater.id,
        Rating.rated_user_id == rated_user_id
    ).first()

    if rating:
        rating.is_positive = is_positive
        rating.updated_by = rater.username
    else:
        rating = Rating(
            rater_id=rater.id,
            rated_user_id=rated_user_id,
            is_positive=is_positive,
            created_by=rater.username
        )
        db.add(rating)
    db.flush()
    return rating


def submit_rating(db: Session, rater: User, rated_user_id: int, is_positive: bool) -> Rating:
    """
    Create or overwrite the rater's rating of another user and refresh the
    rated user's aggregate, all in a single transaction.
    """
    if rater.id == rated_user_id:
        raise SelfRatingError()

    rated_user = db.query(User).filter(User.id == rated_user_id).first()
    if not rated_user:
        raise NotFoundError("User not found")

    try:
        rating = _upsert_rating(db, rater, rated_user_id, is_positive)
    except IntegrityError:
        # A concurrent first rating for the same pair won the insert; overwrite it
        db.rollback()
        rating = _upsert_rating(db, rater, rated_user_id, is_positive)

    percentage, total = recompute_user_rating(db, rated_user_id)
    db.commit()

    db.refresh(rating)
    logger.log(
        event_level(),
        f"User {rated_user_id} rating recomputed to {percentage}% over {total} ratings",
        extra={"event": "rating_recomputed", "user_id": rated_user_id, "rating": percentage, "rating_count": total},
    )
    return rating


def get_rating_summary(db: Session, user_id: int, viewer_id: Optional[int] = None) -> dict:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")

    viewer_rating = None
    if viewer_id is not None:
        own = db.query(Rating).filter(
            Rating.rater_id == viewer_id,
            Rating.rated_user_id == user_id
        ).first()
        if own:
            viewer_rating = own.is_positive

    return {
        "user_id": user.id,
        "rating": user.rating,
        "rating_count": user.rating_count,
        "viewer_rating": viewer_rating,
    }
