"""
Block checks gating messaging and profile visibility

A block is stored one way (blocker -> blocked) but both guards treat it
as symmetric: if either user blocked the other, neither can message or
view the other.
"""

from sqlalchemy import or_, and_
from sqlalchemy.orm import Session

from ..core.exceptions import AuthorizationError
from ..core.logging import get_logger, event_level
from ..models.block import Block

logger = get_logger(__name__)


def is_blocked_between(db: Session, user_a_id: int, user_b_id: int) -> bool:
    """True when a Block row exists in either direction"""
    block = db.query(Block.id).filter(
        or_(
            and_(Block.blocker_id == user_a_id, Block.blocked_user_id == user_b_id),
            and_(Block.blocker_id == user_b_id, Block.blocked_user_id == user_a_id)
        )
    ).first()
    return block is not None


def can_message(db: Session, sender_id: int, receiver_id: int) -> bool:
    return not is_blocked_between(db, sender_id, receiver_id)


def can_view(db: Session, viewer_id: int, profile_user_id: int) -> bool:
    if viewer_id == profile_user_id:
        return True
    return not is_blocked_between(db, viewer_id, profile_user_id)


def ensure_can_message(db: Session, sender_id: int, receiver_id: int) -> None:
    if not can_message(db, sender_id, receiver_id):
        logger.log(
            event_level(),
            f"Message from user {sender_id} to user {receiver_id} denied by block",
            extra={"event": "message_denied", "sender_id": sender_id, "receiver_id": receiver_id},
        )
        raise AuthorizationError("Cannot send message to this user")


def ensure_can_view(db: Session, viewer_id: int, profile_user_id: int) -> None:
    if not can_view(db, viewer_id, profile_user_id):
        raise AuthorizationError("User not accessible")
