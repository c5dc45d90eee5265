"""
Block routes
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from ..auth.dependencies import get_current_user
from ..core.exceptions import ValidationError, NotFoundError, ConflictError
from ..core.logging import get_logger, event_level
from ..database import get_db
from ..models.block import Block
from ..models.user import User
from ..schemas.block import BlockCreate, BlockResponse

router = APIRouter()

logger = get_logger(__name__)


@router.get("", response_model=List[BlockResponse])
def get_blocks(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Users blocked by the current user"""
    return db.query(Block).options(joinedload(Block.blocked_user)).filter(
        Block.blocker_id == current_user.id
    ).order_by(Block.created_at.desc(), Block.id.desc()).all()


@router.post("", response_model=BlockResponse)
def block_user(
    block_data: BlockCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if block_data.blocked_user_id == current_user.id:
        raise ValidationError("Cannot block yourself")

    blocked_user = db.query(User).filter(User.id == block_data.blocked_user_id).first()
    if not blocked_user:
        raise NotFoundError("User not found")

    existing = db.query(Block).filter(
        Block.blocker_id == current_user.id,
        Block.blocked_user_id == blocked_user.id
    ).first()
    if existing:
        raise ConflictError("User already blocked")

    block = Block(
        blocker_id=current_user.id,
        blocked_user_id=blocked_user.id,
        created_by=current_user.username
    )
    db.add(block)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("User already blocked")
    db.refresh(block)

    logger.log(
        event_level(),
        f"User {block.blocker_id} blocked user {block.blocked_user_id}",
        extra={"event": "user_blocked", "blocker_id": block.blocker_id, "blocked_user_id": block.blocked_user_id},
    )
    return block


@router.delete("/{user_id}")
def unblock_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db.query(Block).filter(
        Block.blocker_id == current_user.id,
        Block.blocked_user_id == user_id
    ).delete(synchronize_session=False)
    db.commit()
    return {"message": "User unblocked"}
