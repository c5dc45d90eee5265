"""
Chat routes for messaging between users

Delivery is by polling: clients re-fetch /conversations and
/messages/{user_id}; nothing is pushed.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_user, get_current_active_user
from ..core.exceptions import ValidationError, NotFoundError
from ..core.logging import get_logger
from ..database import get_db
from ..models.user import User
from ..schemas.chat import (
    MessageCreate,
    MessageResponse,
    MessageWithUsersResponse,
    ConversationResponse,
)
from ..services import conversations as conversation_service
from ..services.guards import ensure_can_message

router = APIRouter()

# Module logger
logger = get_logger(__name__)


@router.get("/conversations", response_model=List[ConversationResponse])
def get_conversations(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all conversations for the current user, most recent first"""
    return conversation_service.list_conversations(db, current_user.id)


@router.get("/messages/{user_id}", response_model=List[MessageWithUsersResponse])
def get_messages(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the message history with another user, oldest first"""
    return conversation_service.get_message_history(db, current_user.id, user_id)


@router.post("/messages", response_model=MessageResponse)
def create_message(
    message_data: MessageCreate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db)
):
    """Send a message; refused when either side has blocked the other"""
    if message_data.receiver_id == current_user.id:
        raise ValidationError("Cannot send a message to yourself")

    receiver = db.query(User).filter(User.id == message_data.receiver_id).first()
    if not receiver:
        raise NotFoundError("User not found")

    ensure_can_message(db, current_user.id, receiver.id)

    message = conversation_service.send_message(db, current_user, receiver.id, message_data.content)
    logger.debug(f"Message {message.id} sent from user {message.sender_id} to user {message.receiver_id}")
    return message


@router.put("/messages/{message_id}/read", response_model=MessageResponse)
def mark_message_read(
    message_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Mark a received message as read"""
    return conversation_service.mark_message_read(db, message_id, current_user.id)
