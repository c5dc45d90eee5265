"""
Conversation views derived from the flat messages table
"""

from typing import Dict, List

from sqlalchemy import or_, and_, func
from sqlalchemy.orm import Session, aliased

from ..core.exceptions import NotFoundError, AuthorizationError
from ..models.chat import Message
from ..models.user import User


def list_conversations(db: Session, user_id: int) -> List[dict]:
    """
    One entry per counterpart the user has exchanged messages with,
    carrying the counterpart, the latest message and the unread count.

    Messages come back newest first (id breaks created_at ties), so the
    first message seen for a counterpart is the latest one and the order
    in which counterparts are first seen is the inbox order.
    """
    messages = db.query(Message).filter(
        or_(Message.sender_id == user_id, Message.receiver_id == user_id)
    ).order_by(Message.created_at.desc(), Message.id.desc()).all()

    latest: Dict[int, Message] = {}
    for message in messages:
        other_user_id = message.receiver_id if message.sender_id == user_id else message.sender_id
        if other_user_id not in latest:
            latest[other_user_id] = message

    if not latest:
        return []

    users = {
        u.id: u
        for u in db.query(User).filter(User.id.in_(list(latest.keys()))).all()
    }

    unread_counts = dict(
        db.query(Message.sender_id, func.count(Message.id)).filter(
            Message.receiver_id == user_id,
            Message.is_read == False,  # noqa: E712
            Message.sender_id.in_(list(latest.keys()))
        ).group_by(Message.sender_id).all()
    )

    result = []
    for other_user_id, message in latest.items():
        other_user = users.get(other_user_id)
        if not other_user:
            continue
        result.append({
            "other_user": other_user,
            "last_message": message,
            "unread_count": unread_counts.get(other_user_id, 0),
        })
    return result


def get_message_history(db: Session, user_id: int, other_user_id: int) -> List[Message]:
    """All messages between two users, oldest first; marks the user's incoming ones read"""
    other_user = db.query(User).filter(User.id == other_user_id).first()
    if not other_user:
        raise NotFoundError("User not found")

    sender = aliased(User)
    receiver = aliased(User)
    rows = db.query(Message, sender, receiver).join(
        sender, Message.sender_id == sender.id
    ).join(
        receiver, Message.receiver_id == receiver.id
    ).filter(
        or_(
            and_(Message.sender_id == user_id, Message.receiver_id == other_user_id),
            and_(Message.sender_id == other_user_id, Message.receiver_id == user_id)
        )
    ).order_by(Message.created_at.asc(), Message.id.asc()).all()

    messages = [row[0] for row in rows]

    unread = [m for m in messages if m.receiver_id == user_id and not m.is_read]
    if unread:
        db.query(Message).filter(
            Message.id.in_([m.id for m in unread])
        ).update({Message.is_read: True}, synchronize_session=False)
        db.commit()
        for message in unread:
            db.refresh(message)

    return messages


def send_message(db: Session, sender: User, receiver_id: int, content: str) -> Message:
    """Insert a message; callers run the block guard first"""
    message = Message(
        sender_id=sender.id,
        receiver_id=receiver_id,
        content=content,
        created_by=sender.username
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def mark_message_read(db: Session, message_id: int, user_id: int) -> Message:
    message = db.query(Message).filter(Message.id == message_id).first()
    if not message:
        raise NotFoundError("Message not found")
    if message.receiver_id != user_id:
        raise AuthorizationError("Not authorized to modify this message")

    if not message.is_read:
        message.is_read = True
        db.commit()
        db.refresh(message)
    return message
