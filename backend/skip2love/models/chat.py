"""
Message model for direct messages between two users

There is no conversation table: a conversation is the unordered
pair {sender_id, receiver_id} and is derived on read.
"""

from sqlalchemy import Column, Integer, ForeignKey, Text, Boolean, Index
from sqlalchemy.orm import relationship
from .base import BaseModel


class Message(BaseModel):
    __tablename__ = "messages"

    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)

    # Relationships
    sender = relationship("User", foreign_keys=[sender_id], backref="sent_messages")
    receiver = relationship("User", foreign_keys=[receiver_id], backref="received_messages")

    __table_args__ = (
        Index("ix_messages_pair_created", "sender_id", "receiver_id", "created_at"),
    )
