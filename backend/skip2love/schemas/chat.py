"""
Chat schemas for request/response validation
"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from .user import UserPublic, UserSummary


class MessageCreate(BaseModel):
    receiver_id: int
    content: str = Field(..., min_length=1, max_length=5000)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message content cannot be empty")
        return value


class MessageResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True


class MessageWithUsersResponse(MessageResponse):
    sender: UserSummary
    receiver: UserSummary


class ConversationResponse(BaseModel):
    other_user: UserPublic
    last_message: MessageResponse
    unread_count: int = 0
