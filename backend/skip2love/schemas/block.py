"""
Block schemas
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from .user import UserSummary


class BlockCreate(BaseModel):
    blocked_user_id: int


class BlockResponse(BaseModel):
    id: int
    blocker_id: int
    blocked_user_id: int
    created_at: datetime
    blocked_user: Optional[UserSummary] = None

    class Config:
        from_attributes = True
