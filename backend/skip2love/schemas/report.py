"""
Report schemas
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import datetime


class ReportCreate(BaseModel):
    reported_user_id: Optional[int] = None
    reported_post_id: Optional[int] = None
    reason: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)

    @model_validator(mode='after')
    def require_target(self):
        """A report has to point at a user, a post, or both"""
        if self.reported_user_id is None and self.reported_post_id is None:
            raise ValueError("Either reported_user_id or reported_post_id is required")
        return self


class ReportResponse(BaseModel):
    id: int
    reporter_id: int
    reported_user_id: Optional[int]
    reported_post_id: Optional[int]
    reason: str
    description: Optional[str]
    status: str
    created_at: datetime

    class Config:
        from_attributes = True
