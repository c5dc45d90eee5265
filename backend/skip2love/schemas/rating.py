"""
Rating schemas
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class RatingCreate(BaseModel):
    rated_user_id: int
    is_positive: bool


class RatingResponse(BaseModel):
    id: int
    rater_id: int
    rated_user_id: int
    is_positive: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RatingSummaryResponse(BaseModel):
    user_id: int
    rating: int  # Percentage of positive ratings
    rating_count: int
    viewer_rating: Optional[bool] = None  # What the viewer gave, if anything
