"""
Favorite schemas
"""

from pydantic import BaseModel
from datetime import datetime
from .post import PostWithUserResponse


class FavoriteCreate(BaseModel):
    post_id: int


class FavoriteResponse(BaseModel):
    id: int
    user_id: int
    post_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class FavoriteWithPostResponse(FavoriteResponse):
    post: PostWithUserResponse
