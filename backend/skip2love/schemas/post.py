"""
Post schemas for request/response models
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from .user import UserPublic


class PostCreate(BaseModel):
    title: str = Field(..., min_length=5, max_length=100)
    description: str = Field(..., min_length=20, max_length=1000)
    city: str = Field(..., min_length=1, max_length=100)
    is_premium: bool = False
    images: List[str] = []
    tags: List[str] = []


class PostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=5, max_length=100)
    description: Optional[str] = Field(None, min_length=20, max_length=1000)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    is_premium: Optional[bool] = None
    images: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    is_active: Optional[bool] = None  # Owner may restore a deleted post


class PostResponse(BaseModel):
    id: int
    user_id: int
    title: str
    description: str
    city: str
    is_premium: bool
    images: List[str] = []
    tags: List[str] = []
    is_active: bool
    view_count: int
    favorite_count: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PostWithUserResponse(PostResponse):
    user: UserPublic
    is_favorited: bool = False
