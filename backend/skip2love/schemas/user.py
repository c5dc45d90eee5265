"""
User schemas for request/response models
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    full_name: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=18, le=120)
    city: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=1000)
    phone: Optional[str] = Field(None, max_length=30)
    avatar: Optional[str] = None
    images: List[str] = []
    preferences: List[str] = []


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    """Editable profile fields; anything else in the body (password, rating...) is ignored"""
    full_name: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=18, le=120)
    city: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=1000)
    phone: Optional[str] = Field(None, max_length=30)
    avatar: Optional[str] = None
    images: Optional[List[str]] = None
    preferences: Optional[List[str]] = None


class UserSummary(BaseModel):
    id: int
    username: str
    full_name: Optional[str] = None
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class UserPublic(BaseModel):
    id: int
    username: str
    full_name: Optional[str] = None
    age: Optional[int] = None
    city: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    images: List[str] = []
    preferences: List[str] = []
    is_verified: bool
    is_premium: bool
    rating: int
    rating_count: int
    last_active: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class UserResponse(UserPublic):
    email: str
    phone: Optional[str] = None
    is_blocked: bool
    updated_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    user: UserResponse
    token: str
