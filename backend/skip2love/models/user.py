"""
User model for accounts and public profiles
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON
from sqlalchemy.sql import func
from .base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    # Credentials
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Profile
    full_name = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    city = Column(String(100), nullable=True)
    bio = Column(Text, nullable=True)
    phone = Column(String(30), nullable=True)
    avatar = Column(String(500), nullable=True)
    images = Column(JSON, default=list, nullable=False)  # Ordered list of image URLs
    preferences = Column(JSON, default=list, nullable=False)

    # Flags
    is_verified = Column(Boolean, default=False, nullable=False)
    is_premium = Column(Boolean, default=False, nullable=False)
    is_blocked = Column(Boolean, default=False, nullable=False)  # Suspended account

    # Aggregates maintained by the rating service
    rating = Column(Integer, default=0, nullable=False)  # 0-100, percentage of positive ratings
    rating_count = Column(Integer, default=0, nullable=False)

    last_active = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
