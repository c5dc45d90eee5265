"""
Post model for listings
"""

from sqlalchemy import Column, Integer, ForeignKey, String, Text, Boolean, JSON
from sqlalchemy.orm import relationship
from .base import BaseModel


class Post(BaseModel):
    __tablename__ = "posts"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    city = Column(String(100), nullable=False, index=True)
    is_premium = Column(Boolean, default=False, nullable=False)
    images = Column(JSON, default=list, nullable=False)
    tags = Column(JSON, default=list, nullable=False)

    # Soft delete flag - posts are never physically removed
    is_active = Column(Boolean, default=True, nullable=False, index=True)

    # Counters, only ever changed through atomic UPDATE expressions
    view_count = Column(Integer, default=0, nullable=False)
    favorite_count = Column(Integer, default=0, nullable=False)

    # Relationships
    user = relationship("User", backref="posts")
