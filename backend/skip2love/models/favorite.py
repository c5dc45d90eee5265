"""
Favorite model linking users to posts they saved
"""

from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class Favorite(BaseModel):
    __tablename__ = "favorites"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", backref="favorites")
    post = relationship("Post", backref="favorites")

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_favorites_user_post"),
    )
