"""
Rating model for thumbs up/down ratings between users
"""

from sqlalchemy import Column, Integer, ForeignKey, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class Rating(BaseModel):
    __tablename__ = "ratings"

    rater_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)  # User giving the rating
    rated_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)  # User being rated
    is_positive = Column(Boolean, nullable=False)

    # Relationships
    rater = relationship("User", foreign_keys=[rater_id], backref="ratings_given")
    rated_user = relationship("User", foreign_keys=[rated_user_id], backref="ratings_received")

    # One rating per rater per rated user
    __table_args__ = (
        UniqueConstraint("rater_id", "rated_user_id", name="uq_ratings_rater_rated"),
    )
