"""
Report model for flagging users and posts
"""

from sqlalchemy import Column, Integer, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from .base import BaseModel


class Report(BaseModel):
    __tablename__ = "reports"

    reporter_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    reported_user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    reported_post_id = Column(Integer, ForeignKey("posts.id"), nullable=True, index=True)

    reason = Column(String(100), nullable=False)  # "spam", "fake_profile", "inappropriate", ...
    description = Column(Text, nullable=True)
    status = Column(String(20), default="pending", nullable=False)

    # Relationships
    reporter = relationship("User", foreign_keys=[reporter_id], backref="reports_filed")
    reported_user = relationship("User", foreign_keys=[reported_user_id])
    reported_post = relationship("Post", foreign_keys=[reported_post_id])
