"""
Block model - directional, but checked in both directions
"""

from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class Block(BaseModel):
    __tablename__ = "blocks"

    blocker_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    blocked_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    blocker = relationship("User", foreign_keys=[blocker_id], backref="blocks_made")
    blocked_user = relationship("User", foreign_keys=[blocked_user_id])

    __table_args__ = (
        UniqueConstraint("blocker_id", "blocked_user_id", name="uq_blocks_blocker_blocked"),
    )
