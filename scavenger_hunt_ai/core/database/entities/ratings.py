"""
Rating entity model.

Players rate a hunt after playing it: engagement and difficulty on a 1-5
scale, optional free-text feedback and completion details.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Rating(Base, table=True):
    """Post-hunt feedback.

    Table: ratings
    """

    __tablename__ = "ratings"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    hunt_id: str = Field(foreign_key="hunts.id", index=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=36)

    engagement_score: int = Field(description="How fun the hunt was (1-5)")
    difficulty_rating: int = Field(description="How hard the hunt felt (1-5)")
    feedback: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    completed: bool = Field(default=False)
    completion_time: Optional[int] = Field(default=None, description="Minutes spent playing")

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
