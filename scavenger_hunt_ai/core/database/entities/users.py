"""
User entity model.

Users are lightweight player profiles: a display name and an age group.
There is no password; the API issues a signed token when the profile is created.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import JSON, Column, DateTime, String
from sqlmodel import Field

from scavenger_hunt_ai.core.models.domain.enums import AgeGroup

from ..base import Base, new_id, utc_now


class User(Base, table=True):
    """Player profile.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=50, description="Display name")
    age_group: AgeGroup = Field(sa_type=String(8), description="Player age group")
    preferences: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)

    def __repr__(self) -> str:
        return f"User(id={self.id}, name={self.name}, age_group={self.age_group})"
