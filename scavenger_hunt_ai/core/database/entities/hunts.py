"""
Hunt and clue entity models.

A hunt is created in ``GENERATING`` state and filled in by the generation
pipeline, which writes its story fields, progress and ordered clues.

Tables: hunts, clues
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime, String, Text
from sqlmodel import Field

from scavenger_hunt_ai.core.models.domain.enums import (
    AgeGroup,
    Difficulty,
    HuntStatus,
    LocationType,
    Theme,
)

from ..base import Base, new_id, utc_now


class Hunt(Base, table=True):
    """A user-created scavenger-hunt session.

    Table: hunts
    """

    __tablename__ = "hunts"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)

    # Ownership
    user_id: str = Field(foreign_key="users.id", index=True, max_length=36)

    # Request parameters
    title: str = Field(max_length=100)
    theme: Theme = Field(sa_type=String(16))
    difficulty: Difficulty = Field(sa_type=String(16))
    location_type: LocationType = Field(sa_type=String(16))
    duration: int = Field(default=30, description="Planned duration in minutes")
    age_group: AgeGroup = Field(sa_type=String(8))

    # Generation state
    status: HuntStatus = Field(default=HuntStatus.GENERATING, sa_type=String(16), index=True)
    progress: int = Field(default=0, description="Generation progress percentage")
    error_message: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # Generated story
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    narrative: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )
    started_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"Hunt(id={self.id}, title={self.title}, status={self.status})"


class Clue(Base, table=True):
    """One step of a hunt.

    Table: clues
    """

    __tablename__ = "clues"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    hunt_id: str = Field(foreign_key="hunts.id", index=True, max_length=36)
    order_index: int = Field(description="Zero-based position of the clue in the hunt")

    riddle_text: str = Field(sa_column=Column(Text, nullable=False))
    location_hint: str = Field(max_length=255)
    safety_notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    visual_description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    image_url: Optional[str] = Field(default=None, max_length=512)
    audio_url: Optional[str] = Field(default=None, max_length=512)
    success_message: Optional[str] = Field(default=None, max_length=255)
    interactive_elements: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    def __repr__(self) -> str:
        return f"Clue(id={self.id}, hunt_id={self.hunt_id}, order_index={self.order_index})"
