"""Hunt and clue I/O models for API requests and responses."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scavenger_hunt_ai.core.models.domain.enums import (
    AgeGroup,
    Difficulty,
    HuntStatus,
    LocationType,
    Theme,
)
from scavenger_hunt_ai.core.models.io.common import UtcDateTime

MIN_DURATION = 15
MAX_DURATION = 180


def _clean_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("title must not be blank")
    return value


class HuntCreate(BaseModel):
    """Schema for creating a hunt."""

    title: str = Field(min_length=1, max_length=100, description="Hunt title")
    theme: Theme
    difficulty: Difficulty
    location_type: LocationType
    duration: int = Field(default=30, ge=MIN_DURATION, le=MAX_DURATION, description="Duration in minutes")

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        return _clean_title(value)


class HuntUpdate(BaseModel):
    """Schema for partially updating a hunt. Only provided fields change."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    status: Optional[HuntStatus] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _clean_title(value)


class ClueRead(BaseModel):
    """Schema for reading a clue."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    hunt_id: str
    order_index: int
    riddle_text: str
    location_hint: str
    safety_notes: Optional[str] = None
    visual_description: Optional[str] = None
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    success_message: Optional[str] = None
    interactive_elements: List[str] = Field(default_factory=list)


class HuntRead(BaseModel):
    """Schema for reading a hunt without its clues."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    theme: Theme
    difficulty: Difficulty
    location_type: LocationType
    duration: int
    age_group: AgeGroup
    status: HuntStatus
    progress: int
    description: Optional[str] = None
    narrative: Optional[str] = None
    error_message: Optional[str] = None
    created_at: UtcDateTime
    updated_at: UtcDateTime
    started_at: Optional[UtcDateTime] = None
    completed_at: Optional[UtcDateTime] = None


class HuntDetail(HuntRead):
    """Schema for reading a hunt together with its ordered clues."""

    clues: List[ClueRead] = Field(default_factory=list)


class HuntStatusRead(BaseModel):
    """Generation status of a hunt, polled by clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    status: HuntStatus
    progress: int
    error_message: Optional[str] = None
