"""Rating I/O models for API requests and responses."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from scavenger_hunt_ai.core.models.io.common import UtcDateTime

MIN_SCORE = 1
MAX_SCORE = 5


class RatingCreate(BaseModel):
    """Schema for submitting a rating."""

    hunt_id: str = Field(min_length=1)
    engagement_score: int = Field(ge=MIN_SCORE, le=MAX_SCORE, description="How fun the hunt was")
    difficulty_rating: int = Field(ge=MIN_SCORE, le=MAX_SCORE, description="How hard the hunt felt")
    feedback: Optional[str] = Field(default=None, max_length=1000)
    completed: bool = False
    completion_time: Optional[int] = Field(default=None, ge=0, description="Minutes spent playing")


class RatingRead(BaseModel):
    """Schema for reading a rating."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    hunt_id: str
    user_id: str
    engagement_score: int
    difficulty_rating: int
    feedback: Optional[str] = None
    completed: bool
    completion_time: Optional[int] = None
    created_at: UtcDateTime


class HuntRatings(BaseModel):
    """All ratings of a hunt with aggregates."""

    ratings: List[RatingRead]
    count: int
    average_rating: float
    average_difficulty: float
