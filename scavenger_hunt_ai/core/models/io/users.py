"""User I/O models for API requests and responses."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from scavenger_hunt_ai.core.models.domain.enums import AgeGroup, Difficulty, Theme
from scavenger_hunt_ai.core.models.io.common import UtcDateTime


class UserPreferences(BaseModel):
    """Optional play preferences."""

    favorite_themes: List[Theme] = Field(default_factory=list)
    difficulty_preference: Optional[Difficulty] = None


class UserCreate(BaseModel):
    """Schema for creating a player profile."""

    name: str = Field(min_length=1, max_length=50, description="Display name")
    age_group: AgeGroup = Field(description="Player age group")
    preferences: UserPreferences = Field(default_factory=UserPreferences)


class UserRead(BaseModel):
    """Schema for reading a player profile."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    age_group: AgeGroup
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    created_at: UtcDateTime


class UserWithToken(BaseModel):
    """Profile plus the access token issued for it."""

    user: UserRead
    token: str
