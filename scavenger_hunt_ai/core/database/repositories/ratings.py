"""
Rating repository.

Data access for post-hunt feedback, including per-hunt aggregates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.ratings import Rating
from .base import AsyncBaseRepository


@dataclass(frozen=True)
class RatingSummary:
    """Aggregated ratings of a hunt."""

    count: int
    average_rating: float
    average_difficulty: float


class RatingRepository(AsyncBaseRepository[Rating]):
    """Repository for rating data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Rating)

    async def list_by_hunt(self, hunt_id: str) -> List[Rating]:
        """List the ratings of a hunt, newest first."""
        stmt = select(Rating).where(Rating.hunt_id == hunt_id).order_by(Rating.created_at.desc())  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def summarize(self, hunt_id: str) -> RatingSummary:
        """Compute rating count and averages for a hunt.

        Averages are rounded to two decimals and are 0 when there are no ratings.
        """
        stmt = select(
            func.count(Rating.id),
            func.avg(Rating.engagement_score),
            func.avg(Rating.difficulty_rating),
        ).where(Rating.hunt_id == hunt_id)
        result = await self.session.execute(stmt)
        count, avg_engagement, avg_difficulty = result.one()
        return RatingSummary(
            count=int(count or 0),
            average_rating=round(float(avg_engagement or 0.0), 2),
            average_difficulty=round(float(avg_difficulty or 0.0), 2),
        )
