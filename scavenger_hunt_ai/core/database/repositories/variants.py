"""
Candidate variant repository.

Stores the candidate payloads proposed by each generation stage.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.variants import CandidateVariant
from .base import AsyncBaseRepository


class CandidateVariantRepository(AsyncBaseRepository[CandidateVariant]):
    """Repository for candidate variant data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CandidateVariant)

    async def add_many(self, variants: Sequence[CandidateVariant]) -> None:
        """Persist several variants in one commit."""
        for variant in variants:
            self.session.add(variant)
        await self.session.commit()

    async def list_by_hunt(self, hunt_id: str, stage: Optional[str] = None) -> List[CandidateVariant]:
        """List the variants of a hunt, optionally restricted to one stage."""
        stmt = select(CandidateVariant).where(CandidateVariant.hunt_id == hunt_id)
        if stage is not None:
            stmt = stmt.where(CandidateVariant.stage == stage)
        stmt = stmt.order_by(CandidateVariant.created_at.asc())  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
