"""
Hunt and clue repositories.

This module provides data access operations for hunts and their ordered clues,
including the cascade removal of everything that belongs to a hunt.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy import delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from scavenger_hunt_ai.core.models.domain.enums import HuntStatus

from ..base import utc_now
from ..entities.hunts import Clue, Hunt
from ..entities.ratings import Rating
from ..entities.variants import CandidateVariant
from .base import AsyncBaseRepository, AsyncQueryBuilder


class HuntRepository(AsyncBaseRepository[Hunt]):
    """Repository for hunt data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Hunt)

    async def list_by_user(self, user_id: str, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Hunt]:
        """List a user's hunts, newest first.

        Args:
            user_id: Owner of the hunts
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            List of Hunt instances
        """
        stmt = select(Hunt).where(Hunt.user_id == user_id).order_by(Hunt.created_at.desc())  # type: ignore[attr-defined]
        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def set_progress(self, hunt_id: str, progress: int) -> Optional[Hunt]:
        """Persist the generation progress of a hunt."""
        hunt = await self.get_by_id(hunt_id)
        if hunt is None:
            return None
        hunt.progress = progress
        hunt.updated_at = utc_now()
        return await self.update(hunt)

    async def set_status(
        self, hunt_id: str, status: HuntStatus, *, error_message: Optional[str] = None
    ) -> Optional[Hunt]:
        """Move a hunt to a new status.

        Args:
            hunt_id: Hunt to update
            status: New lifecycle status
            error_message: Failure description, stored only for ``ERROR``

        Returns:
            The updated hunt, or None if it does not exist
        """
        hunt = await self.get_by_id(hunt_id)
        if hunt is None:
            return None
        hunt.status = HuntStatus(status).value
        hunt.error_message = error_message if status == HuntStatus.ERROR else None
        hunt.updated_at = utc_now()
        return await self.update(hunt)

    async def delete(self, hunt_id: str) -> bool:
        """Delete a hunt together with its clues, ratings and variants."""
        hunt = await self.get_by_id(hunt_id)
        if hunt is None:
            return False
        for model in (Clue, Rating, CandidateVariant):
            await self.session.execute(sa_delete(model).where(model.hunt_id == hunt_id))
        await self.session.delete(hunt)
        await self.session.commit()
        return True


class ClueRepository(AsyncBaseRepository[Clue]):
    """Repository for clue data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Clue)

    async def list_by_hunt(self, hunt_id: str) -> List[Clue]:
        """List the clues of a hunt in play order."""
        stmt = select(Clue).where(Clue.hunt_id == hunt_id).order_by(Clue.order_index.asc())  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def replace_for_hunt(self, hunt_id: str, clues: Sequence[Clue]) -> List[Clue]:
        """Replace every clue of a hunt in a single transaction.

        Args:
            hunt_id: Hunt whose clues are replaced
            clues: New clues; their ``hunt_id`` is forced to ``hunt_id``

        Returns:
            The persisted clues in play order
        """
        await self.session.execute(sa_delete(Clue).where(Clue.hunt_id == hunt_id))
        for clue in clues:
            clue.hunt_id = hunt_id
            self.session.add(clue)
        await self.session.commit()
        return await self.list_by_hunt(hunt_id)
