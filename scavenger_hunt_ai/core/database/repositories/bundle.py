"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and API endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .hunts import ClueRepository, HuntRepository
from .ratings import RatingRepository
from .users import UserRepository
from .variants import CandidateVariantRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories sharing one session."""

    users: UserRepository
    hunts: HuntRepository
    clues: ClueRepository
    ratings: RatingRepository
    variants: CandidateVariantRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        hunts=HuntRepository(session),
        clues=ClueRepository(session),
        ratings=RatingRepository(session),
        variants=CandidateVariantRepository(session),
    )
