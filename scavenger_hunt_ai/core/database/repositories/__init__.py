"""
Database repository layer using SQLModel.

Each module provides async data access operations for its corresponding
SQLModel entity models.

Modules:
- base: AsyncBaseRepository and AsyncQueryBuilder utilities
- users: User repository
- hunts: Hunt and clue repositories
- ratings: Rating repository and aggregates
- variants: Candidate variant repository
- bundle: Repository bundle for dependency injection
"""

from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .hunts import ClueRepository, HuntRepository
from .ratings import RatingRepository, RatingSummary
from .users import UserRepository
from .variants import CandidateVariantRepository

__all__ = [
    "CandidateVariantRepository",
    "ClueRepository",
    "HuntRepository",
    "RatingRepository",
    "RatingSummary",
    "SqlRepoBundle",
    "UserRepository",
    "build_sql_repos_from_session",
]
