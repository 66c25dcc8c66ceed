"""
Database entity models.

This package contains all database entity models organized by business domain.
Each module represents a single database table and its related logic.

Modules:
- users: Players who create and play hunts
- hunts: Hunts and their ordered clues
- ratings: Post-hunt feedback
- variants: Candidate payloads produced by the generation stages
"""

from . import hunts, ratings, users, variants

__all__ = [
    "hunts",
    "ratings",
    "users",
    "variants",
]
