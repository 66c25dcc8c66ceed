"""Domain enums for scavenger hunts."""

from __future__ import annotations

from enum import Enum


class HuntStatus(str, Enum):
    """
    Lifecycle status of a hunt.

    A hunt starts in ``GENERATING`` and the pipeline moves it to ``READY`` or
    ``ERROR``. Players then move a ready hunt to ``IN_PROGRESS`` and ``COMPLETED``.
    """

    GENERATING = "GENERATING"
    READY = "READY"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    ERROR = "ERROR"


class Theme(str, Enum):
    """Adventure themes offered to players."""

    pirates = "pirates"
    nature = "nature"
    city = "city"
    space = "space"
    mystery = "mystery"
    animals = "animals"


class Difficulty(str, Enum):
    """How hard the riddles are."""

    easy = "easy"
    medium = "medium"
    hard = "hard"


class LocationType(str, Enum):
    """Where the hunt takes place."""

    indoor = "indoor"
    outdoor = "outdoor"
    mixed = "mixed"


class AgeGroup(str, Enum):
    """Supported player age groups."""

    young = "6-8"
    older = "9-12"
