"""Domain enums for hunts, users and generation stages."""

from .enums import AgeGroup, Difficulty, HuntStatus, LocationType, Theme

__all__ = ["AgeGroup", "Difficulty", "HuntStatus", "LocationType", "Theme"]
