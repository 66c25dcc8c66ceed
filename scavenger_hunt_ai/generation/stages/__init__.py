"""
Generation stage implementations, in run order.

- story_creator: story text and riddles
- geographic_expert: hiding places
- visual_generator: clue illustrations
- safety_validator: hazard removal and safety notes
- creative_booster: interactive elements and success messages
"""

from .creative_booster import CreativeBoosterStage
from .geographic_expert import GeographicExpertStage
from .safety_validator import SafetyValidatorStage
from .story_creator import StoryCreatorStage
from .visual_generator import VisualGeneratorStage

__all__ = [
    "CreativeBoosterStage",
    "GeographicExpertStage",
    "SafetyValidatorStage",
    "StoryCreatorStage",
    "VisualGeneratorStage",
]
