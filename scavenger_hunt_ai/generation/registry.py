from __future__ import annotations

"""Stage registry.

The registry keeps generation stages in registration order, which is the
order the orchestrator runs them in.
"""

from typing import Dict, List, Optional

from .base import GenerationStage


class StageRegistry:
    """
    Ordered, in-memory mapping of stage names to implementations.

    Notes:
        - ``register`` replaces an existing stage of the same name in place,
          keeping its position.
        - ``get`` raises ``KeyError`` if the stage is missing.
    """

    def __init__(self) -> None:
        self._stages: Dict[str, GenerationStage] = {}

    def register(self, stage: GenerationStage) -> None:
        """Register a stage under its ``name``."""
        self._stages[stage.name] = stage

    def get(self, name: str) -> GenerationStage:
        """Retrieve a registered stage by name."""
        return self._stages[name]

    def has(self, name: str) -> bool:
        return name in self._stages

    def ordered(self) -> List[GenerationStage]:
        """All stages in run order."""
        return list(self._stages.values())

    def __len__(self) -> int:
        return len(self._stages)


def build_default_registry(image_base_url: Optional[str] = None) -> StageRegistry:
    """Build the registry with the five standard stages.

    Args:
        image_base_url: Base URL for clue illustrations; defaults to the
            configured ``IMAGE_BASE_URL``.
    """
    from .stages import (
        CreativeBoosterStage,
        GeographicExpertStage,
        SafetyValidatorStage,
        StoryCreatorStage,
        VisualGeneratorStage,
    )

    if image_base_url is None:
        from scavenger_hunt_ai.server.core.config import settings

        image_base_url = settings.generation.image_base_url

    registry = StageRegistry()
    registry.register(StoryCreatorStage())
    registry.register(GeographicExpertStage())
    registry.register(VisualGeneratorStage(image_base_url=image_base_url))
    registry.register(SafetyValidatorStage())
    registry.register(CreativeBoosterStage())
    return registry
