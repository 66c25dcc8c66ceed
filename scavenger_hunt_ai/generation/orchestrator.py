"""
Hunt orchestrator.

Runs the registered stages in order over a shared ``StageContext``. After
each stage the best variant is selected and applied, then the progress
callback is notified with the stage's progress percentage and message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence

from scavenger_hunt_ai.core.errors import GenerationError
from scavenger_hunt_ai.core.logging_config import get_logger

from .base import HuntRequest, StageContext, StageResult, Variant
from .registry import StageRegistry

logger = get_logger(__name__)

ProgressCallback = Callable[[str, int, str], Awaitable[None]]


def select_best(variants: Sequence[Variant]) -> Variant:
    """Return the highest-scoring variant; ties go to the first produced."""
    if not variants:
        raise ValueError("no variants to select from")
    best = variants[0]
    for variant in variants[1:]:
        if variant.score > best.score:
            best = variant
    return best


@dataclass
class GenerationOutcome:
    """Final draft of a hunt plus every stage's variants."""

    context: StageContext
    results: List[StageResult] = field(default_factory=list)

    @property
    def variants(self) -> List[Variant]:
        return [variant for result in self.results for variant in result.variants]


class HuntOrchestrator:
    """Runs generation stages sequentially for one hunt at a time."""

    def __init__(self, registry: StageRegistry, progress_callback: Optional[ProgressCallback] = None) -> None:
        self.registry = registry
        self.progress_callback = progress_callback

    async def run(self, request: HuntRequest) -> GenerationOutcome:
        """
        Generate a hunt.

        Args:
            request: The hunt parameters.

        Returns:
            GenerationOutcome with the completed draft and all variants,
            the selected ones flagged.

        Raises:
            GenerationError: If a stage fails or produces no variants.
        """
        outcome = GenerationOutcome(context=StageContext(request=request))
        for stage in self.registry.ordered():
            logger.debug(f"Hunt {request.hunt_id}: running stage '{stage.name}'")
            result = await stage.run(outcome.context)
            if not result.variants:
                raise GenerationError(f"Stage '{stage.name}' produced no variants")

            best = select_best(result.variants)
            best.selected = True
            stage.apply(outcome.context, best)
            outcome.results.append(result)

            if self.progress_callback is not None:
                await self.progress_callback(stage.name, stage.progress, stage.message)

        logger.info(f"Hunt {request.hunt_id}: generated {len(outcome.context.clues)} clues")
        return outcome
