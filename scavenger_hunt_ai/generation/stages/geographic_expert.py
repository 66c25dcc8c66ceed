from __future__ import annotations

from dataclasses import dataclass
from typing import List

from scavenger_hunt_ai.core.logging_config import get_logger

from ..base import StageContext, StageResult, Variant
from ..templates import LOCATION_SAFETY_SCORES, PLACES

logger = get_logger(__name__)


def choose_places(location_type: str, count: int) -> List[str]:
    """Pick a hiding place for each clue.

    ``mixed`` hunts alternate indoor and outdoor places, starting indoors.
    """
    if location_type == "mixed":
        places = []
        for i in range(count):
            pool = PLACES["indoor"] if i % 2 == 0 else PLACES["outdoor"]
            places.append(pool[(i // 2) % len(pool)])
        return places
    pool = PLACES[location_type]
    return [pool[i % len(pool)] for i in range(count)]


@dataclass(frozen=True)
class GeographicExpertStage:
    """Chooses where each clue is hidden and rates how safe the area is."""

    name: str = "geography"
    progress: int = 30
    message: str = "Finding safe locations..."

    async def run(self, ctx: StageContext) -> StageResult:
        location_type = ctx.request.location_type
        places = choose_places(location_type, len(ctx.clues))
        safety_score = LOCATION_SAFETY_SCORES[location_type]
        variant = Variant(
            source=self.name,
            payload={
                "places": places,
                "location_hints": [f"Look near the {place}." for place in places],
                "safety_score": safety_score,
            },
            score=safety_score / 10,
        )
        return StageResult(stage=self.name, variants=[variant])

    def apply(self, ctx: StageContext, variant: Variant) -> None:
        payload = variant.payload
        for clue, place, hint in zip(ctx.clues, payload["places"], payload["location_hints"]):
            clue.place = place
            clue.location_hint = hint
        ctx.safety_score = payload["safety_score"]
        logger.debug(f"Hunt {ctx.request.hunt_id} placed {len(ctx.clues)} clues, safety score {ctx.safety_score}")
