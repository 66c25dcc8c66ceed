from __future__ import annotations

from dataclasses import dataclass

from scavenger_hunt_ai.core.logging_config import get_logger

from ..base import ClueDraft, StageContext, StageResult, Variant
from ..templates import RIDDLES, STORY_TEMPLATES

logger = get_logger(__name__)

MIN_CLUES = 3
MAX_CLUES = 8
MINUTES_PER_CLUE = 15


def clue_count(duration: int) -> int:
    """Number of clues for a hunt of ``duration`` minutes, between 3 and 8."""
    return max(MIN_CLUES, min(MAX_CLUES, duration // MINUTES_PER_CLUE))


@dataclass(frozen=True)
class StoryCreatorStage:
    """
    Writes the hunt story and one riddle per clue.

    Proposes two narratives for the theme, a short one and a longer one that
    introduces the hero's goal. The riddle tier follows the hunt difficulty.
    """

    name: str = "story"
    progress: int = 10
    message: str = "Creating your story..."

    async def run(self, ctx: StageContext) -> StageResult:
        request = ctx.request
        template = STORY_TEMPLATES[request.theme]
        tier = RIDDLES[request.theme][request.difficulty]
        count = clue_count(request.duration)
        riddles = [f"Clue {i + 1}: {tier[i % len(tier)]}" for i in range(count)]
        description = f"A {template['label']} adventure for ages {request.age_group} ({request.difficulty})"

        short_narrative = f"{template['opening']} {template['closing']}"
        long_narrative = (
            f"{template['opening']} {template['hero']} needs your help to find {template['goal']}. "
            f"There are {count} clues hidden around you. {template['closing']}"
        )
        logger.debug(f"Story for hunt {request.hunt_id}: theme={request.theme}, clues={count}")

        variants = [
            Variant(
                source=self.name,
                payload={"title": request.title, "description": description, "narrative": text, "riddles": riddles},
                score=score,
            )
            for text, score in ((short_narrative, 0.5), (long_narrative, 0.6))
        ]
        return StageResult(stage=self.name, variants=variants)

    def apply(self, ctx: StageContext, variant: Variant) -> None:
        payload = variant.payload
        ctx.title = payload["title"]
        ctx.description = payload["description"]
        ctx.narrative = payload["narrative"]
        ctx.clues = [ClueDraft(order_index=i, riddle_text=text) for i, text in enumerate(payload["riddles"])]
