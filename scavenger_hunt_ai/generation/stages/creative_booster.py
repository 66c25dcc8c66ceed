from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ..base import StageContext, StageResult, Variant
from ..templates import INTERACTIVE_ELEMENTS, SUCCESS_MESSAGES

BASE_SCORE = 0.5
ELEMENT_BONUS = 0.1


@dataclass(frozen=True)
class CreativeBoosterStage:
    """
    Adds the fun: activities to do at each clue and a cheer when it is found.

    Proposes a gentle variant (one activity per clue) and a playful one
    (two per clue). Each activity adds a fixed bonus to the variant score.
    """

    name: str = "creative"
    progress: int = 90
    message: str = "Adding magic touches..."

    def _variant(self, ctx: StageContext, style: str, per_clue: int) -> Variant:
        theme = ctx.request.theme
        elements = INTERACTIVE_ELEMENTS[theme]
        messages = SUCCESS_MESSAGES[theme]
        clues: List[Dict[str, object]] = []
        for clue in ctx.clues:
            i = clue.order_index
            clues.append(
                {
                    "interactive_elements": [elements[(i + k) % len(elements)] for k in range(per_clue)],
                    "success_message": messages[i % len(messages)],
                }
            )
        total = per_clue * len(clues)
        return Variant(
            source=self.name,
            payload={"style": style, "clues": clues},
            score=round(BASE_SCORE + ELEMENT_BONUS * total, 2),
        )

    async def run(self, ctx: StageContext) -> StageResult:
        variants = [self._variant(ctx, "gentle", 1), self._variant(ctx, "playful", 2)]
        return StageResult(stage=self.name, variants=variants)

    def apply(self, ctx: StageContext, variant: Variant) -> None:
        for clue, extra in zip(ctx.clues, variant.payload["clues"]):
            clue.interactive_elements = list(extra["interactive_elements"])
            clue.success_message = extra["success_message"]
