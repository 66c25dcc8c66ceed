from __future__ import annotations

from dataclasses import dataclass

from ..base import StageContext, StageResult, Variant
from ..templates import VISUAL_STYLES


@dataclass(frozen=True)
class VisualGeneratorStage:
    """
    Attaches an illustration to every clue.

    Images are fixed placeholders addressed by theme and clue number under
    ``image_base_url``.
    """

    image_base_url: str
    name: str = "visuals"
    progress: int = 50
    message: str = "Drawing pictures..."

    def image_url(self, theme: str, order_index: int) -> str:
        return f"{self.image_base_url.rstrip('/')}/{theme}/clue-{order_index + 1}.png"

    async def run(self, ctx: StageContext) -> StageResult:
        theme = ctx.request.theme
        style = VISUAL_STYLES[theme]
        images = [
            {
                "image_url": self.image_url(theme, clue.order_index),
                "visual_description": f"A {style} picture of the {clue.place} with a {theme} surprise hidden nearby.",
            }
            for clue in ctx.clues
        ]
        return StageResult(stage=self.name, variants=[Variant(source=self.name, payload={"images": images}, score=0.5)])

    def apply(self, ctx: StageContext, variant: Variant) -> None:
        for clue, image in zip(ctx.clues, variant.payload["images"]):
            clue.image_url = image["image_url"]
            clue.visual_description = image["visual_description"]
