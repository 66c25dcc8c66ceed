from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from scavenger_hunt_ai.core.errors import SafetyViolationError
from scavenger_hunt_ai.core.logging_config import get_logger

from ..base import StageContext, StageResult, Variant
from ..templates import FORBIDDEN_TERMS, HAZARD_REPLACEMENTS, LOCATION_SAFETY_NOTES, SUPERVISION_NOTE

logger = get_logger(__name__)


def _term_pattern(term: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


_HAZARDS = {term: _term_pattern(term) for term in HAZARD_REPLACEMENTS}
_FORBIDDEN = {term: _term_pattern(term) for term in FORBIDDEN_TERMS}


def find_forbidden(*texts: Optional[str]) -> List[str]:
    """Forbidden terms found in any of ``texts``, in table order."""
    joined = " ".join(text for text in texts if text)
    return [term for term, pattern in _FORBIDDEN.items() if pattern.search(joined)]


def replace_hazards(text: str) -> tuple[str, List[str]]:
    """Swap hazardous places in ``text`` for safe ones.

    Returns:
        The rewritten text and the hazard terms that were replaced.
    """
    replaced = []
    for term, pattern in _HAZARDS.items():
        if pattern.search(text):
            text = pattern.sub(HAZARD_REPLACEMENTS[term], text)
            replaced.append(term)
    return text, replaced


@dataclass(frozen=True)
class SafetyValidatorStage:
    """
    Makes the hunt safe for children.

    Hazardous hiding places are swapped for safe alternatives and recorded
    as concerns. Every clue gets the safety note for the hunt's location type,
    plus a supervision note for the youngest age group. Forbidden terms
    anywhere in the hunt cannot be rewritten and abort generation with
    ``SafetyViolationError``.
    """

    name: str = "safety"
    progress: int = 70
    message: str = "Checking everything is safe..."

    async def run(self, ctx: StageContext) -> StageResult:
        request = ctx.request
        note = LOCATION_SAFETY_NOTES[request.location_type]
        if request.age_group == "6-8":
            note = f"{note} {SUPERVISION_NOTE}"

        concerns: List[str] = []
        clues: List[Dict[str, Optional[str]]] = []
        for clue in ctx.clues:
            place, replaced = replace_hazards(clue.place)
            hint, _ = replace_hazards(clue.location_hint)
            description, _ = replace_hazards(clue.visual_description or "")
            for term in replaced:
                concerns.append(f"Clue {clue.order_index + 1}: replaced '{term}' with '{HAZARD_REPLACEMENTS[term]}'")
            clues.append(
                {
                    "place": place,
                    "location_hint": hint,
                    "visual_description": description or None,
                    "safety_notes": note,
                }
            )

        unresolved = find_forbidden(
            ctx.title,
            ctx.description,
            ctx.narrative,
            *(clue.riddle_text for clue in ctx.clues),
            *(clue["location_hint"] for clue in clues),
            *(clue["visual_description"] for clue in clues),
        )
        if unresolved:
            logger.warning(f"Hunt {request.hunt_id} failed safety validation: {unresolved}")
            raise SafetyViolationError(unresolved)

        score = max(0.0, round(1.0 - 0.1 * len(concerns), 2))
        variant = Variant(source=self.name, payload={"clues": clues, "concerns": concerns}, score=score)
        return StageResult(stage=self.name, variants=[variant])

    def apply(self, ctx: StageContext, variant: Variant) -> None:
        for clue, checked in zip(ctx.clues, variant.payload["clues"]):
            clue.place = checked["place"]
            clue.location_hint = checked["location_hint"]
            clue.visual_description = checked["visual_description"]
            clue.safety_notes = checked["safety_notes"]
        ctx.concerns = list(variant.payload["concerns"])
