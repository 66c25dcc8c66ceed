from __future__ import annotations

"""Stage protocol and pipeline data models.

A stage is one step of hunt generation. The orchestrator calls
``run`` to obtain candidate variants, picks the best one and hands it back to
the stage through ``apply`` so the stage can write it into the shared
``StageContext``.

Stages should:

- be deterministic with respect to the request and the draft they receive,
- only put JSON-serializable data in ``Variant.payload`` (variants are
  persisted),
- raise ``GenerationError`` subclasses for failures the hunt should report.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol


@dataclass(frozen=True)
class HuntRequest:
    """Parameters of the hunt being generated."""

    hunt_id: str
    title: str
    theme: str
    difficulty: str
    location_type: str
    duration: int
    age_group: str


@dataclass
class ClueDraft:
    """A clue under construction, filled in stage by stage."""

    order_index: int
    riddle_text: str
    location_hint: str = ""
    place: str = ""
    safety_notes: Optional[str] = None
    visual_description: Optional[str] = None
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    success_message: Optional[str] = None
    interactive_elements: List[str] = field(default_factory=list)


@dataclass
class StageContext:
    """Mutable state shared by the stages of one generation run.

    Attributes
    ----------
    request:
        The immutable hunt parameters.
    title, description, narrative:
        Story fields, written by the story stage.
    clues:
        Clue drafts in play order.
    safety_score:
        Location safety rating from the geography stage.
    concerns:
        Safety findings recorded by the safety stage.
    """

    request: HuntRequest
    title: str = ""
    description: str = ""
    narrative: str = ""
    clues: List[ClueDraft] = field(default_factory=list)
    safety_score: Optional[int] = None
    concerns: List[str] = field(default_factory=list)


@dataclass
class Variant:
    """A candidate output proposed by a stage."""

    source: str
    payload: Dict[str, Any]
    score: float
    selected: bool = False


@dataclass(frozen=True)
class StageResult:
    """Variants produced by one stage run, in production order."""

    stage: str
    variants: List[Variant]


class GenerationStage(Protocol):
    """Protocol for generation stage implementations."""

    name: str
    progress: int
    message: str

    async def run(self, ctx: StageContext) -> StageResult: ...

    def apply(self, ctx: StageContext, variant: Variant) -> None: ...
