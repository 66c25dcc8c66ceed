"""
Hunt generation pipeline.

A hunt is generated by a fixed sequence of placeholder "AI" stages
(story, geography, visuals, safety, creative). Each stage proposes candidate
variants; the orchestrator keeps the best one and reports progress.

Modules:
- base: stage protocol and the data passed between stages
- registry: ordered registry of stages
- templates: theme content the stages draw from
- stages: the stage implementations
- orchestrator: runs the stages in order
"""

from .base import ClueDraft, GenerationStage, HuntRequest, StageContext, StageResult, Variant
from .orchestrator import GenerationOutcome, HuntOrchestrator, select_best
from .registry import StageRegistry, build_default_registry

__all__ = [
    "ClueDraft",
    "GenerationOutcome",
    "GenerationStage",
    "HuntOrchestrator",
    "HuntRequest",
    "StageContext",
    "StageRegistry",
    "StageResult",
    "Variant",
    "build_default_registry",
    "select_best",
]
