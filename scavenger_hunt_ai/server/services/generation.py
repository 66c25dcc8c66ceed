"""
Hunt Generation Service.

Runs the generation pipeline for a freshly created hunt outside the request
that created it. Each run uses its own database session, persists progress
before broadcasting it, and always leaves the hunt either ``READY`` or
``ERROR``.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from scavenger_hunt_ai.core.database.entities.hunts import Clue, Hunt
from scavenger_hunt_ai.core.database.entities.variants import CandidateVariant
from scavenger_hunt_ai.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from scavenger_hunt_ai.core.errors import AppError
from scavenger_hunt_ai.core.logging_config import get_logger
from scavenger_hunt_ai.core.models.domain.enums import (
    AgeGroup,
    Difficulty,
    HuntStatus,
    LocationType,
    Theme,
)
from scavenger_hunt_ai.core.models.io.hunts import HuntRead
from scavenger_hunt_ai.core.monitoring import log_error, log_hunt_generation
from scavenger_hunt_ai.generation import (
    GenerationOutcome,
    HuntOrchestrator,
    HuntRequest,
    StageRegistry,
    build_default_registry,
)

from .notifier import HUNT_ERROR, HUNT_PROGRESS, HUNT_READY, HuntNotifier, get_notifier

logger = get_logger(__name__)


def hunt_request_from(hunt: Hunt) -> HuntRequest:
    """Build the pipeline input from a stored hunt."""
    return HuntRequest(
        hunt_id=hunt.id,
        title=hunt.title,
        theme=Theme(hunt.theme).value,
        difficulty=Difficulty(hunt.difficulty).value,
        location_type=LocationType(hunt.location_type).value,
        duration=hunt.duration,
        age_group=AgeGroup(hunt.age_group).value,
    )


class HuntGenerationService:
    """
    Generates hunt content in the background.

    Args:
        session_factory: Factory for the sessions used by generation runs.
        notifier: Broadcaster for real-time hunt events.
        registry_factory: Builds the stage registry for each run.
        timeout_seconds: Upper bound for one generation run.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        notifier: HuntNotifier,
        registry_factory: Callable[[], StageRegistry] = build_default_registry,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        if timeout_seconds is None:
            from scavenger_hunt_ai.server.core.config import settings

            timeout_seconds = settings.generation.timeout_seconds
        self.session_factory = session_factory
        self.notifier = notifier
        self.registry_factory = registry_factory
        self.timeout_seconds = timeout_seconds

    async def generate(self, hunt_id: str) -> None:
        """
        Generate the content of a hunt.

        Never raises: every failure is logged, stored on the hunt as
        ``ERROR`` and broadcast as ``hunt-error``.
        """
        started = time.perf_counter()
        async with self.session_factory() as session:
            repos = build_sql_repos_from_session(session=session)
            hunt = await repos.hunts.get_by_id(hunt_id)
            if hunt is None:
                logger.warning(f"Skipping generation, hunt {hunt_id} does not exist")
                return

            logger.info(f"Generating hunt {hunt_id} (theme={hunt.theme}, duration={hunt.duration})")
            request = hunt_request_from(hunt)

            async def on_progress(stage: str, progress: int, message: str) -> None:
                await repos.hunts.set_progress(hunt_id, progress)
                await self.notifier.broadcast(
                    hunt_id, HUNT_PROGRESS, {"progress": progress, "stage": stage, "message": message}
                )

            orchestrator = HuntOrchestrator(self.registry_factory(), progress_callback=on_progress)
            try:
                outcome = await asyncio.wait_for(orchestrator.run(request), timeout=self.timeout_seconds)
            except asyncio.TimeoutError:
                await self._fail(
                    session,
                    repos,
                    hunt_id,
                    "GENERATION_TIMEOUT",
                    f"Hunt generation timed out after {self.timeout_seconds:g} seconds",
                    started,
                )
                return
            except AppError as e:
                await self._fail(session, repos, hunt_id, e.code, e.message, started)
                return
            except Exception as e:
                logger.error(f"Unexpected failure generating hunt {hunt_id}: {e}", exc_info=True)
                await self._fail(session, repos, hunt_id, "GENERATION_FAILED", str(e) or type(e).__name__, started)
                return

            try:
                await self._complete(repos, hunt_id, outcome, started)
            except Exception as e:
                logger.error(f"Could not store generated hunt {hunt_id}: {e}", exc_info=True)
                await self._fail(session, repos, hunt_id, "GENERATION_FAILED", str(e) or type(e).__name__, started)

    async def _complete(
        self, repos: SqlRepoBundle, hunt_id: str, outcome: GenerationOutcome, started: float
    ) -> None:
        ctx = outcome.context
        hunt = await repos.hunts.get_by_id(hunt_id)
        if hunt is None:
            logger.warning(f"Hunt {hunt_id} was deleted during generation, discarding results")
            return

        clues = [
            Clue(
                hunt_id=hunt_id,
                order_index=draft.order_index,
                riddle_text=draft.riddle_text,
                location_hint=draft.location_hint,
                safety_notes=draft.safety_notes,
                visual_description=draft.visual_description,
                image_url=draft.image_url,
                audio_url=draft.audio_url,
                success_message=draft.success_message,
                interactive_elements=list(draft.interactive_elements),
            )
            for draft in ctx.clues
        ]
        await repos.clues.replace_for_hunt(hunt_id, clues)
        await repos.variants.add_many(
            [
                CandidateVariant(
                    hunt_id=hunt_id,
                    stage=variant.source,
                    payload=variant.payload,
                    score=variant.score,
                    selected=variant.selected,
                )
                for variant in outcome.variants
            ]
        )

        hunt.description = ctx.description
        hunt.narrative = ctx.narrative
        hunt.progress = 100
        hunt.status = HuntStatus.READY.value
        hunt.error_message = None
        hunt = await repos.hunts.update(hunt)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(f"Hunt {hunt_id} ready with {len(clues)} clues in {duration_ms:.1f}ms")
        log_hunt_generation(hunt_id, HuntStatus.READY.value, duration_ms, theme=ctx.request.theme)

        data = HuntRead.model_validate(hunt).model_dump(mode="json")
        data["clue_count"] = len(clues)
        await self.notifier.broadcast(hunt_id, HUNT_READY, data)

    async def _fail(
        self,
        session: AsyncSession,
        repos: SqlRepoBundle,
        hunt_id: str,
        code: str,
        message: str,
        started: float,
    ) -> None:
        try:
            # Drop whatever the interrupted stage left half-written
            await session.rollback()
            await repos.hunts.set_status(hunt_id, HuntStatus.ERROR, error_message=message)
        except Exception as e:
            logger.error(f"Could not record failure of hunt {hunt_id}: {e}", exc_info=True)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.warning(f"Hunt {hunt_id} generation failed [{code}]: {message}")
        log_hunt_generation(hunt_id, HuntStatus.ERROR.value, duration_ms)
        log_error(error_type=code, error_message=message, context={"hunt_id": hunt_id})

        await self.notifier.broadcast(hunt_id, HUNT_ERROR, {"code": code, "message": message})


_generation_service: Optional[HuntGenerationService] = None


def get_generation_service() -> HuntGenerationService:
    """Get the process-wide generation service bound to the application database."""
    global _generation_service
    if _generation_service is None:
        from scavenger_hunt_ai.core.database import async_session_maker

        _generation_service = HuntGenerationService(async_session_maker, get_notifier())
    return _generation_service
