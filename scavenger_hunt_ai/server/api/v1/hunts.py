"""
Hunts API Endpoints.

This module provides the interface for creating, playing and managing
scavenger hunts.

Includes:
- Hunt CRUD operations (create, list, get, update, delete)
- Clue and generation-status lookups
- Background generation of the hunt content, with progress pushed over the
  real-time channel
"""

from typing import List

from fastapi import APIRouter, BackgroundTasks, Query, Response

from scavenger_hunt_ai.core.database.base import utc_now
from scavenger_hunt_ai.core.database.entities.hunts import Hunt
from scavenger_hunt_ai.core.database.repositories import SqlRepoBundle
from scavenger_hunt_ai.core.errors import ConflictError, ForbiddenError, NotFoundError
from scavenger_hunt_ai.core.logging_config import get_logger
from scavenger_hunt_ai.core.models.domain.enums import HuntStatus
from scavenger_hunt_ai.core.models.io.common import ApiResponse
from scavenger_hunt_ai.core.models.io.hunts import (
    ClueRead,
    HuntCreate,
    HuntDetail,
    HuntRead,
    HuntStatusRead,
    HuntUpdate,
)
from scavenger_hunt_ai.server.services.deps import (
    CurrentUserDep,
    GenerationServiceDep,
    NotifierDep,
    ReposDep,
)
from scavenger_hunt_ai.server.services.notifier import HUNT_UPDATED

logger = get_logger(__name__)
router = APIRouter()

# Statuses a player may set, and the statuses from which they may not
PLAYER_STATUSES = (HuntStatus.IN_PROGRESS, HuntStatus.COMPLETED)
LOCKED_STATUSES = (HuntStatus.GENERATING, HuntStatus.ERROR)


async def _get_hunt_or_404(repos: SqlRepoBundle, hunt_id: str) -> Hunt:
    hunt = await repos.hunts.get_by_id(hunt_id)
    if hunt is None:
        raise NotFoundError("Hunt", hunt_id)
    return hunt


async def _get_owned_hunt(repos: SqlRepoBundle, hunt_id: str, user_id: str) -> Hunt:
    hunt = await _get_hunt_or_404(repos, hunt_id)
    if hunt.user_id != user_id:
        raise ForbiddenError("You can only change your own hunts")
    return hunt


@router.post(
    "",
    response_model=ApiResponse[HuntRead],
    status_code=201,
    summary="Create Hunt",
    description="Create a hunt and start generating its story and clues in the background.",
    response_description="The created hunt, still in GENERATING state.",
)
async def create_hunt(
    hunt_in: HuntCreate,
    current_user: CurrentUserDep,
    repos: ReposDep,
    generation: GenerationServiceDep,
    background_tasks: BackgroundTasks,
):
    """
    Create a new hunt.

    The response is returned immediately with status `GENERATING` and
    progress 0. Join the hunt's room on the real-time channel to follow
    `hunt-progress` and receive `hunt-ready` or `hunt-error`.

    - **title**: Hunt title (1-100 characters).
    - **theme**: pirates, nature, city, space, mystery or animals.
    - **difficulty**: easy, medium or hard.
    - **location_type**: indoor, outdoor or mixed.
    - **duration**: Minutes, 15-180 (defaults to 30).
    """
    hunt = Hunt(
        user_id=current_user.id,
        title=hunt_in.title,
        theme=hunt_in.theme.value,
        difficulty=hunt_in.difficulty.value,
        location_type=hunt_in.location_type.value,
        duration=hunt_in.duration,
        age_group=current_user.age_group,
        status=HuntStatus.GENERATING.value,
        progress=0,
    )
    hunt = await repos.hunts.create(hunt)
    logger.info(f"Created hunt {hunt.id} for user {current_user.id}, theme={hunt.theme}")

    background_tasks.add_task(generation.generate, hunt.id)
    return {"success": True, "data": HuntRead.model_validate(hunt)}


@router.get(
    "",
    response_model=ApiResponse[List[HuntRead]],
    summary="List My Hunts",
    description="Retrieve the authenticated player's hunts, newest first.",
    response_description="A list of hunts.",
)
async def list_hunts(
    current_user: CurrentUserDep,
    repos: ReposDep,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
):
    """List the caller's hunts with pagination."""
    hunts = await repos.hunts.list_by_user(current_user.id, limit=limit, offset=offset)
    return {"success": True, "data": [HuntRead.model_validate(hunt) for hunt in hunts]}


@router.get(
    "/{hunt_id}",
    response_model=ApiResponse[HuntDetail],
    summary="Get Hunt",
    description="Retrieve a hunt together with its clues in play order.",
    response_description="The hunt with its clues.",
    responses={404: {"description": "Hunt not found"}},
)
async def get_hunt(hunt_id: str, repos: ReposDep):
    """Get a hunt and its clues."""
    hunt = await _get_hunt_or_404(repos, hunt_id)
    clues = await repos.clues.list_by_hunt(hunt_id)
    detail = HuntDetail(
        **HuntRead.model_validate(hunt).model_dump(),
        clues=[ClueRead.model_validate(clue) for clue in clues],
    )
    return {"success": True, "data": detail}


@router.patch(
    "/{hunt_id}",
    response_model=ApiResponse[HuntRead],
    summary="Update Hunt",
    description="Rename a hunt or record play progress. Only the owner may update a hunt.",
    response_description="The updated hunt.",
    responses={
        403: {"description": "Not the owner of the hunt"},
        404: {"description": "Hunt not found"},
        409: {"description": "Hunt cannot be played yet or the status is not allowed"},
    },
)
async def update_hunt(
    hunt_id: str,
    hunt_in: HuntUpdate,
    current_user: CurrentUserDep,
    repos: ReposDep,
    notifier: NotifierDep,
):
    """
    Update a hunt.

    - **title**: New title.
    - **status**: `IN_PROGRESS` or `COMPLETED`, once the hunt is ready.
    - **progress**: Play progress percentage, once the hunt is ready.

    Starting a hunt stamps `started_at`; completing it stamps `completed_at`.
    Connected clients receive `hunt-updated`.
    """
    hunt = await _get_owned_hunt(repos, hunt_id, current_user.id)
    current_status = HuntStatus(hunt.status)
    changes = hunt_in.model_dump(exclude_unset=True)

    if changes.get("status") is not None or changes.get("progress") is not None:
        if current_status in LOCKED_STATUSES:
            raise ConflictError(f"Hunt is {current_status.value} and cannot be played")

    if hunt_in.title is not None:
        hunt.title = hunt_in.title

    if hunt_in.status is not None:
        if hunt_in.status not in PLAYER_STATUSES:
            raise ConflictError(
                f"Status can only be set to {' or '.join(s.value for s in PLAYER_STATUSES)}",
                details={"status": hunt_in.status.value},
            )
        now = utc_now()
        if hunt.started_at is None:
            hunt.started_at = now
        if hunt_in.status == HuntStatus.COMPLETED and hunt.completed_at is None:
            hunt.completed_at = now
        hunt.status = hunt_in.status.value

    if hunt_in.progress is not None:
        hunt.progress = hunt_in.progress

    hunt.updated_at = utc_now()
    hunt = await repos.hunts.update(hunt)
    logger.info(f"Updated hunt {hunt_id}: {sorted(changes)}")

    data = HuntRead.model_validate(hunt)
    await notifier.broadcast(hunt_id, HUNT_UPDATED, data.model_dump(mode="json"))
    return {"success": True, "data": data}


@router.delete(
    "/{hunt_id}",
    status_code=204,
    summary="Delete Hunt",
    description="Delete a hunt with its clues, ratings and generation variants. Only the owner may delete a hunt.",
    responses={403: {"description": "Not the owner of the hunt"}, 404: {"description": "Hunt not found"}},
)
async def delete_hunt(hunt_id: str, current_user: CurrentUserDep, repos: ReposDep):
    """Delete a hunt."""
    await _get_owned_hunt(repos, hunt_id, current_user.id)
    await repos.hunts.delete(hunt_id)
    logger.info(f"Deleted hunt {hunt_id}")
    return Response(status_code=204)


@router.get(
    "/{hunt_id}/clues",
    response_model=ApiResponse[List[ClueRead]],
    summary="Get Hunt Clues",
    description="Retrieve the clues of a hunt in play order.",
    response_description="A list of clues.",
    responses={404: {"description": "Hunt not found"}},
)
async def get_hunt_clues(hunt_id: str, repos: ReposDep):
    """List a hunt's clues. Empty while the hunt is generating."""
    await _get_hunt_or_404(repos, hunt_id)
    clues = await repos.clues.list_by_hunt(hunt_id)
    return {"success": True, "data": [ClueRead.model_validate(clue) for clue in clues]}


@router.get(
    "/{hunt_id}/status",
    response_model=ApiResponse[HuntStatusRead],
    summary="Get Generation Status",
    description="Poll the generation status and progress of a hunt.",
    response_description="Status, progress and error message of the hunt.",
    responses={404: {"description": "Hunt not found"}},
)
async def get_hunt_status(hunt_id: str, repos: ReposDep):
    """Get a hunt's status and progress."""
    hunt = await _get_hunt_or_404(repos, hunt_id)
    return {"success": True, "data": HuntStatusRead.model_validate(hunt)}
