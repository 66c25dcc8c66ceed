"""
Users API Endpoints.

Players register with a display name and an age group and receive an access
token. There are no passwords; the token is the player's identity.
"""

from fastapi import APIRouter

from scavenger_hunt_ai.core.database.entities.users import User
from scavenger_hunt_ai.core.errors import NotFoundError
from scavenger_hunt_ai.core.logging_config import get_logger
from scavenger_hunt_ai.core.models.io.common import ApiResponse
from scavenger_hunt_ai.core.models.io.users import UserCreate, UserRead, UserWithToken
from scavenger_hunt_ai.server.core.security import create_access_token
from scavenger_hunt_ai.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[UserWithToken],
    status_code=201,
    summary="Create User",
    description="Create a player profile and issue an access token for it.",
    response_description="The created user and its access token.",
)
async def create_user(user_in: UserCreate, repos: ReposDep):
    """
    Create a new player.

    - **name**: Display name (1-50 characters).
    - **age_group**: `6-8` or `9-12`.
    - **preferences**: Favorite themes and preferred difficulty (optional).
    """
    user = User(
        name=user_in.name,
        age_group=user_in.age_group.value,
        preferences=user_in.preferences.model_dump(mode="json"),
    )
    user = await repos.users.create(user)
    logger.info(f"Created user {user.id} (age_group={user.age_group})")

    token = create_access_token(user)
    return {"success": True, "data": {"user": UserRead.model_validate(user), "token": token}}


@router.get(
    "/me",
    response_model=ApiResponse[UserRead],
    summary="Get Current User",
    description="Retrieve the profile of the authenticated player.",
    response_description="The current user.",
)
async def get_me(current_user: CurrentUserDep):
    """Get the profile the access token belongs to."""
    return {"success": True, "data": UserRead.model_validate(current_user)}


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserRead],
    summary="Get User",
    description="Retrieve a player profile by its ID.",
    response_description="The user.",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: str, repos: ReposDep, current_user: CurrentUserDep):
    """Get a player profile."""
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return {"success": True, "data": UserRead.model_validate(user)}
