"""
Ratings API Endpoints.

Players rate a hunt after playing it. Ratings are public per hunt, together
with their averages.
"""

from fastapi import APIRouter

from scavenger_hunt_ai.core.database.entities.ratings import Rating
from scavenger_hunt_ai.core.errors import NotFoundError
from scavenger_hunt_ai.core.logging_config import get_logger
from scavenger_hunt_ai.core.models.io.common import ApiResponse
from scavenger_hunt_ai.core.models.io.ratings import HuntRatings, RatingCreate, RatingRead
from scavenger_hunt_ai.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[RatingRead],
    status_code=201,
    summary="Rate Hunt",
    description="Submit engagement and difficulty scores for a hunt.",
    response_description="The stored rating.",
    responses={404: {"description": "Hunt not found"}},
)
async def create_rating(rating_in: RatingCreate, current_user: CurrentUserDep, repos: ReposDep):
    """
    Rate a hunt.

    - **hunt_id**: The rated hunt.
    - **engagement_score**: How fun it was, 1-5.
    - **difficulty_rating**: How hard it felt, 1-5.
    - **feedback**: Free text, up to 1000 characters (optional).
    - **completed**: Whether the hunt was finished.
    - **completion_time**: Minutes spent playing (optional).
    """
    if await repos.hunts.get_by_id(rating_in.hunt_id) is None:
        raise NotFoundError("Hunt", rating_in.hunt_id)

    rating = await repos.ratings.create(Rating(user_id=current_user.id, **rating_in.model_dump()))
    logger.info(
        f"User {current_user.id} rated hunt {rating.hunt_id}: "
        f"engagement={rating.engagement_score}, difficulty={rating.difficulty_rating}"
    )
    return {"success": True, "data": RatingRead.model_validate(rating)}


@router.get(
    "/hunt/{hunt_id}",
    response_model=ApiResponse[HuntRatings],
    summary="Get Hunt Ratings",
    description="Retrieve every rating of a hunt, newest first, with average scores.",
    response_description="Ratings with count and averages.",
    responses={404: {"description": "Hunt not found"}},
)
async def get_hunt_ratings(hunt_id: str, repos: ReposDep):
    """List a hunt's ratings and their averages (0 when there are none)."""
    if await repos.hunts.get_by_id(hunt_id) is None:
        raise NotFoundError("Hunt", hunt_id)

    ratings = await repos.ratings.list_by_hunt(hunt_id)
    summary = await repos.ratings.summarize(hunt_id)
    data = HuntRatings(
        ratings=[RatingRead.model_validate(rating) for rating in ratings],
        count=summary.count,
        average_rating=summary.average_rating,
        average_difficulty=summary.average_difficulty,
    )
    return {"success": True, "data": data}
