"""
Unit tests for the ratings API.

Tests cover:
- Submitting ratings for existing and missing hunts
- Score validation and authentication
- Per-hunt rating summaries
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


@pytest.fixture
def hunt_payload():
    return {"title": "Garden Quest", "theme": "nature", "difficulty": "medium", "location_type": "outdoor"}


async def _create_hunt(client: AsyncClient, headers, payload) -> str:
    response = await client.post("/api/v1/hunts", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]


class TestCreateRating:
    async def test_create_rating(self, client: AsyncClient, register, hunt_payload):
        player = await register()
        hunt_id = await _create_hunt(client, player["headers"], hunt_payload)

        response = await client.post(
            "/api/v1/ratings",
            json={
                "hunt_id": hunt_id,
                "engagement_score": 5,
                "difficulty_rating": 3,
                "feedback": "We loved the riddles!",
                "completed": True,
                "completion_time": 42,
            },
            headers=player["headers"],
        )

        assert response.status_code == 201
        rating = response.json()["data"]
        assert rating["hunt_id"] == hunt_id
        assert rating["user_id"] == player["user"]["id"]
        assert rating["engagement_score"] == 5
        assert rating["difficulty_rating"] == 3
        assert rating["completed"] is True
        assert rating["completion_time"] == 42

    async def test_optional_fields_default(self, client: AsyncClient, register, hunt_payload):
        player = await register()
        hunt_id = await _create_hunt(client, player["headers"], hunt_payload)

        response = await client.post(
            "/api/v1/ratings",
            json={"hunt_id": hunt_id, "engagement_score": 4, "difficulty_rating": 2},
            headers=player["headers"],
        )

        rating = response.json()["data"]
        assert rating["completed"] is False
        assert rating["feedback"] is None
        assert rating["completion_time"] is None

    async def test_rating_unknown_hunt(self, client: AsyncClient, register):
        player = await register()

        response = await client.post(
            "/api/v1/ratings",
            json={"hunt_id": "missing", "engagement_score": 4, "difficulty_rating": 2},
            headers=player["headers"],
        )

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.parametrize(
        "scores",
        [
            {"engagement_score": 0, "difficulty_rating": 3},
            {"engagement_score": 6, "difficulty_rating": 3},
            {"engagement_score": 3, "difficulty_rating": 0},
            {"engagement_score": 3, "difficulty_rating": 6},
        ],
    )
    async def test_scores_out_of_range(self, client: AsyncClient, register, hunt_payload, scores):
        player = await register()
        hunt_id = await _create_hunt(client, player["headers"], hunt_payload)

        response = await client.post(
            "/api/v1/ratings", json={"hunt_id": hunt_id, **scores}, headers=player["headers"]
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_requires_token(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/ratings", json={"hunt_id": "h", "engagement_score": 4, "difficulty_rating": 2}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "NO_TOKEN"


class TestHuntRatings:
    async def test_summary_averages(self, client: AsyncClient, register, hunt_payload):
        owner = await register("Mia")
        friend = await register("Leo")
        hunt_id = await _create_hunt(client, owner["headers"], hunt_payload)

        for player, engagement, difficulty in ((owner, 5, 2), (friend, 4, 3), (friend, 4, 4)):
            response = await client.post(
                "/api/v1/ratings",
                json={"hunt_id": hunt_id, "engagement_score": engagement, "difficulty_rating": difficulty},
                headers=player["headers"],
            )
            assert response.status_code == 201

        response = await client.get(f"/api/v1/ratings/hunt/{hunt_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["count"] == 3
        assert len(data["ratings"]) == 3
        assert data["average_rating"] == 4.33
        assert data["average_difficulty"] == 3.0

    async def test_summary_without_ratings(self, client: AsyncClient, register, hunt_payload):
        player = await register()
        hunt_id = await _create_hunt(client, player["headers"], hunt_payload)

        response = await client.get(f"/api/v1/ratings/hunt/{hunt_id}")

        data = response.json()["data"]
        assert data == {"ratings": [], "count": 0, "average_rating": 0.0, "average_difficulty": 0.0}

    async def test_summary_unknown_hunt(self, client: AsyncClient):
        response = await client.get("/api/v1/ratings/hunt/missing")

        assert response.status_code == 404
