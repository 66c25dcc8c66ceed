"""
API Dependencies.

Shared ``Annotated`` dependencies for the routers: database session and
repositories, the authenticated user, the notifier and the generation service.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from scavenger_hunt_ai.core.database import get_session
from scavenger_hunt_ai.core.database.entities.users import User
from scavenger_hunt_ai.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from scavenger_hunt_ai.core.errors import AuthenticationError
from scavenger_hunt_ai.server.core.security import decode_access_token
from scavenger_hunt_ai.server.services.generation import HuntGenerationService, get_generation_service
from scavenger_hunt_ai.server.services.notifier import HuntNotifier, get_notifier

bearer_scheme = HTTPBearer(auto_error=False, description="Access token returned by POST /users")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repos(session: SessionDep) -> SqlRepoBundle:
    """Repositories sharing the request's session."""
    return build_sql_repos_from_session(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


async def get_current_user(
    repos: ReposDep,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> User:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        AuthenticationError: ``NO_TOKEN`` when no bearer token is sent,
            ``INVALID_TOKEN`` when it does not decode to an existing user.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token provided", code="NO_TOKEN")
    claims = decode_access_token(credentials.credentials)
    user = await repos.users.get_by_id(str(claims["sub"]))
    if user is None:
        raise AuthenticationError("Invalid token", code="INVALID_TOKEN")
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]
NotifierDep = Annotated[HuntNotifier, Depends(get_notifier)]
GenerationServiceDep = Annotated[HuntGenerationService, Depends(get_generation_service)]
