"""
Access token helpers.

Tokens are HS256 JSON Web Tokens signed with ``JWT_SECRET``. The subject is
the user id; name and age group ride along for the client's convenience.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from scavenger_hunt_ai.core.database.entities.users import User
from scavenger_hunt_ai.core.errors import AuthenticationError
from scavenger_hunt_ai.core.logging_config import get_logger

from .config import JWTConfig, settings

logger = get_logger(__name__)


def create_access_token(user: User, config: Optional[JWTConfig] = None) -> str:
    """
    Issue a signed access token for ``user``.

    Args:
        user: The user the token identifies.
        config: Signing configuration; defaults to the application settings.

    Returns:
        The encoded JWT.
    """
    config = config or settings.jwt
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user.id,
        "name": user.name,
        "age_group": getattr(user.age_group, "value", user.age_group),
        "iat": now,
        "exp": now + timedelta(hours=config.expire_hours),
    }
    return jwt.encode(claims, config.secret, algorithm=config.algorithm)


def decode_access_token(token: str, config: Optional[JWTConfig] = None) -> Dict[str, Any]:
    """
    Validate a token and return its claims.

    Raises:
        AuthenticationError: ``INVALID_TOKEN`` when the token is malformed,
            expired, wrongly signed or has no subject.
    """
    config = config or settings.jwt
    try:
        claims = jwt.decode(token, config.secret, algorithms=[config.algorithm], options={"require": ["sub", "exp"]})
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired", code="INVALID_TOKEN") from e
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected access token: {e}")
        raise AuthenticationError("Invalid token", code="INVALID_TOKEN") from e
    return claims
