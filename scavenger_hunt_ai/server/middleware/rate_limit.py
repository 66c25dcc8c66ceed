"""
Per-client Rate Limiting.

Every HTTP route shares one default limit keyed by the client IP address.
Clients over the limit get ``429 RATE_LIMITED`` in the error envelope, see
``rate_limit_exceeded_handler``. The WebSocket channel is not limited.
"""

from typing import Optional

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from scavenger_hunt_ai.core.logging_config import get_logger
from scavenger_hunt_ai.server.core.config import RateLimitConfig, settings

logger = get_logger(__name__)


def build_limiter(config: Optional[RateLimitConfig] = None) -> Limiter:
    """Create a limiter applying the configured default limit to every route."""
    config = config or settings.rate_limit
    return Limiter(
        key_func=get_remote_address,
        default_limits=[config.default_limit],
        enabled=config.enabled,
    )


def setup_rate_limiting(app: FastAPI, limiter: Limiter) -> None:
    """
    Attach a limiter to the application.

    Must run before the other middleware are added so the limit is checked
    after CORS and timing have seen the request.

    Args:
        app: The FastAPI application instance
        limiter: Limiter holding the limits and their storage
    """
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    logger.debug(f"Rate limiting {'enabled' if limiter.enabled else 'disabled'}")
