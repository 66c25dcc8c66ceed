"""
Middleware modules for the Scavenger Hunt AI server.

This package contains custom middleware for request timing, security
headers and per-client rate limiting.
"""

from .rate_limit import build_limiter, setup_rate_limiting
from .security_headers import SecurityHeadersMiddleware
from .timing import RequestTimingMiddleware

__all__ = ["RequestTimingMiddleware", "SecurityHeadersMiddleware", "build_limiter", "setup_rate_limiting"]
