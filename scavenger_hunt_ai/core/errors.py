"""
Application error hierarchy.

Every error raised on purpose by the service derives from ``AppError`` and
carries the HTTP status and machine-readable code it is reported with.
The server's exception handlers turn these into the JSON error envelope.
"""

from typing import Any, Optional


class AppError(Exception):
    """Base class for expected application errors."""

    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """A requested resource does not exist."""

    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Optional[str] = None) -> None:
        message = f"{resource} not found" if resource_id is None else f"{resource} {resource_id} not found"
        super().__init__(message)


class AuthenticationError(AppError):
    """The request carries no usable credentials."""

    status_code = 401
    code = "INVALID_TOKEN"


class ForbiddenError(AppError):
    """The caller is authenticated but not allowed to act on the resource."""

    status_code = 403
    code = "FORBIDDEN"


class ConflictError(AppError):
    """The request conflicts with the current state of the resource."""

    status_code = 409
    code = "CONFLICT"


class GenerationError(AppError):
    """Hunt generation failed."""

    status_code = 500
    code = "GENERATION_FAILED"


class SafetyViolationError(GenerationError):
    """Generated content still contains a hazard the safety stage cannot fix."""

    code = "SAFETY_VIOLATION"

    def __init__(self, concerns: list[str]) -> None:
        super().__init__(f"Unsafe content detected: {', '.join(concerns)}", details={"concerns": concerns})
        self.concerns = concerns
