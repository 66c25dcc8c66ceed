"""
Shared response envelopes.

Successful responses wrap their payload as ``{"success": true, "data": ...}``.
Failures use ``{"code", "message", "details", "timestamp"}``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, Field

DataT = TypeVar("DataT")


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps; SQLite returns them without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class ApiResponse(BaseModel, Generic[DataT]):
    """Success envelope."""

    success: bool = True
    data: DataT


class ErrorResponse(BaseModel):
    """Error envelope returned by every exception handler."""

    code: str = Field(description="Machine-readable error code, e.g. NOT_FOUND")
    message: str = Field(description="Human-readable error message")
    details: Optional[Any] = Field(default=None, description="Extra context such as field errors")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
