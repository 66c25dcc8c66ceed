"""
Candidate variant entity model.

Each generation stage proposes one or more candidate payloads. They are kept
for auditing; the best-scoring one per stage is flagged as selected.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class CandidateVariant(Base, table=True):
    """Candidate payload produced by a generation stage.

    Table: candidate_variants
    """

    __tablename__ = "candidate_variants"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    hunt_id: str = Field(foreign_key="hunts.id", index=True, max_length=36)
    stage: str = Field(max_length=32, description="Provenance tag: name of the stage that produced it")
    payload: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    score: float = Field(default=0.0)
    selected: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
