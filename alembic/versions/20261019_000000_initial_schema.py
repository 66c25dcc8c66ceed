"""Initial schema for Scavenger Hunt AI

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

This is the initial migration that creates all tables of the service:
- users: player profiles
- hunts: hunts and their generation state
- clues: ordered clues of a hunt
- ratings: post-hunt feedback
- candidate_variants: candidate payloads proposed by the generation stages

Enumerated values (status, theme, difficulty, location type, age group) are
stored as plain strings.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("age_group", sa.String(8), nullable=False),
        sa.Column("preferences", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_created_at", "created_at"),
    )

    # Create hunts table
    op.create_table(
        "hunts",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("theme", sa.String(16), nullable=False),
        sa.Column("difficulty", sa.String(16), nullable=False),
        sa.Column("location_type", sa.String(16), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("age_group", sa.String(8), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("progress", sa.Integer(), nullable=False),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("narrative", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_hunts_user_id", "user_id"),
        sa.Index("ix_hunts_status", "status"),
        sa.Index("ix_hunts_created_at", "created_at"),
    )

    # Create clues table
    op.create_table(
        "clues",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("hunt_id", sa.String(36), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("riddle_text", sa.Text(), nullable=False),
        sa.Column("location_hint", sa.String(255), nullable=False),
        sa.Column("safety_notes", sa.Text(), nullable=True),
        sa.Column("visual_description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(512), nullable=True),
        sa.Column("audio_url", sa.String(512), nullable=True),
        sa.Column("success_message", sa.String(255), nullable=True),
        sa.Column("interactive_elements", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["hunt_id"], ["hunts.id"]),
        sa.Index("ix_clues_hunt_id", "hunt_id"),
    )

    # Create ratings table
    op.create_table(
        "ratings",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("hunt_id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("engagement_score", sa.Integer(), nullable=False),
        sa.Column("difficulty_rating", sa.Integer(), nullable=False),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("completion_time", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["hunt_id"], ["hunts.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_ratings_hunt_id", "hunt_id"),
        sa.Index("ix_ratings_user_id", "user_id"),
        sa.Index("ix_ratings_created_at", "created_at"),
    )

    # Create candidate_variants table
    op.create_table(
        "candidate_variants",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("hunt_id", sa.String(36), nullable=False),
        sa.Column("stage", sa.String(32), nullable=False),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.Column("score", sa.Float(), nullable=False),
        sa.Column("selected", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["hunt_id"], ["hunts.id"]),
        sa.Index("ix_candidate_variants_hunt_id", "hunt_id"),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("candidate_variants")
    op.drop_table("ratings")
    op.drop_table("clues")
    op.drop_table("hunts")
    op.drop_table("users")
