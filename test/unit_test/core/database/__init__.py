"""Unit tests for the database layer.

Covers the entity models, the repositories and the engine/session helpers,
all against in-memory SQLite.
"""
