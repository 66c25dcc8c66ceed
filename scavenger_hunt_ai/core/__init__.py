"""
Shared core of Scavenger Hunt AI.

Subpackages:
    database: SQLModel entities, repositories and session management.
    models: Domain enums and API I/O schemas.
"""
