"""
API I/O schemas.

Pydantic models defining the contract between the REST API and its clients.
"""
