"""
Scavenger Hunt AI server.

FastAPI application exposing the REST API under ``/api/v1`` and the
real-time WebSocket channel.
"""
