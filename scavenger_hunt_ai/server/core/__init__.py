"""Core server configuration, constants and security helpers."""
