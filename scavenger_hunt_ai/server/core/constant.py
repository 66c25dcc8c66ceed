"""Server-wide constants."""

PROJECT_NAME = "Scavenger Hunt AI"
API_V1_STR = "/api/v1"
WEBSOCKET_PATH = "/ws"
