"""Server services: real-time notifications, hunt generation and API dependencies."""
