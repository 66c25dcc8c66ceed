"""HTTP and WebSocket API of the Scavenger Hunt AI server."""
