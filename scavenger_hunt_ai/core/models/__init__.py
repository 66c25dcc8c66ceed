"""Domain and I/O models shared by the server and the generation pipeline."""
