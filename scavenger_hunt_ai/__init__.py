"""
Scavenger Hunt AI.

Backend for a children's scavenger-hunt application: players create themed
hunts, a staged placeholder "AI" pipeline writes the clues, and progress is
pushed to clients in real time.
"""

__version__ = "0.1.0"
