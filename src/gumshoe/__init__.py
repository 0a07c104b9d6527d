"""Gumshoe: seeded crimes, NPCs, evidence and the game clock."""
