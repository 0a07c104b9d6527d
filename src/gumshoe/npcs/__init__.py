"""Deterministic NPC profile generation."""

from gumshoe.npcs.generator import NPCProfileGenerator, fingerprint_hash, npc_id_for

__all__ = [
    "NPCProfileGenerator",
    "fingerprint_hash",
    "npc_id_for",
]
