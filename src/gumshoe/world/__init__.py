"""Registry of generated facts and world population."""

from gumshoe.world.builder import build_world
from gumshoe.world.exporters import dump_world
from gumshoe.world.registry import CaseRegistry

__all__ = [
    "build_world",
    "CaseRegistry",
    "dump_world",
]
