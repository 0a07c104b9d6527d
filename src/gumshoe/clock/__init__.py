"""Game clock and fast-forward."""

from gumshoe.clock.clock import Clock, ClockState, FastForwardState

__all__ = [
    "Clock",
    "ClockState",
    "FastForwardState",
]
