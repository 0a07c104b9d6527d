"""In-world clock with pause, time multiplier and fast-forward."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math

from gumshoe.config import SeedConfig
from gumshoe.domain.enums import ClockPhase
from gumshoe.util.signals import Signal
from gumshoe.util.time import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    format_clock,
    join_minutes,
)

logger = logging.getLogger(__name__)

DEFAULT_SECONDS_PER_MINUTE = 10.0
MIN_MULTIPLIER = 0.1
MAX_MULTIPLIER = 1_000_000.0
MIN_FAST_FORWARD_SECONDS = 0.1
MAX_FAST_FORWARD_MINUTES = MINUTES_PER_DAY
MAX_MINUTES_PER_TICK = MINUTES_PER_DAY

# Float slack, relative to the drain threshold, so exact deltas drain exactly.
_DRAIN_TOLERANCE = 1e-9


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_multiplier(value: float) -> float:
    value = float(value)
    if math.isnan(value):
        return 1.0
    return clamp(value, MIN_MULTIPLIER, MAX_MULTIPLIER)


@dataclass
class FastForwardState:
    active: bool = False
    remaining: int = 0


@dataclass
class ClockState:
    day: int = 1
    hour: int = 8
    minute: int = 0
    multiplier: float = 1.0
    paused: bool = False
    fast_forward: FastForwardState = field(default_factory=FastForwardState)


class Clock:
    """Tick-driven game clock.

    Feed real seconds through tick(); every `real_seconds_per_game_minute /
    multiplier` seconds of accumulated debt advance one game minute and fire
    `time_changed(day, hour, minute)`. Several minutes drained in one frame
    still notify once each, in order.

    A fast-forward runs at a computed multiplier until its minutes are spent,
    ignores pause, and cannot be cancelled once started.
    """

    def __init__(
        self,
        real_seconds_per_game_minute: float = DEFAULT_SECONDS_PER_MINUTE,
        state: ClockState | None = None,
    ) -> None:
        if not math.isfinite(real_seconds_per_game_minute) or real_seconds_per_game_minute <= 0:
            logger.warning(
                "real_seconds_per_game_minute must be positive, got %s; using %s",
                real_seconds_per_game_minute,
                DEFAULT_SECONDS_PER_MINUTE,
            )
            real_seconds_per_game_minute = DEFAULT_SECONDS_PER_MINUTE
        self.real_seconds_per_game_minute = float(real_seconds_per_game_minute)
        self.state = state or ClockState()
        self.state.multiplier = clamp_multiplier(self.state.multiplier)
        self._buffer = 0.0
        self.time_changed = Signal("time_changed")
        self.fast_forward_started = Signal("fast_forward_started")
        self.fast_forward_completed = Signal("fast_forward_completed")

    @classmethod
    def from_config(
        cls,
        config: SeedConfig,
        real_seconds_per_game_minute: float = DEFAULT_SECONDS_PER_MINUTE,
    ) -> "Clock":
        hour, minute = divmod(config.start_time_min % MINUTES_PER_DAY, MINUTES_PER_HOUR)
        return cls(real_seconds_per_game_minute, ClockState(hour=hour, minute=minute))

    @property
    def day(self) -> int:
        return self.state.day

    @property
    def hour(self) -> int:
        return self.state.hour

    @property
    def minute(self) -> int:
        return self.state.minute

    @property
    def multiplier(self) -> float:
        return self.state.multiplier

    @property
    def paused(self) -> bool:
        return self.state.paused

    @property
    def is_fast_forwarding(self) -> bool:
        return self.state.fast_forward.active

    @property
    def phase(self) -> ClockPhase:
        return ClockPhase.FAST_FORWARD if self.is_fast_forwarding else ClockPhase.NORMAL

    @property
    def minute_of_day(self) -> int:
        return self.state.hour * MINUTES_PER_HOUR + self.state.minute

    @property
    def total_minutes(self) -> int:
        """Absolute game-minutes since day 1, 00:00."""
        return join_minutes(self.state.day, self.state.hour, self.state.minute)

    def time_string(self) -> str:
        return format_clock(self.state.day, self.state.hour, self.state.minute)

    def pause(self) -> None:
        self.state.paused = True

    def resume(self) -> None:
        self.state.paused = False

    def toggle_pause(self) -> bool:
        self.state.paused = not self.state.paused
        return self.state.paused

    def set_multiplier(self, multiplier: float) -> float:
        if self.is_fast_forwarding:
            logger.warning("Ignoring multiplier change to %s during fast-forward", multiplier)
            return self.state.multiplier
        self.state.multiplier = clamp_multiplier(multiplier)
        return self.state.multiplier

    def set_time(self, hour: int, minute: int, day: int | None = None) -> None:
        """Jump to a time of day. Out-of-range values are clamped, not wrapped."""
        self.state.hour = int(clamp(hour, 0, 23))
        self.state.minute = int(clamp(minute, 0, 59))
        if day is not None:
            self.state.day = max(1, int(day))
        self._emit_time()

    def tick(self, delta: float) -> int:
        """Advance by `delta` real seconds; returns the number of minutes crossed.

        At most MAX_MINUTES_PER_TICK minutes drain per call; debt beyond that
        is dropped so a frame always ends.
        """
        if not math.isfinite(delta) or delta <= 0:
            return 0
        if self.state.paused and not self.is_fast_forwarding:
            return 0
        self._buffer += delta
        advanced = 0
        while True:
            threshold = self.real_seconds_per_game_minute / self.state.multiplier
            if self._buffer + threshold * _DRAIN_TOLERANCE < threshold:
                break
            if advanced >= MAX_MINUTES_PER_TICK:
                logger.warning(
                    "Dropping %.3fs of real-time debt after %d minutes in one tick",
                    self._buffer,
                    advanced,
                )
                self._buffer = 0.0
                break
            self._buffer = max(0.0, self._buffer - threshold)
            advanced += 1
            if self._advance_minute():
                # Leftover debt was accrued at the fast-forward rate.
                self._buffer = 0.0
                break
        return advanced

    def advance_minutes(self, minutes: int) -> None:
        for _ in range(max(0, int(minutes))):
            if self._advance_minute():
                self._buffer = 0.0

    def start_fast_forward_offset(self, minutes_ahead: int, desired_seconds: float = 5.0) -> bool:
        if self.is_fast_forwarding:
            logger.warning(
                "Fast-forward already running (%d minutes left); ignoring new request",
                self.state.fast_forward.remaining,
            )
            return False
        minutes = int(clamp(minutes_ahead, 1, MAX_FAST_FORWARD_MINUTES))
        seconds = float(desired_seconds)
        if not math.isfinite(seconds):
            seconds = MIN_FAST_FORWARD_SECONDS
        seconds = max(MIN_FAST_FORWARD_SECONDS, seconds)
        multiplier = clamp_multiplier(minutes * self.real_seconds_per_game_minute / seconds)
        self.state.multiplier = multiplier
        self.state.fast_forward = FastForwardState(active=True, remaining=minutes)
        self._buffer = 0.0
        logger.debug(
            "Fast-forward %d minutes over %.2fs (x%.2f) from %s",
            minutes,
            seconds,
            multiplier,
            self.time_string(),
        )
        self.fast_forward_started.emit()
        return True

    def start_fast_forward_to(self, hour: int, minute: int, desired_seconds: float = 5.0) -> bool:
        """Fast-forward to the next occurrence of hour:minute (a full day if it is now)."""
        target = int(clamp(hour, 0, 23)) * MINUTES_PER_HOUR + int(clamp(minute, 0, 59))
        offset = (target - self.minute_of_day) % MINUTES_PER_DAY
        return self.start_fast_forward_offset(offset or MINUTES_PER_DAY, desired_seconds)

    def _advance_minute(self) -> bool:
        """Step one minute; returns True when this minute finished a fast-forward.

        All state, fast-forward accounting included, is settled before any
        listener runs.
        """
        total = self.minute_of_day + 1
        days, total = divmod(total, MINUTES_PER_DAY)
        self.state.day += days
        self.state.hour, self.state.minute = divmod(total, MINUTES_PER_HOUR)
        completed = self._count_fast_forward_minute()
        self._emit_time()
        if completed:
            logger.debug("Fast-forward completed at %s", self.time_string())
            self.fast_forward_completed.emit()
        return completed

    def _count_fast_forward_minute(self) -> bool:
        ff = self.state.fast_forward
        if not ff.active:
            return False
        ff.remaining -= 1
        if ff.remaining > 0:
            return False
        self.state.fast_forward = FastForwardState()
        self.state.multiplier = 1.0
        return True

    def _emit_time(self) -> None:
        self.time_changed.emit(self.state.day, self.state.hour, self.state.minute)
