"""Time helpers using integer game-minutes."""

from __future__ import annotations

from dataclasses import dataclass

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY

UNBOUNDED = 0


@dataclass(frozen=True)
class TimeWindow:
    """Absolute game-minute window; an end of 0 leaves the window open."""

    start: int
    end: int = UNBOUNDED

    @property
    def unbounded(self) -> bool:
        return self.end == UNBOUNDED

    def is_active(self, now: int) -> bool:
        if now < self.start:
            return False
        return self.unbounded or now <= self.end

    def overlaps(self, other: "TimeWindow") -> bool:
        if not self.unbounded and self.end < other.start:
            return False
        if not other.unbounded and other.end < self.start:
            return False
        return True


def split_minutes(total: int) -> tuple[int, int, int]:
    """Split absolute minutes (0 = day 1, 00:00) into (day, hour, minute)."""
    total = max(0, total)
    day, minute_of_day = divmod(total, MINUTES_PER_DAY)
    hour, minute = divmod(minute_of_day, MINUTES_PER_HOUR)
    return day + 1, hour, minute


def join_minutes(day: int, hour: int, minute: int) -> int:
    return (max(1, day) - 1) * MINUTES_PER_DAY + hour * MINUTES_PER_HOUR + minute


def format_clock(day: int, hour: int, minute: int) -> str:
    return f"Day {day} {hour:02d}:{minute:02d}"
