"""Deterministic RNG wrapper for reproducible cities and cases."""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import random
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def derive_seed(seed: int, salt: str) -> int:
    digest = hashlib.sha256(f"{seed}:{salt}".encode("ascii")).hexdigest()
    return int(digest[:16], 16)


@dataclass
class Rng:
    current_seed: int

    def __post_init__(self) -> None:
        self._random = random.Random(self.current_seed)

    def seed(self, value: int) -> None:
        """Reset the stream so the next draws repeat those of a fresh Rng(value)."""
        self.current_seed = value
        self._random.seed(value)

    def fork(self, salt: str) -> "Rng":
        return Rng(derive_seed(self.current_seed, salt))

    def range_int(self, a: int, b: int) -> int:
        low, high = (a, b) if a <= b else (b, a)
        return self._random.randint(low, high)

    def range_float(self, a: float, b: float) -> float:
        low, high = (a, b) if a <= b else (b, a)
        return self._random.uniform(low, high)

    def chance(self, p: float) -> bool:
        p = max(0.0, min(1.0, p))
        if p <= 0.0:
            return False
        if p >= 1.0:
            return True
        return self._random.random() < p

    def choice(self, seq: Sequence[T]) -> T | None:
        if not seq:
            return None
        return seq[self._random.randrange(len(seq))]

    def sample(self, seq: Sequence[T], k: int) -> list[T]:
        items = list(seq)
        return self._random.sample(items, max(0, min(k, len(items))))

    def weighted_choice(self, items: Iterable[tuple[T, float]]) -> T:
        items_list = list(items)
        total = sum(weight for _, weight in items_list)
        if total <= 0:
            raise ValueError("weighted_choice requires positive total weight")
        pick = self._random.random() * total
        cumulative = 0.0
        for value, weight in items_list:
            cumulative += weight
            if pick <= cumulative:
                return value
        return items_list[-1][0]
