"""Injectable random sources for item creation."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
import random


class RandomSource(ABC):
    @abstractmethod
    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both ends inclusive."""
        raise NotImplementedError


class SeededRandom(RandomSource):
    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def uniform_int(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"Invalid range: {low} to {high}")
        return self._rng.randint(low, high)


class FixedRandom(RandomSource):
    """Replays scripted values, clamped into the requested range."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self.calls: List[tuple[int, int]] = []

    def uniform_int(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"Invalid range: {low} to {high}")
        self.calls.append((low, high))
        if not self._values:
            raise RuntimeError("FixedRandom ran out of values")
        value = self._values.pop(0)
        return max(low, min(high, value))
