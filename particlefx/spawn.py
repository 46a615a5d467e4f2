"""Strategies that decide how many particles to spawn each step."""

from __future__ import annotations

import abc
import math
from collections.abc import Iterable
from dataclasses import dataclass


class SpawnStrategy(abc.ABC):
    """Decides how many particles to emit during a time step."""

    @abc.abstractmethod
    def spawn_count(self, dt: float) -> int:
        """Return how many particles to spawn for a step of ``dt`` seconds."""


@dataclass(frozen=True)
class Burst:
    """``count`` particles released once the clock passes ``time``."""

    time: float
    count: int


class BurstSpawnStrategy(SpawnStrategy):
    """Releases fixed bursts at fixed times since creation."""

    def __init__(self, bursts: Iterable[Burst]) -> None:
        self.bursts = list(bursts)
        self.elapsed = 0.0

    def spawn_count(self, dt: float) -> int:
        old = self.elapsed
        self.elapsed += dt
        return sum(b.count for b in self.bursts if old < b.time <= self.elapsed)


class RateSpawnStrategy(SpawnStrategy):
    """Emits a steady ``rate`` particles per second, carrying fractions over."""

    def __init__(self, rate: float) -> None:
        self.rate = rate
        self._accumulator = 0.0

    def spawn_count(self, dt: float) -> int:
        self._accumulator += self.rate * dt
        to_spawn = math.floor(self._accumulator)
        self._accumulator -= to_spawn
        return to_spawn