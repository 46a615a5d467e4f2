"""Emitter shapes: where new particles appear relative to the emitter."""

from __future__ import annotations

import abc
import math
import random

from .particle import Vec2


class EmitterShape(abc.ABC):
    """A region from which spawn offsets are drawn."""

    @abc.abstractmethod
    def sample(self) -> Vec2:
        """Return a random offset inside the shape."""


class BoxShape(EmitterShape):
    """An axis-aligned rectangle centred on the emitter."""

    def __init__(
        self, width: float, height: float, rng: random.Random | None = None
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()

    def sample(self) -> Vec2:
        half_w = self.width * 0.5
        half_h = self.height * 0.5
        return (self._rng.uniform(-half_w, half_w), self._rng.uniform(-half_h, half_h))


class CircleShape(EmitterShape):
    """A disc centred on the emitter, sampled uniformly by area."""

    def __init__(self, radius: float, rng: random.Random | None = None) -> None:
        self.radius = radius
        self._rng = rng if rng is not None else random.Random()

    def sample(self) -> Vec2:
        r = self.radius * math.sqrt(self._rng.random())
        theta = self._rng.random() * math.tau
        return (r * math.cos(theta), r * math.sin(theta))


class PointShape(EmitterShape):
    """Every particle starts exactly at the emitter."""

    def sample(self) -> Vec2:
        return (0.0, 0.0)