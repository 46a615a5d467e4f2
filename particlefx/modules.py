"""Modules that change particles each simulation step."""

from __future__ import annotations

import abc
import math
import random

from .particle import Particle, Vec2, Vec4


def _life_fraction(life: float, max_life: float) -> float:
    return min(max(life / max_life, 0.0), 1.0)


def _check_max_life(max_life: float) -> float:
    if max_life == 0:
        raise ValueError("max_life must be non-zero")
    return max_life


class Module(abc.ABC):
    """Something applied to every live particle on every update."""

    @abc.abstractmethod
    def apply(self, particle: Particle, dt: float) -> None:
        """Update ``particle`` in place for a step of ``dt`` seconds."""


class GravityModule(Module):
    """Accelerates particles by a constant vector."""

    def __init__(self, gravity: Vec2 = (0.0, -9.8)) -> None:
        self.gravity = gravity

    def apply(self, particle: Particle, dt: float) -> None:
        gx, gy = self.gravity
        vx, vy = particle.velocity
        particle.velocity = (vx + gx * dt, vy + gy * dt)


class NoiseModule(Module):
    """Nudges particles in a random direction at a fixed speed."""

    def __init__(self, magnitude: float, rng: random.Random | None = None) -> None:
        self.magnitude = magnitude
        self._rng = rng if rng is not None else random.Random()

    def apply(self, particle: Particle, dt: float) -> None:
        rx = self._rng.uniform(-1.0, 1.0)
        ry = self._rng.uniform(-1.0, 1.0)
        length = math.hypot(rx, ry)
        if length > 0.0:
            rx, ry = rx / length, ry / length
        step = self.magnitude * dt
        px, py = particle.position
        particle.position = (px + rx * step, py + ry * step)


class AngularVelocityModule(Module):
    """Gives non-spinning particles a random spin within ±max."""

    def __init__(
        self, max_angular_velocity: float, rng: random.Random | None = None
    ) -> None:
        self.max_angular_velocity = max_angular_velocity
        self._rng = rng if rng is not None else random.Random()

    def apply(self, particle: Particle, dt: float) -> None:
        if particle.angular_velocity == 0.0:
            limit = self.max_angular_velocity
            particle.angular_velocity = self._rng.uniform(-limit, limit)


class ColorFadeModule(Module):
    """Blends colour from ``start_color`` at full life to ``end_color`` at death."""

    def __init__(self, start_color: Vec4, end_color: Vec4, max_life: float) -> None:
        self.start_color = start_color
        self.end_color = end_color
        self.max_life = _check_max_life(max_life)

    def apply(self, particle: Particle, dt: float) -> None:
        t = _life_fraction(particle.life, self.max_life)
        particle.color = tuple(
            e + (s - e) * t for s, e in zip(self.start_color, self.end_color)
        )


class SizeModule(Module):
    """Scales size from ``start_size`` at full life to ``end_size`` at death."""

    def __init__(self, start_size: float, end_size: float, max_life: float) -> None:
        self.start_size = start_size
        self.end_size = end_size
        self.max_life = _check_max_life(max_life)

    def apply(self, particle: Particle, dt: float) -> None:
        t = _life_fraction(particle.life, self.max_life)
        particle.size = self.end_size + (self.start_size - self.end_size) * t