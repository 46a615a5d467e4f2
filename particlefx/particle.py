"""The particle state that modules act on."""

from __future__ import annotations

from dataclasses import dataclass

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]


@dataclass(slots=True)
class Particle:
    """A single particle: kinematics, remaining life and appearance."""

    position: Vec2
    velocity: Vec2
    life: float
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    size: float = 5.0
    angle: float = 0.0
    angular_velocity: float = 0.0