# particlefx

Building blocks for a 2D particle system. It has no dependencies and does no
drawing, so you can drive it from any loop.

## What is in it

- `particlefx.particle.Particle`: a dataclass with `position`, `velocity`, `life`,
  `color` (RGBA, default `(1, 1, 1, 1)`), `size` (default `5.0`), `angle` and
  `angular_velocity`. Vectors are plain tuples.
- `particlefx.shapes`: emitter shapes. Each one's `sample()` returns a spawn offset.
  - `PointShape()` always returns `(0.0, 0.0)`.
  - `BoxShape(width, height)` picks a point uniformly inside a rectangle centred on the origin.
  - `CircleShape(radius)` picks a point uniformly by area inside a disc.
- `particlefx.spawn`: strategies whose `spawn_count(dt)` says how many particles
  to create for a step.
  - `RateSpawnStrategy(rate)` spawns `rate` particles per second. Fractions carry over
    to later steps.
  - `BurstSpawnStrategy([Burst(time, count), ...])` keeps its own clock. It returns
    `count` for each burst whose `time` falls in the step just taken (after the
    previous time, up to and including the new one).
- `particlefx.modules`: behaviours whose `apply(particle, dt)` updates a particle in place.
  - `GravityModule(gravity=(0.0, -9.8))` adds `gravity * dt` to the velocity.
  - `NoiseModule(magnitude)` moves the position by `magnitude * dt` in a random direction.
  - `AngularVelocityModule(max_angular_velocity)` gives any particle with zero
    angular velocity a random one in `[-max, max]`.
  - `ColorFadeModule(start_color, end_color, max_life)` blends from `end_color`
    (life 0) to `start_color` (life `max_life`).
  - `SizeModule(start_size, end_size, max_life)` does the same for size.
  - `ColorFadeModule` and `SizeModule` raise `ValueError` when `max_life` is zero.
  - Subclass `Module` to write your own.

The random shapes and modules take an optional `rng` (a `random.Random`). Pass a
seeded one to get repeatable results.

## Example

```python
from particlefx.particle import Particle
from particlefx.shapes import CircleShape
from particlefx.spawn import RateSpawnStrategy
from particlefx.modules import GravityModule, SizeModule

shape = CircleShape(0.2)
spawner = RateSpawnStrategy(20.0)
modules = [GravityModule((0.0, -0.1)), SizeModule(0.05, 0.25, 2.0)]
particles = []

dt = 1 / 60
for _ in range(120):
    for _ in range(spawner.spawn_count(dt)):
        x, y = shape.sample()
        particles.append(Particle(position=(x, y + 0.2), velocity=(0.0, 0.2), life=2.0))
    for p in particles:
        for module in modules:
            module.apply(p, dt)
```

## What it does not do

There is no emitter class that owns the particles. The package does not move
particles by their velocity, reduce their life, or remove dead ones. Your own loop
does all of that. There is also no renderer, no blend-mode setting, no textures and
no window: drawing is up to you.

## Tests

```
pip install -e .[test]
pytest
```