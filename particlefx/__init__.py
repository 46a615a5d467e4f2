"""Building blocks for a 2D particle system: particles, shapes, spawning and modules."""

__version__ = "0.1.0"
__all__ = ["particle", "modules", "shapes", "spawn"]