"""Simulation core of a Pang-style arcade game: rules, geometry, shapes, world and texture loading."""

__version__ = "0.1.0"
__all__ = ["rules", "geometry", "texture", "shape", "entities", "world"]