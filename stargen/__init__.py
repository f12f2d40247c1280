"""Procedural star-system generation from galaxy coordinates."""

from .engine.rng import RandomStream, ScriptedStream
from .world.galaxy import CoordinateOutOfBounds, Galaxy, GalaxyBuilder
from .world.system import StarSystemGenerator, generate_star_system

__all__ = [
    "CoordinateOutOfBounds",
    "Galaxy",
    "GalaxyBuilder",
    "RandomStream",
    "ScriptedStream",
    "StarSystemGenerator",
    "generate_star_system",
]
