"""Moon generation for planets."""
from __future__ import annotations

import math
from typing import Sequence, Tuple

from pygame.math import Vector3

from stargen.engine.rng import RandomStream
from stargen.world.models import Moon, MoonType, PlanetType
from stargen.world.orbits import orbital_position


GIANT_MOON_COLORS = ("#CCCCCC", "#E0FFFF", "#8B4513")
GIANT_MIN_MOONS = 2
GIANT_MOON_SPREAD = 8  # 2-9 moons
GIANT_MOON_SPACING = 2.0
GIANT_MOON_SIZE = (0.1, 0.4)
GIANT_MOON_SPEED_SCALE = 0.5
GIANT_ICE_CHANCE = 0.6
GIANT_TIDAL_LOCK_CHANCE = 0.8

# Terrestrial bodies that can hold a single captured or co-formed moon.
LONE_MOON_TYPES = frozenset(
    {PlanetType.ROCKY, PlanetType.DESERT, PlanetType.OCEAN, PlanetType.VOLCANIC}
)
LONE_MOON_MIN_PLANET_SIZE = 0.8
LONE_MOON_CHANCE = 0.4
LONE_MOON_COLOR = "#CCCCCC"
LONE_MOON_SIZE = (0.05, 0.25)
LONE_MOON_DISTANCE = 3.0
LONE_MOON_SPEED = 0.1
LONE_TIDAL_LOCK_CHANCE = 0.5


def _giant_moons(planet_id: str, planet_name: str, rng: RandomStream) -> Tuple[Moon, ...]:
    count = rng.below(GIANT_MOON_SPREAD) + GIANT_MIN_MOONS
    moons = []
    for index in range(count):
        distance = (index + 1) * GIANT_MOON_SPACING
        moons.append(
            Moon(
                id=f"{planet_id}-moon-{index}",
                name=f"{planet_name} {_roman(index + 1)}",
                color=rng.choice(GIANT_MOON_COLORS),
                size=rng.uniform(*GIANT_MOON_SIZE),
                distance=distance,
                orbit_speed=math.sqrt(1.0 / distance ** 3) * GIANT_MOON_SPEED_SCALE,
                moon_type=MoonType.ICE if rng.chance(GIANT_ICE_CHANCE) else MoonType.ROCKY,
                tidally_locked=rng.chance(GIANT_TIDAL_LOCK_CHANCE),
            )
        )
    return tuple(moons)


def _roman(value: int) -> str:
    numerals = ((10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"))
    parts = []
    for amount, numeral in numerals:
        while value >= amount:
            parts.append(numeral)
            value -= amount
    return "".join(parts)


def generate_moons(
    planet_id: str,
    planet_name: str,
    planet_type: PlanetType,
    planet_size: float,
    rng: RandomStream,
) -> Tuple[Moon, ...]:
    if planet_type is PlanetType.GAS_GIANT:
        return _giant_moons(planet_id, planet_name, rng)
    if planet_type not in LONE_MOON_TYPES or planet_size <= LONE_MOON_MIN_PLANET_SIZE:
        return ()
    if rng.chance(LONE_MOON_CHANCE):
        return (
            Moon(
                id=f"{planet_id}-moon-0",
                name=f"{planet_name} I",
                color=LONE_MOON_COLOR,
                size=rng.uniform(*LONE_MOON_SIZE),
                distance=LONE_MOON_DISTANCE,
                orbit_speed=LONE_MOON_SPEED,
                moon_type=MoonType.ROCKY,
                tidally_locked=rng.chance(LONE_TIDAL_LOCK_CHANCE),
            ),
        )
    return ()


def moon_position(planet_position: Sequence[float], moon: Moon, time: float) -> Vector3:
    return orbital_position(moon.distance, moon.orbit_speed, time, center=planet_position)


__all__ = ["generate_moons", "moon_position"]
