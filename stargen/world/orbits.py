"""Planet counts, orbital spacing and circular-orbit kinematics."""
from __future__ import annotations

import math
from typing import Dict, Sequence, Tuple

from pygame.math import Vector3

from stargen.engine.rng import RandomStream
from stargen.world.models import StarClass


# Upper bound of the uniform planet count for main-sequence classes.
BASE_PLANETS: Dict[StarClass, int] = {
    StarClass.O: 2,
    StarClass.B: 2,
    StarClass.A: 4,
    StarClass.F: 6,
    StarClass.G: 6,
    StarClass.K: 8,
    StarClass.M: 8,
}

REMNANT_BARREN_CHANCE = 0.7
REMNANT_MAX_PLANETS = 2

ORBIT_BASE = 0.4
ORBIT_STEP = 0.3
ORBIT_JITTER = 0.2  # Total width of the jitter window
ORBIT_SPEED_SCALE = 0.1

ROTATION_MIN = 0.01
ROTATION_RANGE = 0.1
RETROGRADE_CHANCE = 0.1


def planet_count(star_class: StarClass, rng: RandomStream) -> int:
    if star_class.is_remnant:
        if rng.chance(REMNANT_BARREN_CHANCE):
            return 0
        return rng.below(REMNANT_MAX_PLANETS + 1)
    return rng.below(BASE_PLANETS[star_class]) + 1


def orbit_distance(index: int, star_mass: float, rng: RandomStream) -> float:
    """Titius-Bode style spacing with a small independent jitter.

    Adjacent bases are at least ORBIT_STEP apart, wider than the whole
    jitter window, so distances still increase with the index.
    """

    base = ORBIT_BASE + ORBIT_STEP * 2 ** index
    jitter = (rng.next() - 0.5) * ORBIT_JITTER
    return (base + jitter) * math.sqrt(star_mass)


def orbit_speed(distance: float) -> float:
    """Angular speed from a simplified Kepler third law."""

    return math.sqrt(1.0 / distance ** 3) * ORBIT_SPEED_SCALE


def rotation(rng: RandomStream) -> Tuple[float, int]:
    """Return (speed, direction); direction is -1 for retrograde spin."""

    speed = rng.next() * ROTATION_RANGE + ROTATION_MIN
    direction = -1 if rng.chance(RETROGRADE_CHANCE) else 1
    return speed, direction


def orbital_position(
    distance: float,
    speed: float,
    time: float,
    center: Sequence[float] = (0.0, 0.0, 0.0),
) -> Vector3:
    angle = time * speed
    return Vector3(
        center[0] + math.cos(angle) * distance,
        center[1],
        center[2] + math.sin(angle) * distance,
    )


__all__ = [
    "BASE_PLANETS",
    "orbit_distance",
    "orbit_speed",
    "orbital_position",
    "planet_count",
    "rotation",
]
