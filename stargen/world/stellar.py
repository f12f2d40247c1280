"""Star classification, physical profiles and habitable zones."""
from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from stargen.engine.logger import ChannelLogger
from stargen.engine.rng import RandomStream
from stargen.world.models import HabitableZone, StarClass, StellarProfile


# Cumulative thresholds favouring cool, low-mass stars.
CLASS_THRESHOLDS: Tuple[Tuple[float, StarClass], ...] = (
    (0.76, StarClass.M),
    (0.88, StarClass.K),
    (0.96, StarClass.G),
    (0.98, StarClass.F),
    (0.994, StarClass.A),
    (0.998, StarClass.B),
    (0.9995, StarClass.O),
)

REMNANT_CLASSES = (StarClass.WHITE_DWARF, StarClass.NEUTRON_STAR, StarClass.BLACK_HOLE)

STELLAR_PROFILES: Dict[StarClass, StellarProfile] = {
    StarClass.O: StellarProfile(color="#9BB0FF", size=15.0, mass=20.0, age=0.01, temperature=30000.0),
    StarClass.B: StellarProfile(color="#AABFFF", size=8.0, mass=10.0, age=0.1, temperature=20000.0),
    StarClass.A: StellarProfile(color="#CAD7FF", size=2.5, mass=2.0, age=1.0, temperature=8500.0),
    StarClass.F: StellarProfile(color="#F8F7FF", size=1.5, mass=1.3, age=3.0, temperature=6500.0),
    StarClass.G: StellarProfile(color="#FFF4EA", size=1.0, mass=1.0, age=5.0, temperature=5800.0),
    StarClass.K: StellarProfile(color="#FFE4B5", size=0.8, mass=0.7, age=8.0, temperature=4500.0),
    StarClass.M: StellarProfile(color="#FFCC6F", size=0.4, mass=0.3, age=12.0, temperature=3200.0),
    StarClass.WHITE_DWARF: StellarProfile(color="#FFFFFF", size=0.01, mass=0.6, age=15.0, temperature=50000.0),
    StarClass.NEUTRON_STAR: StellarProfile(color="#E6E6FA", size=0.001, mass=1.4, age=2.0, temperature=100000.0),
    StarClass.BLACK_HOLE: StellarProfile(color="#000000", size=0.001, mass=10.0, age=5.0, temperature=0.0),
}

CLASS_DESCRIPTIONS: Dict[StarClass, str] = {
    StarClass.O: "massive blue giant",
    StarClass.B: "hot blue-white star",
    StarClass.A: "white main sequence star",
    StarClass.F: "yellow-white star",
    StarClass.G: "yellow dwarf star",
    StarClass.K: "orange dwarf star",
    StarClass.M: "red dwarf star",
    StarClass.WHITE_DWARF: "white dwarf remnant",
    StarClass.NEUTRON_STAR: "neutron star",
    StarClass.BLACK_HOLE: "stellar black hole",
}

# Flux thresholds for the runaway-greenhouse and maximum-greenhouse edges.
INNER_FLUX = 1.1
OUTER_FLUX = 0.53


def roll_star_class(rng: RandomStream, logger: Optional[ChannelLogger] = None) -> StarClass:
    roll = rng.next()
    for threshold, star_class in CLASS_THRESHOLDS:
        if roll < threshold:
            return star_class
    star_class = rng.choice(REMNANT_CLASSES)
    if logger:
        logger.info("Rolled stellar remnant %s (roll %.5f)", star_class.value, roll)
    return star_class


def stellar_profile(star_class: StarClass) -> StellarProfile:
    return STELLAR_PROFILES[star_class]


def calculate_luminosity(mass: float) -> float:
    """Simplified main-sequence mass-luminosity relation, L = M^4."""

    return mass ** 4


def calculate_habitable_zone(mass: float) -> HabitableZone:
    luminosity = calculate_luminosity(mass)
    return HabitableZone(
        inner=math.sqrt(luminosity / INNER_FLUX),
        outer=math.sqrt(luminosity / OUTER_FLUX),
    )


def describe_system(name: str, star_class: StarClass) -> str:
    return (
        f"The {name} system orbits a {CLASS_DESCRIPTIONS[star_class]}, creating unique "
        "conditions for planetary formation and potential life."
    )


__all__ = [
    "CLASS_THRESHOLDS",
    "STELLAR_PROFILES",
    "calculate_habitable_zone",
    "calculate_luminosity",
    "describe_system",
    "roll_star_class",
    "stellar_profile",
]
