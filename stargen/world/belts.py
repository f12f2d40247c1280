"""Asteroid belt placement between or beyond planetary orbits."""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from stargen.engine.logger import ChannelLogger
from stargen.engine.rng import RandomStream
from stargen.world.models import AsteroidBelt, BeltDensity


BELT_CHANCE = 0.4
GAP_MARGIN = 0.5  # Clearance kept from each bounding orbit
OUTER_OFFSET = 1.0
OUTER_WIDTH = 2.0
EMPTY_SYSTEM_ANCHOR = 1.0
STATION_CHANCE = 0.3
MAX_STATIONS = 4

BELT_RESOURCES = (
    "Dilithium", "Tritanium", "Duranium", "Latinum", "Quadrotriticale",
    "Pergium", "Topaline", "Zenite", "Corbomite", "Trellium-D",
)


def _open_gaps(distances: List[float]) -> List[Tuple[float, float]]:
    gaps = []
    for lower, upper in zip(distances, distances[1:]):
        inner = lower + GAP_MARGIN
        outer = upper - GAP_MARGIN
        if inner < outer:
            gaps.append((inner, outer))
    return gaps


def belt_radii(planet_distances: Iterable[float], rng: RandomStream) -> Tuple[float, float]:
    """Pick (inner, outer) radii for a belt.

    A gap between neighbouring orbits is used only when it is wide enough to
    leave a margin on both sides; otherwise the belt sits past the outermost
    planet.
    """

    distances = sorted(planet_distances)
    gaps = _open_gaps(distances) if len(distances) >= 2 else []
    if gaps:
        return rng.choice(gaps)
    anchor = distances[-1] if distances else EMPTY_SYSTEM_ANCHOR
    inner = anchor + OUTER_OFFSET
    return inner, inner + OUTER_WIDTH


def generate_asteroid_belt(
    system_id: str,
    system_name: str,
    planet_distances: Iterable[float],
    rng: RandomStream,
    logger: Optional[ChannelLogger] = None,
) -> AsteroidBelt:
    inner, outer = belt_radii(planet_distances, rng)
    density = rng.choice(tuple(BeltDensity))
    resources = BELT_RESOURCES[: rng.below(3) + 1]
    stations = rng.below(MAX_STATIONS + 1) if rng.chance(STATION_CHANCE) else 0
    if logger:
        logger.debug(
            "Belt for %s at %.2f-%.2f AU (%s, %d stations)",
            system_id,
            inner,
            outer,
            density.value,
            stations,
        )
    return AsteroidBelt(
        id=f"{system_id}-belt",
        name=f"{system_name} Asteroid Belt",
        inner_radius=inner,
        outer_radius=outer,
        density=density,
        resources=resources,
        mining_stations=stations,
    )


__all__ = ["BELT_CHANCE", "BELT_RESOURCES", "belt_radii", "generate_asteroid_belt"]
