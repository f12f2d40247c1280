"""Deterministic star-system generation for a galaxy coordinate."""
from __future__ import annotations

import time
from typing import List, Optional

from stargen.engine.logger import GameLogger
from stargen.engine.rng import RandomStream
from stargen.world.anomalies import ANOMALY_CHANCE, generate_anomaly
from stargen.world.belts import BELT_CHANCE, generate_asteroid_belt
from stargen.world.models import Planet, StarSystem
from stargen.world.names import generate_system_name
from stargen.world.orbits import orbit_distance, planet_count
from stargen.world.planets import synthesize_planet
from stargen.world.politics import assess_threat, assign_faction
from stargen.world.stellar import (
    calculate_habitable_zone,
    describe_system,
    roll_star_class,
    stellar_profile,
)


def system_id(x: int, y: int, z: int) -> str:
    return f"system-{x}-{y}-{z}"


def generate_star_system(
    x: int,
    y: int,
    z: int,
    rng: RandomStream,
    logger: Optional[GameLogger] = None,
) -> StarSystem:
    """Build the complete system for ``(x, y, z)`` from ``rng``.

    The stream is consumed in a fixed order (name, star class, faction,
    threat, planet count, each planet's orbit then body, belt, anomaly), so
    two equal streams yield identical systems. Planets are kept in generation
    order, which is also order of increasing distance.
    """

    stellar_log = logger.channel("stellar") if logger else None
    orbit_log = logger.channel("orbits") if logger else None
    planet_log = logger.channel("planets") if logger else None
    belt_log = logger.channel("belts") if logger else None

    identifier = system_id(x, y, z)
    name = generate_system_name(rng)
    star_class = roll_star_class(rng, stellar_log)
    star = stellar_profile(star_class)
    habitable_zone = calculate_habitable_zone(star.mass)
    faction = assign_faction(rng)
    threat_level = assess_threat(rng)

    planets: List[Planet] = []
    for index in range(planet_count(star_class, rng)):
        distance = orbit_distance(index, star.mass, rng)
        if orbit_log:
            orbit_log.debug("%s: orbit %d at %.3f AU", identifier, index, distance)
        planets.append(
            synthesize_planet(
                identifier,
                name,
                index,
                distance,
                habitable_zone,
                star.temperature,
                rng,
                planet_log,
            )
        )

    asteroid_belt = None
    if rng.chance(BELT_CHANCE):
        asteroid_belt = generate_asteroid_belt(
            identifier, name, [planet.distance for planet in planets], rng, belt_log
        )
    anomaly = generate_anomaly(identifier, rng) if rng.chance(ANOMALY_CHANCE) else None

    if stellar_log:
        stellar_log.debug(
            "%s (%s): class %s, %d planets, HZ %.3f-%.3f AU",
            identifier,
            name,
            star_class.value,
            len(planets),
            habitable_zone.inner,
            habitable_zone.outer,
        )
    return StarSystem(
        id=identifier,
        name=name,
        coordinates=(x, y, z),
        star_class=star_class,
        star=star,
        description=describe_system(name, star_class),
        planets=tuple(planets),
        habitable_zone=habitable_zone,
        asteroid_belt=asteroid_belt,
        anomaly=anomaly,
        faction=faction,
        threat_level=threat_level,
    )


class StarSystemGenerator:
    """Generate systems whose streams are derived from a base seed.

    Each coordinate gets its own stream, so systems can be produced in any
    order, or concurrently, with identical results.
    """

    def __init__(self, seed: int | str = 0, logger: Optional[GameLogger] = None) -> None:
        self.seed = seed
        self.logger = logger

    def stream_for(self, x: int, y: int, z: int) -> RandomStream:
        return RandomStream.seeded(self.seed, "system", x, y, z)

    def generate(self, x: int, y: int, z: int) -> StarSystem:
        start_time = time.perf_counter()
        system = generate_star_system(x, y, z, self.stream_for(x, y, z), self.logger)
        if self.logger:
            elapsed_ms = (time.perf_counter() - start_time) * 1000.0
            self.logger.channel("galaxy").debug("Generated %s in %.2f ms", system.id, elapsed_ms)
        return system


__all__ = ["StarSystemGenerator", "generate_star_system", "system_id"]
