"""Record types produced by the star-system generator."""
from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


Coordinates = Tuple[int, int, int]


class StarClass(enum.Enum):
    """Spectral class, or remnant tag for stellar corpses."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"
    WHITE_DWARF = "WD"
    NEUTRON_STAR = "NS"
    BLACK_HOLE = "BH"

    @property
    def is_remnant(self) -> bool:
        return self in (StarClass.WHITE_DWARF, StarClass.NEUTRON_STAR, StarClass.BLACK_HOLE)


class PlanetType(enum.Enum):
    ROCKY = "Rocky"
    GAS_GIANT = "Gas Giant"
    ICE_WORLD = "Ice World"
    DESERT = "Desert"
    OCEAN = "Ocean"
    VOLCANIC = "Volcanic"
    DEAD = "Dead"


class TectonicActivity(enum.Enum):
    NONE = "None"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    EXTREME = "Extreme"


class MoonType(enum.Enum):
    ROCKY = "Rocky"
    ICE = "Ice"
    CAPTURED_ASTEROID = "Captured Asteroid"


class BeltDensity(enum.Enum):
    SPARSE = "Sparse"
    MODERATE = "Moderate"
    DENSE = "Dense"


class AnomalyType(enum.Enum):
    WORMHOLE = "Wormhole"
    SPATIAL_RIFT = "Spatial Rift"
    SUBSPACE_DISTORTION = "Subspace Distortion"
    QUANTUM_SINGULARITY = "Quantum Singularity"
    TIME_DISTORTION = "Time Distortion"


class Stability(enum.Enum):
    STABLE = "Stable"
    UNSTABLE = "Unstable"
    DETERIORATING = "Deteriorating"
    DANGEROUS = "Dangerous"


class ThreatLevel(enum.Enum):
    SAFE = "Safe"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    EXTREME = "Extreme"


@dataclass(frozen=True)
class StellarProfile:
    color: str
    size: float
    mass: float  # Solar masses
    age: float  # Billion years
    temperature: float  # Kelvin

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "size": self.size,
            "mass": self.mass,
            "age": self.age,
            "temperature": self.temperature,
        }


@dataclass(frozen=True)
class HabitableZone:
    """Orbital band (AU) where liquid surface water is thermally possible."""

    inner: float
    outer: float

    def contains(self, distance: float) -> bool:
        return self.inner <= distance <= self.outer

    def to_dict(self) -> Dict[str, Any]:
        return {"inner": self.inner, "outer": self.outer}


@dataclass(frozen=True)
class Moon:
    id: str
    name: str
    color: str
    size: float
    distance: float  # From the parent planet
    orbit_speed: float
    moon_type: MoonType
    tidally_locked: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "size": self.size,
            "distance": self.distance,
            "orbit_speed": self.orbit_speed,
            "type": self.moon_type.value,
            "tidally_locked": self.tidally_locked,
        }


@dataclass
class Planet:
    """A generated planet.

    Only ``discovered`` is expected to change after generation.
    """

    id: str
    name: str
    planet_type: PlanetType
    color: str
    size: float  # Earth radii
    gravity: float  # Earth = 1.0
    magnetic_field: float  # Earth = 1.0
    tectonic_activity: TectonicActivity
    temperature: float  # Kelvin
    distance: float  # AU from the star
    orbit_speed: float  # Radians per second
    rotation_speed: float
    rotation_direction: int  # +1 prograde, -1 retrograde
    atmosphere: str
    life: str
    population: int
    resources: Tuple[str, ...]
    trade_goods: Tuple[str, ...]
    rings: bool
    moons: Tuple[Moon, ...]
    weather_patterns: Tuple[str, ...]
    in_habitable_zone: bool
    discovered: bool = False

    @property
    def retrograde(self) -> bool:
        return self.rotation_direction < 0

    @property
    def signed_rotation_speed(self) -> float:
        return self.rotation_speed * self.rotation_direction

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.planet_type.value,
            "color": self.color,
            "size": self.size,
            "gravity": self.gravity,
            "magnetic_field": self.magnetic_field,
            "tectonic_activity": self.tectonic_activity.value,
            "temperature": self.temperature,
            "distance": self.distance,
            "orbit_speed": self.orbit_speed,
            "rotation_speed": self.rotation_speed,
            "rotation_direction": self.rotation_direction,
            "atmosphere": self.atmosphere,
            "life": self.life,
            "population": self.population,
            "resources": list(self.resources),
            "trade_goods": list(self.trade_goods),
            "rings": self.rings,
            "moons": [moon.to_dict() for moon in self.moons],
            "weather_patterns": list(self.weather_patterns),
            "in_habitable_zone": self.in_habitable_zone,
            "discovered": self.discovered,
        }


@dataclass(frozen=True)
class AsteroidBelt:
    id: str
    name: str
    inner_radius: float
    outer_radius: float
    density: BeltDensity
    resources: Tuple[str, ...]
    mining_stations: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "inner_radius": self.inner_radius,
            "outer_radius": self.outer_radius,
            "density": self.density.value,
            "resources": list(self.resources),
            "mining_stations": self.mining_stations,
        }


@dataclass(frozen=True)
class SpaceAnomaly:
    id: str
    name: str
    anomaly_type: AnomalyType
    description: str
    effects: Tuple[str, ...]
    stability: Stability

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.anomaly_type.value,
            "description": self.description,
            "effects": list(self.effects),
            "stability": self.stability.value,
        }


@dataclass
class StarSystem:
    """A fully generated star system for one galaxy coordinate."""

    id: str
    name: str
    coordinates: Coordinates
    star_class: StarClass
    star: StellarProfile
    description: str
    planets: Tuple[Planet, ...]
    habitable_zone: HabitableZone
    asteroid_belt: Optional[AsteroidBelt]
    anomaly: Optional[SpaceAnomaly]
    faction: Optional[str]
    threat_level: ThreatLevel
    discovered: bool = False

    @property
    def moon_count(self) -> int:
        return sum(len(planet.moons) for planet in self.planets)

    @property
    def population(self) -> int:
        return sum(planet.population for planet in self.planets)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "coordinates": list(self.coordinates),
            "star_class": self.star_class.value,
            "star": self.star.to_dict(),
            "description": self.description,
            "planets": [planet.to_dict() for planet in self.planets],
            "habitable_zone": self.habitable_zone.to_dict(),
            "asteroid_belt": self.asteroid_belt.to_dict() if self.asteroid_belt else None,
            "anomaly": self.anomaly.to_dict() if self.anomaly else None,
            "faction": self.faction,
            "threat_level": self.threat_level.value,
            "discovered": self.discovered,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


__all__ = [
    "AnomalyType",
    "AsteroidBelt",
    "BeltDensity",
    "Coordinates",
    "HabitableZone",
    "Moon",
    "MoonType",
    "Planet",
    "PlanetType",
    "SpaceAnomaly",
    "Stability",
    "StarClass",
    "StarSystem",
    "StellarProfile",
    "TectonicActivity",
    "ThreatLevel",
]
