"""Planet synthesis: type, physical attributes, biosphere and economy.

Every helper here is a pure function of its arguments and the stream it is
handed. :func:`synthesize_planet` draws from the stream in a fixed order
(name, type, size, atmosphere, life, color, rotation, population,
resources, trade goods, rings, moons, magnetic field, tectonics), so equal
streams always produce equal planets.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from stargen.engine.logger import ChannelLogger
from stargen.engine.rng import RandomStream
from stargen.world.models import HabitableZone, Planet, PlanetType, TectonicActivity
from stargen.world.moons import generate_moons
from stargen.world.names import generate_planet_name
from stargen.world.orbits import orbit_speed, rotation


SOLAR_TEMPERATURE = 5778.0
EARTH_EQUILIBRIUM = 278.0
COSMIC_BACKGROUND = 2.7

VOLCANIC_TEMPERATURE = 800.0
FROZEN_TEMPERATURE = 150.0
FREEZING_POINT = 273.0
BOILING_POINT = 373.0
EXTREMOPHILE_CEILING = 200.0
THERMOPHILE_FLOOR = 500.0
HABITABLE_BAND = (200.0, 400.0)

SIZE_RANGES: Dict[PlanetType, Tuple[float, float]] = {
    PlanetType.GAS_GIANT: (4.0, 12.0),
    PlanetType.ROCKY: (0.5, 2.0),
    PlanetType.DESERT: (0.5, 2.0),
    PlanetType.OCEAN: (0.5, 2.0),
    PlanetType.VOLCANIC: (0.5, 2.0),
    PlanetType.ICE_WORLD: (0.3, 1.5),
    PlanetType.DEAD: (0.2, 1.0),
}

DENSITY_FACTORS: Dict[PlanetType, float] = {
    PlanetType.GAS_GIANT: 0.3,
    PlanetType.ICE_WORLD: 0.6,
    PlanetType.ROCKY: 1.0,
    PlanetType.DESERT: 1.0,
    PlanetType.OCEAN: 1.0,
    PlanetType.VOLCANIC: 1.0,
    PlanetType.DEAD: 1.0,
}

ATMOSPHERES = (
    "Breathable", "Toxic", "Thin", "Dense", "Corrosive",
    "High CO2", "Methane", "Ammonia-based",
)

OCEAN_LIFE = (
    "Advanced aquatic civilization",
    "Primitive aquatic life",
    "Complex marine ecosystem",
    "Microscopic life",
    "Silicon-based organisms",
)

TERRESTRIAL_LIFE: Tuple[Tuple[float, str], ...] = (
    (0.1, "Advanced civilization"),
    (0.3, "Primitive civilization"),
    (0.6, "Complex life forms"),
    (0.8, "Simple life forms"),
)

GAS_GIANT_COLORS = ("#4169E1", "#87CEEB", "#DDA0DD", "#F0E68C")
PLANET_COLORS: Dict[PlanetType, str] = {
    PlanetType.ICE_WORLD: "#E0FFFF",
    PlanetType.DESERT: "#F4A460",
    PlanetType.OCEAN: "#006994",
    PlanetType.VOLCANIC: "#FF4500",
    PlanetType.DEAD: "#696969",
}
FALLBACK_COLOR = "#CCCCCC"

# (cumulative roll, exclusive upper bound of the population band)
POPULATION_BANDS: Tuple[Tuple[float, int], ...] = (
    (0.85, 100_000),
    (0.95, 1_000_000),
    (1.0, 1_000_000_000),  # Remainder of the roll
)
UNINHABITED_CHANCE = 0.7

RESOURCE_POOLS: Dict[PlanetType, Tuple[str, ...]] = {
    PlanetType.ROCKY: ("Tritanium", "Duranium", "Pergium"),
    PlanetType.GAS_GIANT: ("Deuterium", "Helium-3"),
    PlanetType.ICE_WORLD: ("Water", "Deuterium"),
    PlanetType.DESERT: ("Rare minerals", "Crystals"),
    PlanetType.OCEAN: ("Biological compounds",),
    PlanetType.VOLCANIC: ("Dilithium", "Rare earth elements"),
    PlanetType.DEAD: ("Metal ores", "Radioactive materials"),
}

TRADE_GOODS = (
    "Medical Supplies", "Scientific Data", "Artwork", "Luxury Items",
    "Industrial Equipment", "Agricultural Products", "Textiles", "Spices",
    "Technology Components", "Biological Samples",
)
TRADE_HUB_TYPES = (PlanetType.OCEAN, PlanetType.ROCKY)

RING_CHANCE = 0.6

TECTONIC_BUCKETS: Tuple[Tuple[float, TectonicActivity], ...] = (
    (0.2, TectonicActivity.NONE),
    (0.5, TectonicActivity.LOW),
    (1.0, TectonicActivity.MODERATE),
    (1.5, TectonicActivity.HIGH),
)

GAS_GIANT_WEATHER = ("Massive storms", "Atmospheric bands", "Lightning")


def calculate_temperature(distance: float, star_temperature: float) -> float:
    """Equilibrium temperature in Kelvin, floored at the cosmic background."""

    flux = (star_temperature / SOLAR_TEMPERATURE) ** 4 / distance ** 2
    return max((flux * 0.25) ** 0.25 * EARTH_EQUILIBRIUM, COSMIC_BACKGROUND)


def classify_planet(
    distance: float,
    habitable_zone: HabitableZone,
    temperature: float,
    rng: RandomStream,
) -> PlanetType:
    if distance < habitable_zone.inner * 0.7:
        return PlanetType.VOLCANIC if temperature > VOLCANIC_TEMPERATURE else PlanetType.ROCKY
    if habitable_zone.contains(distance):
        roll = rng.next()
        if roll < 0.4:
            return PlanetType.ROCKY
        if roll < 0.7:
            return PlanetType.OCEAN
        return PlanetType.DESERT
    if distance < habitable_zone.outer * 3:
        return PlanetType.GAS_GIANT if rng.chance(0.7) else PlanetType.ICE_WORLD
    return PlanetType.ICE_WORLD if rng.chance(0.8) else PlanetType.GAS_GIANT


def planet_size(planet_type: PlanetType, rng: RandomStream) -> float:
    return rng.uniform(*SIZE_RANGES[planet_type])


def planet_gravity(size: float, planet_type: PlanetType) -> float:
    return size ** 3 * DENSITY_FACTORS[planet_type]


def generate_atmosphere(
    planet_type: PlanetType, temperature: float, gravity: float, rng: RandomStream
) -> str:
    if planet_type is PlanetType.GAS_GIANT:
        return "Dense hydrogen/helium"
    if gravity < 0.3:
        return "None"
    if temperature < FROZEN_TEMPERATURE:
        return "Frozen"
    if temperature > VOLCANIC_TEMPERATURE:
        return "Toxic volcanic"
    if planet_type is PlanetType.OCEAN and FREEZING_POINT < temperature < BOILING_POINT:
        return "Breathable" if rng.chance(0.7) else "High humidity"
    return rng.choice(ATMOSPHERES)


def generate_life(
    planet_type: PlanetType, temperature: float, in_habitable_zone: bool, rng: RandomStream
) -> str:
    if planet_type is PlanetType.GAS_GIANT:
        return "Aerial microbes" if rng.chance(0.1) else "None"
    if planet_type is PlanetType.DEAD:
        return "None"
    if not in_habitable_zone and temperature < EXTREMOPHILE_CEILING:
        return "Extremophile bacteria" if rng.chance(0.2) else "None"
    if temperature > THERMOPHILE_FLOOR:
        return "Thermophiles" if rng.chance(0.1) else "None"
    if in_habitable_zone and planet_type is PlanetType.OCEAN:
        return rng.choice(OCEAN_LIFE)
    if in_habitable_zone and planet_type in (PlanetType.ROCKY, PlanetType.DESERT):
        roll = rng.next()
        for threshold, life in TERRESTRIAL_LIFE:
            if roll < threshold:
                return life
        return "Microbial life"
    return "Microbial life" if rng.chance(0.3) else "None"


def planet_color(
    planet_type: PlanetType,
    temperature: float,
    rng: RandomStream,
    logger: Optional[ChannelLogger] = None,
) -> str:
    if planet_type is PlanetType.ROCKY:
        return "#8B4513" if temperature > 400 else "#A0522D"
    if planet_type is PlanetType.GAS_GIANT:
        return rng.choice(GAS_GIANT_COLORS)
    color = PLANET_COLORS.get(planet_type)
    if color is None:
        if logger:
            logger.warning("No color mapped for planet type %r; using %s", planet_type, FALLBACK_COLOR)
        return FALLBACK_COLOR
    return color


def calculate_population(
    planet_type: PlanetType, temperature: float, in_habitable_zone: bool, rng: RandomStream
) -> int:
    if not in_habitable_zone or planet_type in (PlanetType.GAS_GIANT, PlanetType.DEAD):
        return 0
    if not HABITABLE_BAND[0] <= temperature <= HABITABLE_BAND[1]:
        return 0
    roll = rng.next()
    if roll < UNINHABITED_CHANCE:
        return 0
    for threshold, ceiling in POPULATION_BANDS[:-1]:
        if roll < threshold:
            return rng.below(ceiling)
    return rng.below(POPULATION_BANDS[-1][1])


def _unique_picks(pool: Sequence[str], count: int, rng: RandomStream) -> Tuple[str, ...]:
    selected: List[str] = []
    for _ in range(count):
        item = rng.choice(pool)
        if item not in selected:
            selected.append(item)
    return tuple(selected)


def generate_resources(planet_type: PlanetType, rng: RandomStream) -> Tuple[str, ...]:
    return _unique_picks(RESOURCE_POOLS[planet_type], rng.below(3), rng)


def generate_trade_goods(planet_type: PlanetType, rng: RandomStream) -> Tuple[str, ...]:
    trade_chance = 0.5 if planet_type in TRADE_HUB_TYPES else 0.3
    if rng.next() > trade_chance:
        return ()
    return _unique_picks(TRADE_GOODS, rng.below(2) + 1, rng)


def has_rings(planet_type: PlanetType, rng: RandomStream) -> bool:
    return planet_type is PlanetType.GAS_GIANT and rng.chance(RING_CHANCE)


def calculate_magnetic_field(size: float, planet_type: PlanetType, rng: RandomStream) -> float:
    if planet_type is PlanetType.GAS_GIANT:
        return size * 10
    if planet_type in (PlanetType.DEAD, PlanetType.ICE_WORLD):
        return 0.1
    return size * (rng.next() * 2)


def calculate_tectonic_activity(
    planet_type: PlanetType, temperature: float, size: float, rng: RandomStream
) -> TectonicActivity:
    if planet_type in (PlanetType.GAS_GIANT, PlanetType.DEAD):
        return TectonicActivity.NONE
    if planet_type is PlanetType.VOLCANIC:
        return TectonicActivity.EXTREME
    if size < 0.5:
        return TectonicActivity.NONE
    activity = size * (temperature / 300) * rng.next()
    for ceiling, level in TECTONIC_BUCKETS:
        if activity < ceiling:
            return level
    return TectonicActivity.EXTREME


def generate_weather(planet_type: PlanetType, temperature: float, gravity: float) -> Tuple[str, ...]:
    if planet_type is PlanetType.DEAD or gravity < 0.1:
        return ("None",)
    if planet_type is PlanetType.GAS_GIANT:
        return GAS_GIANT_WEATHER
    patterns: List[str] = []
    if temperature > FREEZING_POINT:
        patterns.append("Rain")
    if temperature < FREEZING_POINT:
        patterns.append("Snow")
    if planet_type is PlanetType.DESERT:
        patterns.append("Dust storms")
    if planet_type is PlanetType.OCEAN:
        patterns.extend(("Hurricanes", "Tidal patterns"))
    if planet_type is PlanetType.VOLCANIC:
        patterns.append("Ash clouds")
    if gravity > 2:
        patterns.append("Extreme weather")
    return tuple(patterns) if patterns else ("Calm",)


def synthesize_planet(
    system_id: str,
    system_name: str,
    index: int,
    distance: float,
    habitable_zone: HabitableZone,
    star_temperature: float,
    rng: RandomStream,
    logger: Optional[ChannelLogger] = None,
) -> Planet:
    planet_id = f"{system_id}-planet-{index}"
    name = generate_planet_name(system_name, index, rng)
    in_zone = habitable_zone.contains(distance)
    temperature = calculate_temperature(distance, star_temperature)
    planet_type = classify_planet(distance, habitable_zone, temperature, rng)
    size = planet_size(planet_type, rng)
    gravity = planet_gravity(size, planet_type)
    atmosphere = generate_atmosphere(planet_type, temperature, gravity, rng)
    life = generate_life(planet_type, temperature, in_zone, rng)
    color = planet_color(planet_type, temperature, rng, logger)
    rotation_speed, rotation_direction = rotation(rng)
    population = calculate_population(planet_type, temperature, in_zone, rng)
    resources = generate_resources(planet_type, rng)
    trade_goods = generate_trade_goods(planet_type, rng)
    rings = has_rings(planet_type, rng)
    moons = generate_moons(planet_id, name, planet_type, size, rng)
    magnetic_field = calculate_magnetic_field(size, planet_type, rng)
    tectonics = calculate_tectonic_activity(planet_type, temperature, size, rng)

    if logger:
        logger.debug(
            "%s: %s at %.3f AU, %.1f K, %d moons, population %d",
            name,
            planet_type.value,
            distance,
            temperature,
            len(moons),
            population,
        )
    return Planet(
        id=planet_id,
        name=name,
        planet_type=planet_type,
        color=color,
        size=size,
        gravity=gravity,
        magnetic_field=magnetic_field,
        tectonic_activity=tectonics,
        temperature=temperature,
        distance=distance,
        orbit_speed=orbit_speed(distance),
        rotation_speed=rotation_speed,
        rotation_direction=rotation_direction,
        atmosphere=atmosphere,
        life=life,
        population=population,
        resources=resources,
        trade_goods=trade_goods,
        rings=rings,
        moons=moons,
        weather_patterns=generate_weather(planet_type, temperature, gravity),
        in_habitable_zone=in_zone,
    )


__all__ = [
    "calculate_magnetic_field",
    "calculate_population",
    "calculate_tectonic_activity",
    "calculate_temperature",
    "classify_planet",
    "generate_atmosphere",
    "generate_life",
    "generate_resources",
    "generate_trade_goods",
    "generate_weather",
    "has_rings",
    "planet_color",
    "planet_gravity",
    "planet_size",
    "synthesize_planet",
]
