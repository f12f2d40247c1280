import logging

import pytest

from stargen.engine.logger import GameLogger, LoggerConfig
from stargen.engine.rng import RandomStream, ScriptedStream
from stargen.world.models import PlanetType, TectonicActivity
from stargen.world.planets import (
    DENSITY_FACTORS,
    FALLBACK_COLOR,
    RESOURCE_POOLS,
    SIZE_RANGES,
    calculate_magnetic_field,
    calculate_population,
    calculate_tectonic_activity,
    calculate_temperature,
    classify_planet,
    generate_atmosphere,
    generate_life,
    generate_resources,
    generate_trade_goods,
    generate_weather,
    has_rings,
    planet_color,
    planet_gravity,
    planet_size,
    synthesize_planet,
)
from stargen.world.stellar import calculate_habitable_zone


SUN_ZONE = calculate_habitable_zone(1.0)
SUN_TEMPERATURE = 5800.0


def test_tables_cover_every_planet_type() -> None:
    for table in (SIZE_RANGES, DENSITY_FACTORS, RESOURCE_POOLS):
        assert set(table) == set(PlanetType)


def test_temperature_model() -> None:
    assert calculate_temperature(1.0, 5778.0) == pytest.approx(0.25 ** 0.25 * 278.0)
    assert calculate_temperature(0.5, 5778.0) > calculate_temperature(1.0, 5778.0)


def test_temperature_floor_for_black_hole() -> None:
    assert calculate_temperature(3.0, 0.0) == 2.7
    assert calculate_temperature(1e6, 3200.0) == 2.7


def test_habitable_zone_roll_selects_rocky() -> None:
    temperature = calculate_temperature(1.1, SUN_TEMPERATURE)
    assert classify_planet(1.1, SUN_ZONE, temperature, ScriptedStream([0.2])) is PlanetType.ROCKY
    assert classify_planet(1.1, SUN_ZONE, temperature, ScriptedStream([0.5])) is PlanetType.OCEAN
    assert classify_planet(1.1, SUN_ZONE, temperature, ScriptedStream([0.8])) is PlanetType.DESERT


def test_close_orbits_are_rocky_or_volcanic_without_a_draw() -> None:
    rng = ScriptedStream([0.5])
    assert classify_planet(0.3, SUN_ZONE, 900.0, rng) is PlanetType.VOLCANIC
    assert classify_planet(0.3, SUN_ZONE, 500.0, rng) is PlanetType.ROCKY
    assert rng.draws == 0


def test_outer_orbits() -> None:
    assert classify_planet(2.0, SUN_ZONE, 150.0, ScriptedStream([0.6])) is PlanetType.GAS_GIANT
    assert classify_planet(2.0, SUN_ZONE, 150.0, ScriptedStream([0.75])) is PlanetType.ICE_WORLD
    assert classify_planet(20.0, SUN_ZONE, 40.0, ScriptedStream([0.75])) is PlanetType.ICE_WORLD
    assert classify_planet(20.0, SUN_ZONE, 40.0, ScriptedStream([0.95])) is PlanetType.GAS_GIANT


@pytest.mark.parametrize("planet_type", list(PlanetType))
def test_size_ranges(planet_type) -> None:
    low, high = SIZE_RANGES[planet_type]
    assert planet_size(planet_type, ScriptedStream([0.0])) == pytest.approx(low)
    assert low <= planet_size(planet_type, ScriptedStream([0.9999])) < high


def test_gravity_density_factors() -> None:
    assert planet_gravity(10.0, PlanetType.GAS_GIANT) == pytest.approx(300.0)
    assert planet_gravity(1.0, PlanetType.ICE_WORLD) == pytest.approx(0.6)
    assert planet_gravity(2.0, PlanetType.ROCKY) == pytest.approx(8.0)


def test_atmosphere_rules() -> None:
    rng = ScriptedStream([0.5])
    assert generate_atmosphere(PlanetType.GAS_GIANT, 100.0, 50.0, rng) == "Dense hydrogen/helium"
    assert generate_atmosphere(PlanetType.ROCKY, 300.0, 0.2, rng) == "None"
    assert generate_atmosphere(PlanetType.ICE_WORLD, 100.0, 0.6, rng) == "Frozen"
    assert generate_atmosphere(PlanetType.VOLCANIC, 900.0, 1.0, rng) == "Toxic volcanic"
    assert generate_atmosphere(PlanetType.OCEAN, 300.0, 1.0, ScriptedStream([0.5])) == "Breathable"
    assert generate_atmosphere(PlanetType.OCEAN, 300.0, 1.0, ScriptedStream([0.8])) == "High humidity"
    assert generate_atmosphere(PlanetType.ROCKY, 300.0, 1.0, ScriptedStream([0.0])) == "Breathable"
    assert generate_atmosphere(PlanetType.DESERT, 300.0, 1.0, ScriptedStream([0.9999])) == "Ammonia-based"


def test_life_rules() -> None:
    assert generate_life(PlanetType.GAS_GIANT, 100.0, False, ScriptedStream([0.05])) == "Aerial microbes"
    assert generate_life(PlanetType.GAS_GIANT, 100.0, False, ScriptedStream([0.5])) == "None"
    assert generate_life(PlanetType.DEAD, 300.0, True, ScriptedStream([0.0])) == "None"
    assert generate_life(PlanetType.ICE_WORLD, 150.0, False, ScriptedStream([0.1])) == "Extremophile bacteria"
    assert generate_life(PlanetType.VOLCANIC, 600.0, False, ScriptedStream([0.05])) == "Thermophiles"
    assert generate_life(PlanetType.OCEAN, 300.0, True, ScriptedStream([0.0])) == "Advanced aquatic civilization"
    assert generate_life(PlanetType.ROCKY, 300.0, True, ScriptedStream([0.05])) == "Advanced civilization"
    assert generate_life(PlanetType.DESERT, 300.0, True, ScriptedStream([0.25])) == "Primitive civilization"
    assert generate_life(PlanetType.ROCKY, 300.0, True, ScriptedStream([0.5])) == "Complex life forms"
    assert generate_life(PlanetType.ROCKY, 300.0, True, ScriptedStream([0.7])) == "Simple life forms"
    assert generate_life(PlanetType.ROCKY, 300.0, True, ScriptedStream([0.9])) == "Microbial life"
    assert generate_life(PlanetType.ROCKY, 300.0, False, ScriptedStream([0.2])) == "Microbial life"
    assert generate_life(PlanetType.ROCKY, 300.0, False, ScriptedStream([0.5])) == "None"


def test_population_requires_habitable_conditions() -> None:
    rng = ScriptedStream([0.99, 0.5])
    assert calculate_population(PlanetType.GAS_GIANT, 300.0, True, rng) == 0
    assert calculate_population(PlanetType.DEAD, 300.0, True, rng) == 0
    assert calculate_population(PlanetType.ROCKY, 300.0, False, rng) == 0
    assert calculate_population(PlanetType.ROCKY, 450.0, True, rng) == 0
    assert calculate_population(PlanetType.ROCKY, 190.0, True, rng) == 0
    assert rng.draws == 0


def test_population_bands() -> None:
    assert calculate_population(PlanetType.ROCKY, 300.0, True, ScriptedStream([0.5])) == 0
    assert calculate_population(PlanetType.OCEAN, 300.0, True, ScriptedStream([0.8, 0.5])) == 50_000
    assert calculate_population(PlanetType.DESERT, 250.0, True, ScriptedStream([0.9, 0.5])) == 500_000
    assert calculate_population(PlanetType.ROCKY, 400.0, True, ScriptedStream([0.97, 0.5])) == 500_000_000


def test_resources_drop_duplicates() -> None:
    assert generate_resources(PlanetType.ROCKY, ScriptedStream([0.99, 0.0, 0.0])) == ("Tritanium",)
    assert generate_resources(PlanetType.VOLCANIC, ScriptedStream([0.0])) == ()
    picks = generate_resources(PlanetType.VOLCANIC, ScriptedStream([0.99, 0.0, 0.9]))
    assert picks == ("Dilithium", "Rare earth elements")


def test_trade_goods_chances() -> None:
    assert generate_trade_goods(PlanetType.ROCKY, ScriptedStream([0.6])) == ()
    assert generate_trade_goods(PlanetType.DESERT, ScriptedStream([0.4])) == ()
    goods = generate_trade_goods(PlanetType.OCEAN, ScriptedStream([0.5, 0.5, 0.0]))
    assert goods == ("Medical Supplies", "Agricultural Products")


def test_rings_only_on_gas_giants() -> None:
    assert has_rings(PlanetType.GAS_GIANT, ScriptedStream([0.5]))
    assert not has_rings(PlanetType.GAS_GIANT, ScriptedStream([0.95]))
    for planet_type in PlanetType:
        if planet_type is not PlanetType.GAS_GIANT:
            assert not has_rings(planet_type, ScriptedStream([0.0]))


def test_magnetic_field() -> None:
    assert calculate_magnetic_field(5.0, PlanetType.GAS_GIANT, ScriptedStream([0.5])) == pytest.approx(50.0)
    assert calculate_magnetic_field(0.8, PlanetType.DEAD, ScriptedStream([0.5])) == 0.1
    assert calculate_magnetic_field(1.5, PlanetType.ROCKY, ScriptedStream([0.5])) == pytest.approx(1.5)


def test_ice_world_is_magnetically_weak_and_quiet() -> None:
    rng = ScriptedStream([0.5])
    assert calculate_magnetic_field(1.0, PlanetType.ICE_WORLD, rng) == 0.1
    assert calculate_tectonic_activity(PlanetType.ICE_WORLD, 100.0, 1.0, rng) is TectonicActivity.NONE


@pytest.mark.parametrize(
    "planet_type, temperature, size, roll, expected",
    [
        (PlanetType.GAS_GIANT, 300.0, 8.0, 0.9, TectonicActivity.NONE),
        (PlanetType.DEAD, 300.0, 0.9, 0.9, TectonicActivity.NONE),
        (PlanetType.VOLCANIC, 900.0, 1.0, 0.0, TectonicActivity.EXTREME),
        (PlanetType.ROCKY, 300.0, 0.4, 0.9, TectonicActivity.NONE),
        (PlanetType.ROCKY, 300.0, 1.0, 0.1, TectonicActivity.NONE),
        (PlanetType.ROCKY, 300.0, 1.0, 0.3, TectonicActivity.LOW),
        (PlanetType.OCEAN, 300.0, 1.0, 0.7, TectonicActivity.MODERATE),
        (PlanetType.DESERT, 300.0, 2.0, 0.6, TectonicActivity.HIGH),
        (PlanetType.ROCKY, 300.0, 2.0, 0.9, TectonicActivity.EXTREME),
    ],
)
def test_tectonic_buckets(planet_type, temperature, size, roll, expected) -> None:
    assert calculate_tectonic_activity(planet_type, temperature, size, ScriptedStream([roll])) is expected


def test_weather_tags() -> None:
    assert generate_weather(PlanetType.DEAD, 300.0, 1.0) == ("None",)
    assert generate_weather(PlanetType.ROCKY, 300.0, 0.05) == ("None",)
    assert generate_weather(PlanetType.GAS_GIANT, 120.0, 100.0) == (
        "Massive storms",
        "Atmospheric bands",
        "Lightning",
    )
    assert generate_weather(PlanetType.OCEAN, 300.0, 1.0) == ("Rain", "Hurricanes", "Tidal patterns")
    assert generate_weather(PlanetType.DESERT, 250.0, 1.0) == ("Snow", "Dust storms")
    assert generate_weather(PlanetType.VOLCANIC, 900.0, 3.0) == ("Rain", "Ash clouds", "Extreme weather")
    assert generate_weather(PlanetType.ROCKY, 273.0, 1.0) == ("Calm",)


def test_planet_colors() -> None:
    rng = ScriptedStream([0.0])
    assert planet_color(PlanetType.ROCKY, 500.0, rng) == "#8B4513"
    assert planet_color(PlanetType.ROCKY, 300.0, rng) == "#A0522D"
    assert planet_color(PlanetType.GAS_GIANT, 100.0, rng) == "#4169E1"
    assert planet_color(PlanetType.OCEAN, 300.0, rng) == "#006994"


def test_unmapped_color_falls_back_and_logs(caplog) -> None:
    logger = GameLogger(LoggerConfig(level=logging.DEBUG, channels={"planets": True}))
    caplog.set_level(logging.DEBUG, logger="stargen")
    color = planet_color("Crystal", 300.0, ScriptedStream([0.0]), logger.channel("planets"))
    assert color == FALLBACK_COLOR
    assert any("No color mapped" in record.getMessage() for record in caplog.records)


def test_synthesized_planet_in_habitable_zone() -> None:
    planet = synthesize_planet("system-0-0-0", "Vega", 0, 1.1, SUN_ZONE, SUN_TEMPERATURE, ScriptedStream([0.2]))
    assert planet.planet_type is PlanetType.ROCKY
    assert planet.name == "Vega b"
    assert planet.id == "system-0-0-0-planet-0"
    assert planet.in_habitable_zone
    assert planet.temperature == pytest.approx(calculate_temperature(1.1, SUN_TEMPERATURE))
    assert not planet.rings
    assert not planet.discovered


def test_distant_gas_giant_without_rings() -> None:
    planet = synthesize_planet("system-0-0-0", "Vega", 4, 20.0, SUN_ZONE, SUN_TEMPERATURE, ScriptedStream([0.95]))
    assert planet.planet_type is PlanetType.GAS_GIANT
    assert planet.rings is False
    assert planet.atmosphere == "Dense hydrogen/helium"
    assert planet.population == 0
    assert 2 <= len(planet.moons) <= 9
    assert planet.magnetic_field == pytest.approx(planet.size * 10)


def test_synthesis_is_repeatable() -> None:
    first = synthesize_planet("s", "Deneb", 2, 1.2, SUN_ZONE, SUN_TEMPERATURE, RandomStream(99))
    second = synthesize_planet("s", "Deneb", 2, 1.2, SUN_ZONE, SUN_TEMPERATURE, RandomStream(99))
    assert first == second
