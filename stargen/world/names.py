"""Display names for systems and planets."""
from __future__ import annotations

from stargen.engine.rng import RandomStream


STAR_PREFIXES = (
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta", "Iota", "Kappa",
    "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho", "Sigma", "Tau", "Upsilon",
    "Phi", "Chi", "Psi", "Omega",
)

STAR_SUFFIXES = (
    "Centauri", "Tauri", "Orionis", "Cygni", "Leonis", "Virginis", "Scorpii", "Aquarii",
    "Pegasi", "Andromedae", "Cassiopeiae", "Ursae", "Draconis", "Lyrae", "Aquilae",
)

CATALOGUE_PREFIXES = (
    "Kepler", "Gliese", "Proxima", "Trappist", "HD", "TOI", "K2", "WASP", "HAT",
    "XO", "TrES", "CoRoT", "Qatar", "KELT", "MASCARA",
)

PROPER_NAMES = (
    "Qo'noS", "Vulcan", "Risa", "Bajor", "Cardassia", "Ferenginar", "Romulus", "Remus",
    "Andoria", "Tellar", "Trill", "Betazed", "Rura Penthe", "Talos", "Rigel", "Deneb",
    "Altair", "Vega", "Sirius", "Arcturus", "Capella", "Aldebaran", "Antares", "Pollux",
)

PROPER_NAME_CHANCE = 0.3
DESIGNATION_CHANCE = 0.7


def planet_letter(index: int) -> str:
    # Planets are lettered from "b"; the star itself is "a".
    return chr(ord("b") + index)


def generate_system_name(rng: RandomStream) -> str:
    if rng.chance(PROPER_NAME_CHANCE):
        return rng.choice(PROPER_NAMES)
    return f"{rng.choice(STAR_PREFIXES)} {rng.choice(STAR_SUFFIXES)}"


def generate_planet_name(system_name: str, index: int, rng: RandomStream) -> str:
    """Either "<system> c" or a survey catalogue entry such as "Kepler-442c"."""

    letter = planet_letter(index)
    if rng.chance(DESIGNATION_CHANCE):
        return f"{system_name} {letter}"
    catalogue = rng.choice(CATALOGUE_PREFIXES)
    return f"{catalogue}-{rng.below(999) + 1}{letter}"


__all__ = ["generate_planet_name", "generate_system_name", "planet_letter"]
