"""Faction control and threat rating for generated systems."""
from __future__ import annotations

from typing import Optional, Tuple

from stargen.engine.rng import RandomStream
from stargen.world.models import ThreatLevel


FACTIONS = (
    "Federation", "Klingon Empire", "Romulan Star Empire",
    "Cardassian Union", "Dominion", "Borg Collective",
    "Ferengi Alliance", "Neutral Zone", "Independent",
)
FACTION_CHANCE = 0.3

THREAT_LADDER: Tuple[Tuple[float, ThreatLevel], ...] = (
    (0.4, ThreatLevel.SAFE),
    (0.7, ThreatLevel.LOW),
    (0.9, ThreatLevel.MODERATE),
    (0.98, ThreatLevel.HIGH),
)


def assign_faction(rng: RandomStream) -> Optional[str]:
    """Return the controlling faction, or None for unclaimed space."""

    if rng.chance(FACTION_CHANCE):
        return rng.choice(FACTIONS)
    return None


def assess_threat(rng: RandomStream) -> ThreatLevel:
    roll = rng.next()
    for threshold, level in THREAT_LADDER:
        if roll < threshold:
            return level
    return ThreatLevel.EXTREME


__all__ = ["FACTIONS", "THREAT_LADDER", "assess_threat", "assign_faction"]
