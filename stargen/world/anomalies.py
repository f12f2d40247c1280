"""Space anomalies attached to a small share of systems."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from stargen.engine.rng import RandomStream
from stargen.world.models import AnomalyType, SpaceAnomaly, Stability


ANOMALY_CHANCE = 0.15


@dataclass(frozen=True)
class AnomalyProfile:
    description: str
    effects: Tuple[str, ...]


ANOMALY_PROFILES: Dict[AnomalyType, AnomalyProfile] = {
    AnomalyType.WORMHOLE: AnomalyProfile(
        description="A stable wormhole leading to unknown regions of space",
        effects=("Instant travel", "Navigation hazard", "Temporal effects"),
    ),
    AnomalyType.SPATIAL_RIFT: AnomalyProfile(
        description="A tear in the fabric of space-time",
        effects=("Sensor interference", "Hull stress", "Dimensional intrusion"),
    ),
    AnomalyType.SUBSPACE_DISTORTION: AnomalyProfile(
        description="Distorted subspace field affecting warp travel",
        effects=("Warp drive malfunction", "Communication disruption"),
    ),
    AnomalyType.QUANTUM_SINGULARITY: AnomalyProfile(
        description="A microscopic black hole with unique properties",
        effects=("Gravitational lensing", "Time dilation", "Energy discharge"),
    ),
    AnomalyType.TIME_DISTORTION: AnomalyProfile(
        description="Temporal anomaly causing time flow irregularities",
        effects=("Temporal displacement", "Causality loops", "Chronometer malfunction"),
    ),
}


def generate_anomaly(system_id: str, rng: RandomStream) -> SpaceAnomaly:
    anomaly_type = rng.choice(tuple(AnomalyType))
    profile = ANOMALY_PROFILES[anomaly_type]
    return SpaceAnomaly(
        id=f"{system_id}-anomaly",
        name=f"{anomaly_type.value} Anomaly",
        anomaly_type=anomaly_type,
        description=profile.description,
        effects=profile.effects,
        # Stability is rolled independently of the anomaly type.
        stability=rng.choice(tuple(Stability)),
    )


__all__ = ["ANOMALY_CHANCE", "ANOMALY_PROFILES", "AnomalyProfile", "generate_anomaly"]
