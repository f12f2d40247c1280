"""settings.json loading for galaxy generation."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Read settings.json, falling back to an empty mapping."""

    if not settings_path.exists():
        return {}
    try:
        data = json.loads(settings_path.read_text())
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def _read(section: Mapping[str, Any], key: str, default: Any, cast: Callable[[Any], Any]) -> Any:
    """Cast one settings value, keeping the default when it is unusable."""

    try:
        return cast(section.get(key, default))
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class GalaxySettings:
    """Grid dimensions and seeding for a generated galaxy."""

    width: int = 10
    height: int = 10
    depth: int = 1
    occupancy: float = 0.7
    seed: int = 0
    initial_discovered: int = 5
    workers: int = 1

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GalaxySettings":
        galaxy = data.get("galaxy", {})
        if not isinstance(galaxy, dict):
            galaxy = {}
        defaults = cls()
        return cls(
            width=max(0, _read(galaxy, "width", defaults.width, int)),
            height=max(0, _read(galaxy, "height", defaults.height, int)),
            depth=max(0, _read(galaxy, "depth", defaults.depth, int)),
            occupancy=max(0.0, min(1.0, _read(galaxy, "occupancy", defaults.occupancy, float))),
            seed=_read(galaxy, "seed", defaults.seed, int),
            initial_discovered=max(
                0, _read(galaxy, "initialDiscovered", defaults.initial_discovered, int)
            ),
            workers=max(1, _read(galaxy, "workers", defaults.workers, int)),
        )

    @classmethod
    def from_settings(cls, settings_path: Path) -> "GalaxySettings":
        return cls.from_dict(load_settings(settings_path))

    def cell_count(self) -> int:
        return self.width * self.height * self.depth


__all__ = ["GalaxySettings", "load_settings"]
