"""Galaxy grid built from one generated star system per occupied cell."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from stargen.engine.logger import GameLogger
from stargen.engine.rng import RandomStream
from stargen.engine.settings import GalaxySettings
from stargen.world.models import Coordinates, StarSystem
from stargen.world.system import StarSystemGenerator


class CoordinateOutOfBounds(ValueError):
    """Raised when a coordinate lies outside the galaxy grid."""


@dataclass
class Galaxy:
    settings: GalaxySettings
    _systems: Dict[Coordinates, StarSystem] = field(default_factory=dict)

    def add(self, system: StarSystem) -> None:
        self._systems[system.coordinates] = system

    def contains(self, coordinates: Coordinates) -> bool:
        x, y, z = coordinates
        return (
            0 <= x < self.settings.width
            and 0 <= y < self.settings.height
            and 0 <= z < self.settings.depth
        )

    def system_at(self, x: int, y: int, z: int = 0) -> Optional[StarSystem]:
        if not self.contains((x, y, z)):
            raise CoordinateOutOfBounds(
                f"({x}, {y}, {z}) is outside a "
                f"{self.settings.width}x{self.settings.height}x{self.settings.depth} galaxy"
            )
        return self._systems.get((x, y, z))

    def systems(self) -> List[StarSystem]:
        return [self._systems[coordinates] for coordinates in sorted(self._systems)]

    def discovered(self) -> List[StarSystem]:
        return [system for system in self.systems() if system.discovered]

    def __len__(self) -> int:
        return len(self._systems)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.settings.width,
            "height": self.settings.height,
            "depth": self.settings.depth,
            "seed": self.settings.seed,
            "systems": [system.to_dict() for system in self.systems()],
        }


class GalaxyBuilder:
    """Walks the grid, rolls occupancy per cell and generates systems."""

    def __init__(self, settings: GalaxySettings, logger: Optional[GameLogger] = None) -> None:
        self.settings = settings
        self.logger = logger
        self.generator = StarSystemGenerator(settings.seed, logger)

    def cells(self) -> Iterable[Coordinates]:
        for x in range(self.settings.width):
            for y in range(self.settings.height):
                for z in range(self.settings.depth):
                    yield (x, y, z)

    def occupied(self, coordinates: Coordinates) -> bool:
        rng = RandomStream.seeded(self.settings.seed, "occupancy", *coordinates)
        return rng.chance(self.settings.occupancy)

    def build(self, workers: Optional[int] = None) -> Galaxy:
        workers = workers or self.settings.workers
        occupied = [coordinates for coordinates in self.cells() if self.occupied(coordinates)]
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                systems = list(executor.map(lambda cell: self.generator.generate(*cell), occupied))
        else:
            systems = [self.generator.generate(*cell) for cell in occupied]

        galaxy = Galaxy(self.settings)
        for system in systems:
            galaxy.add(system)
        # Charted space at the start: the first few systems in grid order.
        for system in galaxy.systems()[: self.settings.initial_discovered]:
            system.discovered = True

        if self.logger:
            self.logger.channel("galaxy").info(
                "Built galaxy of %d systems across %d cells (seed %s, %d workers)",
                len(galaxy),
                self.settings.cell_count(),
                self.settings.seed,
                workers,
            )
        return galaxy


__all__ = ["CoordinateOutOfBounds", "Galaxy", "GalaxyBuilder"]
