"""Entry point: build a galaxy from settings.json and print it."""
from __future__ import annotations

import argparse
import dataclasses
import json
from pathlib import Path
from typing import List, Optional

from stargen.engine.logger import init_logger
from stargen.engine.settings import GalaxySettings
from stargen.world.galaxy import Galaxy, GalaxyBuilder
from stargen.world.system import StarSystemGenerator


SETTINGS_PATH = Path("settings.json")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a procedural galaxy of star systems.")
    parser.add_argument("--settings", type=Path, default=SETTINGS_PATH, help="Path to settings.json")
    parser.add_argument("--seed", type=int, default=None, help="Override the galaxy seed")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads for generation")
    parser.add_argument(
        "--system",
        type=int,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=None,
        help="Print a single system as JSON instead of the galaxy summary",
    )
    parser.add_argument("--json", action="store_true", help="Print the whole galaxy as JSON")
    return parser.parse_args(argv)


def format_summary(galaxy: Galaxy) -> str:
    lines = [f"{'ID':<16} {'NAME':<24} {'CLASS':<5} {'PLANETS':>7} {'MOONS':>5}  THREAT    FACTION"]
    for system in galaxy.systems():
        marker = "*" if system.discovered else " "
        lines.append(
            f"{system.id:<16} {system.name:<24} {system.star_class.value:<5} "
            f"{len(system.planets):>7} {system.moon_count:>5}  {system.threat_level.value:<9} "
            f"{system.faction or '-'}{marker}"
        )
    lines.append(f"{len(galaxy)} systems, {len(galaxy.discovered())} charted (*)")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logger = init_logger(args.settings)
    settings = GalaxySettings.from_settings(args.settings)
    if args.seed is not None:
        settings = dataclasses.replace(settings, seed=args.seed)

    if args.system is not None:
        system = StarSystemGenerator(settings.seed, logger).generate(*args.system)
        print(system.to_json())
        return

    galaxy = GalaxyBuilder(settings, logger).build(workers=args.workers)
    if args.json:
        print(json.dumps(galaxy.to_dict(), indent=2))
    else:
        print(format_summary(galaxy))


if __name__ == "__main__":
    main()
