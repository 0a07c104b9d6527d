from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from gumshoe import config
from gumshoe.world.builder import build_world
from gumshoe.world.exporters import dump_world


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump a seeded city: NPCs, crimes and evidence.")
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--templates", type=str, default=None)
    parser.add_argument("--npcs", type=int, default=12)
    parser.add_argument("--crimes", type=int, default=3)
    parser.add_argument("--out", type=str, default=None)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    seed_config = config.load_seed_config(args.config) if args.config else config.SeedConfig()
    templates = config.load_crime_templates(args.templates)
    registry = build_world(seed_config, templates, npc_count=args.npcs, crime_count=args.crimes)
    output = dump_world(registry)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as handle:
            handle.write(output)
        print(f"Wrote world dump to {args.out}")
        return

    print(output)


if __name__ == "__main__":
    main()
