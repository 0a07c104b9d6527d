from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from gumshoe import config
from gumshoe.cases.generator import CaseGenerator
from gumshoe.evidence.planting import plant_evidence
from gumshoe.npcs.generator import NPCProfileGenerator


def main() -> None:
    parser = argparse.ArgumentParser(description="Plan a single seeded crime.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--city-seed", type=int, default=config.SEED)
    parser.add_argument("--npcs", type=int, default=8)
    parser.add_argument("--templates", type=str, default=None)
    parser.add_argument("--location", action="append", default=[])
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    templates = config.load_crime_templates(args.templates)
    profiles = NPCProfileGenerator(args.city_seed).generate_many(args.npcs)
    by_id = {profile.id: profile for profile in profiles}
    crime = CaseGenerator(templates).plan_crime(list(by_id), args.location, args.seed)
    if crime is None:
        print(f"No crime generated for seed {args.seed}")
        return

    evidence = plant_evidence(crime, by_id.get(crime.culprit_id))
    culprit = by_id.get(crime.culprit_id)
    victim = by_id.get(crime.victim_id)
    print(f"Crime: {crime.id} (seed {crime.seed})")
    print(f"Type: {crime.type} severity {crime.severity} at {crime.location}")
    print(f"Culprit: {culprit.name if culprit else '-'}")
    print(f"Victim: {victim.name if victim else '-'}")
    print(f"Evidence count: {len(evidence)}")
    for item in evidence:
        print(f"- {item.type} | {item.metadata.model_dump(exclude={'kind'})}")


if __name__ == "__main__":
    main()
