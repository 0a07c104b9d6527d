"""Populate a city: NPCs from the city seed, then seeded crimes and their evidence."""

from __future__ import annotations

import logging
from typing import Sequence

from gumshoe.cases.generator import CaseGenerator
from gumshoe.cases.templates import CrimeTemplate
from gumshoe.config import SeedConfig
from gumshoe.evidence.planting import plant_evidence
from gumshoe.npcs.generator import NPCProfileGenerator
from gumshoe.util.rng import Rng
from gumshoe.world.registry import CaseRegistry

logger = logging.getLogger(__name__)

CRIME_SEED_MAX = 2**31 - 1


def default_locations(config: SeedConfig) -> list[str]:
    slug = config.neighborhood_name.strip().lower().replace(" ", "_") or "city"
    return [f"{slug}:block_{index}" for index in range(config.blocks)]


def crime_seeds(config: SeedConfig, count: int) -> list[int]:
    rng = Rng(config.city_seed).fork("crimes")
    return [rng.range_int(1, CRIME_SEED_MAX) for _ in range(max(0, count))]


def build_world(
    config: SeedConfig,
    templates: Sequence[CrimeTemplate],
    location_ids: Sequence[str] | None = None,
    npc_count: int = 12,
    crime_count: int = 3,
    now: int | None = None,
) -> CaseRegistry:
    registry = CaseRegistry(city_seed=config.city_seed)
    locations = list(location_ids) if location_ids is not None else default_locations(config)
    profiles = NPCProfileGenerator(config.city_seed).generate_many(npc_count, locations or None)
    for profile in profiles:
        registry.add_npc(profile)

    generator = CaseGenerator(templates)
    start = config.start_time_min if now is None else now
    npc_ids = [profile.id for profile in profiles]
    for seed in crime_seeds(config, crime_count):
        crime = generator.plan_crime(npc_ids, locations, seed, now=start)
        if crime is None:
            logger.warning("Skipping crime slot for seed %s: nothing generated", seed)
            continue
        registry.add_crime(crime)
        culprit = registry.npcs.get(crime.culprit_id)
        for evidence in plant_evidence(crime, culprit):
            registry.add_evidence(evidence)

    logger.info(
        "Built %s (seed %s): %d npcs, %d crimes, %d evidence",
        config.neighborhood_name,
        config.city_seed,
        len(registry.npcs),
        len(registry.crimes),
        len(registry.ledger),
    )
    return registry
