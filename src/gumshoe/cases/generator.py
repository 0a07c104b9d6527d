"""Seeded crime planning."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from gumshoe.cases.templates import CrimeTemplate
from gumshoe.domain.models import Crime
from gumshoe.util.rng import Rng
from gumshoe.util.time import TimeWindow

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_ANCHOR = "city_center"
START_DELAY_MINUTES = 60


def crime_id_for(seed: int) -> str:
    return f"crime_{seed}"


class CaseGenerator:
    """Turns a seed plus NPC and location pools into one Crime.

    The generator keeps its own stream and re-seeds it for every call, so a
    crime can be replayed in isolation from nothing but its seed and pools.
    Generated crimes are returned, never stored.
    """

    def __init__(self, templates: Iterable[CrimeTemplate] = ()) -> None:
        self.templates: tuple[CrimeTemplate, ...] = tuple(templates)
        self._rng = Rng(0)

    def plan_crime(
        self,
        npc_ids: Sequence[str],
        location_ids: Sequence[str],
        seed: int,
        now: int = 0,
    ) -> Crime | None:
        self._rng.seed(seed)
        if not self.templates:
            logger.warning("No crime templates available; nothing generated for seed %s", seed)
            return None

        template = self._rng.choice(self.templates)
        npcs = list(npc_ids)
        culprit_id = ""
        victim_id = ""
        if npcs:
            # Culprit and victim are drawn independently and may be the same NPC.
            culprit_id = self._rng.choice(npcs)
            victim_id = self._rng.choice(npcs)
        else:
            logger.debug("Empty NPC pool for seed %s; culprit and victim left unset", seed)

        location = self._rng.choice(list(location_ids))
        if location is None:
            location = DEFAULT_LOCATION_ANCHOR

        crime = Crime(
            id=crime_id_for(seed),
            type=template.type,
            severity=template.severity,
            culprit_id=culprit_id,
            victim_id=victim_id,
            location=location,
            window=TimeWindow(start=now + START_DELAY_MINUTES),
            seed=seed,
        )
        logger.debug(
            "Planned %s (%s, severity %d) at %s", crime.id, crime.type, crime.severity, crime.location
        )
        return crime
