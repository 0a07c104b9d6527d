"""Deterministic NPC profiles derived from the city seed."""

from __future__ import annotations

import hashlib
from typing import Sequence

from gumshoe.domain.enums import Build, FacialHair
from gumshoe.domain.models import NPCProfile, NPCTraits, RoutineStop
from gumshoe.util.rng import Rng

FIRST_NAMES = [
    "Alma", "Bernard", "Clara", "Dashiell", "Edith", "Floyd", "Greta", "Harlan",
    "Ida", "Jasper", "Lorna", "Mickey", "Nora", "Otis", "Pearl", "Rex",
    "Sadie", "Thelma", "Vernon", "Wendell",
]
LAST_NAMES = [
    "Archer", "Bishop", "Carver", "Doyle", "Esposito", "Falk", "Garrity",
    "Hale", "Iverson", "Kerr", "Lane", "Maddox", "Novak", "O'Hara",
    "Pruitt", "Quill", "Sloane", "Tully", "Vance", "Whitlock",
]

SKIN_TONES = ["pale", "fair", "olive", "tan", "brown", "dark"]
HAIR_STYLES = ["cropped", "slicked", "wavy", "curly", "bald", "bob", "long"]
HAIR_COLORS = ["black", "brown", "auburn", "blond", "red", "grey", "white"]
EYE_COLORS = ["brown", "blue", "green", "hazel", "grey"]
SCARS = ["left cheek", "right brow", "chin", "knuckles", "neck", "forearm"]
BUILD_WEIGHTS = [
    (Build.SLIGHT, 0.2),
    (Build.AVERAGE, 0.45),
    (Build.ATHLETIC, 0.2),
    (Build.HEAVY, 0.15),
]
FACIAL_HAIR_WEIGHTS = [
    (FacialHair.NONE, 0.55),
    (FacialHair.STUBBLE, 0.2),
    (FacialHair.MUSTACHE, 0.15),
    (FacialHair.BEARD, 0.1),
]

DEFAULT_PLACES = ["home", "diner", "docks", "office", "bar", "market", "church", "pier"]
ACTIVITIES = ["sleeping", "working", "eating", "drinking", "shopping", "walking", "praying"]
AFFILIATIONS = [
    "dockworkers_union", "vice_squad_informant", "harbor_syndicate", "church_choir",
    "night_shift", "gamblers", "city_hall", "jazz_club",
]

GLASSES_CHANCE = 0.25


def npc_id_for(index: int) -> str:
    return f"npc_{index:03d}"


def fingerprint_hash(city_seed: int, npc_id: str) -> str:
    digest = hashlib.sha256(f"{city_seed}:{npc_id}:fingerprint".encode("ascii")).hexdigest()
    return digest[:16]


class NPCProfileGenerator:
    def __init__(self, city_seed: int) -> None:
        self.city_seed = city_seed
        self._root = Rng(city_seed)

    def generate(self, index: int, place_ids: Sequence[str] | None = None) -> NPCProfile:
        """Build the profile for one NPC slot.

        Each slot draws from its own fork of the city stream, so a profile
        depends only on the city seed, the index and the place pool.
        """
        rng = self._root.fork(f"npc:{index}")
        npc_id = npc_id_for(index)
        first_name = rng.choice(FIRST_NAMES)
        last_name = rng.choice(LAST_NAMES)
        traits = self._traits(rng)
        routine = self._routine(rng, list(place_ids or DEFAULT_PLACES))
        affiliations = tuple(sorted(rng.sample(AFFILIATIONS, rng.range_int(0, 3))))
        return NPCProfile(
            id=npc_id,
            first_name=first_name,
            last_name=last_name,
            traits=traits,
            fingerprint_hash=fingerprint_hash(self.city_seed, npc_id),
            routine=routine,
            affiliations=affiliations,
        )

    def generate_many(self, count: int, place_ids: Sequence[str] | None = None) -> list[NPCProfile]:
        return [self.generate(index, place_ids) for index in range(max(0, count))]

    def _traits(self, rng: Rng) -> NPCTraits:
        facial_hair = rng.weighted_choice(FACIAL_HAIR_WEIGHTS)
        scar_count = rng.weighted_choice([(0, 0.6), (1, 0.3), (2, 0.1)])
        return NPCTraits(
            height_cm=rng.range_int(150, 200),
            build=rng.weighted_choice(BUILD_WEIGHTS),
            skin_tone=rng.choice(SKIN_TONES),
            hair_style=rng.choice(HAIR_STYLES),
            hair_color=rng.choice(HAIR_COLORS),
            eye_color=rng.choice(EYE_COLORS),
            glasses=rng.chance(GLASSES_CHANCE),
            facial_hair=facial_hair,
            scars=tuple(rng.sample(SCARS, scar_count)),
        )

    def _routine(self, rng: Rng, places: list[str]) -> tuple[RoutineStop, ...]:
        if not places:
            places = list(DEFAULT_PLACES)
        stop_count = rng.range_int(3, 5)
        hours = sorted(rng.sample(range(24), stop_count))
        stops: list[RoutineStop] = []
        for hour in hours:
            activity = "sleeping" if hour < 6 else rng.choice(ACTIVITIES[1:])
            stops.append(RoutineStop(hour=hour, place=rng.choice(places), activity=activity))
        return tuple(stops)
