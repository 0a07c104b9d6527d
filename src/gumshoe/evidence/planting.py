"""Seed physical evidence for a freshly planned crime."""

from __future__ import annotations

import hashlib

from gumshoe.domain.enums import CrimeType, CustodyAction, EvidenceKind
from gumshoe.domain.models import Crime, Evidence, NPCProfile
from gumshoe.evidence.metadata import build_metadata
from gumshoe.util.rng import Rng

SCENE_ACTOR = "scene"

KINDS_BY_CRIME = {
    CrimeType.THEFT: [EvidenceKind.FINGERPRINT, EvidenceKind.NOTE],
    CrimeType.BURGLARY: [EvidenceKind.FINGERPRINT, EvidenceKind.WEAPON, EvidenceKind.NOTE],
    CrimeType.ASSAULT: [EvidenceKind.WEAPON, EvidenceKind.DNA, EvidenceKind.FINGERPRINT],
    CrimeType.MURDER: [EvidenceKind.WEAPON, EvidenceKind.DNA, EvidenceKind.FINGERPRINT, EvidenceKind.NOTE],
}
WEAPON_CLASSES = {
    CrimeType.BURGLARY: ["crowbar", "screwdriver"],
    CrimeType.ASSAULT: ["pipe wrench", "brass knuckles", "bottle"],
    CrimeType.MURDER: ["kitchen knife", "revolver", "hammer", "garrote"],
}
SURFACES = ["door handle", "window frame", "glass", "desk", "cash box"]
HANDWRITING = ["neat", "hurried", "block capitals", "shaky"]
NOTE_LINES = [
    "Pier 9, midnight. Come alone.",
    "You owe me and you know it.",
    "Leave the key under the mat.",
    "Last warning.",
]
DNA_SAMPLES = ["blood", "hair", "saliva", "skin"]


def _profile_hash(seed: int, npc_id: str) -> str:
    digest = hashlib.sha256(f"{seed}:{npc_id}:dna".encode("ascii")).hexdigest()
    return digest[:16]


def _metadata_payload(kind: EvidenceKind, crime: Crime, culprit: NPCProfile | None, rng: Rng) -> dict:
    if kind == EvidenceKind.FINGERPRINT:
        partial = rng.chance(0.4)
        return {
            # A partial print never carries a usable template.
            "template_hash": "" if culprit is None or partial else culprit.fingerprint_hash,
            "partial": partial,
            "surface": rng.choice(SURFACES),
        }
    if kind == EvidenceKind.WEAPON:
        return {
            "weapon_class": rng.choice(WEAPON_CLASSES.get(crime.type, ["unknown"])),
            "serial": f"SN-{rng.range_int(10000, 99999)}",
            "blood_traces": crime.type in (CrimeType.ASSAULT, CrimeType.MURDER) and rng.chance(0.7),
        }
    if kind == EvidenceKind.NOTE:
        return {"text": rng.choice(NOTE_LINES), "handwriting": rng.choice(HANDWRITING)}
    return {
        "sample_kind": rng.choice(DNA_SAMPLES),
        "profile_hash": "" if culprit is None else _profile_hash(crime.seed, culprit.id),
    }


def plant_evidence(crime: Crime, culprit: NPCProfile | None = None, now: int | None = None) -> list[Evidence]:
    """Create the physical evidence left behind by a crime.

    Draws from a stream forked off the crime seed, so the same crime always
    leaves the same evidence. New ids are attached to the crime and each item
    opens its chain with a scene collection entry at `now` (defaulting to the
    crime's start).
    """
    rng = Rng(crime.seed).fork("evidence")
    timestamp = crime.window.start if now is None else now
    pool = KINDS_BY_CRIME.get(crime.type, [EvidenceKind.FINGERPRINT])
    count = min(len(pool), rng.range_int(1, 3))
    kinds = rng.sample(pool, count)
    planted: list[Evidence] = []
    for index, kind in enumerate(kinds):
        evidence = Evidence(
            id=f"{crime.id}_ev{index}",
            case_id=crime.id,
            type=kind.value,
            location=crime.location,
            created_at=timestamp,
            metadata=build_metadata(kind, _metadata_payload(kind, crime, culprit, rng)),
        )
        evidence.add_custody_entry(SCENE_ACTOR, timestamp, CustodyAction.COLLECTED)
        crime.attach_evidence(evidence.id)
        planted.append(evidence)
    return planted
