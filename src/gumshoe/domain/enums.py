"""Shared enums for generated facts and the clock."""

from __future__ import annotations

from enum import StrEnum


class CrimeType(StrEnum):
    THEFT = "theft"
    BURGLARY = "burglary"
    ASSAULT = "assault"
    MURDER = "murder"


class CrimeStatus(StrEnum):
    OPEN = "open"
    SOLVED = "solved"
    FAILED = "failed"


class EvidenceKind(StrEnum):
    FINGERPRINT = "fingerprint"
    WEAPON = "weapon"
    NOTE = "note"
    DNA = "dna"


class CustodyAction(StrEnum):
    COLLECTED = "collected"
    LOGGED = "logged"
    TRANSFERRED = "transferred"
    ANALYZED = "analyzed"
    STASHED = "stashed"


class Build(StrEnum):
    SLIGHT = "slight"
    AVERAGE = "average"
    ATHLETIC = "athletic"
    HEAVY = "heavy"


class FacialHair(StrEnum):
    NONE = "none"
    STUBBLE = "stubble"
    MUSTACHE = "mustache"
    BEARD = "beard"


class ClockPhase(StrEnum):
    NORMAL = "normal"
    FAST_FORWARD = "fast_forward"
