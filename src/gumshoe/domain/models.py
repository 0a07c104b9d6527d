"""Domain models for generated crimes, evidence and NPCs."""

from __future__ import annotations

import logging
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from gumshoe.domain.enums import Build, CrimeStatus, CrimeType, FacialHair
from gumshoe.evidence.metadata import EvidenceMetadata, GenericMetadata
from gumshoe.util.time import TimeWindow

logger = logging.getLogger(__name__)


class Crime(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    type: CrimeType = CrimeType.THEFT
    severity: int = Field(default=1, ge=1, le=5)
    culprit_id: str = ""
    victim_id: str = ""
    location: str
    window: TimeWindow
    evidence_ids: List[str] = Field(default_factory=list)
    status: CrimeStatus = CrimeStatus.OPEN
    seed: int

    def is_active(self, now: int) -> bool:
        return self.window.is_active(now)

    def attach_evidence(self, evidence_id: str) -> None:
        if evidence_id not in self.evidence_ids:
            self.evidence_ids.append(evidence_id)

    def mark_solved(self) -> bool:
        return self._close(CrimeStatus.SOLVED)

    def mark_failed(self) -> bool:
        return self._close(CrimeStatus.FAILED)

    def _close(self, status: CrimeStatus) -> bool:
        if self.status != CrimeStatus.OPEN:
            logger.info("Crime %s already %s; ignoring %s", self.id, self.status, status)
            return False
        self.status = status
        return True


class CustodyEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    actor: str
    timestamp: int
    action: str


class Evidence(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    case_id: str
    type: str
    location: str
    created_at: int
    metadata: EvidenceMetadata = Field(default_factory=GenericMetadata)
    # Append-only: add_custody_entry swaps in a longer tuple.
    custody: Tuple[CustodyEntry, ...] = ()

    @property
    def custody_chain(self) -> Tuple[CustodyEntry, ...]:
        return self.custody

    def add_custody_entry(self, actor: str, timestamp: int, action: str) -> CustodyEntry | None:
        """Append a custody entry at the tail of the chain.

        Earlier entries are never touched. Timestamp order is up to the caller.
        """
        actor = (actor or "").strip()
        action = (action or "").strip()
        if not actor or not action:
            logger.warning(
                "Rejected custody entry for %s: actor=%r action=%r", self.id, actor, action
            )
            return None
        if self.custody and timestamp < self.custody[-1].timestamp:
            logger.debug(
                "Custody entry for %s at %s precedes previous entry at %s",
                self.id,
                timestamp,
                self.custody[-1].timestamp,
            )
        entry = CustodyEntry(actor=actor, timestamp=int(timestamp), action=action)
        self.custody = self.custody + (entry,)
        return entry


class NPCTraits(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    height_cm: int
    build: Build
    skin_tone: str
    hair_style: str
    hair_color: str
    eye_color: str
    glasses: bool = False
    facial_hair: FacialHair = FacialHair.NONE
    scars: Tuple[str, ...] = ()


class RoutineStop(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    hour: int = Field(ge=0, le=23)
    place: str
    activity: str


class NPCProfile(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    first_name: str
    last_name: str
    traits: NPCTraits
    fingerprint_hash: str
    routine: Tuple[RoutineStop, ...] = ()
    affiliations: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def stop_at(self, hour: int) -> RoutineStop | None:
        """Most recent routine stop at or before `hour`, wrapping to the previous day."""
        if not self.routine:
            return None
        current = self.routine[-1]
        for stop in self.routine:
            if stop.hour <= hour % 24:
                current = stop
        return current
