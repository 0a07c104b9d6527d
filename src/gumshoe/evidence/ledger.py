"""Evidence store with append-only chain of custody."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Tuple

from pydantic import ValidationError

from gumshoe.domain.models import CustodyEntry, Evidence
from gumshoe.evidence.metadata import merge_metadata

logger = logging.getLogger(__name__)


class EvidenceLedger:
    """Holds evidence records and routes custody appends to them.

    The ledger only ever appends to a chain. It does not check that
    timestamps are ordered; callers are expected to log handling in the
    order it happens.
    """

    def __init__(self) -> None:
        self._evidence: Dict[str, Evidence] = {}

    def __contains__(self, evidence_id: object) -> bool:
        return evidence_id in self._evidence

    def __iter__(self) -> Iterator[Evidence]:
        return iter(self._evidence.values())

    def __len__(self) -> int:
        return len(self._evidence)

    def record(self, evidence: Evidence) -> Evidence:
        existing = self._evidence.get(evidence.id)
        if existing is not None:
            logger.warning("Evidence %s already recorded; keeping the original", evidence.id)
            return existing
        self._evidence[evidence.id] = evidence
        return evidence

    def get(self, evidence_id: str) -> Evidence | None:
        return self._evidence.get(evidence_id)

    def add_custody_entry(
        self, evidence_id: str, actor: str, timestamp: int, action: str
    ) -> CustodyEntry | None:
        evidence = self._lookup(evidence_id)
        if evidence is None:
            return None
        return evidence.add_custody_entry(actor, timestamp, action)

    def chain(self, evidence_id: str) -> Tuple[CustodyEntry, ...]:
        evidence = self._lookup(evidence_id)
        if evidence is None:
            return ()
        return evidence.custody_chain

    def update_metadata(self, evidence_id: str, **fields: Any) -> bool:
        evidence = self._lookup(evidence_id)
        if evidence is None:
            return False
        try:
            evidence.metadata = merge_metadata(evidence.metadata, fields)
        except ValidationError as exc:
            logger.warning("Rejected metadata edit for %s: %s", evidence_id, exc)
            return False
        return True

    def for_case(self, case_id: str) -> list[Evidence]:
        return [item for item in self._evidence.values() if item.case_id == case_id]

    def handled_by(self, actor: str) -> list[Evidence]:
        return [
            item
            for item in self._evidence.values()
            if any(entry.actor == actor for entry in item.custody_chain)
        ]

    def _lookup(self, evidence_id: str) -> Evidence | None:
        evidence = self._evidence.get(evidence_id)
        if evidence is None:
            logger.warning("Unknown evidence id: %s", evidence_id)
        return evidence
