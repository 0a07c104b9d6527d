"""Registry of generated facts, linked in a NetworkX graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping

import networkx as nx

from gumshoe.domain.enums import CrimeStatus
from gumshoe.domain.models import Crime, Evidence, NPCProfile
from gumshoe.evidence.ledger import EvidenceLedger


def ensure_exists(entity_id: str, entity_map: Mapping[str, object], label: str) -> None:
    if entity_id not in entity_map:
        raise KeyError(f"Unknown {label} id: {entity_id}")


@dataclass
class CaseRegistry:
    city_seed: int
    graph: nx.MultiDiGraph = field(default_factory=nx.MultiDiGraph)
    npcs: Dict[str, NPCProfile] = field(default_factory=dict)
    crimes: Dict[str, Crime] = field(default_factory=dict)
    ledger: EvidenceLedger = field(default_factory=EvidenceLedger)

    def add_npc(self, profile: NPCProfile) -> None:
        self.npcs[profile.id] = profile
        self.graph.add_node(profile.id, node_type="npc", name=profile.name)

    def add_crime(self, crime: Crime) -> None:
        self.crimes[crime.id] = crime
        self.graph.add_node(crime.id, node_type="crime", crime_type=crime.type, location=crime.location)
        # Unset or unknown NPC references stay weak and are not linked.
        if crime.culprit_id in self.npcs:
            self.graph.add_edge(crime.id, crime.culprit_id, edge_type="culprit")
        if crime.victim_id in self.npcs:
            self.graph.add_edge(crime.id, crime.victim_id, edge_type="victim")

    def add_evidence(self, evidence: Evidence) -> Evidence:
        evidence = self.ledger.record(evidence)
        self.graph.add_node(evidence.id, node_type="evidence", evidence_type=evidence.type)
        if evidence.case_id in self.crimes:
            self.crimes[evidence.case_id].attach_evidence(evidence.id)
            self.graph.add_edge(evidence.id, evidence.case_id, edge_type="evidence_of")
        return evidence

    def log_custody(self, evidence_id: str, actor: str, timestamp: int, action: str):
        entry = self.ledger.add_custody_entry(evidence_id, actor, timestamp, action)
        if entry is not None:
            self.graph.add_edge(
                entry.actor,
                evidence_id,
                edge_type="handled",
                timestamp=entry.timestamp,
                action=entry.action,
            )
        return entry

    def crime(self, crime_id: str) -> Crime:
        ensure_exists(crime_id, self.crimes, "crime")
        return self.crimes[crime_id]

    def npc(self, npc_id: str) -> NPCProfile:
        ensure_exists(npc_id, self.npcs, "npc")
        return self.npcs[npc_id]

    def active_crimes(self, now: int) -> list[Crime]:
        return [crime for crime in self.crimes.values() if crime.is_active(now)]

    def open_crimes(self) -> list[Crime]:
        return [crime for crime in self.crimes.values() if crime.status == CrimeStatus.OPEN]

    def crimes_involving(self, npc_id: str) -> list[Crime]:
        if npc_id not in self.graph:
            return []
        crime_ids = {source for source, _ in self.graph.in_edges(npc_id)}
        return [self.crimes[crime_id] for crime_id in sorted(crime_ids) if crime_id in self.crimes]

    def handlers_of(self, evidence_id: str) -> list[str]:
        """Actors in the order they first appear in the custody chain."""
        handlers: list[str] = []
        for entry in self.ledger.chain(evidence_id):
            if entry.actor not in handlers:
                handlers.append(entry.actor)
        return handlers

    def evidence_for(self, crime_id: str) -> list[Evidence]:
        crime = self.crime(crime_id)
        return [item for item in (self.ledger.get(eid) for eid in crime.evidence_ids) if item is not None]
