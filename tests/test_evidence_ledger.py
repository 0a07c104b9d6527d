import logging

import pytest
from pydantic import ValidationError

from gumshoe.domain.models import Evidence
from gumshoe.evidence.ledger import EvidenceLedger
from gumshoe.evidence.metadata import (
    GenericMetadata,
    NoteMetadata,
    WeaponMetadata,
    build_metadata,
)


@pytest.fixture()
def evidence():
    return Evidence(
        id="crime_1_ev0",
        case_id="crime_1",
        type="weapon",
        location="harbor:block_2",
        created_at=60,
        metadata=build_metadata("weapon", {"weapon_class": "revolver", "serial": "SN-1"}),
    )


@pytest.fixture()
def ledger(evidence):
    ledger = EvidenceLedger()
    ledger.record(evidence)
    return ledger


def test_custody_appends_in_call_order(ledger):
    calls = [("scene", 60, "collected"), ("det_ward", 75, "logged"), ("lab", 200, "analyzed")]
    for actor, timestamp, action in calls:
        ledger.add_custody_entry("crime_1_ev0", actor, timestamp, action)
    chain = ledger.chain("crime_1_ev0")
    assert [(e.actor, e.timestamp, e.action) for e in chain] == calls


def test_prior_entries_never_change(ledger):
    first = ledger.add_custody_entry("crime_1_ev0", "scene", 60, "collected")
    snapshot = ledger.chain("crime_1_ev0")
    ledger.add_custody_entry("crime_1_ev0", "det_ward", 61, "transferred")
    assert ledger.chain("crime_1_ev0")[0] is first
    assert ledger.chain("crime_1_ev0")[:1] == snapshot
    with pytest.raises(ValidationError):
        first.actor = "someone_else"


def test_chain_is_read_only_view(evidence):
    evidence.add_custody_entry("scene", 60, "collected")
    chain = evidence.custody_chain
    assert isinstance(chain, tuple)
    assert len(evidence.custody_chain) == 1


def test_out_of_order_timestamps_kept_as_given(evidence):
    evidence.add_custody_entry("scene", 100, "collected")
    evidence.add_custody_entry("det_ward", 50, "logged")
    assert [entry.timestamp for entry in evidence.custody_chain] == [100, 50]


def test_malformed_entry_rejected(evidence, caplog):
    with caplog.at_level(logging.WARNING):
        assert evidence.add_custody_entry("  ", 10, "collected") is None
        assert evidence.add_custody_entry("scene", 10, "") is None
    assert evidence.custody_chain == ()
    assert "Rejected custody entry" in caplog.text


def test_unknown_evidence_id(ledger, caplog):
    with caplog.at_level(logging.WARNING):
        assert ledger.add_custody_entry("missing", "scene", 1, "collected") is None
        assert ledger.chain("missing") == ()
    assert "Unknown evidence id: missing" in caplog.text


def test_record_keeps_original(ledger, evidence):
    duplicate = evidence.model_copy(update={"location": "elsewhere"})
    assert ledger.record(duplicate) is evidence
    assert len(ledger) == 1


def test_metadata_edit_keeps_custody(ledger):
    ledger.add_custody_entry("crime_1_ev0", "scene", 60, "collected")
    assert ledger.update_metadata("crime_1_ev0", blood_traces=True)
    item = ledger.get("crime_1_ev0")
    assert isinstance(item.metadata, WeaponMetadata)
    assert item.metadata.blood_traces is True
    assert item.metadata.weapon_class == "revolver"
    assert len(item.custody_chain) == 1


def test_metadata_edit_rejects_unknown_field(ledger, caplog):
    with caplog.at_level(logging.WARNING):
        assert not ledger.update_metadata("crime_1_ev0", caliber=38)
    assert ledger.get("crime_1_ev0").metadata.weapon_class == "revolver"


def test_build_metadata_variants():
    assert isinstance(build_metadata("note", {"text": "Pier 9"}), NoteMetadata)
    generic = build_metadata("tire_track", {"width_cm": 21})
    assert isinstance(generic, GenericMetadata)
    assert generic.fields == {"width_cm": 21}


def test_build_metadata_falls_back_on_bad_payload(caplog):
    with caplog.at_level(logging.WARNING):
        metadata = build_metadata("weapon", {"bogus": 1})
    assert metadata == WeaponMetadata()
    assert "Malformed weapon metadata" in caplog.text


def test_handled_by_and_for_case(ledger):
    ledger.add_custody_entry("crime_1_ev0", "det_ward", 70, "logged")
    assert [item.id for item in ledger.handled_by("det_ward")] == ["crime_1_ev0"]
    assert ledger.handled_by("nobody") == []
    assert [item.id for item in ledger.for_case("crime_1")] == ["crime_1_ev0"]


def test_copy_has_independent_custody(evidence):
    evidence.add_custody_entry("scene", 60, "collected")
    copy = evidence.model_copy()
    copy.add_custody_entry("intruder", 61, "transferred")
    assert [entry.actor for entry in evidence.custody_chain] == ["scene"]
    assert [entry.actor for entry in copy.custody_chain] == ["scene", "intruder"]


def test_custody_survives_dump_and_reload(evidence):
    evidence.add_custody_entry("scene", 60, "collected")
    evidence.add_custody_entry("lab", 90, "analyzed")
    dumped = evidence.model_dump()
    assert [entry["actor"] for entry in dumped["custody"]] == ["scene", "lab"]
    restored = Evidence.model_validate(dumped)
    assert restored.custody_chain == evidence.custody_chain
    assert isinstance(restored.metadata, WeaponMetadata)
