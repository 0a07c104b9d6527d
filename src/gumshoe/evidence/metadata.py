"""Type-specific evidence metadata variants."""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gumshoe.domain.enums import EvidenceKind

logger = logging.getLogger(__name__)


class FingerprintMetadata(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["fingerprint"] = "fingerprint"
    template_hash: str = ""
    partial: bool = False
    surface: str = "unknown"


class WeaponMetadata(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["weapon"] = "weapon"
    weapon_class: str = "unknown"
    serial: str = ""
    blood_traces: bool = False


class NoteMetadata(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["note"] = "note"
    text: str = ""
    handwriting: str = "unknown"


class DnaMetadata(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["dna"] = "dna"
    sample_kind: str = "unknown"
    profile_hash: str = ""


class GenericMetadata(BaseModel):
    """Open key/value payload for evidence types without a dedicated schema."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["generic"] = "generic"
    fields: Dict[str, str | int | float | bool] = Field(default_factory=dict)


EvidenceMetadata = Annotated[
    Union[FingerprintMetadata, WeaponMetadata, NoteMetadata, DnaMetadata, GenericMetadata],
    Field(discriminator="kind"),
]

METADATA_TYPES: dict[str, type[BaseModel]] = {
    EvidenceKind.FINGERPRINT: FingerprintMetadata,
    EvidenceKind.WEAPON: WeaponMetadata,
    EvidenceKind.NOTE: NoteMetadata,
    EvidenceKind.DNA: DnaMetadata,
}


def build_metadata(evidence_type: str, payload: Mapping[str, Any] | None = None):
    """Pick the metadata variant for an evidence type tag.

    Unknown tags get a GenericMetadata carrying the payload as-is. A payload
    that does not fit its variant is logged and replaced by the variant's
    defaults.
    """
    payload = dict(payload or {})
    payload.pop("kind", None)
    model = METADATA_TYPES.get(evidence_type.strip().lower())
    if model is None:
        return GenericMetadata(fields=payload)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Malformed %s metadata, using defaults: %s", evidence_type, exc)
        return model()


def merge_metadata(metadata, fields: Mapping[str, Any]):
    """Return a new metadata value with `fields` applied; raises ValidationError."""
    if isinstance(metadata, GenericMetadata):
        merged = dict(metadata.fields)
        merged.update(fields)
        return GenericMetadata(fields=merged)
    data = metadata.model_dump()
    data.update(fields)
    return type(metadata).model_validate(data)
