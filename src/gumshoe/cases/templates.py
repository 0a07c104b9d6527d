"""Crime templates: prototype records that crimes are instantiated from."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from gumshoe.domain.enums import CrimeType

logger = logging.getLogger(__name__)


class CrimeTemplate(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: CrimeType = CrimeType.THEFT
    severity: int = 1

    @field_validator("type", mode="before")
    @classmethod
    def _known_type(cls, value: Any) -> Any:
        if value is None:
            return CrimeType.THEFT
        label = str(value).strip().lower()
        if label not in {item.value for item in CrimeType}:
            logger.warning("Unknown crime type %r in template; using theft", value)
            return CrimeType.THEFT
        return label

    @field_validator("severity", mode="before")
    @classmethod
    def _clamp_severity(cls, value: Any) -> int:
        if value is None:
            return 1
        return max(1, min(5, int(value)))


DEFAULT_TEMPLATES: tuple[CrimeTemplate, ...] = (
    CrimeTemplate(type=CrimeType.THEFT, severity=1),
    CrimeTemplate(type=CrimeType.BURGLARY, severity=2),
    CrimeTemplate(type=CrimeType.ASSAULT, severity=3),
    CrimeTemplate(type=CrimeType.MURDER, severity=5),
)


def parse_crime_templates(records: Iterable[Mapping[str, Any]] | None) -> list[CrimeTemplate]:
    """Build templates from parsed records, skipping entries that cannot be read."""
    templates: list[CrimeTemplate] = []
    for index, record in enumerate(records or []):
        if not isinstance(record, Mapping):
            logger.warning("Skipping crime template %d: expected a mapping, got %r", index, record)
            continue
        try:
            templates.append(CrimeTemplate.model_validate(dict(record)))
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping crime template %d: %s", index, exc)
    return templates
