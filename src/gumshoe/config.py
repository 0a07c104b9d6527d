"""Seed configuration and crime template loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import yaml

from gumshoe.cases.templates import CrimeTemplate, DEFAULT_TEMPLATES, parse_crime_templates

logger = logging.getLogger(__name__)

SEED = 1337
DEFAULT_BLOCKS = 6
DEFAULT_START_TIME_MIN = 8 * 60
DEFAULT_NEIGHBORHOOD = "Harbor Row"


class SeedConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    city_seed: int = SEED
    blocks: int = Field(default=DEFAULT_BLOCKS, ge=1)
    start_time_min: int = Field(default=DEFAULT_START_TIME_MIN, ge=0, le=1439)
    neighborhood_name: str = DEFAULT_NEIGHBORHOOD


def parse_seed_config(payload: Any) -> SeedConfig:
    """Validate already-parsed config data, falling back to defaults."""
    if payload is None:
        logger.warning("Seed config is empty; using default seed %s", SEED)
        return SeedConfig()
    if not isinstance(payload, Mapping):
        logger.warning(
            "Seed config must be a mapping, got %s; using default seed %s",
            type(payload).__name__,
            SEED,
        )
        return SeedConfig()
    try:
        return SeedConfig.model_validate(dict(payload))
    except ValidationError as exc:
        logger.warning("Malformed seed config (%s); using default seed %s", exc.error_count(), SEED)
        logger.debug("Seed config errors: %s", exc)
        return SeedConfig()


def _read_yaml(path: Path, label: str) -> tuple[bool, Any]:
    if not path.exists():
        logger.warning("%s not found at %s", label, path)
        return False, None
    try:
        return True, yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Could not read %s at %s: %s", label, path, exc)
        return False, None


def load_seed_config(path: Path | str | None = None) -> SeedConfig:
    """Load the seed config from YAML (JSON is accepted too)."""
    if path is None:
        logger.warning("No seed config path given; using default seed %s", SEED)
        return SeedConfig()
    ok, payload = _read_yaml(Path(path), "Seed config")
    if not ok:
        logger.warning("Using default seed %s", SEED)
        return SeedConfig()
    return parse_seed_config(payload)


def load_crime_templates(path: Path | str | None = None) -> list[CrimeTemplate]:
    """Load crime templates; the built-in set is used when the file is unusable."""
    if path is None:
        return list(DEFAULT_TEMPLATES)
    ok, payload = _read_yaml(Path(path), "Crime templates")
    if not ok:
        return list(DEFAULT_TEMPLATES)
    if isinstance(payload, Mapping):
        payload = payload.get("templates")
    if not isinstance(payload, list):
        logger.warning("Crime templates at %s are not a list; using built-in templates", path)
        return list(DEFAULT_TEMPLATES)
    return parse_crime_templates(payload)
