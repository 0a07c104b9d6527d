"""Crime templates and seeded crime planning."""

from gumshoe.cases.generator import CaseGenerator, DEFAULT_LOCATION_ANCHOR
from gumshoe.cases.templates import CrimeTemplate, DEFAULT_TEMPLATES, parse_crime_templates

__all__ = [
    "CaseGenerator",
    "CrimeTemplate",
    "DEFAULT_LOCATION_ANCHOR",
    "DEFAULT_TEMPLATES",
    "parse_crime_templates",
]
