"""Sampling policies for generated employee fields."""

from .birthdate import age_at, format_iso, parse_iso, sample_birthdate, subtract_years
from .corpora import DEFAULT_WORKLOADS, NAMES, SURNAMES
from .pickers import Picker, ShuffledPicker, UniformPicker, make_picker
from .rng import RandomSource, rng_from_config, seeded_rng

__all__ = [
    "DEFAULT_WORKLOADS",
    "NAMES",
    "SURNAMES",
    "Picker",
    "RandomSource",
    "ShuffledPicker",
    "UniformPicker",
    "age_at",
    "format_iso",
    "make_picker",
    "parse_iso",
    "rng_from_config",
    "sample_birthdate",
    "seeded_rng",
    "subtract_years",
]
