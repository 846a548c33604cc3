"""Typed configuration schema and loader for the staffgen package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator, model_validator

SamplingPolicy = Literal["shuffled", "uniform"]

# Widest age range a configuration may allow.
MIN_SUPPORTED_AGE = 14
MAX_SUPPORTED_AGE = 99


def parse_seed(raw: str) -> int | str:
    """Return ``raw`` as an ``int`` when it is one, else the string unchanged."""

    try:
        return int(raw)
    except ValueError:
        return raw


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class AgeSettings(BaseModel):
    """Inclusive bounds for the ages a request may ask for."""

    lower_bound: conint(ge=MIN_SUPPORTED_AGE, le=MAX_SUPPORTED_AGE)
    upper_bound: conint(ge=MIN_SUPPORTED_AGE, le=MAX_SUPPORTED_AGE)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_order(self) -> "AgeSettings":
        if self.lower_bound >= self.upper_bound:
            raise ValueError("ages.lower_bound must be less than ages.upper_bound")
        return self


class SamplingSettings(BaseModel):
    """Sampling policy per field."""

    names: SamplingPolicy
    workloads: SamplingPolicy

    model_config = ConfigDict(extra="forbid")


class SeedSettings(BaseModel):
    """Seed for reproducible generation; ``None`` draws from OS entropy."""

    seed_env: str
    value: int | str | None = None

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """JSON rendering options."""

    indent: conint(ge=0) | None = 2
    ensure_ascii: bool = False

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    ages: AgeSettings
    workloads: list[conint(gt=0)]
    sampling: SamplingSettings
    seed: SeedSettings
    output: OutputSettings

    model_config = ConfigDict(extra="forbid")

    @field_validator("workloads")
    @classmethod
    def _check_workloads(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("workloads must not be empty")
        if len(set(value)) != len(value):
            raise ValueError("workloads must not contain duplicates")
        return value


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < environment
    variable named by ``seed.seed_env``.
    """

    with (
        importlib_resources.files("staffgen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.seed_env
    raw = environ.get(seed_env)
    if raw:
        cfg.seed.value = parse_seed(raw)

    return cfg


__all__ = [
    "ConfigModel",
    "AgeSettings",
    "SamplingSettings",
    "SeedSettings",
    "OutputSettings",
    "SamplingPolicy",
    "MIN_SUPPORTED_AGE",
    "MAX_SUPPORTED_AGE",
    "parse_seed",
    "deep_merge_dicts",
    "load_config",
]
