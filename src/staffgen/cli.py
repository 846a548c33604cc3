"""Typer-based command line interface for the employee generator.

The ``generate`` command validates the requested count and age range, builds
the records and prints them as JSON to stdout, or writes them to ``--out``.

Exit codes
----------
0 success
3 I/O error (unsupported output extension, filesystem issues)
4 configuration error
5 invalid generation request
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
import yaml
from pydantic import ValidationError as ConfigValidationError

from .config import ConfigModel, load_config
from .config.schema import parse_seed
from .generator import EmployeeGenerator
from .io import records_to_json, write_records
from .models import AgeRange, GenerationRequest
from .utils.errors import OutputFormatError, ValidationError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="staffgen",
    help="Synthetic employee records. Use 'staffgen generate' to produce a list.",
)

_POLICIES = ("shuffled", "uniform")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    seed: str | None,
    names: str | None,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if seed is not None:
        new_cfg.seed.value = parse_seed(seed)
    if names is not None:
        new_cfg.sampling.names = names  # type: ignore[assignment]
    return new_cfg


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the staffgen command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    count: int = typer.Option(..., "--count", "-n", help="Number of employees"),  # noqa: B008
    min_age: int = typer.Option(..., "--min-age", help="Minimum age (inclusive)"),  # noqa: B008
    max_age: int = typer.Option(..., "--max-age", help="Maximum age (exclusive)"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible output"
    ),
    names: Optional[str] = typer.Option(  # noqa: B008
        None, "--names", help="Name sampling policy [shuffled|uniform]"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file (.json or .jsonl); stdout when omitted"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Generate ``--count`` employees aged within ``[--min-age, --max-age)``."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
    except (ConfigValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if names is not None and names not in _POLICIES:
        _safe_exit(4, f"Unknown name sampling policy: {names}")
    cfg = _apply_overrides(cfg, seed=seed, names=names)
    if verbose:
        typer.echo("Loaded config", err=True)

    request = GenerationRequest(count=count, age=AgeRange(min=min_age, max=max_age))
    generator = EmployeeGenerator(cfg)
    try:
        with Timing() as t_gen:
            records = generator.generate(request)
    except ValidationError as exc:
        _safe_exit(5, str(exc))
    if verbose:
        typer.echo(f"Generated {len(records)} records in {t_gen.ms:.1f} ms", err=True)

    indent = cfg.output.indent
    ensure_ascii = cfg.output.ensure_ascii
    if out_path is None:
        typer.echo(records_to_json(records, indent=indent, ensure_ascii=ensure_ascii))
        return

    try:
        write_records(out_path, records, indent=indent, ensure_ascii=ensure_ascii)
    except (OutputFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {out_path}", err=True)
