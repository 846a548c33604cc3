"""Extension based registry for writing generated records.

The output is always the list of record dictionaries.  ``.json`` writes a
single JSON array and ``.jsonl`` writes one record per line.  Writing to any
other extension raises :class:`~staffgen.utils.errors.OutputFormatError`.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable

from .models import EmployeeRecord
from .utils.errors import OutputFormatError

__all__ = [
    "register_writer",
    "get_extension",
    "records_to_json",
    "records_to_jsonl",
    "write_records",
]

WriterFunc = Callable[..., str]

_WRITERS: dict[str, WriterFunc] = {}


def register_writer(ext: str, func: WriterFunc) -> None:
    """Register a renderer for files ending with ``ext``.

    The renderer receives the records plus ``indent``/``ensure_ascii`` keyword
    arguments and returns the text to write.
    """

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot)."""

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def _as_dicts(records: Iterable[EmployeeRecord]) -> list[dict[str, Any]]:
    return [record.to_dict() for record in records]


def records_to_json(
    records: Iterable[EmployeeRecord],
    *,
    indent: int | None = 2,
    ensure_ascii: bool = False,
) -> str:
    """Render ``records`` as a JSON array."""

    return json.dumps(_as_dicts(records), indent=indent, ensure_ascii=ensure_ascii)


def records_to_jsonl(
    records: Iterable[EmployeeRecord],
    *,
    indent: int | None = None,
    ensure_ascii: bool = False,
) -> str:
    """Render ``records`` as JSON Lines; ``indent`` is ignored."""

    lines = [json.dumps(item, ensure_ascii=ensure_ascii) for item in _as_dicts(records)]
    return "".join(line + "\n" for line in lines)


def write_records(
    path: str | os.PathLike[str],
    records: Iterable[EmployeeRecord],
    *,
    indent: int | None = 2,
    ensure_ascii: bool = False,
) -> Path:
    """Write ``records`` to ``path`` choosing the format from its extension."""

    ext = get_extension(path)
    render = _WRITERS.get(ext)
    if render is None:
        raise OutputFormatError(f"No writer registered for extension '{ext}'")
    text = render(records, indent=indent, ensure_ascii=ensure_ascii)
    out = Path(path)
    out.write_text(text, encoding="utf-8")
    return out


register_writer(".json", records_to_json)
register_writer(".jsonl", records_to_jsonl)
