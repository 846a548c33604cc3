"""Random sources for the samplers.

Every sampler draws from a :class:`RandomSource`, a structural type satisfied by
:class:`random.Random`.  Tests inject seeded instances; production code either
derives one from a configured seed via :func:`seeded_rng` or falls back to OS
entropy.

Seed derivation hashes the seed together with a namespace and a ``kind`` label
using SHA-256, so different consumers of the same seed get independent streams
while the same ``(seed, kind)`` pair always yields the same stream.
"""

from __future__ import annotations

import hashlib
import random
from collections.abc import MutableSequence
from typing import Any, Final, Protocol, runtime_checkable

from staffgen.config import ConfigModel

__all__ = ["RandomSource", "seeded_rng", "rng_from_config"]

_NS_RNG: Final = b"staffgen/v1/rng"


@runtime_checkable
class RandomSource(Protocol):
    """Minimal interface the samplers rely on."""

    def random(self) -> float: ...

    def randrange(self, start: int, stop: int | None = ..., step: int = ...) -> int: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def seeded_rng(seed: int | str, kind: str = "generator") -> random.Random:
    """Derive a reproducible RNG for ``seed`` and ``kind``."""

    data = _NS_RNG + kind.encode("utf-8") + b"\x00" + str(seed).encode("utf-8")
    digest = hashlib.sha256(data).digest()
    return random.Random(int.from_bytes(digest, "big"))


def rng_from_config(cfg: ConfigModel, kind: str = "generator") -> random.Random:
    """Return a seeded RNG when ``cfg.seed.value`` is set, else an entropy-seeded one."""

    if cfg.seed.value is None:
        return random.Random()
    return seeded_rng(cfg.seed.value, kind)
