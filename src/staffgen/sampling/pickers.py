"""Pickers drawing one value at a time from a fixed list.

Two policies are available:

``uniform``
    :class:`UniformPicker` draws independently and uniformly on every call, so
    repeats across consecutive picks are possible.

``shuffled``
    :class:`ShuffledPicker` owns the immutable source list and a working pool
    holding a random permutation of it.  Each pick pops the next element; an
    empty pool is refilled with a freshly shuffled full copy.  No value repeats
    within one cycle of ``len(values)`` picks.

Both are stateful objects scoped to a single generation call.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from staffgen.config.schema import SamplingPolicy

from .rng import RandomSource

__all__ = ["Picker", "UniformPicker", "ShuffledPicker", "make_picker"]

T = TypeVar("T")


class Picker(Generic[T]):
    """Base class holding the immutable source values and the random source."""

    def __init__(self, values: Sequence[T], rng: RandomSource) -> None:
        if not values:
            raise ValueError("cannot pick from an empty list")
        self.values: tuple[T, ...] = tuple(values)
        self.rng = rng

    def __call__(self) -> T:
        return self.pick()

    def pick(self) -> T:  # pragma: no cover - abstract
        raise NotImplementedError


class UniformPicker(Picker[T]):
    """Independent uniform draw per call."""

    def pick(self) -> T:
        return self.values[self.rng.randrange(len(self.values))]


class ShuffledPicker(Picker[T]):
    """Shuffle-and-pop picker without replacement inside a cycle."""

    def __init__(self, values: Sequence[T], rng: RandomSource) -> None:
        super().__init__(values, rng)
        self.pool: list[T] = []
        self.cycles = 0
        self._refill()

    def _refill(self) -> None:
        pool = list(self.values)
        self.rng.shuffle(pool)
        self.pool = pool
        self.cycles += 1

    @property
    def remaining(self) -> int:
        """Number of values left before the next reshuffle."""

        return len(self.pool)

    def pick(self) -> T:
        if not self.pool:
            self._refill()
        return self.pool.pop()


def make_picker(policy: SamplingPolicy, values: Sequence[T], rng: RandomSource) -> Picker[T]:
    """Return the picker implementing ``policy`` over ``values``."""

    if policy == "shuffled":
        return ShuffledPicker(values, rng)
    if policy == "uniform":
        return UniformPicker(values, rng)
    raise ValueError(f"unknown sampling policy: {policy}")
