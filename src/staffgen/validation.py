"""Input validation for generation requests.

All checks run before any sampling so a rejected request never produces
partial output.  ``bool`` is rejected even though it subclasses ``int``, and
floats are rejected even when integral.
"""

from __future__ import annotations

from typing import Any

from .models import GenerationRequest
from .utils.errors import ValidationError

__all__ = ["DEFAULT_MIN_AGE", "DEFAULT_MAX_AGE", "is_strict_int", "validate_request"]

DEFAULT_MIN_AGE = 14
DEFAULT_MAX_AGE = 99


def is_strict_int(value: Any) -> bool:
    """Return ``True`` for ``int`` values that are not ``bool``."""

    return isinstance(value, int) and not isinstance(value, bool)


def validate_request(
    request: GenerationRequest,
    *,
    lower: int = DEFAULT_MIN_AGE,
    upper: int = DEFAULT_MAX_AGE,
) -> GenerationRequest:
    """Check ``request`` and return it unchanged.

    Raises :class:`~staffgen.utils.errors.ValidationError` when the count is
    not a positive integer, when either age is not an integer within
    ``[lower, upper]`` or when ``min >= max``.
    """

    count = request.count
    if not is_strict_int(count) or count <= 0:
        raise ValidationError("Invalid input: count must be a positive integer.")

    min_age = request.age.min
    max_age = request.age.max
    if not is_strict_int(min_age) or not lower <= min_age <= upper:
        raise ValidationError(f"Invalid input: min age must be integer in [{lower},{upper}]")
    if not is_strict_int(max_age) or not lower <= max_age <= upper:
        raise ValidationError(f"Invalid input: max age must be integer in [{lower},{upper}]")
    if min_age >= max_age:
        raise ValidationError("Invalid input: min age must be less than max age")
    return request
