"""Core data models for generation requests and employee records.

Requests are immutable and validated once, before any sampling happens.
Records are plain frozen dataclasses; :meth:`EmployeeRecord.to_dict` yields the
output shape ``{gender, name, surname, birthdate, workload}`` in that key order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .utils.errors import ValidationError

__all__ = ["Gender", "GENDERS", "AgeRange", "GenerationRequest", "EmployeeRecord"]

Gender = Literal["male", "female"]

GENDERS: tuple[Gender, Gender] = ("male", "female")


@dataclass(frozen=True, slots=True)
class AgeRange:
    """Half-open age interval ``[min, max)`` in whole years."""

    min: int
    max: int


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """Number of records to produce and the age range they must fall in."""

    count: int
    age: AgeRange

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationRequest":
        """Build a request from ``{"count": n, "age": {"min": a, "max": b}}``.

        Only the shape is checked here; value rules are applied by
        :func:`staffgen.validation.validate_request`.
        """

        if not isinstance(data, Mapping):
            raise ValidationError("Invalid input: request must be a mapping.")
        if "count" not in data:
            raise ValidationError("Invalid input: count is required.")
        age = data.get("age")
        if not isinstance(age, Mapping):
            raise ValidationError("Invalid input: age must be a mapping with min and max.")
        if "min" not in age or "max" not in age:
            raise ValidationError("Invalid input: age must define min and max.")
        return cls(count=data["count"], age=AgeRange(min=age["min"], max=age["max"]))


@dataclass(frozen=True, slots=True)
class EmployeeRecord:
    """One generated employee."""

    gender: Gender
    name: str
    surname: str
    birthdate: str
    workload: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "gender": self.gender,
            "name": self.name,
            "surname": self.surname,
            "birthdate": self.birthdate,
            "workload": self.workload,
        }
