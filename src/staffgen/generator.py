"""Employee record generator.

:class:`EmployeeGenerator` validates a :class:`~staffgen.models.GenerationRequest`
and then produces ``count`` records in order.  For every record it assigns a
gender with probability 0.5, picks a name and surname from the lists matching
that gender, samples a birthdate inside the requested age range and draws a
workload from the configured set.

Pickers are rebuilt on every :meth:`EmployeeGenerator.generate` call, so
shuffled pools never leak between calls.  The random source is owned by the
generator instance; pass a seeded :class:`random.Random` for reproducible
output.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from .config import ConfigModel, load_config
from .models import EmployeeRecord, Gender, GenerationRequest
from .sampling.birthdate import sample_birthdate
from .sampling.corpora import NAMES, SURNAMES
from .sampling.pickers import Picker, make_picker
from .sampling.rng import RandomSource, rng_from_config
from .utils.logging import get_logger
from .validation import validate_request

__all__ = ["EmployeeGenerator", "assign_gender", "generate"]

log = get_logger(__name__)


def assign_gender(rng: RandomSource) -> Gender:
    """Return ``"male"`` or ``"female"`` with equal probability."""

    return "male" if rng.random() < 0.5 else "female"


class EmployeeGenerator:
    """Generate random employee records."""

    def __init__(self, cfg: ConfigModel | None = None, *, rng: RandomSource | None = None) -> None:
        """Initialize the generator.

        Parameters
        ----------
        cfg:
            Configuration; package defaults are loaded when omitted.
        rng:
            Random source.  When omitted it is derived from ``cfg.seed``.
        """

        self.cfg: ConfigModel = cfg if cfg is not None else load_config()
        self.rng: RandomSource = rng if rng is not None else rng_from_config(self.cfg)

    def validate(self, request: GenerationRequest | Mapping[str, Any]) -> GenerationRequest:
        """Coerce ``request`` into a :class:`GenerationRequest` and check it."""

        if not isinstance(request, GenerationRequest):
            request = GenerationRequest.from_mapping(request)
        ages = self.cfg.ages
        return validate_request(request, lower=ages.lower_bound, upper=ages.upper_bound)

    def _name_pickers(self) -> tuple[dict[Gender, Picker[str]], dict[Gender, Picker[str]]]:
        policy = self.cfg.sampling.names
        names = {g: make_picker(policy, values, self.rng) for g, values in NAMES.items()}
        surnames = {g: make_picker(policy, values, self.rng) for g, values in SURNAMES.items()}
        return names, surnames

    def generate(
        self,
        request: GenerationRequest | Mapping[str, Any],
        *,
        today: datetime | None = None,
    ) -> list[EmployeeRecord]:
        """Return ``request.count`` records; nothing is sampled if validation fails."""

        request = self.validate(request)
        if today is None:
            today = datetime.now(timezone.utc)
        log.debug(
            "Generating %d employees aged [%d, %d) with %s name sampling",
            request.count,
            request.age.min,
            request.age.max,
            self.cfg.sampling.names,
        )

        pick_name, pick_surname = self._name_pickers()
        pick_workload = make_picker(self.cfg.sampling.workloads, self.cfg.workloads, self.rng)

        records: list[EmployeeRecord] = []
        for _ in range(request.count):
            gender = assign_gender(self.rng)
            records.append(
                EmployeeRecord(
                    gender=gender,
                    name=pick_name[gender](),
                    surname=pick_surname[gender](),
                    birthdate=sample_birthdate(request.age.min, request.age.max, today, self.rng),
                    workload=pick_workload(),
                )
            )

        log.info("Generated %d employee records", len(records))
        return records


def generate(
    request: GenerationRequest | Mapping[str, Any],
    *,
    cfg: ConfigModel | None = None,
    rng: RandomSource | None = None,
    today: datetime | None = None,
) -> list[EmployeeRecord]:
    """Validate ``request`` and generate its employee records."""

    return EmployeeGenerator(cfg, rng=rng).generate(request, today=today)
