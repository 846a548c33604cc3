"""staffgen: synthetic employee record generator.

Produces lists of random employees (gender, name, surname, birthdate and
workload) for a requested count and age range.
"""

from .generator import EmployeeGenerator, generate
from .models import AgeRange, EmployeeRecord, GenerationRequest
from .utils.errors import ValidationError

__version__ = "0.1.0"

__all__ = [
    "AgeRange",
    "EmployeeGenerator",
    "EmployeeRecord",
    "GenerationRequest",
    "ValidationError",
    "generate",
    "__version__",
]
