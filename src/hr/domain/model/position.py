"""Position — a named salary band.

Positions live independently of employees: they are created up front,
never mutated, and may be shared by any number of employees.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from hr.domain.model.value_objects import SalaryBand


@dataclass(frozen=True)
class Position:
    """A job position and the salary band it pays within.

    The bounds are checked once here (``min_salary <= max_salary``);
    the manager trusts them afterwards.
    """

    id: str
    name: str
    min_salary: Decimal
    max_salary: Decimal

    def __post_init__(self) -> None:
        band = SalaryBand(self.min_salary, self.max_salary)
        object.__setattr__(self, "min_salary", band.minimum)
        object.__setattr__(self, "max_salary", band.maximum)

    @property
    def band(self) -> SalaryBand:
        return SalaryBand(self.min_salary, self.max_salary)

    def __str__(self) -> str:
        return f"{self.name} {self.band}"
