"""Employee — a worker holding one position and a salary."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from hr.domain.model.position import Position
from hr.domain.model.value_objects import Amount, to_amount


@dataclass(eq=False)
class Employee:
    """A registered (or soon to be registered) employee.

    Compared by identity; the manager matches employees by ``id`` itself.
    ``position`` is a live reference to a shared Position, so band checks
    always see the position currently assigned.

    Salary and position are changed through ``change_salary()`` and
    ``assign_position()``, which the EmployeeManager calls only after the
    salary band check passes.
    """

    id: str
    name: str
    position: Position
    salary: Decimal

    def __post_init__(self) -> None:
        self.salary = to_amount(self.salary)

    def change_salary(self, new_salary: Amount) -> None:
        self.salary = to_amount(new_salary)

    def assign_position(self, new_position: Position) -> None:
        self.position = new_position
