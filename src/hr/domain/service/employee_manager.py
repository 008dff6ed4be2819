"""Domain service: Employee Manager.

Owns the registry of employees and is the only place allowed to change
an employee's salary or position.  Two invariants hold between any two
calls:

- every held employee's salary lies within their current position's band
- no two held employees share an ID

Every mutating operation validates first and mutates last, so a failed
call leaves the registry exactly as it found it.
"""

from __future__ import annotations

from decimal import Decimal

from loguru import logger

from hr.domain.exceptions import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    InvalidSalaryError,
)
from hr.domain.model.employee import Employee
from hr.domain.model.position import Position
from hr.domain.model.value_objects import Amount

# Silent when used as a library; configure_logging() turns it back on.
logger.disable("hr")


class EmployeeManager:

    def __init__(self) -> None:
        # dict keeps insertion order
        self._employees: dict[str, Employee] = {}

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def is_salary_valid_for_position(position: Position, salary: Amount) -> bool:
        """True iff ``position.min_salary <= salary <= position.max_salary``."""
        return position.band.contains(salary)

    # --- Commands -------------------------------------------------------------

    def add_employee(self, employee: Employee) -> None:
        """Register an employee at the end of the roster.

        Raises DuplicateEmployeeError if the ID is taken, then
        InvalidSalaryError if the salary is outside the position's band.
        """
        if employee.id in self._employees:
            logger.info("Rejected duplicate employee {}", employee.id)
            raise DuplicateEmployeeError(employee.id)

        self._ensure_salary_fits(employee.position, employee.salary)

        self._employees[employee.id] = employee
        logger.debug(
            "Added employee {} as {} at {}",
            employee.id, employee.position.name, employee.salary,
        )

    def remove_employee(self, employee: Employee) -> None:
        """Remove the held employee whose ID matches ``employee.id``."""
        held = self._resolve(employee)
        del self._employees[held.id]
        logger.debug("Removed employee {}", held.id)

    def update_employee_salary(self, employee: Employee, new_salary: Amount) -> None:
        """Change a held employee's salary within their current position's band.

        The salary is left untouched if the new value is out of band.
        """
        held = self._resolve(employee)
        self._ensure_salary_fits(held.position, new_salary)

        old_salary = held.salary
        held.change_salary(new_salary)
        logger.debug(
            "Updated salary of employee {}: {} -> {}", held.id, old_salary, held.salary
        )

    def update_employee_position(self, employee: Employee, new_position: Position) -> None:
        """Move a held employee to another position.

        The employee's *current* salary must fit the new band; the salary
        is never adjusted to make it fit.
        """
        held = self._resolve(employee)
        self._ensure_salary_fits(new_position, held.salary)

        old_position = held.position
        held.assign_position(new_position)
        logger.debug(
            "Moved employee {}: {} -> {}", held.id, old_position.name, new_position.name
        )

    # --- Queries --------------------------------------------------------------

    def get_employees(self) -> list[Employee]:
        """Return a copy of the roster in insertion order."""
        return list(self._employees.values())

    def find_employee(self, employee_id: str) -> Employee | None:
        return self._employees.get(employee_id)

    def calculate_total_salary(self) -> Decimal:
        total = Decimal("0")
        for employee in self._employees.values():
            total += employee.salary
        return total

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee: object) -> bool:
        return isinstance(employee, Employee) and employee.id in self._employees

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, employee: Employee) -> Employee:
        held = self._employees.get(employee.id)
        if held is None:
            logger.info("Employee {} is not registered", employee.id)
            raise EmployeeNotFoundError(employee.id)
        return held

    def _ensure_salary_fits(self, position: Position, salary: Amount) -> None:
        if not self.is_salary_valid_for_position(position, salary):
            logger.info(
                "Rejected salary {} for position {} {}",
                salary, position.name, position.band,
            )
            raise InvalidSalaryError(
                salary=salary,
                band=position.band,
                position_name=position.name,
            )
