"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Callers that need to branch on the failure use the concrete subclasses and
their attributes, never the message text.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateEmployeeError(ValidationError):
    """An employee with the same ID is already registered."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Duplicate employee: ID '{employee_id}' is already registered")


class InvalidSalaryError(ValidationError):
    """A salary falls outside the band of the position it is checked against."""

    def __init__(self, salary, band, position_name: str) -> None:
        self.salary = salary
        self.band = band
        self.position_name = position_name
        super().__init__(
            f"Invalid salary for position '{position_name}': "
            f"Salary is not within the range {band} (got {salary})"
        )


class EmployeeNotFoundError(EntityNotFoundError):
    """No registered employee has the requested ID."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee not found: ID '{employee_id}'")
