"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PositionSpec:
    """Input: a position as described in a roster file."""

    id: str
    name: str
    min_salary: str
    max_salary: str


@dataclass(frozen=True)
class EmployeeSpec:
    """Input: an employee as described in a roster file."""

    id: str
    name: str
    position_id: str
    salary: str


@dataclass(frozen=True)
class EmployeeDTO:
    """Output: a single employee as displayed to the user."""

    id: str
    name: str
    position: str
    salary: str  # plain number, no currency formatting


@dataclass(frozen=True)
class RosterDTO:
    """Output: every registered employee plus the salary total."""

    employees: list[EmployeeDTO]
    total_salary: str
