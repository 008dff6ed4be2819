"""Application service: Load Roster use case.

Builds Positions and Employees from plain specs and registers every
employee with a fresh EmployeeManager, in the order given.  The first
business rule violation aborts the load and propagates unchanged.
"""

from __future__ import annotations

from loguru import logger

from hr.application.dto import EmployeeSpec, PositionSpec
from hr.domain.exceptions import EntityNotFoundError, ValidationError
from hr.domain.model.employee import Employee
from hr.domain.model.position import Position
from hr.domain.service.employee_manager import EmployeeManager


class LoadRosterHandler:

    def __init__(self, manager: EmployeeManager) -> None:
        self._manager = manager

    def handle(
        self,
        position_specs: list[PositionSpec],
        employee_specs: list[EmployeeSpec],
    ) -> EmployeeManager:
        positions = self._build_positions(position_specs)

        for spec in employee_specs:
            position = positions.get(spec.position_id)
            if position is None:
                raise EntityNotFoundError(
                    f"Position not found: '{spec.position_id}' "
                    f"(employee '{spec.id}')"
                )
            self._manager.add_employee(
                Employee(
                    id=spec.id,
                    name=spec.name,
                    position=position,
                    salary=spec.salary,
                )
            )

        logger.info(
            "Loaded {} employees across {} positions",
            len(self._manager), len(positions),
        )
        return self._manager

    @staticmethod
    def _build_positions(specs: list[PositionSpec]) -> dict[str, Position]:
        positions: dict[str, Position] = {}
        for spec in specs:
            if spec.id in positions:
                raise ValidationError(f"Duplicate position ID '{spec.id}'")
            positions[spec.id] = Position(
                id=spec.id,
                name=spec.name,
                min_salary=spec.min_salary,
                max_salary=spec.max_salary,
            )
        return positions
