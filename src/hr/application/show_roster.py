"""Application service: Show Roster use case (query)."""

from __future__ import annotations

from hr.application.dto import EmployeeDTO, RosterDTO
from hr.domain.service.employee_manager import EmployeeManager


class ShowRosterHandler:

    def __init__(self, manager: EmployeeManager) -> None:
        self._manager = manager

    def handle(self) -> RosterDTO:
        return RosterDTO(
            employees=[
                EmployeeDTO(
                    id=employee.id,
                    name=employee.name,
                    position=employee.position.name,
                    salary=str(employee.salary),
                )
                for employee in self._manager.get_employees()
            ],
            total_salary=str(self._manager.calculate_total_salary()),
        )
