"""Tests for loguru configuration."""

from loguru import logger

from hr.domain.model.employee import Employee
from hr.domain.model.position import Position
from hr.domain.service.employee_manager import EmployeeManager
from hr.infrastructure.logging_config import configure_logging

JUNIOR = Position("1", "Junior Developer", 30000, 50000)


class TestConfigureLogging:

    def test_domain_logs_silent_until_configured(self, capsys):
        logger.disable("hr")
        messages = []
        sink_id = logger.add(messages.append, level="DEBUG")
        try:
            EmployeeManager().add_employee(Employee("1", "John Doe", JUNIOR, 40000))
            assert messages == []

            configure_logging("DEBUG")
            EmployeeManager().add_employee(Employee("2", "Jane Smith", JUNIOR, 45000))

            assert "Added employee 2" in capsys.readouterr().err
        finally:
            logger.remove()
            logger.disable("hr")

    def test_level_filters_debug(self, capsys):
        try:
            configure_logging("WARNING")
            EmployeeManager().add_employee(Employee("1", "John Doe", JUNIOR, 40000))

            assert "Added employee" not in capsys.readouterr().err
        finally:
            logger.remove()
            logger.disable("hr")
