"""CLI commands for roster files.

Rosters are loaded into a fresh in-memory EmployeeManager on every run;
nothing is written back.
"""

from __future__ import annotations

from pathlib import Path

import click

from hr.application.load_roster import LoadRosterHandler
from hr.application.show_roster import ShowRosterHandler
from hr.domain.exceptions import DomainException
from hr.domain.service.employee_manager import EmployeeManager
from hr.infrastructure.bootstrap import DEFAULT_ROSTER_PATH, employee_manager
from hr.infrastructure.roster_file import read_roster

_roster_argument = click.argument(
    "path",
    required=False,
    default=DEFAULT_ROSTER_PATH,
    envvar="HR_ROSTER",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def _load(path: Path) -> EmployeeManager:
    try:
        positions, employees = read_roster(path)
        return LoadRosterHandler(employee_manager()).handle(positions, employees)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("check")
@_roster_argument
def roster_check(path: Path) -> None:
    """Check that every employee's salary fits their position."""
    manager = _load(path)
    roster = ShowRosterHandler(manager).handle()
    click.echo(
        f"OK: {len(roster.employees)} employees, total salary {roster.total_salary}"
    )


@click.command("list")
@_roster_argument
def roster_list(path: Path) -> None:
    """List the employees of a roster file."""
    manager = _load(path)
    roster = ShowRosterHandler(manager).handle()

    if not roster.employees:
        click.echo("No employees found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Position':<20} {'Salary':>12}")
    click.echo("-" * 61)
    for e in roster.employees:
        click.echo(f"{e.id:<6} {e.name:<20} {e.position:<20} {e.salary:>12}")
    click.echo("-" * 61)
    click.echo(f"{'Total':<48} {roster.total_salary:>12}")
