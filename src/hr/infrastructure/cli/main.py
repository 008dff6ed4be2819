import click

from hr.infrastructure.bootstrap import DEFAULT_LOG_LEVEL
from hr.infrastructure.cli.roster_commands import roster_check, roster_list
from hr.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=DEFAULT_LOG_LEVEL,
    envvar="HR_LOG_LEVEL",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log verbosity (env: HR_LOG_LEVEL).",
)
def cli(log_level: str) -> None:
    """HR — Employee salary band registry"""
    configure_logging(log_level)


@cli.group()
def roster() -> None:
    """Validate and inspect roster files."""


# Register subcommands
roster.add_command(roster_check)
roster.add_command(roster_list)
