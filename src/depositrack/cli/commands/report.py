"""Deposit report commands."""

import click

from depositrack.cli.error_handling import handle_domain_error
from depositrack.domain.deposits import DepositService
from depositrack.domain.entities import DepositReport
from depositrack.domain.errors import DomainError
from depositrack.domain.report import format_report


def echo_report(report: DepositReport) -> None:
    """Print report lines."""
    for line in format_report(report):
        click.echo(line)


@click.command("report")
@click.pass_context
def report(ctx):
    """Report confirmed deposits of the stored transactions."""
    service = DepositService(ctx.obj["store"])
    config = ctx.obj["config"]

    try:
        deposit_report = service.build_report(config.known_customers)
    except DomainError as e:
        handle_domain_error(ctx, e)

    echo_report(deposit_report)


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
