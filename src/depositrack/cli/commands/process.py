"""Full ingest-and-report run."""

import click

from depositrack.cli.commands.report import echo_report
from depositrack.cli.error_handling import handle_domain_error
from depositrack.cli.sources import resolve_transaction_files
from depositrack.domain.deposits import DepositService
from depositrack.domain.errors import DomainError
from depositrack.utils.transaction_loader import load_transaction_files


@click.command("process")
@click.argument("files", nargs=-1, type=click.Path())
@click.pass_context
def process(ctx, files: tuple[str, ...]):
    """Load FILES into a fresh store and report confirmed deposits.

    FILES default to the config's 'transactionFiles'.
    """
    service = DepositService(ctx.obj["store"])
    config = ctx.obj["config"]
    paths = resolve_transaction_files(ctx, files)

    try:
        records = load_transaction_files(paths)
        deposit_report = service.process(records, config.known_customers)
    except DomainError as e:
        handle_domain_error(ctx, e)

    echo_report(deposit_report)


def register_commands(cli):
    """Register process command with main CLI."""
    cli.add_command(process)
