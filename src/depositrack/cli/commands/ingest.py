"""Transaction ingest command."""

import click

from depositrack.cli.error_handling import handle_domain_error
from depositrack.cli.sources import resolve_transaction_files
from depositrack.domain.deposits import DepositService
from depositrack.domain.errors import DomainError
from depositrack.utils.transaction_loader import load_transaction_files


@click.command("ingest")
@click.argument("files", nargs=-1, type=click.Path())
@click.pass_context
def ingest(ctx, files: tuple[str, ...]):
    """Replace stored transactions with the contents of FILES.

    FILES default to the config's 'transactionFiles'.
    """
    store = ctx.obj["store"]
    service = DepositService(store)
    paths = resolve_transaction_files(ctx, files)

    try:
        records = load_transaction_files(paths)
        result = service.load(records)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("Ingest complete:")
    click.echo(f"  Read: {len(records)} records from {len(paths)} file(s)")
    click.echo(f"  Stored: {result.total} unique transactions")


def register_commands(cli):
    """Register ingest command with main CLI."""
    cli.add_command(ingest)
