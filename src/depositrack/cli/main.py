"""Main CLI entry point."""

import logging

import click

from depositrack.cli.error_handling import handle_domain_error
from depositrack.config import CONFIG_PATH_ENV, Config
from depositrack.database.factories import DB_PATH_ENV, create_sqlite_store
from depositrack.domain.errors import DomainError

# Import and register all commands at module level
from depositrack.cli.commands import ingest, process, report


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides DEPOSITRACK_DB_PATH environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    help="Path to JSON config file (defaults to DEPOSITRACK_CONFIG, then ./config.json)",
    envvar=CONFIG_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Log storage and ingestion details")
@click.pass_context
def cli(ctx, db_path: str | None, config_path: str | None, verbose: bool):
    """Depositrack - Confirmed deposit reporting for wallet transactions.

    Loads wallet transaction exports, deduplicates them by (txid, vout) and
    reports confirmed deposits per known customer.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Open the store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            config = Config.load(config_path)
            store = create_sqlite_store(database_path=db_path or config.database_path)
        except DomainError as e:
            handle_domain_error(ctx, e)
        store.connect()
        store.initialize_schema()
        ctx.call_on_close(store.disconnect)
        ctx.obj["config"] = config
        ctx.obj["store"] = store


# Register all commands
ingest.register_commands(cli)
report.register_commands(cli)
process.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
