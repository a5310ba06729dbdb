"""Transaction file resolution for CLI commands."""

from pathlib import Path

import click

from depositrack.config import Config


def resolve_transaction_files(ctx: click.Context, files: tuple[str, ...]) -> list[Path]:
    """Return files given on the command line, or the configured ones."""
    if files:
        return [Path(f) for f in files]

    config: Config = ctx.obj["config"]
    if not config.transaction_files:
        click.echo(
            "Error: No transaction files given and none configured in 'transactionFiles'.",
            err=True,
        )
        ctx.exit(1)
    return list(config.transaction_files)
