"""Main CLI entry point."""

import click
from fintrack.database.factories import create_database
from fintrack.domain.errors import StoreUnavailableError
from fintrack.logger import setup_logging

# Import and register all commands at module level
from fintrack.cli.commands import (
    account,
    income,
    expense,
    transfer,
    obligation,
    summary,
    seed,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy database URL (overrides FINTRACK_DATABASE_URL environment variable)",
    envvar="FINTRACK_DATABASE_URL",
)
@click.pass_context
def cli(ctx, db_path: str | None, database_url: str | None):
    """Fintrack - personal and small-business finance tracker.

    Record income, expenses and transfers against your accounts, keep track
    of receivables and payables, and see where the month stands.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_database(database_url=database_url, database_path=db_path)
        except StoreUnavailableError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
income.register_commands(cli)
expense.register_commands(cli)
transfer.register_commands(cli)
obligation.register_commands(cli)
summary.register_commands(cli)
seed.register_commands(cli)


def main():
    """Main entry point for CLI."""
    setup_logging(default_level="WARNING")
    cli()


if __name__ == "__main__":
    main()
