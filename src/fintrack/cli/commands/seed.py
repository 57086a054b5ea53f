"""Demo data command."""

import click
from fintrack.domain.account import AccountService
from fintrack.domain.seed import seed_demo_accounts
from fintrack.utils.amount_parser import format_amount


@click.command("seed-demo")
@click.pass_context
def seed_demo(ctx):
    """Create a set of demo accounts when none exist yet."""
    db = ctx.obj["db"]
    created = seed_demo_accounts(AccountService(db))

    if not created:
        click.echo("Accounts already exist; nothing to seed.")
        return

    click.echo(f"Created {len(created)} demo accounts:")
    for acc in created:
        click.echo(f"  {acc.name} ({acc.account_type}): {format_amount(acc.balance)}")


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed_demo)
