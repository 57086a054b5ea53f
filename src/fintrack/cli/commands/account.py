"""Account management commands."""

import click
from fintrack.cli.error_handling import handle_domain_error, resolve_account_or_exit
from fintrack.domain.account import AccountService
from fintrack.domain.entities import AccountType
from fintrack.utils.amount_parser import format_amount


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice([t.value for t in AccountType], case_sensitive=False),
    default=AccountType.CHECKING.value,
    help="Account type (default: checking)",
)
@click.option("--number", "account_number", required=True, help="Account number (at least 4 digits)")
@click.option("--balance", help="Opening balance (defaults to 0.00)")
@click.pass_context
def create_account(ctx, name: str, account_type: str, account_number: str, balance: str | None):
    """Create a new account.

    Examples:
        fintrack account create "Chase Checking" --number 1234-5678
        fintrack account create "Rainy Day" --type savings --number 9012 --balance 500.00
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        account = service.create_account(
            name=name,
            account_type=account_type.lower(),
            account_number=account_number,
            initial_balance=balance,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created account '{account.name}' (ID: {account.id})")
    click.echo(f"  Balance: {format_amount(account.balance)}")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 72)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | {acc.account_type:8s} | "
            f"{acc.account_number:12s} | {format_amount(acc.balance):>12s}"
        )
    click.echo("-" * 72)
    click.echo(f"Total balance: {format_amount(service.total_balance())}")


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show one account.

    ACCOUNT can be an account name or ID.
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.require_account(account_id)
    click.echo(f"Account {acc.id}: {acc.name}")
    click.echo(f"  Type: {acc.account_type}")
    click.echo(f"  Number: {acc.account_number}")
    click.echo(f"  Balance: {format_amount(acc.balance)}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
