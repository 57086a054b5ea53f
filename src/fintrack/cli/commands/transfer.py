"""Transfer commands."""

import click
from fintrack.cli.error_handling import handle_domain_error, resolve_account_or_exit
from fintrack.domain.account import AccountService
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import format_amount
from fintrack.utils.date_parser import parse_date


@click.group()
def transfer_group():
    """Move money between accounts."""
    pass


@transfer_group.command("add")
@click.option("--from", "from_account", required=True, help="Source account name or ID")
@click.option("--to", "to_account", required=True, help="Destination account name or ID")
@click.option("--amount", required=True, help="Amount to move")
@click.option("--date", "date_str", default="today", show_default=True,
              help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--description", help="Description")
@click.pass_context
def add_transfer(ctx, from_account: str, to_account: str, amount: str, date_str: str,
                 description: str | None):
    """Transfer money from one account to another.

    Examples:
        fintrack transfer add --from "Chase Checking" --to "Chase Savings" --amount 250
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = TransactionService(db)

    from_id = resolve_account_or_exit(ctx, account_service, from_account)
    to_id = resolve_account_or_exit(ctx, account_service, to_account)
    try:
        transfer = service.create_transfer(
            date=parse_date(date_str),
            amount=amount,
            from_account_id=from_id,
            to_account_id=to_id,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    source = account_service.require_account(from_id)
    destination = account_service.require_account(to_id)
    click.echo(f"Recorded transfer {transfer.id} of {format_amount(transfer.amount)}")
    click.echo(f"  {source.name}: {format_amount(source.balance)}")
    click.echo(f"  {destination.name}: {format_amount(destination.balance)}")


@transfer_group.command("list")
@click.pass_context
def list_transfers(ctx):
    """List transfers, newest first."""
    db = ctx.obj["db"]
    names = {acc.id: acc.name for acc in AccountService(db).list_accounts()}
    records = TransactionService(db).list_transfers()

    if not records:
        click.echo("No transfers found.")
        return

    for txn in records:
        source = names.get(txn.from_account_id, "Unknown account")
        destination = names.get(txn.to_account_id, "Unknown account")
        click.echo(
            f"ID: {txn.id:4d} | {txn.date} | {source} -> {destination} | {format_amount(txn.amount)}"
        )


def register_commands(cli):
    """Register transfer commands with main CLI."""
    cli.add_command(transfer_group, name="transfer")
