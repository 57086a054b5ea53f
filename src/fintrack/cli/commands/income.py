"""Income commands."""

import click
from fintrack.cli.error_handling import handle_domain_error, resolve_account_or_exit
from fintrack.domain.account import AccountService
from fintrack.domain.entities import IncomeSource
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import format_amount
from fintrack.utils.date_parser import parse_date, parse_month


@click.group()
def income_group():
    """Record and list income."""
    pass


@income_group.command("add")
@click.option("--account", required=True, help="Account name or ID to credit")
@click.option("--amount", required=True, help="Amount received (e.g., 1500.00)")
@click.option(
    "--source",
    type=click.Choice([s.value for s in IncomeSource], case_sensitive=False),
    required=True,
    help="Income source",
)
@click.option("--date", "date_str", default="today", show_default=True,
              help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--description", help="Description")
@click.pass_context
def add_income(ctx, account: str, amount: str, source: str, date_str: str, description: str | None):
    """Record income and credit the account.

    Examples:
        fintrack income add --account "Chase Checking" --amount 3200.00 --source salary
        fintrack income add --account 2 --amount 150 --source freelance --date 2024-03-05
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = TransactionService(db)

    account_id = resolve_account_or_exit(ctx, account_service, account)
    try:
        txn_date = parse_date(date_str)
        income = service.create_income(
            date=txn_date,
            amount=amount,
            source=source.lower(),
            account_id=account_id,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    acc = account_service.require_account(account_id)
    click.echo(f"Recorded income {income.id}")
    click.echo(f"  Account: {acc.name}")
    click.echo(f"  Date: {income.date}")
    click.echo(f"  Amount: +{format_amount(income.amount)}")
    click.echo(f"  New balance: {format_amount(acc.balance)}")


@income_group.command("list")
@click.option("--month", help="Only this month (YYYY-MM, 'this month', 'last month')")
@click.pass_context
def list_income(ctx, month: str | None):
    """List income, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    names = {acc.id: acc.name for acc in AccountService(db).list_accounts()}

    if month is None:
        records = service.list_income()
    else:
        try:
            records = service.list_income_by_month(parse_month(month))
        except ValueError as e:
            handle_domain_error(ctx, e)

    if not records:
        click.echo("No income found.")
        return

    for txn in records:
        click.echo(
            f"ID: {txn.id:4d} | {txn.date} | {txn.source:10s} | "
            f"{names.get(txn.account_id, 'Unknown account'):20s} | +{format_amount(txn.amount)}"
        )


def register_commands(cli):
    """Register income commands with main CLI."""
    cli.add_command(income_group, name="income")
