"""Expense commands."""

import click
from fintrack.cli.error_handling import handle_domain_error, resolve_account_or_exit
from fintrack.domain.account import AccountService
from fintrack.domain.entities import ExpenseCategory
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import format_amount
from fintrack.utils.date_parser import parse_date, parse_month


@click.group()
def expense_group():
    """Record and list expenses."""
    pass


@expense_group.command("add")
@click.option("--account", required=True, help="Account name or ID to debit")
@click.option("--amount", required=True, help="Amount spent (e.g., 42.50)")
@click.option(
    "--category",
    type=click.Choice([c.value for c in ExpenseCategory], case_sensitive=False),
    required=True,
    help="Expense category",
)
@click.option("--date", "date_str", default="today", show_default=True,
              help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--description", help="Description")
@click.pass_context
def add_expense(ctx, account: str, amount: str, category: str, date_str: str, description: str | None):
    """Record an expense and debit the account.

    Examples:
        fintrack expense add --account "Chase Checking" --amount 64.20 --category food
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = TransactionService(db)

    account_id = resolve_account_or_exit(ctx, account_service, account)
    try:
        txn_date = parse_date(date_str)
        expense = service.create_expense(
            date=txn_date,
            amount=amount,
            category=category.lower(),
            account_id=account_id,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    acc = account_service.require_account(account_id)
    click.echo(f"Recorded expense {expense.id}")
    click.echo(f"  Account: {acc.name}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Amount: -{format_amount(expense.amount)}")
    click.echo(f"  New balance: {format_amount(acc.balance)}")


@expense_group.command("list")
@click.option("--month", help="Only this month (YYYY-MM, 'this month', 'last month')")
@click.pass_context
def list_expenses(ctx, month: str | None):
    """List expenses, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    names = {acc.id: acc.name for acc in AccountService(db).list_accounts()}

    if month is None:
        records = service.list_expenses()
    else:
        try:
            records = service.list_expenses_by_month(parse_month(month))
        except ValueError as e:
            handle_domain_error(ctx, e)

    if not records:
        click.echo("No expenses found.")
        return

    for txn in records:
        click.echo(
            f"ID: {txn.id:4d} | {txn.date} | {txn.category:14s} | "
            f"{names.get(txn.account_id, 'Unknown account'):20s} | -{format_amount(txn.amount)}"
        )


@expense_group.command("breakdown")
@click.pass_context
def breakdown(ctx):
    """Top expense categories this month."""
    db = ctx.obj["db"]
    totals = SummaryService(db).category_breakdown()

    if not totals:
        click.echo("No expenses this month.")
        return

    click.echo("\nTop categories this month:")
    for item in totals:
        click.echo(f"  {item.category:16s} {item.total:>12,.2f}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
