"""Dashboard commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import ActivityType
from fintrack.domain.summary import SummaryService
from fintrack.utils.amount_parser import format_amount
from fintrack.utils.date_parser import parse_month


@click.command("summary")
@click.option("--month", help="Month to summarize (YYYY-MM, 'last month'); defaults to this month")
@click.pass_context
def summary(ctx, month: str | None):
    """Show monthly income, expenses, net income and total balance."""
    db = ctx.obj["db"]
    service = SummaryService(db)

    try:
        month_key = parse_month(month) if month is not None else None
    except ValueError as e:
        handle_domain_error(ctx, e)

    result = service.monthly_summary(month=month_key).to_dict()
    click.echo(f"\n{result['current_month']}")
    click.echo("-" * 40)
    click.echo(f"Income:        {result['monthly_income']:>14s}")
    click.echo(f"Expenses:      {result['monthly_expenses']:>14s}")
    click.echo(f"Net income:    {result['net_income']:>14s}")
    click.echo(f"Total balance: {result['total_balance']:>14s}")


@click.command("recent")
@click.pass_context
def recent(ctx):
    """Show the most recently recorded transactions."""
    db = ctx.obj["db"]
    entries = SummaryService(db).recent_activity()

    if not entries:
        click.echo("No transactions yet.")
        return

    for entry in entries:
        if entry.activity_type == ActivityType.TRANSFER:
            sign = " "
            where = f"{entry.from_account_name} -> {entry.to_account_name}"
        else:
            sign = "+" if entry.activity_type == ActivityType.INCOME else "-"
            where = f"{entry.account_name} ({entry.label})"
        click.echo(
            f"{entry.date} | {entry.activity_type.value:8s} | {where:40s} | "
            f"{sign}{format_amount(entry.amount)}"
        )


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(summary)
    cli.add_command(recent)
