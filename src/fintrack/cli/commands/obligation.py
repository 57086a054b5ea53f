"""Receivable and payable commands.

Both groups share one shape, so they are built by ``make_obligation_group``.
"""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.entities import ObligationStatus
from fintrack.domain.obligation import ObligationService, PayableService, ReceivableService
from fintrack.utils.amount_parser import format_amount
from fintrack.utils.date_parser import parse_date

STATUS_CHOICES = [s.value for s in ObligationStatus]


def make_obligation_group(
    name: str, service_cls: type[ObligationService], party_option: str, party_help: str
) -> click.Group:
    """Build the add/list/status/totals command group for one obligation kind."""

    @click.group(name=name, help=f"Track {name}s.")
    def group():
        pass

    @group.command("add", help=f"Create a {name}.")
    @click.option(party_option, "party", required=True, help=party_help)
    @click.option("--amount", required=True, help="Amount owed")
    @click.option("--due-date", "due_date", required=True, help="Due date (YYYY-MM-DD)")
    @click.option("--date", "date_str", default="today", show_default=True, help="Date raised")
    @click.option("--description", help="Description")
    @click.option("--status", type=click.Choice(STATUS_CHOICES), default=None,
                  help="Initial status (default: pending)")
    @click.pass_context
    def add(ctx, party: str, amount: str, due_date: str, date_str: str,
            description: str | None, status: str | None):
        service = service_cls(ctx.obj["db"])
        try:
            record = service.create(
                date=parse_date(date_str),
                amount=amount,
                counterparty=party,
                due_date=parse_date(due_date),
                description=description,
                status=status,
            )
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(
            f"Created {name} {record.id}: {record.counterparty} "
            f"{format_amount(record.amount)} due {record.due_date} [{record.status}]"
        )

    @group.command("list", help=f"List {name}s, newest first.")
    @click.pass_context
    def list_records(ctx):
        records = service_cls(ctx.obj["db"]).list()
        if not records:
            click.echo(f"No {name}s found.")
            return
        for record in records:
            click.echo(
                f"ID: {record.id:4d} | {record.counterparty:20s} | {format_amount(record.amount):>10s} | "
                f"due {record.due_date} | {record.status}"
            )

    @group.command("status", help=f"Set a {name}'s status to pending, paid or overdue.")
    @click.argument("record_id", type=int, metavar="ID")
    @click.argument("status", metavar="STATUS")
    @click.pass_context
    def set_status(ctx, record_id: int, status: str):
        service = service_cls(ctx.obj["db"])
        try:
            record = service.update_status(record_id, status)
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(f"{name.capitalize()} {record.id} is now {record.status}")

    @group.command("totals", help=f"Sum {name}s by status.")
    @click.pass_context
    def totals(ctx):
        result = service_cls(ctx.obj["db"]).totals()
        click.echo(f"Total:   {format_amount(result.total)} ({result.count} {name}s)")
        click.echo(f"Pending: {format_amount(result.pending)}")
        click.echo(f"Overdue: {format_amount(result.overdue)}")
        click.echo(f"Paid:    {format_amount(result.paid)}")

    return group


receivable_group = make_obligation_group(
    "receivable", ReceivableService, "--customer", "Customer name"
)
payable_group = make_obligation_group("payable", PayableService, "--vendor", "Vendor name")


def register_commands(cli):
    """Register receivable and payable commands with main CLI."""
    cli.add_command(receivable_group, name="receivable")
    cli.add_command(payable_group, name="payable")
