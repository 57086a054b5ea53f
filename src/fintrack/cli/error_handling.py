"""Shared CLI plumbing: error rendering and account lookup."""

from typing import NoReturn

import click

from fintrack.domain.account import AccountService
from fintrack.domain.errors import DomainError
from fintrack.logger import get_logger
from fintrack.utils.account_resolver import resolve_account

logger = get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> NoReturn:
    """Print ``Error: <message>`` on stderr and exit with status 1."""
    logger.debug("%s failed: %r", ctx.command_path, error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def resolve_account_or_exit(ctx: click.Context, account_service: AccountService, account: str | int) -> int:
    """Account id for a name or id typed on the command line."""
    try:
        return resolve_account(account_service, account)
    except DomainError as e:
        handle_domain_error(ctx, e)
