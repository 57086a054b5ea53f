"""Account domain service."""

import re
from decimal import Decimal
from typing import Optional, Union

from fintrack.database.base import Database
from fintrack.domain.entities import Account as AccountEntity, AccountType
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    invalid_choice,
    required_field,
)
from fintrack.logger import get_logger
from fintrack.utils.amount_parser import format_amount, parse_non_negative_amount, parse_amount

logger = get_logger(__name__)

MIN_ACCOUNT_NUMBER_LENGTH = 4


def clean_account_number(account_number: str) -> str:
    """Strip whitespace and hyphens from an account number."""
    return re.sub(r"[\s-]", "", account_number)


class AccountService:
    """Service for managing accounts and their balances."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        account_type: Union[AccountType, str],
        account_number: str,
        initial_balance: Union[str, Decimal, None] = None,
    ) -> AccountEntity:
        """Create a new account.

        Args:
            name: Display name
            account_type: checking, savings or credit
            account_number: Free-form number; needs at least four characters
                once spaces and hyphens are removed
            initial_balance: Starting balance, defaults to 0.00

        Returns:
            The created account

        Raises:
            ValidationError: If any field is missing or malformed
        """
        if not name or not name.strip():
            raise ValidationError(required_field("Account name"))

        try:
            type_value = AccountType(account_type).value
        except ValueError as e:
            raise ValidationError(invalid_choice("account type", account_type, AccountType)) from e

        if account_number is None or len(clean_account_number(account_number)) < MIN_ACCOUNT_NUMBER_LENGTH:
            raise ValidationError("Account number must be at least 4 digits")

        if initial_balance is None:
            balance = Decimal("0.00")
        else:
            try:
                balance = parse_non_negative_amount(initial_balance)
            except ValueError as e:
                raise ValidationError(f"Invalid balance: {e}") from e

        account_id = self.db.create_account(
            name=name.strip(),
            account_type=type_value,
            account_number=account_number,
            balance=balance,
        )
        logger.debug("Created account %s (%s) with balance %s", account_id, name, format_amount(balance))
        return self.require_account(account_id)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def require_account(self, account_id: int) -> AccountEntity:
        """Get account by ID or raise NotFoundError."""
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def adjust_balance(
        self, account_id: int, delta: Union[str, Decimal]
    ) -> Optional[AccountEntity]:
        """Apply a signed delta to an account balance.

        The addition happens in the store as one update statement, rounded to
        two decimals.

        Args:
            account_id: Account to adjust
            delta: Signed amount to add

        Returns:
            Updated account, or None if the account does not exist (callers
            treat that as a no-op)
        """
        try:
            amount = parse_amount(delta)
        except ValueError as e:
            raise ValidationError(f"Invalid balance adjustment: {e}") from e

        account = self.db.adjust_account_balance(account_id, amount)
        if account is None:
            logger.warning(
                "Balance adjustment of %s skipped: account %s not found",
                format_amount(amount),
                account_id,
            )
            return None
        logger.debug(
            "Adjusted account %s by %s, balance now %s",
            account_id,
            format_amount(amount),
            format_amount(account.balance),
        )
        return account

    def total_balance(self) -> Decimal:
        """Sum of all current account balances."""
        return sum((acc.balance for acc in self.db.list_accounts()), Decimal("0.00"))
