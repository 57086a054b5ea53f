"""Transaction domain service.

Records income, expenses and transfers and keeps account balances in step with
them. Each recording runs as one unit of work: the transaction row and its
balance adjustments are committed together or not at all.
"""

import re
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from fintrack.database.base import Database
from fintrack.domain.account import AccountService
from fintrack.domain.entities import (
    Expense,
    ExpenseCategory,
    Income,
    IncomeSource,
    Transfer,
)
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    invalid_choice,
    required_field,
    same_account_transfer,
)
from fintrack.logger import get_logger
from fintrack.utils.amount_parser import format_amount, parse_non_negative_amount
from fintrack.utils.date_parser import to_iso_date

logger = get_logger(__name__)

DateInput = Union[date, str]
AmountInput = Union[str, Decimal]
ACCOUNT_ID_RE = re.compile(r"^[0-9]+$")


def validate_date(value: Optional[DateInput], field: str = "Date") -> str:
    """Return the ISO form of a date or raise ValidationError."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(required_field(field))
    try:
        return to_iso_date(value)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def validate_amount(value: Optional[AmountInput]) -> Decimal:
    """Return a non-negative two-decimal amount or raise ValidationError."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(required_field("Amount"))
    try:
        return parse_non_negative_amount(value)
    except ValueError as e:
        raise ValidationError(f"Invalid amount: {e}") from e


def validate_account_id(value: Union[int, str, None], field: str = "Account") -> int:
    """Return an account id or raise ValidationError.

    Only integers and strings of digits are ids; floats are rejected rather
    than truncated.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(required_field(field))
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and ACCOUNT_ID_RE.match(value.strip()):
        return int(value.strip())
    raise ValidationError(f"Invalid {field.lower()} id '{value}'")


def validate_choice(value, enum_cls, field: str) -> str:
    """Return the enumeration value for ``value`` or raise ValidationError."""
    if value is None or value == "":
        raise ValidationError(required_field(field.capitalize()))
    try:
        return enum_cls(value).value
    except ValueError as e:
        raise ValidationError(invalid_choice(field, value, enum_cls)) from e


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    description = description.strip()
    return description or None


class TransactionService:
    """Service for recording income, expense and transfer transactions."""

    def __init__(self, db: Database, require_accounts: bool = False):
        """Initialize transaction service.

        Args:
            db: Database instance
            require_accounts: If True, reject transactions that reference a
                missing account instead of recording them without a balance
                adjustment
        """
        self.db = db
        self.accounts = AccountService(db)
        self.require_accounts = require_accounts

    def _check_accounts(self, *account_ids: int) -> None:
        if not self.require_accounts:
            return
        for account_id in account_ids:
            if self.db.get_account(account_id) is None:
                raise NotFoundError(account_not_found(account_id))

    def create_income(
        self,
        date: Optional[DateInput],
        amount: Optional[AmountInput],
        source: Union[IncomeSource, str, None],
        account_id: Optional[int],
        description: Optional[str] = None,
    ) -> Income:
        """Record income and credit the receiving account.

        Args:
            date: Transaction date (date or "YYYY-MM-DD")
            amount: Non-negative amount
            source: One of IncomeSource
            account_id: Account to credit
            description: Optional free text

        Returns:
            The persisted income record

        Raises:
            ValidationError: If any field is missing or malformed
            NotFoundError: If require_accounts is set and the account is missing
        """
        iso_date = validate_date(date)
        value = validate_amount(amount)
        source_value = validate_choice(source, IncomeSource, "source")
        account_id = validate_account_id(account_id)
        self._check_accounts(account_id)

        with self.db.atomic():
            income_id = self.db.create_income(
                date=iso_date,
                amount=value,
                source=source_value,
                account_id=account_id,
                description=_clean_description(description),
            )
            self.accounts.adjust_balance(account_id, value)

        logger.debug("Recorded income %s of %s to account %s", income_id, format_amount(value), account_id)
        return self.db.get_income(income_id)

    def create_expense(
        self,
        date: Optional[DateInput],
        amount: Optional[AmountInput],
        category: Union[ExpenseCategory, str, None],
        account_id: Optional[int],
        description: Optional[str] = None,
    ) -> Expense:
        """Record an expense and debit the paying account.

        Raises:
            ValidationError: If any field is missing or malformed
            NotFoundError: If require_accounts is set and the account is missing
        """
        iso_date = validate_date(date)
        value = validate_amount(amount)
        category_value = validate_choice(category, ExpenseCategory, "category")
        account_id = validate_account_id(account_id)
        self._check_accounts(account_id)

        with self.db.atomic():
            expense_id = self.db.create_expense(
                date=iso_date,
                amount=value,
                category=category_value,
                account_id=account_id,
                description=_clean_description(description),
            )
            self.accounts.adjust_balance(account_id, -value)

        logger.debug("Recorded expense %s of %s from account %s", expense_id, format_amount(value), account_id)
        return self.db.get_expense(expense_id)

    def create_transfer(
        self,
        date: Optional[DateInput],
        amount: Optional[AmountInput],
        from_account_id: Optional[int],
        to_account_id: Optional[int],
        description: Optional[str] = None,
    ) -> Transfer:
        """Move money between two accounts.

        The source is debited before the destination is credited; both
        adjustments and the transfer row share one unit of work.

        Raises:
            ValidationError: If any field is missing or malformed, or both
                account ids are the same
            NotFoundError: If require_accounts is set and an account is missing
        """
        iso_date = validate_date(date)
        value = validate_amount(amount)
        from_account_id = validate_account_id(from_account_id, "From account")
        to_account_id = validate_account_id(to_account_id, "To account")
        if from_account_id == to_account_id:
            raise ValidationError(same_account_transfer())
        self._check_accounts(from_account_id, to_account_id)

        with self.db.atomic():
            transfer_id = self.db.create_transfer(
                date=iso_date,
                amount=value,
                from_account_id=from_account_id,
                to_account_id=to_account_id,
                description=_clean_description(description),
            )
            self.accounts.adjust_balance(from_account_id, -value)
            self.accounts.adjust_balance(to_account_id, value)

        logger.debug(
            "Recorded transfer %s of %s from account %s to account %s",
            transfer_id,
            format_amount(value),
            from_account_id,
            to_account_id,
        )
        return self.db.get_transfer(transfer_id)

    def list_income(self) -> list[Income]:
        """List all income, newest created first."""
        return self.db.list_income()

    def list_income_by_month(self, month: str) -> list[Income]:
        """List income whose date starts with the "YYYY-MM" prefix."""
        return self.db.list_income(month=month)

    def list_expenses(self) -> list[Expense]:
        """List all expenses, newest created first."""
        return self.db.list_expenses()

    def list_expenses_by_month(self, month: str) -> list[Expense]:
        """List expenses whose date starts with the "YYYY-MM" prefix."""
        return self.db.list_expenses(month=month)

    def list_transfers(self) -> list[Transfer]:
        """List all transfers, newest created first."""
        return self.db.list_transfers()
