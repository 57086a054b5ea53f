"""Receivable and payable domain services.

Obligations track money owed to or by us. They carry a status but never touch
account balances.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Generic, Optional, TypeVar, Union

from fintrack.database.base import Database
from fintrack.domain.entities import ObligationStatus, ObligationTotals, Payable, Receivable
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_choice,
    payable_not_found,
    receivable_not_found,
    required_field,
)
from fintrack.domain.transaction import AmountInput, DateInput, validate_amount, validate_date
from fintrack.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T", Receivable, Payable)


def validate_status(status: Union[ObligationStatus, str, None]) -> str:
    """Return the status value or raise ValidationError."""
    try:
        return ObligationStatus(status).value
    except ValueError as e:
        raise ValidationError(invalid_choice("status", status, ObligationStatus)) from e


class ObligationService(ABC, Generic[T]):
    """Shared behaviour of receivables and payables."""

    kind = "obligation"
    counterparty_label = "Counterparty"

    def __init__(self, db: Database):
        """Initialize obligation service.

        Args:
            db: Database instance
        """
        self.db = db

    # Storage hooks provided by subclasses
    @abstractmethod
    def _insert(self, date: str, amount: Decimal, counterparty: str, due_date: str,
                status: str, description: Optional[str]) -> int:
        """Store a new record. Returns its ID."""
        pass

    @abstractmethod
    def _get(self, obligation_id: int) -> Optional[T]:
        """Fetch one record by ID."""
        pass

    @abstractmethod
    def _list(self) -> list[T]:
        """Fetch all records, newest created first."""
        pass

    @abstractmethod
    def _set_status(self, obligation_id: int, status: str) -> Optional[T]:
        """Store a new status. Returns None if the record is missing."""
        pass

    @abstractmethod
    def _not_found(self, obligation_id: int) -> str:
        """Message for a missing record."""
        pass

    def create(
        self,
        date: Optional[DateInput],
        amount: Optional[AmountInput],
        counterparty: Optional[str],
        due_date: Optional[DateInput],
        description: Optional[str] = None,
        status: Union[ObligationStatus, str, None] = None,
    ) -> T:
        """Create an obligation.

        Args:
            date: Date the obligation was raised
            amount: Non-negative amount
            counterparty: Customer or vendor name
            due_date: Date payment is due
            description: Optional free text
            status: Initial status, pending when omitted

        Raises:
            ValidationError: If any field is missing or malformed
        """
        iso_date = validate_date(date)
        value = validate_amount(amount)
        if counterparty is None or not counterparty.strip():
            raise ValidationError(required_field(self.counterparty_label))
        iso_due_date = validate_date(due_date, "Due date")
        status_value = ObligationStatus.PENDING.value if status is None else validate_status(status)

        obligation_id = self._insert(
            iso_date,
            value,
            counterparty.strip(),
            iso_due_date,
            status_value,
            (description or "").strip() or None,
        )
        logger.debug("Created %s %s for %s", self.kind, obligation_id, counterparty)
        return self._get(obligation_id)

    def get(self, obligation_id: int) -> Optional[T]:
        """Get an obligation by ID, or None if it does not exist."""
        return self._get(obligation_id)

    def list(self) -> list[T]:
        """List obligations, newest created first."""
        return self._list()

    def update_status(self, obligation_id: int, status: Union[ObligationStatus, str, None]) -> T:
        """Change an obligation's status.

        Any of pending, paid and overdue may follow any other.

        Raises:
            ValidationError: If status is not pending, paid or overdue
            NotFoundError: If the obligation does not exist
        """
        status_value = validate_status(status)
        updated = self._set_status(obligation_id, status_value)
        if updated is None:
            raise NotFoundError(self._not_found(obligation_id))
        logger.debug("Set %s %s status to %s", self.kind, obligation_id, status_value)
        return updated

    def totals(self) -> ObligationTotals:
        """Sum amounts overall and per status."""
        by_status = {status.value: Decimal("0.00") for status in ObligationStatus}
        records = self._list()
        for record in records:
            by_status[record.status] = by_status.get(record.status, Decimal("0.00")) + record.amount
        return ObligationTotals(
            total=sum((r.amount for r in records), Decimal("0.00")),
            pending=by_status[ObligationStatus.PENDING.value],
            overdue=by_status[ObligationStatus.OVERDUE.value],
            paid=by_status[ObligationStatus.PAID.value],
            count=len(records),
        )


class ReceivableService(ObligationService[Receivable]):
    """Service for money owed by customers."""

    kind = "receivable"
    counterparty_label = "Customer name"

    def _insert(self, date, amount, counterparty, due_date, status, description):
        return self.db.create_receivable(
            date=date,
            amount=amount,
            customer_name=counterparty,
            due_date=due_date,
            status=status,
            description=description,
        )

    def _get(self, obligation_id):
        return self.db.get_receivable(obligation_id)

    def _list(self):
        return self.db.list_receivables()

    def _set_status(self, obligation_id, status):
        return self.db.update_receivable_status(obligation_id, status)

    def _not_found(self, obligation_id):
        return receivable_not_found(obligation_id)


class PayableService(ObligationService[Payable]):
    """Service for money owed to vendors."""

    kind = "payable"
    counterparty_label = "Vendor name"

    def _insert(self, date, amount, counterparty, due_date, status, description):
        return self.db.create_payable(
            date=date,
            amount=amount,
            vendor_name=counterparty,
            due_date=due_date,
            status=status,
            description=description,
        )

    def _get(self, obligation_id):
        return self.db.get_payable(obligation_id)

    def _list(self):
        return self.db.list_payables()

    def _set_status(self, obligation_id, status):
        return self.db.update_payable_status(obligation_id, status)

    def _not_found(self, obligation_id):
        return payable_not_found(obligation_id)
