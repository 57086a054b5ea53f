"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import (
    Account,
    Income,
    Expense,
    Transfer,
    Receivable,
    Payable,
)


class Database(ABC):
    """Abstract database interface for fintrack.

    Every write commits on its own unless it runs inside ``atomic()``, in which
    case all writes in the block are committed together or rolled back together.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database.

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Group the writes made inside the block into one unit of work."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self, name: str, account_type: str, account_number: str, balance: Decimal
    ) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def adjust_account_balance(self, account_id: int, delta: Decimal) -> Optional[Account]:
        """Add a signed delta to an account balance in a single store-side update.

        Returns the updated account, or None if the account does not exist.
        """
        pass

    # Income operations
    @abstractmethod
    def create_income(
        self,
        date: str,
        amount: Decimal,
        source: str,
        account_id: int,
        description: Optional[str] = None,
    ) -> int:
        """Create an income transaction. Returns income ID."""
        pass

    @abstractmethod
    def get_income(self, income_id: int) -> Optional[Income]:
        """Get income transaction by ID."""
        pass

    @abstractmethod
    def list_income(self, month: Optional[str] = None) -> list[Income]:
        """List income transactions, newest created first.

        Args:
            month: Optional "YYYY-MM" prefix the date must start with
        """
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        date: str,
        amount: Decimal,
        category: str,
        account_id: int,
        description: Optional[str] = None,
    ) -> int:
        """Create an expense transaction. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense transaction by ID."""
        pass

    @abstractmethod
    def list_expenses(self, month: Optional[str] = None) -> list[Expense]:
        """List expense transactions, newest created first.

        Args:
            month: Optional "YYYY-MM" prefix the date must start with
        """
        pass

    # Transfer operations
    @abstractmethod
    def create_transfer(
        self,
        date: str,
        amount: Decimal,
        from_account_id: int,
        to_account_id: int,
        description: Optional[str] = None,
    ) -> int:
        """Create a transfer transaction. Returns transfer ID."""
        pass

    @abstractmethod
    def get_transfer(self, transfer_id: int) -> Optional[Transfer]:
        """Get transfer by ID."""
        pass

    @abstractmethod
    def list_transfers(self) -> list[Transfer]:
        """List transfers, newest created first."""
        pass

    # Receivable operations
    @abstractmethod
    def create_receivable(
        self,
        date: str,
        amount: Decimal,
        customer_name: str,
        due_date: str,
        status: str,
        description: Optional[str] = None,
    ) -> int:
        """Create a receivable. Returns receivable ID."""
        pass

    @abstractmethod
    def get_receivable(self, receivable_id: int) -> Optional[Receivable]:
        """Get receivable by ID."""
        pass

    @abstractmethod
    def list_receivables(self) -> list[Receivable]:
        """List receivables, newest created first."""
        pass

    @abstractmethod
    def update_receivable_status(self, receivable_id: int, status: str) -> Optional[Receivable]:
        """Set receivable status. Returns the updated receivable or None if missing."""
        pass

    # Payable operations
    @abstractmethod
    def create_payable(
        self,
        date: str,
        amount: Decimal,
        vendor_name: str,
        due_date: str,
        status: str,
        description: Optional[str] = None,
    ) -> int:
        """Create a payable. Returns payable ID."""
        pass

    @abstractmethod
    def get_payable(self, payable_id: int) -> Optional[Payable]:
        """Get payable by ID."""
        pass

    @abstractmethod
    def list_payables(self) -> list[Payable]:
        """List payables, newest created first."""
        pass

    @abstractmethod
    def update_payable_status(self, payable_id: int, status: str) -> Optional[Payable]:
        """Set payable status. Returns the updated payable or None if missing."""
        pass
