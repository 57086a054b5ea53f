"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Services receive and return these; the ORM models never leave
the database layer.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from fintrack.utils.amount_parser import format_amount


class AccountType(str, Enum):
    """Kinds of bank account."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"


class IncomeSource(str, Enum):
    """Where an income transaction came from."""

    SALARY = "salary"
    FREELANCE = "freelance"
    BUSINESS = "business"
    INVESTMENT = "investment"
    RENTAL = "rental"
    OTHER = "other"


class ExpenseCategory(str, Enum):
    """Fixed expense categories."""

    FOOD = "food"
    UTILITIES = "utilities"
    TRANSPORTATION = "transportation"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    HOUSING = "housing"
    INSURANCE = "insurance"
    OTHER = "other"


class ObligationStatus(str, Enum):
    """Lifecycle status of a receivable or payable."""

    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class ActivityType(str, Enum):
    """Type tag attached to recent-activity entries."""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Account:
    """Bank account domain entity."""

    id: int
    name: str
    account_type: str
    account_number: str
    balance: Decimal


@dataclass(frozen=True)
class Income:
    """Income transaction domain entity."""

    id: int
    date: str
    amount: Decimal
    source: str
    account_id: int
    description: Optional[str]
    created_at: Optional[datetime]


@dataclass(frozen=True)
class Expense:
    """Expense transaction domain entity."""

    id: int
    date: str
    amount: Decimal
    category: str
    account_id: int
    description: Optional[str]
    created_at: Optional[datetime]


@dataclass(frozen=True)
class Transfer:
    """Transfer between two accounts."""

    id: int
    date: str
    amount: Decimal
    from_account_id: int
    to_account_id: int
    description: Optional[str]
    created_at: Optional[datetime]


@dataclass(frozen=True)
class Receivable:
    """Money owed to us by a customer."""

    id: int
    date: str
    amount: Decimal
    customer_name: str
    description: Optional[str]
    due_date: str
    status: str
    created_at: Optional[datetime]

    @property
    def counterparty(self) -> str:
        return self.customer_name


@dataclass(frozen=True)
class Payable:
    """Money we owe to a vendor."""

    id: int
    date: str
    amount: Decimal
    vendor_name: str
    description: Optional[str]
    due_date: str
    status: str
    created_at: Optional[datetime]

    @property
    def counterparty(self) -> str:
        return self.vendor_name


@dataclass(frozen=True)
class ObligationTotals:
    """Amount totals over a set of receivables or payables."""

    total: Decimal
    pending: Decimal
    overdue: Decimal
    paid: Decimal
    count: int


@dataclass(frozen=True)
class DashboardSummary:
    """Monthly dashboard figures."""

    month: str
    month_label: str
    monthly_income: Decimal
    monthly_expenses: Decimal
    net_income: Decimal
    total_balance: Decimal

    def to_dict(self) -> dict[str, str]:
        """Render with every amount as a 2-decimal string."""
        return {
            "monthly_income": format_amount(self.monthly_income),
            "monthly_expenses": format_amount(self.monthly_expenses),
            "net_income": format_amount(self.net_income),
            "total_balance": format_amount(self.total_balance),
            "current_month": self.month_label,
        }


@dataclass(frozen=True)
class ActivityEntry:
    """A single row of the recent-activity feed."""

    activity_type: ActivityType
    id: int
    date: str
    amount: Decimal
    description: Optional[str]
    created_at: Optional[datetime]
    account_name: Optional[str] = None
    from_account_name: Optional[str] = None
    to_account_name: Optional[str] = None
    label: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.activity_type.value,
            "id": self.id,
            "date": self.date,
            "amount": format_amount(self.amount),
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if self.activity_type == ActivityType.TRANSFER:
            data["from_account"] = self.from_account_name
            data["to_account"] = self.to_account_name
        else:
            data["account"] = self.account_name
            data["label"] = self.label
        return data


@dataclass(frozen=True)
class CategoryTotal:
    """Summed expenses for one category."""

    category: str
    total: float
