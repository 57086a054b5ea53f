"""Dashboard aggregation domain service."""

from collections import defaultdict
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import (
    ActivityEntry,
    ActivityType,
    CategoryTotal,
    DashboardSummary,
    Expense,
    Income,
    Transfer,
)
from fintrack.utils.date_parser import month_key, month_label

UNKNOWN_ACCOUNT = "Unknown account"
RECENT_PER_TYPE = 5
RECENT_LIMIT = 10
BREAKDOWN_LIMIT = 5


class SummaryService:
    """Service for read-only dashboard views."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def monthly_summary(
        self, today: Optional[date] = None, month: Optional[str] = None
    ) -> DashboardSummary:
        """Income, expenses and net for a month plus the total of all balances.

        Args:
            today: Reference date, defaults to the current date
            month: Optional "YYYY-MM" key overriding the month of ``today``

        Returns:
            DashboardSummary for the month
        """
        today = today or date.today()
        if month is None:
            month = month_key(today)
            label = month_label(today)
        else:
            label = _label_for_key(month)

        income = sum((txn.amount for txn in self.db.list_income(month=month)), Decimal("0.00"))
        expenses = sum((txn.amount for txn in self.db.list_expenses(month=month)), Decimal("0.00"))
        total_balance = sum((acc.balance for acc in self.db.list_accounts()), Decimal("0.00"))

        return DashboardSummary(
            month=month,
            month_label=label,
            monthly_income=income,
            monthly_expenses=expenses,
            net_income=income - expenses,
            total_balance=total_balance,
        )

    def recent_activity(
        self, limit: int = RECENT_LIMIT, per_type: int = RECENT_PER_TYPE
    ) -> list[ActivityEntry]:
        """Most recently recorded transactions of every type.

        Takes the newest ``per_type`` income, expense and transfer records,
        merges them and returns the newest ``limit`` overall.
        """
        names = {acc.id: acc.name for acc in self.db.list_accounts()}

        def account_name(account_id: int) -> str:
            return names.get(account_id, UNKNOWN_ACCOUNT)

        entries = [
            self._income_entry(txn, account_name(txn.account_id))
            for txn in self.db.list_income()[:per_type]
        ]
        entries.extend(
            self._expense_entry(txn, account_name(txn.account_id))
            for txn in self.db.list_expenses()[:per_type]
        )
        entries.extend(
            self._transfer_entry(
                txn, account_name(txn.from_account_id), account_name(txn.to_account_id)
            )
            for txn in self.db.list_transfers()[:per_type]
        )

        entries.sort(key=_activity_timestamp, reverse=True)
        return entries[:limit]

    def category_breakdown(
        self, today: Optional[date] = None, limit: int = BREAKDOWN_LIMIT
    ) -> list[CategoryTotal]:
        """Largest expense categories of the current month."""
        month = month_key(today or date.today())
        totals: dict[str, float] = defaultdict(float)
        for expense in self.db.list_expenses(month=month):
            totals[expense.category] += float(expense.amount)

        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [CategoryTotal(category=name, total=total) for name, total in ranked[:limit]]

    @staticmethod
    def _income_entry(txn: Income, account: str) -> ActivityEntry:
        return ActivityEntry(
            activity_type=ActivityType.INCOME,
            id=txn.id,
            date=txn.date,
            amount=txn.amount,
            description=txn.description,
            created_at=txn.created_at,
            account_name=account,
            label=txn.source,
        )

    @staticmethod
    def _expense_entry(txn: Expense, account: str) -> ActivityEntry:
        return ActivityEntry(
            activity_type=ActivityType.EXPENSE,
            id=txn.id,
            date=txn.date,
            amount=txn.amount,
            description=txn.description,
            created_at=txn.created_at,
            account_name=account,
            label=txn.category,
        )

    @staticmethod
    def _transfer_entry(txn: Transfer, from_account: str, to_account: str) -> ActivityEntry:
        return ActivityEntry(
            activity_type=ActivityType.TRANSFER,
            id=txn.id,
            date=txn.date,
            amount=txn.amount,
            description=txn.description,
            created_at=txn.created_at,
            from_account_name=from_account,
            to_account_name=to_account,
        )


def _activity_timestamp(entry: ActivityEntry) -> datetime:
    """Sort key in UTC: creation time, or UTC midnight of the transaction date.

    Creation times are written in UTC; stores without timezone support hand
    them back naive, so naive values are read as UTC.
    """
    if entry.created_at is not None:
        if entry.created_at.tzinfo is None:
            return entry.created_at.replace(tzinfo=UTC)
        return entry.created_at.astimezone(UTC)
    try:
        return datetime.fromisoformat(entry.date).replace(tzinfo=UTC)
    except ValueError:
        return datetime.min.replace(tzinfo=UTC)


def _label_for_key(month: str) -> str:
    try:
        return month_label(datetime.strptime(month, "%Y-%m").date())
    except ValueError:
        return month
