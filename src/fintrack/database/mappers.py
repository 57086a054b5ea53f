"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from decimal import Decimal

from fintrack.domain import entities as domain
from fintrack.database.models import (
    Account as ORMAccount,
    IncomeTransaction as ORMIncome,
    ExpenseTransaction as ORMExpense,
    TransferTransaction as ORMTransfer,
    Receivable as ORMReceivable,
    Payable as ORMPayable,
)
from fintrack.utils.amount_parser import quantize_amount


def _money(value) -> Decimal:
    return quantize_amount(Decimal(value if value is not None else 0))


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_type=orm_account.type,
        account_number=orm_account.account_number,
        balance=_money(orm_account.balance),
    )


def income_to_domain(orm_income: ORMIncome) -> domain.Income:
    """Convert SQLAlchemy IncomeTransaction model to domain Income entity."""
    return domain.Income(
        id=orm_income.id,
        date=orm_income.date,
        amount=_money(orm_income.amount),
        source=orm_income.source,
        account_id=orm_income.account_id,
        description=orm_income.description,
        created_at=orm_income.created_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy ExpenseTransaction model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        date=orm_expense.date,
        amount=_money(orm_expense.amount),
        category=orm_expense.category,
        account_id=orm_expense.account_id,
        description=orm_expense.description,
        created_at=orm_expense.created_at,
    )


def transfer_to_domain(orm_transfer: ORMTransfer) -> domain.Transfer:
    """Convert SQLAlchemy TransferTransaction model to domain Transfer entity."""
    return domain.Transfer(
        id=orm_transfer.id,
        date=orm_transfer.date,
        amount=_money(orm_transfer.amount),
        from_account_id=orm_transfer.from_account_id,
        to_account_id=orm_transfer.to_account_id,
        description=orm_transfer.description,
        created_at=orm_transfer.created_at,
    )


def receivable_to_domain(orm_receivable: ORMReceivable) -> domain.Receivable:
    """Convert SQLAlchemy Receivable model to domain Receivable entity."""
    return domain.Receivable(
        id=orm_receivable.id,
        date=orm_receivable.date,
        amount=_money(orm_receivable.amount),
        customer_name=orm_receivable.customer_name,
        description=orm_receivable.description,
        due_date=orm_receivable.due_date,
        status=orm_receivable.status,
        created_at=orm_receivable.created_at,
    )


def payable_to_domain(orm_payable: ORMPayable) -> domain.Payable:
    """Convert SQLAlchemy Payable model to domain Payable entity."""
    return domain.Payable(
        id=orm_payable.id,
        date=orm_payable.date,
        amount=_money(orm_payable.amount),
        vendor_name=orm_payable.vendor_name,
        description=orm_payable.description,
        due_date=orm_payable.due_date,
        status=orm_payable.status,
        created_at=orm_payable.created_at,
    )
