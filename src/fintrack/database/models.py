"""SQLAlchemy models for fintrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Account(Base):
    """Bank account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    account_number = Column(String, nullable=False)
    balance = Column(Numeric(10, 2), nullable=False, default=0)


class IncomeTransaction(Base):
    """Income transaction model."""

    __tablename__ = "income_transactions"

    id = Column(Integer, primary_key=True)
    date = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    source = Column(String, nullable=False)
    account_id = Column(Integer, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow)


class ExpenseTransaction(Base):
    """Expense transaction model."""

    __tablename__ = "expense_transactions"

    id = Column(Integer, primary_key=True)
    date = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False)
    account_id = Column(Integer, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow)


class TransferTransaction(Base):
    """Transfer transaction model."""

    __tablename__ = "transfer_transactions"

    id = Column(Integer, primary_key=True)
    date = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    from_account_id = Column(Integer, nullable=False)
    to_account_id = Column(Integer, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow)


class Receivable(Base):
    """Receivable model."""

    __tablename__ = "receivables"

    id = Column(Integer, primary_key=True)
    date = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    customer_name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    due_date = Column(String, nullable=False)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(DateTime, default=_utcnow)


class Payable(Base):
    """Payable model."""

    __tablename__ = "payables"

    id = Column(Integer, primary_key=True)
    date = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    vendor_name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    due_date = Column(String, nullable=False)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(DateTime, default=_utcnow)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    The engine connects lazily; tables are created by ``create_schema``.
    """
    engine = create_engine(database_url, echo=False)
    return sessionmaker(bind=engine)


def create_schema(session_factory: sessionmaker[Session]) -> None:
    """Create all tables on the factory's engine."""
    Base.metadata.create_all(session_factory.kw["bind"])
