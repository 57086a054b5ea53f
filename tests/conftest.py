"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.account import AccountService
from fintrack.domain.obligation import PayableService, ReceivableService
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    db.session_factory.kw["bind"].dispose()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def receivable_service(temp_db):
    """Create a ReceivableService with a temporary database."""
    return ReceivableService(temp_db)


@pytest.fixture
def payable_service(temp_db):
    """Create a PayableService with a temporary database."""
    return PayableService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create a checking account holding 100.00."""
    return account_service.create_account(
        name="Test Account",
        account_type="checking",
        account_number="1234-5678",
        initial_balance="100.00",
    )


@pytest.fixture
def second_account(account_service):
    """Create an empty savings account."""
    return account_service.create_account(
        name="Savings",
        account_type="savings",
        account_number="8765 4321",
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
