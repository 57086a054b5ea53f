"""Illustrative starter data."""

from fintrack.domain.account import AccountService
from fintrack.domain.entities import Account, AccountType
from fintrack.logger import get_logger

logger = get_logger(__name__)

# (name, type, account number, balance)
DEMO_ACCOUNTS = [
    ("Chase Checking", AccountType.CHECKING, "****1234", "12450.23"),
    ("Chase Savings", AccountType.SAVINGS, "****5678", "25800.50"),
    ("Wells Fargo", AccountType.CHECKING, "****9012", "8320.75"),
    ("Capital One", AccountType.CREDIT, "****3456", "3680.00"),
    ("Bank of America", AccountType.SAVINGS, "****7890", "15230.45"),
]


def seed_demo_accounts(account_service: AccountService) -> list[Account]:
    """Create the demo accounts if no account exists yet.

    Returns:
        The accounts created; empty when the store already had accounts
    """
    if account_service.list_accounts():
        logger.info("Accounts already present, skipping demo data")
        return []

    created = [
        account_service.create_account(
            name=name,
            account_type=account_type,
            account_number=number,
            initial_balance=balance,
        )
        for name, account_type, number, balance in DEMO_ACCOUNTS
    ]
    logger.info("Seeded %d demo accounts", len(created))
    return created
