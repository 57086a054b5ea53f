"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StoreUnavailableError(DomainError):
    """Backing data store is unreachable or not configured."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def receivable_not_found(receivable_id: int) -> str:
    """Return message for missing receivable."""
    return f"Receivable {receivable_id} not found"


def payable_not_found(payable_id: int) -> str:
    """Return message for missing payable."""
    return f"Payable {payable_id} not found"


def invalid_choice(field: str, value: object, choices) -> str:
    """Return message for a value outside a fixed enumeration."""
    allowed = ", ".join(choice.value for choice in choices)
    return f"Invalid {field} '{value}'. Must be one of: {allowed}"


def required_field(field: str) -> str:
    """Return message for a missing required field."""
    return f"{field} is required"


def same_account_transfer() -> str:
    """Return message for a transfer whose source and destination match."""
    return "Cannot transfer to the same account"
