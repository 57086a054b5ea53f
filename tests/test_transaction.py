"""Tests for recording income, expenses and transfers."""

from datetime import date
from decimal import Decimal

import pytest

from fintrack.cli.main import cli
from fintrack.domain.errors import NotFoundError, ValidationError
from fintrack.domain.transaction import TransactionService


def _balance(account_service, account_id):
    return account_service.get_account(account_id).balance


class TestIncome:
    """Tests for TransactionService.create_income."""

    def test_income_credits_account(self, transaction_service, account_service, sample_account, second_account):
        income = transaction_service.create_income(
            date="2024-03-05", amount="50.00", source="salary", account_id=sample_account.id
        )

        assert income.id is not None
        assert income.amount == Decimal("50.00")
        assert income.source == "salary"
        assert income.created_at is not None
        assert _balance(account_service, sample_account.id) == Decimal("150.00")
        assert _balance(account_service, second_account.id) == Decimal("0.00")

    def test_income_accepts_date_object(self, transaction_service, sample_account):
        income = transaction_service.create_income(
            date=date(2024, 3, 5), amount="1", source="other", account_id=sample_account.id
        )
        assert income.date == "2024-03-05"

    def test_income_invalid_source(self, transaction_service, account_service, sample_account):
        with pytest.raises(ValidationError, match="source"):
            transaction_service.create_income(
                date="2024-03-05", amount="50.00", source="lottery", account_id=sample_account.id
            )
        assert transaction_service.list_income() == []
        assert _balance(account_service, sample_account.id) == Decimal("100.00")

    @pytest.mark.parametrize("amount", [None, "", "abc", "-5.00"])
    def test_income_invalid_amount(self, transaction_service, sample_account, amount):
        with pytest.raises(ValidationError):
            transaction_service.create_income(
                date="2024-03-05", amount=amount, source="salary", account_id=sample_account.id
            )
        assert transaction_service.list_income() == []

    @pytest.mark.parametrize("txn_date", [None, "", "03/05/2024", "2024-13-01"])
    def test_income_invalid_date(self, transaction_service, sample_account, txn_date):
        with pytest.raises(ValidationError):
            transaction_service.create_income(
                date=txn_date, amount="5.00", source="salary", account_id=sample_account.id
            )

    def test_income_missing_account_id(self, transaction_service):
        with pytest.raises(ValidationError):
            transaction_service.create_income(
                date="2024-03-05", amount="5.00", source="salary", account_id=None
            )

    @pytest.mark.parametrize("bad_id", [1.9, 1.0, "1.9", "abc", True, Decimal("1")])
    def test_income_rejects_non_integer_account_id(
        self, transaction_service, account_service, sample_account, bad_id
    ):
        with pytest.raises(ValidationError, match="Invalid account id"):
            transaction_service.create_income(
                date="2024-03-05", amount="5.00", source="salary", account_id=bad_id
            )
        assert transaction_service.list_income() == []
        assert _balance(account_service, sample_account.id) == Decimal("100.00")

    def test_income_accepts_digit_string_account_id(self, transaction_service, account_service, sample_account):
        income = transaction_service.create_income(
            date="2024-03-05", amount="5.00", source="salary", account_id=f" {sample_account.id} "
        )

        assert income.account_id == sample_account.id
        assert _balance(account_service, sample_account.id) == Decimal("105.00")

    def test_income_unknown_account_is_recorded_without_adjustment(
        self, transaction_service, account_service, sample_account
    ):
        income = transaction_service.create_income(
            date="2024-03-05", amount="5.00", source="salary", account_id=999
        )

        assert income.account_id == 999
        assert len(transaction_service.list_income()) == 1
        assert _balance(account_service, sample_account.id) == Decimal("100.00")

    def test_income_unknown_account_rejected_in_strict_mode(self, temp_db):
        service = TransactionService(temp_db, require_accounts=True)

        with pytest.raises(NotFoundError):
            service.create_income(date="2024-03-05", amount="5.00", source="salary", account_id=999)
        assert service.list_income() == []


class TestExpense:
    """Tests for TransactionService.create_expense."""

    def test_expense_debits_account(self, transaction_service, account_service, sample_account):
        expense = transaction_service.create_expense(
            date="2024-03-06",
            amount="30.00",
            category="food",
            account_id=sample_account.id,
            description="Groceries",
        )

        assert expense.category == "food"
        assert expense.description == "Groceries"
        assert _balance(account_service, sample_account.id) == Decimal("70.00")

    def test_expense_can_overdraw(self, transaction_service, account_service, sample_account):
        transaction_service.create_expense(
            date="2024-03-06", amount="130.00", category="housing", account_id=sample_account.id
        )
        assert _balance(account_service, sample_account.id) == Decimal("-30.00")

    def test_expense_invalid_category(self, transaction_service, account_service, sample_account):
        with pytest.raises(ValidationError, match="category"):
            transaction_service.create_expense(
                date="2024-03-06", amount="30.00", category="gadgets", account_id=sample_account.id
            )
        assert transaction_service.list_expenses() == []
        assert _balance(account_service, sample_account.id) == Decimal("100.00")


class TestTransfer:
    """Tests for TransactionService.create_transfer."""

    def test_transfer_moves_money(self, transaction_service, account_service, sample_account, second_account):
        transfer = transaction_service.create_transfer(
            date="2024-03-07",
            amount="20.00",
            from_account_id=sample_account.id,
            to_account_id=second_account.id,
        )

        assert transfer.from_account_id == sample_account.id
        assert transfer.to_account_id == second_account.id
        assert _balance(account_service, sample_account.id) == Decimal("80.00")
        assert _balance(account_service, second_account.id) == Decimal("20.00")

    def test_transfer_same_account_rejected(self, transaction_service, account_service, sample_account):
        with pytest.raises(ValidationError, match="same account"):
            transaction_service.create_transfer(
                date="2024-03-07",
                amount="20.00",
                from_account_id=sample_account.id,
                to_account_id=sample_account.id,
            )

        assert transaction_service.list_transfers() == []
        assert _balance(account_service, sample_account.id) == Decimal("100.00")

    def test_transfer_to_missing_account_still_debits_source(
        self, transaction_service, account_service, sample_account
    ):
        transaction_service.create_transfer(
            date="2024-03-07", amount="20.00", from_account_id=sample_account.id, to_account_id=999
        )

        assert len(transaction_service.list_transfers()) == 1
        assert _balance(account_service, sample_account.id) == Decimal("80.00")

    def test_transfer_rolls_back_when_credit_fails(
        self, temp_db, account_service, sample_account, second_account, monkeypatch
    ):
        service = TransactionService(temp_db)
        original = temp_db.adjust_account_balance

        def failing_adjust(account_id, delta):
            if account_id == second_account.id:
                raise RuntimeError("store went away")
            return original(account_id, delta)

        monkeypatch.setattr(temp_db, "adjust_account_balance", failing_adjust)

        with pytest.raises(RuntimeError):
            service.create_transfer(
                date="2024-03-07",
                amount="20.00",
                from_account_id=sample_account.id,
                to_account_id=second_account.id,
            )

        monkeypatch.undo()
        assert service.list_transfers() == []
        assert _balance(account_service, sample_account.id) == Decimal("100.00")
        assert _balance(account_service, second_account.id) == Decimal("0.00")


class TestBalanceConsistency:
    """Balance always equals the opening balance plus applied effects."""

    def test_documented_scenario(self, transaction_service, account_service, sample_account):
        transaction_service.create_expense(
            date="2024-03-01", amount="30.00", category="food", account_id=sample_account.id
        )
        assert str(_balance(account_service, sample_account.id)) == "70.00"

        transaction_service.create_income(
            date="2024-03-02", amount="50.00", source="salary", account_id=sample_account.id
        )
        assert str(_balance(account_service, sample_account.id)) == "120.00"

        account_b = account_service.create_account(
            name="B", account_type="savings", account_number="0000", initial_balance="0.00"
        )
        transaction_service.create_transfer(
            date="2024-03-03", amount="20.00", from_account_id=sample_account.id, to_account_id=account_b.id
        )
        assert str(_balance(account_service, sample_account.id)) == "100.00"
        assert str(_balance(account_service, account_b.id)) == "20.00"

    def test_mixed_sequence(self, transaction_service, account_service, sample_account, second_account):
        operations = [
            ("income", "12.34"),
            ("expense", "0.99"),
            ("transfer_out", "5.55"),
            ("income", "100.01"),
            ("expense", "33.33"),
            ("transfer_in", "1.11"),
        ]
        expected = Decimal("100.00")
        for kind, amount in operations:
            value = Decimal(amount)
            if kind == "income":
                transaction_service.create_income("2024-04-01", amount, "other", sample_account.id)
                expected += value
            elif kind == "expense":
                transaction_service.create_expense("2024-04-01", amount, "other", sample_account.id)
                expected -= value
            elif kind == "transfer_out":
                transaction_service.create_transfer("2024-04-01", amount, sample_account.id, second_account.id)
                expected -= value
            else:
                transaction_service.create_transfer("2024-04-01", amount, second_account.id, sample_account.id)
                expected += value

        assert _balance(account_service, sample_account.id) == expected
        assert _balance(account_service, second_account.id) == Decimal("4.44")


class TestQueries:
    """Tests for listing transactions."""

    def test_list_newest_created_first(self, transaction_service, sample_account):
        first = transaction_service.create_income("2024-01-01", "1.00", "salary", sample_account.id)
        second = transaction_service.create_income("2023-12-01", "2.00", "salary", sample_account.id)

        assert [txn.id for txn in transaction_service.list_income()] == [second.id, first.id]

    def test_list_by_month_prefix(self, transaction_service, sample_account):
        transaction_service.create_expense("2024-01-05", "1.00", "food", sample_account.id)
        transaction_service.create_expense("2024-01-31", "2.00", "food", sample_account.id)
        transaction_service.create_expense("2024-02-01", "3.00", "food", sample_account.id)

        january = transaction_service.list_expenses_by_month("2024-01")
        assert sorted(txn.date for txn in january) == ["2024-01-05", "2024-01-31"]
        assert transaction_service.list_expenses_by_month("2023-12") == []

    def test_month_filter_is_literal(self, transaction_service, sample_account):
        transaction_service.create_income("2024-01-05", "1.00", "salary", sample_account.id)

        assert transaction_service.list_income_by_month("2024-0_") == []
        assert transaction_service.list_income_by_month("2024%") == []


def test_income_add_command(cli_runner, temp_db, sample_account, account_service):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "income", "add",
            "--account", "Test Account",
            "--amount", "50.00",
            "--source", "salary",
            "--date", "2024-03-05",
        ],
    )

    assert result.exit_code == 0
    assert "Recorded income" in result.output
    assert "New balance: 150.00" in result.output
    assert account_service.get_account(sample_account.id).balance == Decimal("150.00")


def test_expense_add_command_unknown_account(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "expense", "add",
            "--account", "Nowhere",
            "--amount", "5.00",
            "--category", "food",
        ],
    )

    assert result.exit_code == 1
    assert "not found" in result.output


def test_transfer_add_command_same_account(cli_runner, temp_db, sample_account):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "transfer", "add",
            "--from", "Test Account",
            "--to", str(sample_account.id),
            "--amount", "5.00",
        ],
    )

    assert result.exit_code == 1
    assert "same account" in result.output


def test_transfer_add_command(cli_runner, temp_db, sample_account, second_account):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "transfer", "add",
            "--from", "Test Account",
            "--to", "Savings",
            "--amount", "20",
        ],
    )

    assert result.exit_code == 0
    assert "Test Account: 80.00" in result.output
    assert "Savings: 20.00" in result.output


def test_expense_list_command_month(cli_runner, temp_db, transaction_service, sample_account):
    transaction_service.create_expense("2024-01-05", "1.00", "food", sample_account.id)
    transaction_service.create_expense("2024-02-05", "2.00", "shopping", sample_account.id)

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "expense", "list", "--month", "2024-02"]
    )

    assert result.exit_code == 0
    assert "shopping" in result.output
    assert "food" not in result.output
