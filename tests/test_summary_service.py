"""Tests for dashboard aggregation."""

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

from fintrack.cli.main import cli
from fintrack.domain.entities import ActivityEntry, ActivityType
from fintrack.domain.summary import UNKNOWN_ACCOUNT, _activity_timestamp
from fintrack.utils.date_parser import month_key

MARCH = date(2024, 3, 15)


class TestMonthlySummary:
    """Tests for SummaryService.monthly_summary."""

    def test_sums_current_month_only(self, summary_service, transaction_service, sample_account, second_account):
        transaction_service.create_income("2024-03-01", "1000.00", "salary", sample_account.id)
        transaction_service.create_income("2024-03-20", "250.50", "freelance", sample_account.id)
        transaction_service.create_income("2024-02-28", "999.00", "salary", sample_account.id)
        transaction_service.create_expense("2024-03-02", "300.25", "housing", sample_account.id)
        transaction_service.create_expense("2024-04-01", "50.00", "food", sample_account.id)

        summary = summary_service.monthly_summary(today=MARCH)

        assert summary.month == "2024-03"
        assert summary.month_label == "March 2024"
        assert summary.monthly_income == Decimal("1250.50")
        assert summary.monthly_expenses == Decimal("300.25")
        assert summary.net_income == Decimal("950.25")

    def test_total_balance_is_independent_of_month(
        self, summary_service, transaction_service, sample_account, second_account
    ):
        transaction_service.create_income("2023-01-01", "10.00", "other", second_account.id)

        summary = summary_service.monthly_summary(today=MARCH)

        assert summary.monthly_income == Decimal("0.00")
        assert summary.total_balance == Decimal("110.00")

    def test_negative_net(self, summary_service, transaction_service, sample_account):
        transaction_service.create_expense("2024-03-02", "40.00", "food", sample_account.id)

        assert summary_service.monthly_summary(today=MARCH).net_income == Decimal("-40.00")

    def test_to_dict_formats_two_decimals(self, summary_service, transaction_service, sample_account):
        transaction_service.create_income("2024-03-01", "5", "salary", sample_account.id)

        data = summary_service.monthly_summary(today=MARCH).to_dict()

        assert data == {
            "monthly_income": "5.00",
            "monthly_expenses": "0.00",
            "net_income": "5.00",
            "total_balance": "105.00",
            "current_month": "March 2024",
        }

    def test_explicit_month(self, summary_service, transaction_service, sample_account):
        transaction_service.create_income("2024-02-10", "7.00", "salary", sample_account.id)

        summary = summary_service.monthly_summary(today=MARCH, month="2024-02")

        assert summary.monthly_income == Decimal("7.00")
        assert summary.month_label == "February 2024"

    def test_defaults_to_wall_clock_month(self, summary_service, transaction_service, sample_account):
        today = date.today()
        transaction_service.create_income(today, "3.00", "salary", sample_account.id)

        summary = summary_service.monthly_summary()

        assert summary.month == month_key(today)
        assert summary.monthly_income == Decimal("3.00")


class TestRecentActivity:
    """Tests for SummaryService.recent_activity."""

    def test_empty(self, summary_service):
        assert summary_service.recent_activity() == []

    def test_at_most_ten_sorted_descending(
        self, summary_service, transaction_service, sample_account, second_account
    ):
        for i in range(7):
            transaction_service.create_income("2024-03-01", f"{i + 1}.00", "salary", sample_account.id)
            transaction_service.create_expense("2024-03-01", f"{i + 1}.00", "food", sample_account.id)
            transaction_service.create_transfer(
                "2024-03-01", f"{i + 1}.00", sample_account.id, second_account.id
            )

        entries = summary_service.recent_activity()

        assert len(entries) == 10
        stamps = [_activity_timestamp(entry) for entry in entries]
        assert stamps == sorted(stamps, reverse=True)
        # Only the five newest of each type are considered
        assert all(entry.amount >= Decimal("3.00") for entry in entries)

    def test_annotates_types_and_names(
        self, summary_service, transaction_service, sample_account, second_account
    ):
        transaction_service.create_income("2024-03-01", "1.00", "salary", sample_account.id)
        transaction_service.create_expense("2024-03-01", "2.00", "food", second_account.id)
        transaction_service.create_transfer("2024-03-01", "3.00", sample_account.id, second_account.id)

        entries = {entry.activity_type: entry for entry in summary_service.recent_activity()}

        assert entries[ActivityType.INCOME].account_name == "Test Account"
        assert entries[ActivityType.INCOME].label == "salary"
        assert entries[ActivityType.EXPENSE].account_name == "Savings"
        assert entries[ActivityType.EXPENSE].label == "food"
        assert entries[ActivityType.TRANSFER].from_account_name == "Test Account"
        assert entries[ActivityType.TRANSFER].to_account_name == "Savings"

    def test_unknown_account_label(self, summary_service, transaction_service):
        transaction_service.create_income("2024-03-01", "1.00", "salary", 999)

        [entry] = summary_service.recent_activity()

        assert entry.account_name == UNKNOWN_ACCOUNT

    def test_entry_to_dict(self, summary_service, transaction_service, sample_account, second_account):
        transaction_service.create_transfer("2024-03-01", "3", sample_account.id, second_account.id)

        data = summary_service.recent_activity()[0].to_dict()

        assert data["type"] == "transfer"
        assert data["amount"] == "3.00"
        assert data["from_account"] == "Test Account"
        assert data["to_account"] == "Savings"

    def test_timestamp_falls_back_to_date(self):
        base = dict(id=1, amount=Decimal("1.00"), description=None, account_name="A")
        with_stamp = ActivityEntry(
            activity_type=ActivityType.INCOME,
            date="2024-01-01",
            created_at=datetime(2024, 2, 1, 12, 0),
            **base,
        )
        without_stamp = ActivityEntry(
            activity_type=ActivityType.EXPENSE, date="2024-03-01", created_at=None, **base
        )

        assert _activity_timestamp(without_stamp) > _activity_timestamp(with_stamp)
        assert _activity_timestamp(without_stamp) == datetime(2024, 3, 1, tzinfo=UTC)

    def test_timestamps_compare_on_utc_clock(self):
        base = dict(id=1, amount=Decimal("1.00"), description=None, account_name="A")
        # 01:00 at UTC+5 is 20:00 UTC on the previous day
        ahead_of_utc = ActivityEntry(
            activity_type=ActivityType.INCOME,
            date="2024-03-01",
            created_at=datetime(2024, 3, 1, 1, 0, tzinfo=timezone(timedelta(hours=5))),
            **base,
        )
        stored_naive = ActivityEntry(
            activity_type=ActivityType.INCOME,
            date="2024-03-01",
            created_at=datetime(2024, 2, 29, 21, 0),
            **base,
        )
        date_only = ActivityEntry(
            activity_type=ActivityType.EXPENSE, date="2024-03-01", created_at=None, **base
        )

        ordered = sorted([date_only, ahead_of_utc, stored_naive], key=_activity_timestamp, reverse=True)

        assert ordered == [date_only, stored_naive, ahead_of_utc]
        assert _activity_timestamp(ahead_of_utc) == datetime(2024, 2, 29, 20, 0, tzinfo=UTC)


class TestCategoryBreakdown:
    """Tests for SummaryService.category_breakdown."""

    def test_top_five_descending(self, summary_service, transaction_service, sample_account):
        amounts = {
            "food": ["10.00", "15.00"],
            "utilities": ["40.00"],
            "transportation": ["5.00"],
            "entertainment": ["30.00"],
            "shopping": ["1.00"],
            "healthcare": ["20.00"],
        }
        for category, values in amounts.items():
            for value in values:
                transaction_service.create_expense("2024-03-05", value, category, sample_account.id)
        transaction_service.create_expense("2024-02-05", "500.00", "housing", sample_account.id)

        breakdown = summary_service.category_breakdown(today=MARCH)

        assert [item.category for item in breakdown] == [
            "utilities",
            "entertainment",
            "food",
            "healthcare",
            "transportation",
        ]
        assert breakdown[2].total == 25.0
        assert isinstance(breakdown[0].total, float)

    def test_empty_month(self, summary_service, transaction_service, sample_account):
        transaction_service.create_expense("2024-02-05", "5.00", "food", sample_account.id)

        assert summary_service.category_breakdown(today=MARCH) == []


def test_summary_command(cli_runner, temp_db, transaction_service, sample_account):
    transaction_service.create_income("2024-03-01", "50.00", "salary", sample_account.id)

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "summary", "--month", "2024-03"]
    )

    assert result.exit_code == 0
    assert "March 2024" in result.output
    assert "50.00" in result.output
    assert "150.00" in result.output


def test_recent_command(cli_runner, temp_db, transaction_service, sample_account):
    transaction_service.create_expense("2024-03-01", "12.00", "food", sample_account.id)

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "recent"])

    assert result.exit_code == 0
    assert "expense" in result.output
    assert "-12.00" in result.output


def test_recent_command_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "recent"])

    assert result.exit_code == 0
    assert "No transactions yet" in result.output
