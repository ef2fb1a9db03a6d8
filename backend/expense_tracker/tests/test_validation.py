"""
Tests for request validation helpers.
"""
from datetime import date
import pytest
from expense_tracker.services.validation import (
    parse_calendar_date,
    validate_expense,
    validate_login,
    validate_signup,
)

VALID_EXPENSE = {"title": "Coffee", "category": "Food", "amount": 4.5, "date": "2024-01-01"}


class TestSignupValidation:
    def test_valid_signup_is_cleaned(self):
        data, errors = validate_signup({"name": "  Alice ", "email": " A@X.com ", "password": "secret1"})
        assert errors == []
        assert data.name == "Alice"
        assert data.email == "a@x.com"
        assert data.password == "secret1"

    def test_errors_are_reported_in_field_order(self):
        data, errors = validate_signup({"name": " ", "email": "nope", "password": "123"})
        assert data is None
        assert [e.field for e in errors] == ["name", "email", "password"]
        assert errors[0].message == "Name is required and must be a non-empty string"

    def test_email_requires_at_sign(self):
        _, errors = validate_signup({"name": "A", "email": "ax.com", "password": "secret1"})
        assert [e.message for e in errors] == ["Valid email is required"]

    def test_short_password(self):
        _, errors = validate_signup({"name": "A", "email": "a@x.com", "password": "12345"})
        assert [e.message for e in errors] == ["Password must be at least 6 characters long"]

    def test_non_string_name(self):
        _, errors = validate_signup({"name": 42, "email": "a@x.com", "password": "secret1"})
        assert errors[0].field == "name"


class TestLoginValidation:
    def test_missing_fields(self):
        _, errors = validate_login({})
        assert [e.message for e in errors] == ["Email is required", "Password is required"]

    def test_email_is_normalized(self):
        data, errors = validate_login({"email": " A@X.COM", "password": "secret1"})
        assert errors == []
        assert data.email == "a@x.com"


class TestExpenseValidation:
    def test_valid_expense(self):
        changes, errors = validate_expense(dict(VALID_EXPENSE, title="  Coffee  "))
        assert errors == []
        assert changes == {"title": "Coffee", "category": "Food", "amount": 4.5, "date": date(2024, 1, 1)}

    def test_missing_fields_on_create(self):
        changes, errors = validate_expense({})
        assert changes == {}
        assert [e.field for e in errors] == ["title", "category", "amount", "date"]

    def test_title_too_long(self):
        _, errors = validate_expense(dict(VALID_EXPENSE, title="x" * 201))
        assert errors[0].message == "Title cannot exceed 200 characters"

    @pytest.mark.parametrize("category", ["food", "Groceries", "", None, 3])
    def test_category_outside_enum(self, category):
        _, errors = validate_expense(dict(VALID_EXPENSE, category=category))
        assert [e.field for e in errors] == ["category"]
        assert errors[0].message.startswith("Category must be one of: Food, Transport")

    @pytest.mark.parametrize("amount", [-0.01, "4.5", None, True, float("nan"), float("inf")])
    def test_invalid_amount(self, amount):
        _, errors = validate_expense(dict(VALID_EXPENSE, amount=amount))
        assert [e.field for e in errors] == ["amount"]

    @pytest.mark.parametrize("amount", [0, 10, 4.5])
    def test_zero_and_positive_amounts(self, amount):
        changes, errors = validate_expense(dict(VALID_EXPENSE, amount=amount))
        assert errors == []
        assert changes["amount"] == float(amount)

    def test_partial_only_checks_supplied_fields(self):
        changes, errors = validate_expense({"amount": 12, "note": "ignored"}, partial=True)
        assert errors == []
        assert changes == {"amount": 12.0}

    def test_partial_rejects_explicit_null(self):
        changes, errors = validate_expense({"title": None}, partial=True)
        assert changes == {}
        assert errors[0].field == "title"

    def test_partial_reports_first_invalid_field_in_received_order(self):
        changes, errors = validate_expense({"amount": -1, "title": ""}, partial=True)
        assert changes == {}
        assert [e.field for e in errors] == ["amount", "title"]


class TestParseCalendarDate:
    @pytest.mark.parametrize("value,expected", [
        ("2024-01-01", date(2024, 1, 1)),
        ("2024-01-01T10:30:00", date(2024, 1, 1)),
        ("2024-01-01T10:30:00Z", date(2024, 1, 1)),
        ("2024-01-01T10:30:00.000+02:00", date(2024, 1, 1)),
        (date(2024, 1, 1), date(2024, 1, 1)),
    ])
    def test_parses(self, value, expected):
        assert parse_calendar_date(value) == expected

    @pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01", None, 20240101])
    def test_rejects(self, value):
        assert parse_calendar_date(value) is None


class TestSignupLengthLimits:
    def test_name_too_long(self):
        _, errors = validate_signup({"name": "x" * 101, "email": "a@x.com", "password": "secret1"})
        assert [e.message for e in errors] == ["Name cannot exceed 100 characters"]

    def test_name_at_limit_after_trim(self):
        data, errors = validate_signup({"name": " " + "x" * 100 + " ", "email": "a@x.com", "password": "secret1"})
        assert errors == []
        assert len(data.name) == 100

    def test_email_too_long(self):
        email = "a" * 250 + "@x.com"
        _, errors = validate_signup({"name": "A", "email": email, "password": "secret1"})
        assert [e.message for e in errors] == ["Email cannot exceed 255 characters"]
