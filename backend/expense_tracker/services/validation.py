"""
Input validation for auth and expense requests.

Each validator returns the cleaned values alongside a list of FieldError in
field order. Nothing here touches the database or mutates a model instance,
so a caller can reject a request before any store access.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple
from expense_tracker.core.config import settings
from expense_tracker.models.expense import ExpenseCategory
from expense_tracker.schemas.user import LoginData, SignupData

EXPENSE_FIELDS = ("title", "category", "amount", "date")


@dataclass
class FieldError:
    field: str
    message: str


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def parse_calendar_date(value: Any) -> Optional[date]:
    """Parse an ISO date or datetime string (or date object) to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not _is_non_empty_str(value):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def validate_signup(payload: Dict[str, Any]) -> Tuple[Optional[SignupData], List[FieldError]]:
    """Validate name, email and password in that order."""
    errors = []
    name = payload.get("name")
    email = payload.get("email")
    password = payload.get("password")

    if not _is_non_empty_str(name):
        errors.append(FieldError("name", "Name is required and must be a non-empty string"))
    elif len(name.strip()) > settings.NAME_MAX_LENGTH:
        errors.append(FieldError("name", f"Name cannot exceed {settings.NAME_MAX_LENGTH} characters"))
    if not _is_non_empty_str(email) or "@" not in email:
        errors.append(FieldError("email", "Valid email is required"))
    elif len(email.strip()) > settings.EMAIL_MAX_LENGTH:
        errors.append(FieldError("email", f"Email cannot exceed {settings.EMAIL_MAX_LENGTH} characters"))
    if not isinstance(password, str) or len(password) < settings.PASSWORD_MIN_LENGTH:
        errors.append(FieldError(
            "password",
            f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
        ))

    if errors:
        return None, errors
    return SignupData(name=name.strip(), email=email.strip().lower(), password=password), errors


def validate_login(payload: Dict[str, Any]) -> Tuple[Optional[LoginData], List[FieldError]]:
    errors = []
    email = payload.get("email")
    password = payload.get("password")

    if not _is_non_empty_str(email):
        errors.append(FieldError("email", "Email is required"))
    if not isinstance(password, str) or not password:
        errors.append(FieldError("password", "Password is required"))

    if errors:
        return None, errors
    return LoginData(email=email.strip().lower(), password=password), errors


def _clean_title(value: Any) -> Tuple[Any, Optional[str]]:
    if not _is_non_empty_str(value):
        return None, "Title is required and must be a non-empty string"
    title = value.strip()
    if len(title) > settings.TITLE_MAX_LENGTH:
        return None, f"Title cannot exceed {settings.TITLE_MAX_LENGTH} characters"
    return title, None


def _clean_category(value: Any) -> Tuple[Any, Optional[str]]:
    if isinstance(value, str) and value.strip() in ExpenseCategory.values():
        return value.strip(), None
    return None, f"Category must be one of: {', '.join(ExpenseCategory.values())}"


def _clean_amount(value: Any) -> Tuple[Any, Optional[str]]:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None, "Amount must be a positive number"
    if math.isnan(value) or math.isinf(value) or value < 0:
        return None, "Amount must be a positive number"
    return float(value), None


def _clean_date(value: Any) -> Tuple[Any, Optional[str]]:
    parsed = parse_calendar_date(value)
    if parsed is None:
        return None, "Valid date is required"
    return parsed, None


_CLEANERS = {
    "title": _clean_title,
    "category": _clean_category,
    "amount": _clean_amount,
    "date": _clean_date,
}


def validate_expense(
    payload: Dict[str, Any],
    partial: bool = False
) -> Tuple[Dict[str, Any], List[FieldError]]:
    """
    Validate expense fields and return (changes, errors).

    With ``partial`` only the supplied fields are checked, in the order they
    were received, which is how updates work; a field present with a null
    value is still checked and rejected. Unknown keys are ignored. ``changes``
    is empty whenever ``errors`` is not.
    """
    if partial:
        fields = [key for key in payload if key in EXPENSE_FIELDS]
    else:
        fields = EXPENSE_FIELDS
    changes = {}
    errors = []
    for field in fields:
        value, message = _CLEANERS[field](payload.get(field))
        if message:
            errors.append(FieldError(field, message))
        else:
            changes[field] = value

    if errors:
        return {}, errors
    return changes, errors
