"""Models package - Import all models for SQLAlchemy registration."""
from expense_tracker.models.user import User
from expense_tracker.models.expense import Expense, ExpenseCategory

__all__ = [
    "User",
    "Expense",
    "ExpenseCategory",
]
