"""
Expense model for tracking spending.
"""
import enum
from sqlalchemy import Column, String, Float, Date, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship, validates
from expense_tracker.core.config import settings
from expense_tracker.db.base import BaseModel


class ExpenseCategory(str, enum.Enum):
    """Closed set of expense categories shared by filters and validation."""
    FOOD = "Food"
    TRANSPORT = "Transport"
    SHOPPING = "Shopping"
    BILLS = "Bills"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    OTHER = "Other"

    @classmethod
    def values(cls):
        return [category.value for category in cls]


class Expense(BaseModel):
    """Expense model representing a single spending event owned by one user."""
    __tablename__ = "expenses"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_expenses_amount_non_negative"),
        Index("ix_expenses_user_id_date", "user_id", "date"),
    )

    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(settings.TITLE_MAX_LENGTH), nullable=False)
    category = Column(String(50), nullable=False)
    amount = Column(Float, nullable=False)
    date = Column(Date, nullable=False)

    # Relationships
    user = relationship("User", back_populates="expenses")

    @validates("category")
    def validate_category(self, key, value):
        if value not in ExpenseCategory.values():
            raise ValueError(f"Invalid category '{value}'")
        return value

    @validates("amount")
    def validate_amount(self, key, value):
        if value is None or value < 0:
            raise ValueError("Amount must be a positive number")
        return value
