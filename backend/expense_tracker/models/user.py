"""
User model for authentication.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship, validates
from expense_tracker.core.config import settings
from expense_tracker.db.base import BaseModel


class User(BaseModel):
    """Credential record. Email is the login key and is stored lowercased."""
    __tablename__ = "users"

    name = Column(String(settings.NAME_MAX_LENGTH), nullable=False)
    email = Column(String(settings.EMAIL_MAX_LENGTH), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    expenses = relationship("Expense", back_populates="user")

    @validates("name")
    def validate_name(self, key, value):
        if not value or not value.strip():
            raise ValueError("Name is required")
        return value.strip()

    @validates("email")
    def validate_email(self, key, value):
        if not value or "@" not in value:
            raise ValueError("Valid email is required")
        return value.strip().lower()
