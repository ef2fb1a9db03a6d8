"""
Expense service for expense-related business logic.

Every query here is scoped by the owning user id; an expense that belongs to
someone else is indistinguishable from one that does not exist.
"""
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session
from expense_tracker.core.exceptions import NotFoundError, ValidationError
from expense_tracker.models.expense import Expense
from expense_tracker.schemas.expense import ExpenseFilter
from expense_tracker.services.validation import validate_expense

logger = logging.getLogger(__name__)


def list_expenses(user_id: str, filters: ExpenseFilter, db: Session) -> List[Expense]:
    """List the caller's expenses, newest date first, then newest created first."""
    query = db.query(Expense).filter(Expense.user_id == user_id)

    if filters.category:
        query = query.filter(Expense.category == filters.category)
    if filters.start_date:
        query = query.filter(Expense.date >= filters.start_date)
    if filters.end_date:
        query = query.filter(Expense.date <= filters.end_date)

    return query.order_by(Expense.date.desc(), Expense.created_at.desc()).all()


def get_owned_expense(expense_id: str, user_id: str, db: Session) -> Expense:
    """Fetch an expense by id and owner, or raise NotFoundError."""
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.user_id == user_id
    ).first()
    if not expense:
        raise NotFoundError()
    return expense


def create_expense(user_id: str, payload: Dict[str, Any], db: Session) -> Expense:
    """Validate all fields, then persist a new expense owned by the caller."""
    changes, errors = validate_expense(payload)
    if errors:
        raise ValidationError(errors[0].message)

    try:
        expense = Expense(user_id=user_id, **changes)
    except ValueError as e:
        raise ValidationError(str(e))
    db.add(expense)
    db.commit()
    db.refresh(expense)

    logger.info(f"User {user_id} created expense {expense.id}")
    return expense


def update_expense(expense_id: str, user_id: str, payload: Dict[str, Any], db: Session) -> Expense:
    """
    Apply a partial update to an owned expense.

    All supplied fields are validated into a separate change set before the
    record is touched, so a failing field leaves both the instance and the
    store unchanged.
    """
    expense = get_owned_expense(expense_id, user_id, db)

    changes, errors = validate_expense(payload, partial=True)
    if errors:
        raise ValidationError(errors[0].message)

    try:
        for field, value in changes.items():
            setattr(expense, field, value)
    except ValueError as e:
        db.rollback()
        raise ValidationError(str(e))
    db.commit()
    db.refresh(expense)

    logger.info(f"User {user_id} updated expense {expense.id} ({', '.join(changes) or 'no changes'})")
    return expense


def delete_expense(expense_id: str, user_id: str, db: Session) -> None:
    """Delete an owned expense."""
    expense = get_owned_expense(expense_id, user_id, db)
    db.delete(expense)
    db.commit()
    logger.info(f"User {user_id} deleted expense {expense_id}")
