"""
Expense management routes.
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from expense_tracker.api.dependencies import get_current_user
from expense_tracker.core.exceptions import ValidationError
from expense_tracker.core.utils import format_response
from expense_tracker.db.session import get_db
from expense_tracker.models.expense import Expense, ExpenseCategory
from expense_tracker.schemas.expense import ExpenseFilter, ExpenseList, ExpenseResponse
from expense_tracker.schemas.user import TokenData
from expense_tracker.services import expense_service
from expense_tracker.services.validation import parse_calendar_date

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _serialize(expense: Expense) -> Dict[str, Any]:
    return ExpenseResponse.model_validate(expense).model_dump(mode="json")


def _parse_filter_date(value: Optional[str], name: str):
    if value is None or value == "":
        return None
    parsed = parse_calendar_date(value)
    if parsed is None:
        raise ValidationError(f"{name} must be a valid date")
    return parsed


@router.get("")
def list_expenses(
    category: Optional[str] = Query(None),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's expenses with optional category and date range filters."""
    filters = ExpenseFilter(
        category=category or None,
        start_date=_parse_filter_date(start_date, "startDate"),
        end_date=_parse_filter_date(end_date, "endDate")
    )
    expenses = expense_service.list_expenses(current_user.user_id, filters, db)
    result = ExpenseList(
        items=[ExpenseResponse.model_validate(e) for e in expenses],
        count=len(expenses)
    )
    return format_response(result.model_dump(mode="json"), "Expenses fetched successfully")


@router.get("/categories")
def list_categories(current_user: TokenData = Depends(get_current_user)):
    """Get the fixed set of expense categories."""
    return format_response(ExpenseCategory.values(), "Categories fetched successfully")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_expense(
    payload: Dict[str, Any] = Body(...),
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new expense."""
    expense = expense_service.create_expense(current_user.user_id, payload, db)
    return format_response(_serialize(expense), "Expense created successfully")


@router.get("/{expense_id}")
def get_expense(
    expense_id: str,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a single expense owned by the caller."""
    expense = expense_service.get_owned_expense(expense_id, current_user.user_id, db)
    return format_response(_serialize(expense), "Expense fetched successfully")


@router.put("/{expense_id}")
def update_expense(
    expense_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update any of title, category, amount and date on an owned expense."""
    expense = expense_service.update_expense(expense_id, current_user.user_id, payload, db)
    return format_response(_serialize(expense), "Expense updated successfully")


@router.delete("/{expense_id}")
def delete_expense(
    expense_id: str,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an owned expense."""
    expense_service.delete_expense(expense_id, current_user.user_id, db)
    return format_response(message="Expense deleted successfully")
