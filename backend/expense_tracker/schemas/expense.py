"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: str
    title: str
    category: str
    amount: float
    date: date
    user_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ExpenseList(BaseModel):
    """Schema for the expense list response data."""
    items: List[ExpenseResponse]
    count: int


class ExpenseFilter(BaseModel):
    """Optional list filters. Scope to the caller is applied separately."""
    category: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
