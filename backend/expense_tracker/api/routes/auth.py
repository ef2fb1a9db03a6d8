"""
Authentication routes for signup and login.
"""
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from expense_tracker.core.utils import format_response
from expense_tracker.db.session import get_db
from expense_tracker.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Register a new user and return it with a token."""
    result = auth_service.signup(payload, db)
    return format_response(result.model_dump(), "User created successfully")


@router.post("/login")
def login(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Login and get JWT token."""
    result = auth_service.login(payload, db)
    return format_response(result.model_dump(), "Login successful")
