"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from expense_tracker.api.routes import auth, expenses

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(expenses.router)
