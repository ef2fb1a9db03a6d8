"""
Application error taxonomy.

Every error carries a short ``message`` (the category) and an ``error`` string
(the client-facing detail). Handlers in ``main.py`` render them as
``{"message": ..., "error": ...}`` with the class's ``status_code``.
"""


class ExpenseTrackerError(Exception):
    """Base exception for the expense tracker."""

    status_code = 500
    default_message = "Internal server error"
    default_error = "An unexpected error occurred"

    def __init__(self, error: str = None, message: str = None):
        self.error = error or self.default_error
        self.message = message or self.default_message
        super().__init__(self.error)


class ValidationError(ExpenseTrackerError):
    """Raised when request input is missing or malformed."""

    status_code = 400
    default_message = "Validation error"
    default_error = "Invalid input"


class AuthenticationError(ExpenseTrackerError):
    """Raised for missing, invalid or expired tokens and bad login credentials."""

    status_code = 401
    default_message = "Authentication error"
    default_error = "Invalid or missing token"


class NotFoundError(ExpenseTrackerError):
    """Raised when no record exists under the caller's ownership."""

    status_code = 404
    default_message = "Expense not found"
    default_error = "Expense not found or you do not have permission to access it"


class ConflictError(ExpenseTrackerError):
    """Raised when a unique key is already taken."""

    status_code = 409
    default_message = "User already exists"
    default_error = "An account with this email already exists"


class InternalError(ExpenseTrackerError):
    """Raised for store or infrastructure failures."""
