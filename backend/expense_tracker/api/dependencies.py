"""
Shared route dependencies.
"""
import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from expense_tracker.core.exceptions import AuthenticationError
from expense_tracker.core.security import verify_access_token
from expense_tracker.schemas.user import TokenData

logger = logging.getLogger(__name__)

# auto_error is off so a missing header gets the same 401 body as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> TokenData:
    """Resolve the bearer token to the caller's identity. No store access."""
    token = credentials.credentials if credentials else None
    try:
        return verify_access_token(token)
    except AuthenticationError:
        logger.warning("Rejected request with missing or invalid token")
        raise
