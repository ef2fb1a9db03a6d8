"""
Security utilities for JWT authentication and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import logging
import bcrypt
from jose import JWTError, jwt
from expense_tracker.core.config import settings
from expense_tracker.core.exceptions import AuthenticationError
from expense_tracker.schemas.user import TokenData

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ("sub", "email", "exp")


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. A malformed stored hash never matches."""
    pre_hashed = _pre_hash_password(plain_password)
    try:
        return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password.
    Pre-hashes with SHA256 first to support longer passwords, then bcrypt
    with a fresh salt. Returned as a string for database storage.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')


def create_access_token(user_id: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token for the given user."""
    issued_at = datetime.now(timezone.utc)
    if expires_delta:
        expire = issued_at + expires_delta
    else:
        expire = issued_at + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify a JWT token. Returns None if it cannot be trusted."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.debug(f"Token rejected: {e}")
        return None
    if any(not payload.get(claim) for claim in REQUIRED_CLAIMS):
        logger.debug("Token rejected: missing required claims")
        return None
    return payload


def verify_access_token(token: Optional[str]) -> TokenData:
    """
    Resolve a bearer token to the identity it carries.

    Absent, malformed, tampered and expired tokens all raise the same
    AuthenticationError.
    """
    payload = decode_access_token(token) if token else None
    if payload is None:
        raise AuthenticationError()
    return TokenData(user_id=payload["sub"], email=payload["email"])
