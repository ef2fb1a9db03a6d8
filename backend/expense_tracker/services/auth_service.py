"""
Auth service for signup and login business logic.
"""
import logging
from typing import Any, Dict
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session
from expense_tracker.core.exceptions import AuthenticationError, ConflictError, ValidationError
from expense_tracker.core.security import create_access_token, get_password_hash, verify_password
from expense_tracker.models.user import User
from expense_tracker.schemas.user import AuthResult, UserPublic
from expense_tracker.services.validation import validate_login, validate_signup

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _auth_result(user: User) -> AuthResult:
    token = create_access_token(user_id=user.id, email=user.email)
    return AuthResult(user=UserPublic.model_validate(user), token=token)


def signup(payload: Dict[str, Any], db: Session) -> AuthResult:
    """Register a new user and issue a token for it."""
    data, errors = validate_signup(payload)
    if errors:
        raise ValidationError(errors[0].message)

    existing_user = db.query(User).filter(User.email == data.email).first()
    if existing_user:
        raise ConflictError()

    try:
        new_user = User(
            name=data.name,
            email=data.email,
            hashed_password=get_password_hash(data.password)
        )
        db.add(new_user)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise ValidationError(str(e))
    except IntegrityError:
        # Another request created the same email between the check and the insert
        db.rollback()
        raise ConflictError()
    except DataError as e:
        # Column constraints the store enforces itself (e.g. VARCHAR length in strict mode)
        db.rollback()
        logger.warning(f"Store rejected signup data: {e.orig}")
        raise ValidationError("Invalid user data")
    db.refresh(new_user)

    logger.info(f"Created user {new_user.id}")
    return _auth_result(new_user)


def login(payload: Dict[str, Any], db: Session) -> AuthResult:
    """Check credentials and issue a token."""
    data, errors = validate_login(payload)
    if errors:
        raise ValidationError(errors[0].message)

    user = db.query(User).filter(User.email == data.email).first()
    if not user or not verify_password(data.password, user.hashed_password):
        logger.warning("Failed login attempt")
        raise AuthenticationError(INVALID_CREDENTIALS, message="Authentication failed")

    logger.info(f"User {user.id} logged in")
    return _auth_result(user)
