"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel


class UserPublic(BaseModel):
    """Public user fields. The password hash is never part of a response."""
    id: str
    name: str
    email: str

    class Config:
        from_attributes = True


class AuthResult(BaseModel):
    """Schema for signup/login response data."""
    user: UserPublic
    token: str


class TokenData(BaseModel):
    """Identity carried by a verified access token."""
    user_id: str
    email: str


class SignupData(BaseModel):
    """Cleaned signup input."""
    name: str
    email: str
    password: str


class LoginData(BaseModel):
    """Cleaned login input."""
    email: str
    password: str
