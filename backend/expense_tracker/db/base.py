"""
Declarative base and shared columns for all models.
"""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    """Opaque unique identifier for new records."""
    return uuid.uuid4().hex


# MySQL DATETIME drops fractional seconds unless fsp is set
Timestamp = DateTime(timezone=True).with_variant(mysql.DATETIME(timezone=True, fsp=6), "mysql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """Abstract base with id and server-assigned timestamps."""
    __abstract__ = True

    id = Column(String(32), primary_key=True, default=generate_id)
    created_at = Column(Timestamp, default=utcnow, nullable=False, index=True)
    updated_at = Column(Timestamp, default=utcnow, onupdate=utcnow, nullable=False)
