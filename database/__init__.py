"""Database package: catalog ORM models and session helpers."""

from .database import (
    engine,
    SessionLocal,
    init_db,
    get_read_session,
)
from . import models

__all__ = [
    "engine",
    "SessionLocal",
    "init_db",
    "get_read_session",
    "models",
]
