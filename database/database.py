"""Database helpers: engine, session factory and DB initialization.

Provides a read session factory for catalog reads and an `init_db` helper
that creates tables and seeds the bundled catalogs when they are empty.
"""

import json
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.config import load_settings
from core.logger import get_logger
from .models import Base, Exercise, Ingredient
from data.exercises_dataset import EXERCISES_DATA
from data.ingredients_dataset import INGREDIENTS_DATA

logger = get_logger("database")

DATABASE_URL = load_settings().database_url

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=_connect_args)

SessionLocal = sessionmaker(bind=engine)


def exercise_row(item: dict) -> Exercise:
    return Exercise(
        id=item["id"],
        name=item["name"],
        muscles=json.dumps(item.get("muscles", [])),
        equipment=json.dumps(item.get("equipment", [])),
        movement=item.get("movement", "compound"),
        cues=json.dumps(item.get("cues", [])),
    )


def ingredient_row(item: dict) -> Ingredient:
    macros = item["macro_per_100g"]
    return Ingredient(
        id=item.get("id") or item["name"],
        name=item["name"],
        category=item["category"],
        budget_tier=item["budget_tier"],
        kcal=macros["kcal"],
        protein=macros["p"],
        carbs=macros["c"],
        fat=macros["f"],
        typical_portion_g=item.get("typical_portion_g"),
        portion=json.dumps(item["portion"]) if item.get("portion") else None,
        notes=item.get("notes"),
    )


def init_db():
    """Initialize database schema and seed the catalogs.

    Creates all tables and populates the exercises and ingredients tables
    with the bundled datasets if they are empty.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        if session.query(Exercise).count() == 0:
            session.add_all([exercise_row(item) for item in EXERCISES_DATA])
            logger.info("Seeded %s exercises", len(EXERCISES_DATA))
        if session.query(Ingredient).count() == 0:
            session.add_all([ingredient_row(item) for item in INGREDIENTS_DATA])
            logger.info("Seeded %s ingredients", len(INGREDIENTS_DATA))
        session.commit()
    finally:
        session.close()


def get_read_session():
    """Yield a SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency to ensure the session is
    properly closed after the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
