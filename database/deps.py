"""Dependency helpers that expose DB sessions and catalog snapshots.

These wrappers provide application-friendly names for injection into FastAPI
endpoints. Tests swap them out through `app.dependency_overrides`.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from core.config import EngineSettings, load_settings
from schemas.catalog_schema import BudgetTier
from services.catalog import CatalogProvider, ExerciseCatalog, IngredientCatalog
from .database import SessionLocal, get_read_session


def _load_exercises() -> ExerciseCatalog:
    db = SessionLocal()
    try:
        return ExerciseCatalog.from_session(db)
    finally:
        db.close()


# exercises change rarely; loaded once per process
exercise_catalog_provider = CatalogProvider(_load_exercises, kind="exercise")


@lru_cache(maxsize=None)
def csv_catalog_provider(csv_path: str) -> CatalogProvider:
    """One cached snapshot per configured CSV file."""
    return CatalogProvider(lambda: IngredientCatalog.from_csv(csv_path), kind="ingredient")


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()


def get_settings() -> EngineSettings:
    return load_settings()


def get_exercise_catalog() -> ExerciseCatalog:
    return exercise_catalog_provider.get()


def get_ingredient_catalog(
    budget_tier: Optional[BudgetTier] = Query(None, description="Only ingredients of this budget tier"),
    db: Session = Depends(get_db_read),
    settings: EngineSettings = Depends(get_settings),
) -> IngredientCatalog:
    """Ingredient snapshot from the configured CSV file, else from the database.

    The CSV is parsed once per path; database reads filter by tier in the query.
    """
    if settings.ingredient_csv_path:
        catalog = csv_catalog_provider(settings.ingredient_csv_path).get()
        return catalog.for_tier(budget_tier) if budget_tier else catalog
    return IngredientCatalog.from_session(db, budget_tier)
