"""Catalog API router.

Read-only listings of the exercise and ingredient catalogs the engine
plans from.
"""

from fastapi import APIRouter, Depends
from typing import List

from core.logger import get_logger
from database.deps import get_exercise_catalog, get_ingredient_catalog
from schemas import Exercise, Ingredient
from services.catalog import ExerciseCatalog, IngredientCatalog

logger = get_logger("api.catalog")
router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/exercises", response_model=List[Exercise])
def list_exercises(catalog: ExerciseCatalog = Depends(get_exercise_catalog)):
    """Return every exercise in the catalog."""
    return list(catalog.all())


@router.get("/ingredients", response_model=List[Ingredient])
def list_ingredients(catalog: IngredientCatalog = Depends(get_ingredient_catalog)):
    """Return ingredients, filtered by the `budget_tier` query parameter when given."""
    logger.debug("Listing %s ingredients", len(catalog))
    return list(catalog)
