"""Plan API router.

Thin endpoints over the plan engine: index recalculation, plan generation
and plan adaptation. Catalogs and settings arrive through dependencies.
"""

from fastapi import APIRouter, Depends

from core.config import EngineSettings
from core.logger import get_logger
from database.deps import get_exercise_catalog, get_ingredient_catalog, get_settings
from schemas import AdaptRequest, AdaptResponse, IndicesResponse, Plan, PlanRequest, Profile
from services.adaptation_engine import adapt_plan
from services.catalog import ExerciseCatalog, IngredientCatalog
from services.plan_assembler import generate_plan, recalc_indices

logger = get_logger("api.plans")
router = APIRouter(prefix="/api", tags=["plans"])


@router.post("/recalculate-indexes", response_model=IndicesResponse)
def recalculate_indexes(payload: Profile):
    """Return BMR, TDEE, BMI, WHtR and FFMI with the profile's accuracy band.

    Raises:
        ValidationError: If sex or age_range is missing.
    """
    return recalc_indices(payload)


@router.post("/generate-plan", response_model=Plan)
def create_plan(
    payload: PlanRequest,
    exercises: ExerciseCatalog = Depends(get_exercise_catalog),
    ingredients: IngredientCatalog = Depends(get_ingredient_catalog),
    settings: EngineSettings = Depends(get_settings),
):
    """Generate workouts and meals for a profile.

    Args:
        payload: `PlanRequest` with profile, goal and preferences.
        exercises: Exercise catalog snapshot.
        ingredients: Ingredient catalog snapshot.
        settings: Engine settings (seed, workers, allocator tuning).

    Returns:
        The generated `Plan`.
    """
    logger.info("Generating plan: goal=%s days=%s tier=%s", payload.goal, payload.schedule_days, payload.budget_tier)
    return generate_plan(payload, exercises, ingredients, settings=settings)


@router.post("/adapt-plan", response_model=AdaptResponse)
def adapt(payload: AdaptRequest):
    """Patch a previously generated plan from readiness and adherence signals."""
    return adapt_plan(payload)
