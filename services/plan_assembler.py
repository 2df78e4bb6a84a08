"""Plan engine entry points: index recalculation and plan generation.

`generate_plan` wires the index calculator, target resolver, workout
builder and meal allocator together. Catalog snapshots and the random
source are passed in; nothing here reads the database.
"""

import random
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from core.config import EngineSettings, load_settings
from core.exceptions import ValidationError
from core.logger import get_logger
from schemas.plan_schema import IndicesResponse, Plan
from schemas.profile_schema import PlanRequest, Profile
from services.catalog import ExerciseCatalog, IngredientCatalog
from services.exercise_selector import ExerciseSelector
from services.index_calculator import FALLBACK_BMR, index_calculator
from services.meal_allocator import MealAllocator
from services.target_resolver import target_resolver
from services.workout_builder import WorkoutBuilder, clamp_days

logger = get_logger("services.plan_assembler")

RECALC_REQUIRED = ("sex", "age_range")
PLAN_REQUIRED = ("sex", "age_range", "schedule_days", "equipment", "experience", "goal", "budget_tier")
ACTIVE_RECOVERY_NOTE = "Input 7 days → using 6 training days + 1 active recovery."
CONFIDENCE_BY_ACCURACY = {"highest": "high", "high": "high", "med": "med", "low": "low"}


def _missing(payload, fields) -> List[str]:
    return [name for name in fields if getattr(payload, name) in (None, "")]


def recalc_indices(profile: Profile) -> IndicesResponse:
    """Recalculate indices for a profile; sex and age range are required."""
    missing = _missing(profile, RECALC_REQUIRED)
    if missing:
        raise ValidationError.missing(missing)
    return index_calculator.recalculate(profile)


def generate_plan(
    request: PlanRequest,
    exercise_catalog: ExerciseCatalog,
    ingredient_catalog: IngredientCatalog,
    rng: Optional[random.Random] = None,
    settings: Optional[EngineSettings] = None,
) -> Plan:
    """Generate a complete plan for a request.

    Args:
        request: Validated plan request.
        exercise_catalog: Exercise snapshot used for workout selection.
        ingredient_catalog: Ingredient snapshot; filtered to the request's
            budget tier here.
        rng: Random source for meal allocation. Defaults to one seeded from
            `ENGINE_RANDOM_SEED` (unseeded when that is unset).
        settings: Engine settings; loaded from the environment when omitted.

    Returns:
        A frozen `Plan`.

    Raises:
        ValidationError: If any required request field is missing.
    """
    missing = _missing(request, PLAN_REQUIRED)
    if missing:
        raise ValidationError.missing(missing)

    settings = settings or load_settings()
    if rng is None:
        rng = random.Random(settings.random_seed)

    notes = []
    if request.schedule_days == 7:
        notes.append(ACTIVE_RECOVERY_NOTE)
    days = clamp_days(request.schedule_days)

    indices, warnings = index_calculator.calculate_indices(request, days)
    if indices.TDEE is None:
        tdee = index_calculator.calculate_tdee(indices.BMR or FALLBACK_BMR, days)
        logger.info("No TDEE from profile; falling back to %s kcal", tdee)
        indices = indices.model_copy(update={"TDEE": tdee})

    kcal = target_resolver.calculate_target_calories(indices.TDEE, request.goal) or indices.TDEE
    macros = target_resolver.calculate_macros(kcal, request.goal, request.weight_kg)
    meals_per_day = request.meals_per_day or target_resolver.default_meals_per_day(request.goal)

    builder = WorkoutBuilder(ExerciseSelector(exercise_catalog), max_workers=settings.max_workers)
    allocator = MealAllocator(settings.allocator, max_workers=settings.max_workers)
    tier_catalog = ingredient_catalog.for_tier(request.budget_tier)

    # workouts and meals share no state
    with ThreadPoolExecutor(max_workers=2) as pool:
        workouts_future = pool.submit(
            builder.build, days, request.experience, request.goal, request.equipment, request.injuries,
        )
        meals_future = pool.submit(
            allocator.allocate, tier_catalog, macros, meals_per_day, request.goal, rng, request.tolerance,
        )
        workouts = workouts_future.result()
        meals = meals_future.result()

    band = index_calculator.accuracy_band(request)
    plan = Plan(
        indices=indices,
        kcal=kcal,
        macros=macros,
        workouts=workouts,
        meals=meals,
        confidence=CONFIDENCE_BY_ACCURACY[band.accuracy],
        tips=[f"Add {band.next_best_input} to improve accuracy"] if band.next_best_input else [],
        notes=notes,
        warnings=warnings,
    )
    logger.info(
        "Plan generated: goal=%s days=%s kcal=%s meals=%s confidence=%s",
        request.goal, days, kcal, meals_per_day, plan.confidence,
    )
    return plan


__all__ = ["recalc_indices", "generate_plan"]
