"""End-to-end tests for plan generation and index recalculation."""

import random

import pytest

from core.config import AllocatorSettings, EngineSettings
from core.exceptions import ValidationError
from data.exercises_dataset import EXERCISES_DATA
from data.ingredients_dataset import INGREDIENTS_DATA
from schemas import PlanRequest, Profile
from services.catalog import ExerciseCatalog, IngredientCatalog
from services.meal_allocator import MealAllocator
from services.plan_assembler import generate_plan, recalc_indices

SETTINGS = EngineSettings(max_workers=2)

REQUEST = {
    "sex": "male",
    "goal": "hypertrophy",
    "schedule_days": 4,
    "equipment": "full_gym",
    "experience": "intermediate",
    "age_range": "25–34",
    "height_cm": 175,
    "weight_kg": 75,
    "bodyfat_pct": 15,
    "budget_tier": "medium",
    "meals_per_day": 4,
}


@pytest.fixture(scope="module")
def exercises():
    return ExerciseCatalog.from_dicts(EXERCISES_DATA)


@pytest.fixture(scope="module")
def ingredients():
    return IngredientCatalog.from_dicts(INGREDIENTS_DATA)


def _generate(exercises, ingredients, seed=1, **overrides):
    payload = dict(REQUEST, **overrides)
    return generate_plan(PlanRequest(**payload), exercises, ingredients, random.Random(seed), SETTINGS)


def test_reference_request_end_to_end(exercises, ingredients):
    """4 training days, 4 meals each with protein and fat, valid confidence."""
    plan = _generate(exercises, ingredients)
    assert len(plan.workouts) == 4
    assert plan.confidence in ("low", "med", "high")
    assert len(plan.meals) == 4
    for meal in plan.meals:
        assert meal.protein_opts and meal.protein_opts[0].items
        assert meal.fat_opts and meal.fat_opts[0].items


def test_reference_request_targets(exercises, ingredients):
    """Katch BMR 1747, TDEE 2708 at 4 days, +5% for hypertrophy."""
    plan = _generate(exercises, ingredients)
    assert plan.indices.BMR == 1747
    assert plan.indices.method == "katch"
    assert plan.indices.TDEE == 2708
    assert plan.kcal == 2843
    assert plan.macros.protein_g == 135
    assert plan.macros.fat_g == 53
    assert plan.confidence == "high"
    assert plan.tips == ["Add waist_cm to improve accuracy"]
    assert plan.notes == []


def test_meals_use_requested_budget_tier(exercises, ingredients):
    """Only medium-tier ingredients appear in a medium plan."""
    medium_ids = {i.key for i in ingredients.for_tier("medium")}
    plan = _generate(exercises, ingredients)
    for meal in plan.meals:
        for opts in (meal.protein_opts, meal.carb_opts, meal.veg_opts, meal.fat_opts):
            for combo in opts:
                assert all(item.ingredient_id in medium_ids for item in combo.items)


def test_same_seed_same_plan(exercises, ingredients):
    """Plans are reproducible from the seed."""
    assert _generate(exercises, ingredients, seed=7) == _generate(exercises, ingredients, seed=7)


def test_seven_days_becomes_six_with_note(exercises, ingredients):
    """Seven requested days train six with an active recovery note."""
    plan = _generate(exercises, ingredients, schedule_days=7)
    assert len(plan.workouts) == 6
    assert plan.notes == ["Input 7 days → using 6 training days + 1 active recovery."]


def test_missing_fields_listed_together(exercises, ingredients):
    """Every absent required field is named in one error."""
    with pytest.raises(ValidationError) as exc_info:
        generate_plan(PlanRequest(), exercises, ingredients, random.Random(0), SETTINGS)
    assert exc_info.value.details["missing_fields"] == [
        "sex", "age_range", "schedule_days", "equipment", "experience", "goal", "budget_tier",
    ]
    assert exc_info.value.message.startswith("Missing required fields: sex, age_range")


def test_tdee_falls_back_without_body_data(exercises, ingredients):
    """No height or weight: TDEE = 1500 x activity multiplier."""
    plan = _generate(exercises, ingredients, height_cm=None, weight_kg=None, bodyfat_pct=None,
                     schedule_days=3, goal="recomp", meals_per_day=None)
    assert plan.indices.BMR is None
    assert plan.indices.TDEE == 2325
    assert plan.kcal == 2325
    assert plan.confidence == "low"
    assert plan.tips == ["Add height_cm to improve accuracy"]
    assert len(plan.meals) == 3


def test_override_warnings_reach_the_plan(exercises, ingredients):
    """A far-off BMR override shows up in plan warnings."""
    plan = _generate(exercises, ingredients, overrides={"BMR": 2500})
    assert plan.indices.BMR == 2500
    assert plan.warnings == ["BMR override differs >15% from computed (1747 vs 2500)."]


def test_recalc_requires_sex_and_age_range():
    """Missing sex and age range are both reported."""
    with pytest.raises(ValidationError) as exc_info:
        recalc_indices(Profile(height_cm=175, weight_kg=75))
    assert exc_info.value.details["missing_fields"] == ["sex", "age_range"]


def test_recalc_returns_band_and_indices():
    """A complete profile reaches the top band."""
    resp = recalc_indices(Profile(sex="female", age_range="35–44", height_cm=165, weight_kg=60,
                                  bodyfat_pct=25, waist_cm=70))
    assert resp.accuracy == "highest"
    assert resp.next_best_input is None
    assert resp.indices.method == "katch"


def _record_tolerances(monkeypatch):
    seen = set()
    select_final = MealAllocator.select_final

    def spy(self, beams, base, tol):
        seen.add(tol)
        return select_final(self, beams, base, tol)

    monkeypatch.setattr(MealAllocator, "select_final", spy)
    return seen


def test_configured_tolerance_applies_when_request_omits_it(monkeypatch, exercises, ingredients):
    """An unset request tolerance falls back to the configured mode."""
    seen = _record_tolerances(monkeypatch)
    settings = EngineSettings(max_workers=2, allocator=AllocatorSettings(tolerance_mode="tight"))
    generate_plan(PlanRequest(**REQUEST), exercises, ingredients, random.Random(1), settings)
    assert seen == {0.07}


def test_request_tolerance_overrides_configured_mode(monkeypatch, exercises, ingredients):
    """A tolerance on the request wins over the configured mode."""
    seen = _record_tolerances(monkeypatch)
    settings = EngineSettings(max_workers=2, allocator=AllocatorSettings(tolerance_mode="tight"))
    generate_plan(PlanRequest(**REQUEST, tolerance="loose"), exercises, ingredients, random.Random(1), settings)
    assert seen == {0.15}
