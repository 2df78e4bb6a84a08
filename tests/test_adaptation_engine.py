"""Tests for readiness-driven plan adaptation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from schemas import AdaptRequest, Indices, MacroTargets, Plan, WorkoutBlock, WorkoutDay
from services.adaptation_engine import adapt_plan


def _block(muscle, sets=10, rir="1–2"):
    return WorkoutBlock(muscle=muscle, exercise_id=f"{muscle}_ex", sets=sets, reps="6–12", rir=rir)


def _plan(sets=10, kcal=2000):
    return Plan(
        indices=Indices(BMR=1700, TDEE=2600),
        kcal=kcal,
        macros=MacroTargets(protein_g=140, fat_g=60, carb_g=200),
        workouts=[
            WorkoutDay(day=1, blocks=[_block("chest", sets), _block("upper_chest", sets), _block("triceps", sets)]),
            WorkoutDay(day=2, blocks=[_block("quads", sets), _block("hams", sets)]),
        ],
    )


def _sets(plan):
    return {b.muscle: b.sets for day in plan.workouts for b in day.blocks}


def test_soreness_drops_one_set_on_matching_regions():
    """'chest' matches chest and upper_chest by substring."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(), readiness={"soreness": {"chest": 4}}))
    assert _sets(resp.patched_plan) == {"chest": 9, "upper_chest": 9, "triceps": 10, "quads": 10, "hams": 10}
    assert resp.change_log == ["chest -1 set (soreness 4)."]


def test_mild_soreness_changes_nothing():
    """Soreness below 4 is ignored."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(), readiness={"soreness": {"quads": 3}}))
    assert _sets(resp.patched_plan) == _sets(_plan())
    assert resp.change_log == []


def test_sets_never_drop_below_one():
    """Single-set blocks stay at one set."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(sets=1), readiness={"soreness": {"hams": 5}}))
    assert _sets(resp.patched_plan)["hams"] == 1


def test_repeated_adaptation_is_cumulative():
    """Feeding the patched plan back reduces sets again."""
    request = {"readiness": {"soreness": {"quads": 4}}}
    once = adapt_plan(AdaptRequest(current_plan=_plan(), **request)).patched_plan
    twice = adapt_plan(AdaptRequest(current_plan=once, **request)).patched_plan
    assert _sets(once)["quads"] == 9
    assert _sets(twice)["quads"] == 8


def test_input_plan_is_not_mutated():
    """The received plan keeps its original sets and calories."""
    plan = _plan()
    adapt_plan(AdaptRequest(
        current_plan=plan,
        readiness={"soreness": {"chest": 5}, "stress": 5, "motivation": 1},
        weight_trend_2w="above",
        last_week_adherence_pct=10,
    ))
    assert _sets(plan) == _sets(_plan())
    assert plan.kcal == 2000
    assert plan.workouts[0].blocks[0].rir == "1–2"


def test_global_fatigue_caps_rir_and_cuts_sets():
    """High stress with low motivation: sets x0.9 and RIR '2'."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(), readiness={"stress": 4, "motivation": 2}))
    blocks = [b for day in resp.patched_plan.workouts for b in day.blocks]
    assert all(b.sets == 9 for b in blocks)
    assert all(b.rir == "2" for b in blocks)
    assert resp.change_log == ["Global fatigue: sets -10%, cap RIR at 2."]


def test_fatigue_needs_both_signals():
    """High stress alone does not trigger the fatigue rule."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(), readiness={"stress": 5, "motivation": 3}))
    assert resp.change_log == []


@pytest.mark.parametrize("trend,kcal,message", [
    ("above", 1900, "Calories -5% (weight above target)."),
    ("below", 2100, "Calories +5% (weight below target)."),
])
def test_weight_trend_adjusts_calories(trend, kcal, message):
    """Calories move 5% against the weight trend."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(), readiness={}, weight_trend_2w=trend))
    assert resp.patched_plan.kcal == kcal
    assert resp.change_log == [message]


def test_weight_trend_on_target_is_silent():
    """No change, no log line."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(), readiness={}, weight_trend_2w="on_target"))
    assert resp.patched_plan.kcal == 2000
    assert resp.change_log == []


def test_unchanged_calories_are_not_logged():
    """Zero calories stay zero, so nothing is logged."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(kcal=0), readiness={}, weight_trend_2w="above"))
    assert resp.change_log == []


def test_low_adherence_cuts_sets():
    """10 sets x0.85 = 8.5 rounds half-up to 9."""
    resp = adapt_plan(AdaptRequest(current_plan=_plan(), readiness={}, last_week_adherence_pct=55))
    assert set(_sets(resp.patched_plan).values()) == {9}
    assert resp.change_log == ["Low adherence: temporary -15% sets."]


def test_rules_stack_in_fixed_order():
    """Every rule fires once and logs in order."""
    resp = adapt_plan(AdaptRequest(
        current_plan=_plan(),
        readiness={"soreness": {"triceps": 4}, "stress": 4, "motivation": 1},
        weight_trend_2w="below",
        last_week_adherence_pct=40,
    ))
    assert resp.change_log == [
        "triceps -1 set (soreness 4).",
        "Global fatigue: sets -10%, cap RIR at 2.",
        "Calories +5% (weight below target).",
        "Low adherence: temporary -15% sets.",
    ]
    # triceps: 10 -> 9 -> 8 (8.1) -> 7 (6.8); others: 10 -> 9 -> 8 (7.65)
    assert _sets(resp.patched_plan)["triceps"] == 7
    assert _sets(resp.patched_plan)["chest"] == 8


def test_missing_plan_and_readiness_listed_together():
    """Both missing inputs are reported in one error."""
    with pytest.raises(ValidationError) as exc_info:
        adapt_plan(AdaptRequest())
    assert exc_info.value.status_code == 400
    assert exc_info.value.details["missing_fields"] == ["current_plan", "readiness"]
    assert exc_info.value.message == "Missing required fields: current_plan, readiness"


@pytest.mark.parametrize("score", [0, 6])
def test_soreness_scores_outside_one_to_five_are_rejected(score):
    """Soreness is reported on a 1..5 scale."""
    with pytest.raises(PydanticValidationError):
        AdaptRequest(current_plan=_plan(), readiness={"soreness": {"chest": score}})
