"""Tests for exercise selection and the weekly split builder."""

import pytest

from data.exercises_dataset import EXERCISES_DATA
from services.catalog import ExerciseCatalog
from services.exercise_selector import ExerciseSelector
from services.workout_builder import WorkoutBuilder, sets_per_block, split_by_days, weekly_sets_target


@pytest.fixture(scope="module")
def catalog():
    return ExerciseCatalog.from_dicts(EXERCISES_DATA)


@pytest.fixture(scope="module")
def builder(catalog):
    return WorkoutBuilder(ExerciseSelector(catalog), max_workers=2)


def test_days_produce_matching_workout_days(builder):
    """One WorkoutDay per requested day, numbered from 1."""
    for days in range(1, 7):
        workouts = builder.build(days, "intermediate", "hypertrophy", "full_gym")
        assert [w.day for w in workouts] == list(range(1, days + 1))


def test_seven_days_clamped_to_six(builder):
    """The builder never emits more than six training days."""
    assert len(builder.build(7, "novice", "recomp", "full_gym")) == 6


def test_sets_within_bounds(builder):
    """Every block has between 3 and 22 sets."""
    for experience in ("novice", "intermediate", "advanced"):
        for goal in ("hypertrophy", "strength", "fat_loss"):
            for days in (1, 3, 6):
                for day in builder.build(days, experience, goal, "full_gym"):
                    for block in day.blocks:
                        assert 3 <= block.sets <= 22


def test_weekly_sets_target_goal_factor():
    """Intermediate midpoint is 14; strength takes 80% of it."""
    assert weekly_sets_target("intermediate", "hypertrophy") == 14
    assert weekly_sets_target("intermediate", "strength") == 11
    assert weekly_sets_target("novice", "fat_loss") == 9


def test_sets_per_block_four_day_split():
    """14 weekly sets over four slots per day -> 3.5 -> 4 sets."""
    assert sets_per_block(14, split_by_days(4)) == 4


def test_rep_and_rir_hints(builder):
    """Strength uses low rep ranges; hints carry RIR and rest."""
    block = builder.build(3, "novice", "strength", "full_gym")[0].blocks[0]
    assert block.reps == "5–6"
    assert block.rir == "2"
    assert block.rest_hint == "90–120s"
    assert block.rir_hint == "RIR 2; rest 90–120s"

    block = builder.build(3, "intermediate", "hypertrophy", "full_gym")[0].blocks[0]
    assert block.reps == "6–12"
    assert block.progression_hint == "If reps hit top, +2–2.5% or +1 rep"


def test_compound_ranked_before_isolation(catalog):
    """Candidates list compound lifts first."""
    ranked = ExerciseSelector(catalog).candidates("full_gym", "quads")
    movements = [ex.movement for ex in ranked]
    assert movements == sorted(movements, key=lambda m: 0 if m == "compound" else 1)


def test_equipment_filter(builder, catalog):
    """Bodyweight users only get bodyweight exercises or fallbacks."""
    for day in builder.build(6, "intermediate", "hypertrophy", "bodyweight_only"):
        for block in day.blocks:
            exercise = catalog.get(block.exercise_id)
            if exercise is None:
                assert block.exercise_id.endswith("_fallback_exercise")
            else:
                assert "bodyweight" in exercise.equipment


def test_injury_filter(builder, catalog):
    """Knee injuries exclude squats, lunges, leg press and step-ups."""
    for day in builder.build(6, "intermediate", "hypertrophy", "full_gym", ["knee"]):
        for block in day.blocks:
            exercise = catalog.get(block.exercise_id)
            if exercise is None:
                continue
            text = exercise.id + " " + exercise.name.lower()
            for token in ("squat", "lunge", "leg_press", "step_up"):
                assert token not in text


def test_unknown_equipment_is_not_compatible():
    """An unknown equipment class admits nothing."""
    assert ExerciseSelector.equipment_compatible(["barbell"], "kettlebells_only") is False
    assert ExerciseSelector.equipment_compatible(["barbell"], "full_gym") is True
    assert ExerciseSelector.equipment_compatible(["band"], "bands_only") is True
    assert ExerciseSelector.equipment_compatible(["dumbbell"], "bands_only") is False


def test_fallback_exercise_when_catalog_empty():
    """No candidate yields a synthesized id and no name."""
    builder = WorkoutBuilder(ExerciseSelector(ExerciseCatalog([])), max_workers=1)
    day = builder.build(3, "novice", "hypertrophy", "full_gym")[0]
    assert [b.exercise_id for b in day.blocks] == [
        "chest_fallback_exercise",
        "upper_chest_fallback_exercise",
        "triceps_fallback_exercise",
    ]
    assert all(b.exercise_name is None for b in day.blocks)


def test_muscles_sharing_an_exercise_are_merged():
    """Two muscles resolving to one exercise give a single block."""
    catalog = ExerciseCatalog.from_dicts([
        {"id": "dip", "name": "Parallel Dip", "muscles": ["chest", "upper_chest", "triceps"],
         "equipment": ["bodyweight"], "movement": "compound"},
    ])
    builder = WorkoutBuilder(ExerciseSelector(catalog), max_workers=1)
    day = builder.build(3, "novice", "hypertrophy", "full_gym")[0]
    assert len(day.blocks) == 1
    assert day.blocks[0].exercise_id == "dip"
    assert day.blocks[0].muscles_worked == ["chest", "upper_chest", "triceps"]
    assert day.blocks[0].muscle == "chest"
