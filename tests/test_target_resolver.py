"""Unit tests for calorie and macro targets."""

from services.target_resolver import target_resolver


def test_goal_multipliers():
    """Fat loss is a 15% deficit, lean mass an 8% surplus."""
    assert target_resolver.calculate_target_calories(2000, "fat_loss") == 1700
    assert target_resolver.calculate_target_calories(2000, "lean_mass") == 2160
    assert target_resolver.calculate_target_calories(2000, "hypertrophy") == 2100
    assert target_resolver.calculate_target_calories(2000, "recomp") == 2000


def test_macros_fat_loss():
    """2.0 g/kg protein, 0.6 g/kg fat, carbs fill the rest."""
    macros = target_resolver.calculate_macros(1700, "fat_loss", 80)
    assert macros.protein_g == 160
    assert macros.fat_g == 48
    assert macros.carb_g == 157


def test_macros_default_bodyweight():
    """Missing weight assumes 70 kg."""
    macros = target_resolver.calculate_macros(2500, "hypertrophy", None)
    assert macros.protein_g == 126
    assert macros.fat_g == 49


def test_carbs_never_negative():
    """A tiny calorie budget leaves zero carbs, not a negative number."""
    macros = target_resolver.calculate_macros(500, "strength", 100)
    assert macros.carb_g == 0


def test_default_meals_by_goal():
    """Lean mass and hypertrophy eat four meals, the rest three."""
    assert target_resolver.default_meals_per_day("lean_mass") == 4
    assert target_resolver.default_meals_per_day("fat_loss") == 3
