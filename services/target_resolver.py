"""Calorie and macronutrient targets derived from TDEE and goal."""

from typing import Optional

from core.logger import get_logger
from core.numeric import round_half_up
from schemas.plan_schema import MacroTargets

logger = get_logger("services.target_resolver")

CALORIE_MULTIPLIER = {
    "fat_loss": 0.85,
    "lean_mass": 1.08,
    "hypertrophy": 1.05,
    "strength": 1.00,
    "recomp": 1.00,
}

DEFAULT_MEALS_BY_GOAL = {
    "fat_loss": 3,
    "lean_mass": 4,
    "strength": 3,
    "recomp": 3,
    "hypertrophy": 4,
}

DEFAULT_BODYWEIGHT_KG = 70.0


class TargetResolver:
    """Turns energy expenditure into daily calorie and macro targets."""

    def calculate_target_calories(self, tdee: float, goal: str) -> int:
        """Apply the goal multiplier to TDEE; unknown goals keep maintenance."""
        if not tdee:
            return 0
        val = round_half_up(tdee * CALORIE_MULTIPLIER.get(goal, 1.0))
        logger.debug("Target calories for goal %s: %s", goal, val)
        return val

    def calculate_macros(self, kcal: float, goal: str, weight_kg: Optional[float] = None) -> MacroTargets:
        """Protein and fat from bodyweight, carbs fill the remaining calories."""
        w = weight_kg or DEFAULT_BODYWEIGHT_KG
        protein_per_kg = 2.0 if goal == "fat_loss" else 1.8
        fat_per_kg = 0.6 if goal == "fat_loss" else 0.7

        protein_g = round_half_up(w * protein_per_kg)
        fat_g = round_half_up(w * fat_per_kg)
        carb_g = max(0, round_half_up((kcal - 4 * protein_g - 9 * fat_g) / 4))
        macros = MacroTargets(protein_g=protein_g, fat_g=fat_g, carb_g=carb_g)
        logger.debug("Macros calculated: %s", macros)
        return macros

    def default_meals_per_day(self, goal: str) -> int:
        return DEFAULT_MEALS_BY_GOAL.get(goal, 3)


target_resolver = TargetResolver()
__all__ = ["TargetResolver", "target_resolver"]
