"""Pydantic schema package for request and response models."""

from .profile_schema import Overrides, Profile, PlanRequest
from .plan_schema import (
    Indices,
    AccuracyBand,
    IndicesResponse,
    MacroTargets,
    WorkoutBlock,
    WorkoutDay,
    MacroTotals,
    IngredientItem,
    MealCombo,
    MealEntry,
    Plan,
)
from .adapt_schema import ReadinessSignal, AdaptRequest, AdaptResponse
from .catalog_schema import Exercise, Ingredient, MacroProfile, PortionMeta

__all__ = [
    "Overrides",
    "Profile",
    "PlanRequest",
    "Indices",
    "AccuracyBand",
    "IndicesResponse",
    "MacroTargets",
    "WorkoutBlock",
    "WorkoutDay",
    "MacroTotals",
    "IngredientItem",
    "MealCombo",
    "MealEntry",
    "Plan",
    "ReadinessSignal",
    "AdaptRequest",
    "AdaptResponse",
    "Exercise",
    "Ingredient",
    "MacroProfile",
    "PortionMeta",
]
