"""Schemas for computed indices and generated plans.

Plan records are frozen; the adaptation engine produces new values with
`model_copy(update=...)` instead of mutating a received plan.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Method = Literal["mifflin", "katch", "override"]
Accuracy = Literal["low", "med", "high", "highest"]
Confidence = Literal["low", "med", "high"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Indices(_Frozen):
    """Physiological indices; any value that cannot be computed is None."""

    BMR: Optional[int] = None
    method: Method = "mifflin"
    TDEE: Optional[int] = None
    BMI: Optional[float] = None
    WHtR: Optional[float] = None
    FFMI: Optional[float] = None


class AccuracyBand(_Frozen):
    accuracy: Accuracy
    next_best_input: Optional[str] = None


class IndicesResponse(_Frozen):
    """Result of an index recalculation."""

    indices: Indices
    accuracy: Accuracy
    next_best_input: Optional[str] = None
    warnings: List[str] = []


class MacroTargets(_Frozen):
    protein_g: int
    fat_g: int
    carb_g: int


class WorkoutBlock(_Frozen):
    """One exercise slot within a training day."""

    muscle: str
    exercise_id: str
    exercise_name: Optional[str] = None
    muscles_worked: List[str] = []
    sets: int
    reps: str
    rir: str
    rir_hint: str = ""
    rest_hint: str = ""
    progression_hint: str = ""


class WorkoutDay(_Frozen):
    day: int
    blocks: List[WorkoutBlock] = []


class MacroTotals(_Frozen):
    p: int = 0
    c: int = 0
    f: int = 0
    kcal: int = 0


class IngredientItem(_Frozen):
    ingredient_id: str
    name: str
    grams: int
    category: str
    label: Optional[str] = Field(None, description="Piece label such as '2 pcs'")
    p: int = 0
    c: int = 0
    f: int = 0
    kcal: int = 0


class MealCombo(_Frozen):
    """Items of one category within a meal, with rounded totals."""

    combo_label: str
    items: List[IngredientItem]
    totals: MacroTotals


class MealEntry(_Frozen):
    """The single selected ingredient combination for one meal."""

    meal: int
    protein_opts: List[MealCombo] = []
    carb_opts: List[MealCombo] = []
    veg_opts: List[MealCombo] = []
    fat_opts: List[MealCombo] = []
    totals: MacroTotals = MacroTotals()
    within_tolerance: bool = False


class Plan(_Frozen):
    """Complete fitness and nutrition plan."""

    indices: Indices
    kcal: int
    macros: MacroTargets
    workouts: List[WorkoutDay] = []
    meals: List[MealEntry] = []
    confidence: Confidence = "low"
    tips: List[str] = []
    notes: List[str] = []
    warnings: List[str] = []
