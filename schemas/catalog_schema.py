"""Schemas for read-only catalog entities (exercises and ingredients)."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Movement = Literal["compound", "isolation"]
Category = Literal["protein", "carb", "veg", "fat"]
BudgetTier = Literal["low", "medium", "high"]


class Exercise(BaseModel):
    """Exercise catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    muscles: List[str] = []
    equipment: List[str] = []
    movement: Movement = "compound"
    cues: List[str] = []


class MacroProfile(BaseModel):
    """Macronutrients per 100 g."""

    model_config = ConfigDict(frozen=True)

    kcal: float = 0.0
    p: float = 0.0
    c: float = 0.0
    f: float = 0.0


class PortionMeta(BaseModel):
    """Portion sizing hints; grams by default, pieces for items like eggs."""

    model_config = ConfigDict(frozen=True)

    unit: Literal["g", "piece"] = "g"
    typical_g: Optional[float] = None
    min_g: Optional[float] = None
    max_g: Optional[float] = None
    step_g: Optional[float] = None
    grams_per_piece: Optional[float] = None
    min_pieces: Optional[int] = None
    max_pieces: Optional[int] = None
    step_pieces: Optional[int] = None


class Ingredient(BaseModel):
    """Ingredient catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    category: Category
    macro_per_100g: MacroProfile
    budget_tier: BudgetTier = "medium"
    typical_portion_g: Optional[float] = Field(None, description="Legacy typical portion, superseded by portion.typical_g")
    portion: Optional[PortionMeta] = None
    notes: Optional[str] = None

    @property
    def key(self) -> str:
        return self.id or self.name
