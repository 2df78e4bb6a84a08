"""Schemas for biometric profiles and plan requests.

Required fields are checked by the plan engine, not here, so that every
missing one is reported at once. Numeric inputs are clamped into plausible
ranges rather than rejected.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

from core.numeric import clamp, finite_or_none

Sex = Literal["male", "female"]
Goal = Literal["fat_loss", "lean_mass", "hypertrophy", "strength", "recomp"]
Equipment = Literal["full_gym", "dumbbells_only", "bands_only", "bodyweight_only"]
Experience = Literal["novice", "intermediate", "advanced"]
BudgetTier = Literal["low", "medium", "high"]
ToleranceMode = Literal["tight", "normal", "loose"]

PLAUSIBLE_RANGES = {
    "height_cm": (100.0, 250.0),
    "weight_kg": (30.0, 300.0),
    "bodyfat_pct": (3.0, 70.0),
    "waist_cm": (40.0, 200.0),
}


class Overrides(BaseModel):
    """User supplied values that replace computed indices."""

    BMR: Optional[float] = None
    TDEE: Optional[float] = None
    BMI: Optional[float] = None

    @field_validator("BMR", "TDEE", "BMI", mode="before")
    @classmethod
    def _finite(cls, v):
        return finite_or_none(v)


class Profile(BaseModel):
    """Biometric input for index calculation."""

    sex: Optional[Sex] = Field(None, examples=["male"])
    age_range: Optional[str] = Field(None, examples=["25–34"], description="Age bucket, e.g. '<18', '25–34', '>60'")
    height_cm: Optional[float] = Field(None, examples=[175])
    weight_kg: Optional[float] = Field(None, examples=[75])
    bodyfat_pct: Optional[float] = Field(None, examples=[15])
    waist_cm: Optional[float] = Field(None, examples=[82])
    overrides: Overrides = Field(default_factory=Overrides)

    @field_validator("height_cm", "weight_kg", "bodyfat_pct", "waist_cm", mode="before")
    @classmethod
    def _clamp_plausible(cls, v, info):
        v = finite_or_none(v)
        if v is None:
            return None
        lo, hi = PLAUSIBLE_RANGES[info.field_name]
        return clamp(v, lo, hi)

    @field_validator("overrides", mode="before")
    @classmethod
    def _overrides_default(cls, v):
        return Overrides() if v is None else v


class PlanRequest(Profile):
    """Full plan generation request."""

    goal: Optional[Goal] = Field(None, examples=["hypertrophy"])
    schedule_days: Optional[int] = Field(None, ge=1, le=7, examples=[4])
    equipment: Optional[Equipment] = Field(None, examples=["full_gym"])
    experience: Optional[Experience] = Field(None, examples=["intermediate"])
    injuries: List[str] = Field(default=[], examples=[["knee"]])
    budget_tier: Optional[BudgetTier] = Field(None, examples=["medium"])
    meals_per_day: Optional[int] = Field(None, ge=1, le=6, examples=[4])
    tolerance: Optional[ToleranceMode] = Field(None, examples=["normal"], description="Meal macro tolerance; unset uses MEAL_TOLERANCE")

    @field_validator("injuries", mode="before")
    @classmethod
    def _injuries_default(cls, v):
        return [] if v is None else v
