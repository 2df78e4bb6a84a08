"""Schemas for the plan adaptation endpoint."""

from pydantic import BaseModel, Field
from typing import Annotated, Dict, List, Literal, Optional

from .plan_schema import Plan

WeightTrend = Literal["below", "on_target", "above"]


class ReadinessSignal(BaseModel):
    """Self-reported readiness for the coming training week."""

    sleep_h: float = Field(7.0, ge=0, le=24, examples=[6.5])
    soreness: Dict[str, Annotated[int, Field(ge=1, le=5)]] = Field(default_factory=dict, examples=[{"chest": 4, "quads": 2}], description="Region -> soreness 1..5")
    stress: int = Field(3, ge=1, le=5, examples=[4])
    motivation: int = Field(3, ge=1, le=5, examples=[2])


class AdaptRequest(BaseModel):
    current_plan: Optional[Plan] = None
    readiness: Optional[ReadinessSignal] = None
    last_week_adherence_pct: Optional[float] = Field(None, ge=0, le=100, examples=[55])
    weight_trend_2w: Optional[WeightTrend] = Field(None, examples=["above"])


class AdaptResponse(BaseModel):
    patched_plan: Plan
    change_log: List[str]
