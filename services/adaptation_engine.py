"""Rule-based adaptation of an existing plan to readiness signals.

Rules run in a fixed order and stack: a block can lose sets to soreness,
fatigue and low adherence in the same call. Calling `adapt_plan` again with
the same input applies the reductions again.
"""

from typing import List, Tuple

from core.exceptions import ValidationError
from core.logger import get_logger
from core.numeric import round_half_up
from schemas.adapt_schema import AdaptRequest, AdaptResponse, ReadinessSignal
from schemas.plan_schema import Plan, WorkoutBlock

logger = get_logger("services.adaptation_engine")

SORENESS_THRESHOLD = 4
FATIGUE_STRESS = 4
FATIGUE_MOTIVATION = 2
FATIGUE_SETS_FACTOR = 0.9
FATIGUE_RIR_CAP = "2"
WEIGHT_TREND_FACTOR = {"above": 0.95, "below": 1.05}
LOW_ADHERENCE_PCT = 60
LOW_ADHERENCE_SETS_FACTOR = 0.85


def _scale_sets(sets: int, factor: float) -> int:
    return max(1, round_half_up(sets * factor))


def _region_matches(muscle: str, region: str) -> bool:
    return region in muscle or muscle in region


class AdaptationEngine:
    """Applies readiness and adherence rules to workout blocks and calories."""

    def _map_blocks(self, plan: Plan, fn) -> Plan:
        workouts = [
            day.model_copy(update={"blocks": [fn(block) for block in day.blocks]})
            for day in plan.workouts
        ]
        return plan.model_copy(update={"workouts": workouts})

    def apply_soreness(self, plan: Plan, readiness: ReadinessSignal) -> Tuple[Plan, List[str]]:
        log = []
        for region, score in readiness.soreness.items():
            if score < SORENESS_THRESHOLD:
                continue

            def drop_one(block: WorkoutBlock, region=region) -> WorkoutBlock:
                if not _region_matches(block.muscle, region):
                    return block
                return block.model_copy(update={"sets": max(1, block.sets - 1)})

            plan = self._map_blocks(plan, drop_one)
            log.append(f"{region} -1 set (soreness {score}).")
        return plan, log

    def apply_fatigue(self, plan: Plan, readiness: ReadinessSignal) -> Tuple[Plan, List[str]]:
        if readiness.stress < FATIGUE_STRESS or readiness.motivation > FATIGUE_MOTIVATION:
            return plan, []
        plan = self._map_blocks(plan, lambda b: b.model_copy(update={
            "rir": FATIGUE_RIR_CAP,
            "sets": _scale_sets(b.sets, FATIGUE_SETS_FACTOR),
        }))
        return plan, ["Global fatigue: sets -10%, cap RIR at 2."]

    def apply_weight_trend(self, plan: Plan, trend) -> Tuple[Plan, List[str]]:
        factor = WEIGHT_TREND_FACTOR.get(trend)
        if factor is None:
            return plan, []
        kcal = round_half_up(plan.kcal * factor)
        if kcal == plan.kcal:
            return plan, []
        message = "Calories -5% (weight above target)." if trend == "above" else "Calories +5% (weight below target)."
        return plan.model_copy(update={"kcal": kcal}), [message]

    def apply_adherence(self, plan: Plan, adherence_pct) -> Tuple[Plan, List[str]]:
        if adherence_pct is None or adherence_pct >= LOW_ADHERENCE_PCT:
            return plan, []
        plan = self._map_blocks(plan, lambda b: b.model_copy(update={
            "sets": _scale_sets(b.sets, LOW_ADHERENCE_SETS_FACTOR),
        }))
        return plan, ["Low adherence: temporary -15% sets."]

    def adapt(self, request: AdaptRequest) -> AdaptResponse:
        """Return a patched copy of the plan and the ordered change log.

        Raises:
            ValidationError: If the current plan or readiness is missing.
        """
        missing = [name for name in ("current_plan", "readiness") if getattr(request, name) is None]
        if missing:
            raise ValidationError.missing(missing)

        plan = request.current_plan
        change_log: List[str] = []
        for step in (
            lambda p: self.apply_soreness(p, request.readiness),
            lambda p: self.apply_fatigue(p, request.readiness),
            lambda p: self.apply_weight_trend(p, request.weight_trend_2w),
            lambda p: self.apply_adherence(p, request.last_week_adherence_pct),
        ):
            plan, log = step(plan)
            change_log.extend(log)

        logger.info("Plan adapted with %s change(s)", len(change_log))
        return AdaptResponse(patched_plan=plan, change_log=change_log)


adaptation_engine = AdaptationEngine()


def adapt_plan(request: AdaptRequest) -> AdaptResponse:
    return adaptation_engine.adapt(request)


__all__ = ["AdaptationEngine", "adaptation_engine", "adapt_plan"]
