"""Deterministic exercise selection for a target muscle.

Candidates must train the muscle, fit the user's equipment and avoid
movements flagged for the user's injuries. Compound lifts rank before
isolation work, then names alphabetically.
"""

from typing import Iterable, List, Optional, Set

from core.logger import get_logger
from schemas.catalog_schema import Exercise
from services.catalog import ExerciseCatalog

logger = get_logger("services.exercise_selector")

INJURY_AVOID = {
    "shoulder": ["ohp", "pike_pushup", "db_ohp", "handstand", "lateral_raise"],
    "elbow": ["triceps", "skullcrusher", "dips"],
    "wrist": ["pushup", "bench_press", "db_press"],
    "low_back": ["deadlift", "rdl", "back_squat", "hip_hinge"],
    "hip": ["deep_squat", "split_squat"],
    "knee": ["squat", "lunge", "leg_press", "step_up"],
    "ankle": ["calf_raises", "step_up", "jump"],
}

# equipment class -> tags that qualify an exercise; None means anything goes
EQUIPMENT_TAGS = {
    "full_gym": None,
    "dumbbells_only": {"dumbbell", "bodyweight"},
    "bands_only": {"band", "bodyweight"},
    "bodyweight_only": {"bodyweight"},
}


def fallback_exercise_id(muscle: str) -> str:
    return f"{muscle}_fallback_exercise"


class ExerciseSelector:
    """Picks the best catalog exercise for a muscle under user constraints."""

    def __init__(self, catalog: ExerciseCatalog):
        self.catalog = catalog

    @staticmethod
    def avoid_tokens(injuries: Iterable[str]) -> Set[str]:
        tokens: Set[str] = set()
        for injury in injuries or []:
            tokens.update(INJURY_AVOID.get(injury, []))
        return tokens

    @staticmethod
    def equipment_compatible(exercise_equipment: List[str], equipment: str) -> bool:
        if equipment not in EQUIPMENT_TAGS:
            return False
        allowed = EQUIPMENT_TAGS[equipment]
        if allowed is None:
            return True
        return any(tag in allowed for tag in exercise_equipment)

    def candidates(self, equipment: str, muscle: str, injuries: Iterable[str] = ()) -> List[Exercise]:
        """All admissible exercises for the muscle, best first."""
        avoid = self.avoid_tokens(injuries)
        out = []
        for ex in self.catalog:
            if muscle not in ex.muscles:
                continue
            if not self.equipment_compatible(ex.equipment, equipment):
                continue
            name = ex.name.lower()
            if any(token in ex.id or token in name for token in avoid):
                continue
            out.append(ex)
        out.sort(key=lambda ex: (0 if ex.movement == "compound" else 1, ex.name.lower()))
        return out

    def choose(self, equipment: str, muscle: str, injuries: Iterable[str] = ()) -> Optional[Exercise]:
        ranked = self.candidates(equipment, muscle, injuries)
        return ranked[0] if ranked else None

    def choose_id(self, equipment: str, muscle: str, injuries: Iterable[str] = ()) -> str:
        """Id of the best exercise, or a synthesized fallback id when none fits."""
        best = self.choose(equipment, muscle, injuries)
        if best is None:
            logger.warning("No exercise for muscle=%s equipment=%s injuries=%s; using fallback", muscle, equipment, list(injuries))
            return fallback_exercise_id(muscle)
        return best.id
