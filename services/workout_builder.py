"""Weekly workout split builder.

Turns days per week, experience and goal into one `WorkoutDay` per training
day. Set counts, rep ranges, RIR, rest and progression cues come from
experience x goal lookup tables; exercises come from `ExerciseSelector`.
Days are independent, so they are built in a thread pool and collected in
day order.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

from core.logger import get_logger
from core.numeric import clamp, round_half_up
from schemas.plan_schema import WorkoutBlock, WorkoutDay
from services.exercise_selector import ExerciseSelector

logger = get_logger("services.workout_builder")

PUSH = ["chest", "upper_chest", "triceps"]
PULL = ["back", "lats", "biceps", "rear_delts"]
LEGS = ["quads", "hams", "glutes", "calves"]

SPLITS: Dict[int, List[List[str]]] = {
    1: [["chest", "back", "quads", "hams", "glutes", "shoulders", "triceps", "biceps", "core"]],
    2: [
        ["chest", "upper_chest", "shoulders", "triceps", "core"],
        ["back", "lats", "quads", "hams", "glutes", "biceps", "rear_delts"],
    ],
    3: [PUSH, PULL, LEGS],
    4: [
        ["chest", "upper_chest", "shoulders", "triceps"],
        PULL,
        ["chest", "upper_chest", "shoulders", "triceps"],
        LEGS,
    ],
    5: [PUSH, PULL, LEGS, ["chest", "shoulders", "triceps"], ["back", "lats", "rear_delts"]],
    6: [PUSH, PULL, LEGS, PUSH, PULL, LEGS],
}

SETS_BY_EXPERIENCE = {
    "novice": (8, 12),
    "intermediate": (12, 16),
    "advanced": (14, 20),
}
SETS_GOAL_FACTOR = {"strength": 0.8, "fat_loss": 0.85}
WEEKLY_SETS_RANGE = (6, 22)
MIN_SETS_PER_BLOCK = 3

REP_RANGES = {
    "hypertrophy": {"novice": (8, 12), "intermediate": (6, 12), "advanced": (5, 10)},
    "strength": {"novice": (5, 6), "intermediate": (3, 6), "advanced": (2, 5)},
}

RIR_BY_EXPERIENCE = {
    "hypertrophy": {"novice": "2–3", "intermediate": "1–2", "advanced": "0–2"},
    "strength": {"novice": "2", "intermediate": "1–2", "advanced": "0–1"},
}

REST_TIMES = {
    "novice": "90–120s",
    "intermediate": "120–180s",
    "advanced": "2–3+ min",
}

PROGRESSION_HINTS = {
    "novice": "If reps hit top, +5% next time",
    "intermediate": "If reps hit top, +2–2.5% or +1 rep",
    "advanced": "Microload +1–2%; add back-off set if fresh",
}


def training_style(goal: str) -> str:
    return "strength" if goal == "strength" else "hypertrophy"


def clamp_days(days: int) -> int:
    return int(clamp(int(days), 1, 6))


def split_by_days(days: int) -> List[Tuple[int, List[str]]]:
    """(day number, muscles) pairs for the clamped day count."""
    return [(i + 1, list(muscles)) for i, muscles in enumerate(SPLITS[clamp_days(days)])]


def weekly_sets_target(experience: str, goal: str) -> int:
    """Midpoint of the experience range, reduced for strength and fat loss."""
    lo, hi = SETS_BY_EXPERIENCE[experience]
    mid = round_half_up((lo + hi) / 2)
    if goal in SETS_GOAL_FACTOR:
        mid = round_half_up(mid * SETS_GOAL_FACTOR[goal])
    return int(clamp(mid, *WEEKLY_SETS_RANGE))


def sets_per_block(weekly_target: int, split: Sequence[Tuple[int, List[str]]]) -> int:
    slots = sum(len(muscles) for _, muscles in split)
    avg_slots_per_day = slots / len(split)
    sets = max(MIN_SETS_PER_BLOCK, round_half_up(weekly_target / avg_slots_per_day))
    return min(sets, WEEKLY_SETS_RANGE[1])


class WorkoutBuilder:
    """Builds the weekly split on top of an exercise selector."""

    def __init__(self, selector: ExerciseSelector, max_workers: int = 4):
        self.selector = selector
        self.max_workers = max_workers

    def build_day(self, day: int, muscles: List[str], equipment: str, injuries: List[str], block_template: Dict) -> WorkoutDay:
        """Select exercises for one day, merging muscles that share an exercise."""
        chosen: Dict[str, List[str]] = {}
        for muscle in muscles:
            exercise_id = self.selector.choose_id(equipment, muscle, injuries)
            chosen.setdefault(exercise_id, []).append(muscle)

        blocks = []
        for exercise_id, worked in chosen.items():
            exercise = self.selector.catalog.get(exercise_id)
            blocks.append(WorkoutBlock(
                muscle=worked[0],
                exercise_id=exercise_id,
                exercise_name=exercise.name if exercise else None,
                muscles_worked=worked,
                **block_template,
            ))
        return WorkoutDay(day=day, blocks=blocks)

    def build(self, days: int, experience: str, goal: str, equipment: str, injuries: Optional[List[str]] = None) -> List[WorkoutDay]:
        """Build one `WorkoutDay` per training day.

        Args:
            days: Training days per week; clamped to 1-6.
            experience: 'novice', 'intermediate' or 'advanced'.
            goal: Plan goal; 'strength' switches to strength-style tables.
            equipment: Equipment class of the user.
            injuries: Injury keys whose risky movements are avoided.

        Returns:
            Workout days in day order.
        """
        injuries = list(injuries or [])
        split = split_by_days(days)
        style = training_style(goal)
        weekly = weekly_sets_target(experience, goal)
        rep_lo, rep_hi = REP_RANGES[style][experience]
        rir = RIR_BY_EXPERIENCE[style][experience]
        rest = REST_TIMES[experience]
        template = {
            "sets": sets_per_block(weekly, split),
            "reps": f"{rep_lo}–{rep_hi}",
            "rir": rir,
            "rir_hint": f"RIR {rir}; rest {rest}",
            "rest_hint": rest,
            "progression_hint": PROGRESSION_HINTS[experience],
        }

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            workouts = list(pool.map(
                lambda entry: self.build_day(entry[0], entry[1], equipment, injuries, template),
                split,
            ))
        logger.info(
            "Built %s-day split (%s, %s, %s): %s sets per block",
            len(workouts), experience, goal, equipment, template["sets"],
        )
        return workouts
