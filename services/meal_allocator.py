"""Macro-constrained meal allocator.

Builds one ingredient combination per meal with a pruned beam search over
the categories protein -> carb -> veg -> fat. Every partial combination is
scored with a weighted absolute error against the meal's macro targets and
only the best `beam_width` survive each step. The final pick prefers
combinations inside the tolerance band and falls back to the best score.

Randomness (per-meal target perturbation, candidate shuffling) comes only
from the `random.Random` passed in, so a fixed seed reproduces a plan.
"""

import itertools
import math
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from core.config import AllocatorSettings, TOLERANCE_BY_MODE
from core.logger import get_logger
from core.numeric import clamp, round_half_up
from schemas.catalog_schema import Ingredient
from schemas.plan_schema import IngredientItem, MacroTargets, MacroTotals, MealCombo, MealEntry
from services.catalog import IngredientCatalog

logger = get_logger("services.meal_allocator")

CATEGORY_ORDER = ("protein", "carb", "veg", "fat")
COMBO_LABELS = {"protein": "Protein", "carb": "Carbs", "veg": "Vegetables", "fat": "Fats"}
PORTION_MULTIPLIERS = (0.75, 1.0, 1.25, 1.5)
DEFAULT_TYPICAL_G = 100.0
DEFAULT_STEP_G = 10.0


@dataclass(frozen=True)
class PortionCandidate:
    grams: float
    p: float
    c: float
    f: float
    kcal: float
    label: Optional[str] = None


@dataclass(frozen=True)
class ComboItem:
    ingredient_id: str
    name: str
    category: str
    portion: PortionCandidate


@dataclass(frozen=True)
class MealTargets:
    protein: float
    carb: float
    fat: float

    @property
    def kcal(self) -> float:
        return self.protein * 4 + self.carb * 4 + self.fat * 9

    def for_category(self, category: str) -> float:
        return {"protein": self.protein, "carb": self.carb, "fat": self.fat}.get(category, 0.0)


@dataclass(frozen=True)
class Combo:
    """A (partial) meal: chosen items plus their summed macros and score."""

    items: Tuple[ComboItem, ...]
    p: float
    c: float
    f: float
    kcal: float
    score: float

    def has(self, name: str) -> bool:
        return any(item.name == name for item in self.items)


def macro_for_category(category: str, p: float, c: float, f: float) -> float:
    return {"protein": p, "carb": c, "fat": f}.get(category, 0.0)


def score_combo(p: float, c: float, f: float, targets: MealTargets, kcal_penalty: float = 0.05) -> float:
    """Weighted L1 macro error; protein counts most, plus a mild kcal term."""
    kcal = p * 4 + c * 4 + f * 9
    return (
        1.2 * abs(p - targets.protein)
        + 1.0 * abs(c - targets.carb)
        + 0.8 * abs(f - targets.fat)
        + kcal_penalty * abs(kcal - targets.kcal)
    )


def category_policy(goal: Optional[str]) -> Dict[str, Tuple[int, int]]:
    """(min, max) items per category for one meal."""
    return {
        "protein": (1, 1),
        "carb": (0, 1) if goal == "fat_loss" else (1, 1),
        "veg": (1, 1),
        "fat": (1, 1),
    }


def typical_grams(ing: Ingredient) -> float:
    pm = ing.portion
    if pm is not None and pm.typical_g:
        return pm.typical_g
    return ing.typical_portion_g or DEFAULT_TYPICAL_G


def _candidate(ing: Ingredient, grams: float, label: Optional[str] = None) -> PortionCandidate:
    m = ing.macro_per_100g
    return PortionCandidate(
        grams=grams,
        p=m.p * grams / 100,
        c=m.c * grams / 100,
        f=m.f * grams / 100,
        kcal=m.kcal * grams / 100,
        label=label,
    )


def portion_candidates(ing: Ingredient) -> List[PortionCandidate]:
    """Realistic portion sizes for an ingredient.

    Piece-based ingredients (eggs, bread slices) step through their piece
    range. Everything else gets 0.75x-1.5x of the typical portion, snapped
    to the rounding step and clamped to the gram range.
    """
    pm = ing.portion
    if pm is not None and pm.unit == "piece" and pm.grams_per_piece:
        lo = pm.min_pieces if pm.min_pieces is not None else 1
        hi = pm.max_pieces if pm.max_pieces is not None else 3
        step = pm.step_pieces or 1
        return [
            _candidate(ing, pcs * pm.grams_per_piece, label=f"{pcs} pcs")
            for pcs in range(lo, hi + 1, step)
        ]

    typical = typical_grams(ing)
    min_g = pm.min_g if pm is not None and pm.min_g is not None else max(50, math.floor(typical * 0.5))
    max_g = pm.max_g if pm is not None and pm.max_g is not None else min(300, math.ceil(typical * 2.0))
    step_g = pm.step_g if pm is not None and pm.step_g else DEFAULT_STEP_G

    grams = sorted({
        clamp(round_half_up(typical * mult / step_g) * step_g, min_g, max_g)
        for mult in PORTION_MULTIPLIERS
    })
    return [_candidate(ing, g) for g in grams]


class MealAllocator:
    """Beam-search allocator of catalog ingredients to per-meal macro targets."""

    def __init__(self, settings: Optional[AllocatorSettings] = None, max_workers: int = 4):
        self.settings = settings or AllocatorSettings()
        self.max_workers = max_workers

    # --- targets -----------------------------------------------------------

    def perturb(self, base: MealTargets, rng: random.Random) -> MealTargets:
        """Scale each macro target independently by up to +/- the perturbation."""
        spread = self.settings.target_perturbation
        return MealTargets(
            protein=base.protein * (1 + rng.uniform(-1, 1) * spread),
            carb=base.carb * (1 + rng.uniform(-1, 1) * spread),
            fat=base.fat * (1 + rng.uniform(-1, 1) * spread),
        )

    def portion_pool(self, pools: Dict[str, List[Ingredient]], base: MealTargets) -> Dict[str, List[PortionCandidate]]:
        """Per ingredient, the candidates closest to the category's meal target."""
        out: Dict[str, List[PortionCandidate]] = {}
        keep = self.settings.candidates_per_ingredient
        for category, ingredients in pools.items():
            target = base.for_category(category)
            for ing in ingredients:
                cands = sorted(
                    portion_candidates(ing),
                    key=lambda pc: abs(macro_for_category(category, pc.p, pc.c, pc.f) - target),
                )
                out[ing.key] = cands[:keep]
        return out

    # --- search ------------------------------------------------------------

    def _extend(self, beam: Combo, additions: Sequence[ComboItem], targets: MealTargets) -> Combo:
        p = beam.p + sum(a.portion.p for a in additions)
        c = beam.c + sum(a.portion.c for a in additions)
        f = beam.f + sum(a.portion.f for a in additions)
        kcal = beam.kcal + sum(a.portion.kcal for a in additions)
        return Combo(
            items=beam.items + tuple(additions),
            p=p, c=c, f=f, kcal=kcal,
            score=score_combo(p, c, f, targets, self.settings.kcal_penalty),
        )

    def extend_beams(
        self,
        beams: List[Combo],
        category: str,
        k_min: int,
        k_max: int,
        ingredients: List[Ingredient],
        pcands: Dict[str, List[PortionCandidate]],
        targets: MealTargets,
        rng: random.Random,
    ) -> List[Combo]:
        """Add `k_min`..`k_max` items of one category to every beam and prune."""
        target = targets.for_category(category)

        def typical_macro(ing: Ingredient) -> float:
            m = ing.macro_per_100g
            g = typical_grams(ing)
            return macro_for_category(category, m.p * g / 100, m.c * g / 100, m.f * g / 100)

        ranked = sorted(ingredients, key=lambda ing: abs(typical_macro(ing) - target))
        shuffled = list(ranked)
        rng.shuffle(shuffled)
        limit = min(self.settings.choice_limit, len(ingredients))

        items_by_key = {
            ing.key: [ComboItem(ing.key, ing.name, ing.category, pc) for pc in pcands.get(ing.key, [])]
            for ing in ingredients
        }

        def items_for(ing: Ingredient) -> List[ComboItem]:
            return items_by_key[ing.key]

        out: List[Combo] = []
        for beam in beams:
            for k in range(k_min, k_max + 1):
                if k == 0:
                    out.append(beam)
                    continue
                choices = (shuffled if rng.random() < self.settings.variety_probability else ranked)[:limit]
                choices = [ing for ing in choices if not beam.has(ing.name)]
                if k == 1:
                    for ing in choices:
                        for item in items_for(ing):
                            out.append(self._extend(beam, (item,), targets))
                elif k == 2:
                    for a, b in itertools.combinations(choices, 2):
                        if a.name == b.name:
                            continue
                        for item_a, item_b in itertools.product(items_for(a), items_for(b)):
                            out.append(self._extend(beam, (item_a, item_b), targets))

        out.sort(key=lambda combo: (combo.score, len(combo.items)))
        width = self.settings.beam_widths.get(category, 60)
        logger.debug("Beam step %s: %s expansions -> keep %s", category, len(out), min(width, len(out)))
        return out[:width]

    def within_tolerance(self, combo: Combo, base: MealTargets, tol: float) -> bool:
        s = self.settings
        ok_p = abs(combo.p - base.protein) <= base.protein * tol
        ok_c = abs(combo.c - base.carb) <= base.carb * tol or base.carb < s.negligible_carb_g
        ok_f = abs(combo.f - base.fat) <= base.fat * tol or base.fat < s.negligible_fat_g
        return ok_p and ok_c and ok_f

    def select_final(self, beams: List[Combo], base: MealTargets, tol: float) -> Tuple[Optional[Combo], bool]:
        """Best in-tolerance combination, else the best-scored one overall."""
        if not beams:
            return None, False
        qualified = [b for b in beams if self.within_tolerance(b, base, tol)]
        if qualified:
            return min(qualified, key=lambda b: b.score), True
        return min(beams, key=lambda b: b.score), False

    def search_meal(
        self,
        pools: Dict[str, List[Ingredient]],
        pcands: Dict[str, List[PortionCandidate]],
        targets: MealTargets,
        policy: Dict[str, Tuple[int, int]],
        rng: random.Random,
    ) -> List[Combo]:
        """Run the beam search for one meal and return the surviving beams."""
        beams = [Combo(items=(), p=0.0, c=0.0, f=0.0, kcal=0.0,
                       score=score_combo(0, 0, 0, targets, self.settings.kcal_penalty))]
        for category in CATEGORY_ORDER:
            k_min, k_max = policy[category]
            beams = self.extend_beams(beams, category, k_min, k_max, pools[category], pcands, targets, rng)
            if not beams:
                break
        return beams

    # --- output ------------------------------------------------------------

    @staticmethod
    def _totals(items: Sequence[ComboItem]) -> MacroTotals:
        return MacroTotals(
            p=round_half_up(sum(i.portion.p for i in items)),
            c=round_half_up(sum(i.portion.c for i in items)),
            f=round_half_up(sum(i.portion.f for i in items)),
            kcal=round_half_up(sum(i.portion.kcal for i in items)),
        )

    def to_entry(self, meal_no: int, combo: Optional[Combo], within: bool) -> MealEntry:
        """Regroup a combination by category into labeled display combos."""
        if combo is None:
            return MealEntry(meal=meal_no)
        grouped: Dict[str, List[MealCombo]] = {}
        for category in CATEGORY_ORDER:
            items = [i for i in combo.items if i.category == category]
            if not items:
                grouped[category] = []
                continue
            grouped[category] = [MealCombo(
                combo_label=COMBO_LABELS[category],
                items=[
                    IngredientItem(
                        ingredient_id=i.ingredient_id,
                        name=i.name,
                        grams=round_half_up(i.portion.grams),
                        category=i.category,
                        label=i.portion.label,
                        p=round_half_up(i.portion.p),
                        c=round_half_up(i.portion.c),
                        f=round_half_up(i.portion.f),
                        kcal=round_half_up(i.portion.kcal),
                    )
                    for i in items
                ],
                totals=self._totals(items),
            )]
        return MealEntry(
            meal=meal_no,
            protein_opts=grouped["protein"],
            carb_opts=grouped["carb"],
            veg_opts=grouped["veg"],
            fat_opts=grouped["fat"],
            totals=self._totals(combo.items),
            within_tolerance=within,
        )

    # --- entry point -------------------------------------------------------

    def allocate(
        self,
        catalog: IngredientCatalog,
        macros: MacroTargets,
        meals_per_day: int,
        goal: Optional[str],
        rng: random.Random,
        tolerance_mode: Optional[str] = None,
    ) -> List[MealEntry]:
        """Allocate ingredients to every meal of the day.

        Args:
            catalog: Ingredients available to the user (already tier-filtered).
            macros: Daily protein/fat/carb targets in grams.
            meals_per_day: Number of meals; daily targets are split evenly.
            goal: Plan goal; fat loss makes the carb item optional.
            rng: Random source for target perturbation and candidate shuffling.
            tolerance_mode: 'tight', 'normal' or 'loose'; defaults to settings.

        Returns:
            One `MealEntry` per meal in meal order.
        """
        meals_per_day = max(1, int(meals_per_day))
        tol = TOLERANCE_BY_MODE[tolerance_mode] if tolerance_mode else self.settings.tolerance
        pools = {category: catalog.by_category(category) for category in CATEGORY_ORDER}
        for category, ingredients in pools.items():
            if not ingredients:
                logger.warning("Ingredient catalog has no %s items", category)

        base = MealTargets(
            protein=macros.protein_g / meals_per_day,
            carb=macros.carb_g / meals_per_day,
            fat=macros.fat_g / meals_per_day,
        )
        pcands = self.portion_pool(pools, base)
        policy = category_policy(goal)

        # draw per-meal randomness up front, in meal order
        jobs = []
        for meal_no in range(1, meals_per_day + 1):
            targets = self.perturb(base, rng)
            jobs.append((meal_no, targets, random.Random(rng.getrandbits(64))))

        def run(job) -> MealEntry:
            meal_no, targets, meal_rng = job
            beams = self.search_meal(pools, pcands, targets, policy, meal_rng)
            best, within = self.select_final(beams, base, tol)
            if best is None:
                logger.warning("Meal %s: no combination could be built", meal_no)
            elif not within:
                logger.warning("Meal %s: no combination within %.0f%% tolerance, using best score %.1f", meal_no, tol * 100, best.score)
            return self.to_entry(meal_no, best, within)

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            entries = list(pool.map(run, jobs))
        logger.info(
            "Allocated %s meals (P/C/F per meal %.0f/%.0f/%.0f g, %s within tolerance)",
            meals_per_day, base.protein, base.carb, base.fat, sum(e.within_tolerance for e in entries),
        )
        return entries
