"""Read an ingredient catalog snapshot from a CSV file.

The CSV holds one ingredient per row with at least `name`, `category`,
`budget_tier` and the per-100 g macro columns `kcal`, `protein`, `carbs`,
`fat`. Optional portion columns (`unit`, `typical_g`, `min_g`, `max_g`,
`step_g`, `grams_per_piece`, `min_pieces`, `max_pieces`, `step_pieces`) map
onto the ingredient's portion metadata. Rows with an unknown category or
without a name are skipped.
"""
from __future__ import annotations

from typing import List, Dict, Optional
import math
import pandas as pd

from core.logger import get_logger

logger = get_logger("data.ingest_catalog")

CATEGORIES = {"protein", "carb", "veg", "fat"}
BUDGET_TIERS = {"low", "medium", "high"}
GRAM_PORTION_COLUMNS = ("typical_g", "min_g", "max_g", "step_g", "grams_per_piece")
PIECE_PORTION_COLUMNS = ("min_pieces", "max_pieces", "step_pieces")


def _number(val) -> Optional[float]:
    """Return a float for a CSV cell, or None for blanks and NaN."""
    if val is None:
        return None
    try:
        f = float(val)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(f) else f


def _portion(row: pd.Series) -> Optional[Dict]:
    portion: Dict = {}
    unit = row.get("unit")
    if isinstance(unit, str) and unit.strip() in ("g", "piece"):
        portion["unit"] = unit.strip()
    for col in GRAM_PORTION_COLUMNS:
        v = _number(row.get(col))
        if v is not None:
            portion[col] = v
    for col in PIECE_PORTION_COLUMNS:
        v = _number(row.get(col))
        if v is not None:
            portion[col] = int(v)
    return portion or None


def parse_ingredients_csv(csv_path: str) -> List[Dict]:
    """Parse the CSV and return a list of ingredient dictionaries.

    Args:
        csv_path: Path to the ingredient CSV file.

    Returns:
        List of dictionaries shaped like the bundled `INGREDIENTS_DATA`
        entries (id, name, category, budget_tier, macro_per_100g, portion).
    """
    logger.info("Parsing ingredient CSV: %s", csv_path)
    df = pd.read_csv(csv_path, encoding="utf-8")
    df = df.rename(columns=lambda s: s.strip().lower())

    ingredients = []
    for _, row in df.iterrows():
        name = row.get("name")
        if not isinstance(name, str) or not name.strip():
            continue
        name = name.strip()
        category = str(row.get("category", "")).strip().lower()
        if category not in CATEGORIES:
            logger.warning("Skipping %s: unknown category '%s'", name, category)
            continue
        tier = str(row.get("budget_tier", "medium")).strip().lower()
        if tier not in BUDGET_TIERS:
            tier = "medium"

        p = _number(row.get("protein")) or 0.0
        c = _number(row.get("carbs")) or 0.0
        f = _number(row.get("fat")) or 0.0
        kcal = _number(row.get("kcal"))
        calculated = p * 4 + c * 4 + f * 9
        # Use calculated calories if the stated value is missing or far off
        if kcal is None or abs(calculated - kcal) > max(kcal, 1.0) * 0.15:
            logger.debug("Adjusting kcal for %s: stated=%s, calculated=%.1f", name, kcal, calculated)
            kcal = calculated

        raw_id = row.get("id")
        ingredient_id = raw_id.strip() if isinstance(raw_id, str) and raw_id.strip() else name

        ingredients.append({
            "id": ingredient_id,
            "name": name,
            "category": category,
            "budget_tier": tier,
            "macro_per_100g": {"kcal": round(kcal, 1), "p": p, "c": c, "f": f},
            "portion": _portion(row),
        })

    logger.info("Parsed %s ingredients from CSV", len(ingredients))
    return ingredients
