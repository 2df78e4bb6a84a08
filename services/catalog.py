"""Read-only catalog snapshots handed to the plan engine.

The engine never queries the database itself: callers load an
`ExerciseCatalog` and an `IngredientCatalog` and pass them in. Exercises are
reference data that rarely change, and a CSV ingredient file is fixed at
startup, so a `CatalogProvider` keeps the first snapshot it loads for the
lifetime of the process.
"""

import json
import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from sqlalchemy.orm import Session

from core.exceptions import DatabaseError
from core.logger import get_logger
from database import models
from schemas.catalog_schema import Exercise, Ingredient

logger = get_logger("services.catalog")


def _json_list(raw) -> List:
    if isinstance(raw, (list, tuple)):
        return list(raw)
    if not raw:
        return []
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Could not decode catalog list value %r", raw)
        return []


class ExerciseCatalog:
    """Immutable collection of exercises."""

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises: Tuple[Exercise, ...] = tuple(exercises)
        self._by_id: Dict[str, Exercise] = {e.id: e for e in self._exercises}

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self):
        return iter(self._exercises)

    def all(self) -> Tuple[Exercise, ...]:
        return self._exercises

    def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)

    @classmethod
    def from_dicts(cls, items: Iterable[dict]) -> "ExerciseCatalog":
        return cls(Exercise(**item) for item in items)

    @classmethod
    def from_session(cls, db: Session) -> "ExerciseCatalog":
        """Load every exercise row into a snapshot."""
        rows = db.query(models.Exercise).all()
        return cls(
            Exercise(
                id=r.id,
                name=r.name,
                muscles=_json_list(r.muscles),
                equipment=_json_list(r.equipment),
                movement=r.movement or "compound",
                cues=_json_list(r.cues),
            )
            for r in rows
        )


class IngredientCatalog:
    """Immutable collection of ingredients, filterable by budget tier and category."""

    def __init__(self, ingredients: Iterable[Ingredient]):
        self._ingredients: Tuple[Ingredient, ...] = tuple(ingredients)

    def __len__(self) -> int:
        return len(self._ingredients)

    def __iter__(self):
        return iter(self._ingredients)

    def for_tier(self, budget_tier: str) -> "IngredientCatalog":
        return IngredientCatalog(i for i in self._ingredients if i.budget_tier == budget_tier)

    def by_category(self, category: str) -> List[Ingredient]:
        return [i for i in self._ingredients if i.category == category]

    @classmethod
    def from_dicts(cls, items: Iterable[dict]) -> "IngredientCatalog":
        return cls(Ingredient(**item) for item in items)

    @classmethod
    def from_session(cls, db: Session, budget_tier: Optional[str] = None) -> "IngredientCatalog":
        """Load ingredient rows, optionally only those of one budget tier."""
        query = db.query(models.Ingredient)
        if budget_tier:
            query = query.filter(models.Ingredient.budget_tier == budget_tier)
        out = []
        for r in query.all():
            portion = None
            if r.portion:
                try:
                    portion = json.loads(r.portion)
                except json.JSONDecodeError:
                    logger.warning("Ignoring malformed portion metadata for %s", r.id)
            out.append(Ingredient(
                id=r.id,
                name=r.name,
                category=r.category,
                budget_tier=r.budget_tier,
                macro_per_100g={"kcal": r.kcal, "p": r.protein, "c": r.carbs, "f": r.fat},
                typical_portion_g=r.typical_portion_g,
                portion=portion,
                notes=r.notes,
            ))
        return cls(out)

    @classmethod
    def from_csv(cls, csv_path: str) -> "IngredientCatalog":
        from data.ingest_catalog import parse_ingredients_csv

        return cls.from_dicts(parse_ingredients_csv(csv_path))


Catalog = Union[ExerciseCatalog, IngredientCatalog]


class CatalogProvider:
    """Lazily loads a catalog once and serves the cached snapshot.

    The loader is injected so tests can supply a fixed catalog without
    touching the database or the filesystem.
    """

    def __init__(self, loader: Callable[[], Catalog], kind: str = "exercise"):
        self._loader = loader
        self._kind = kind
        self._catalog: Optional[Catalog] = None
        self._lock = threading.Lock()

    def get(self) -> Catalog:
        if self._catalog is None:
            with self._lock:
                if self._catalog is None:
                    try:
                        self._catalog = self._loader()
                    except Exception as exc:
                        logger.exception("Loading %s catalog failed", self._kind)
                        raise DatabaseError(f"Could not load {self._kind} catalog: {exc}", operation="read")
                    logger.info("%s catalog cached (%s items)", self._kind.capitalize(), len(self._catalog))
        return self._catalog
