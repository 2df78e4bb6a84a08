"""Tests for catalog snapshots: CSV ingestion, database loading and caching."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import EngineSettings
from core.exceptions import DatabaseError
from data.exercises_dataset import EXERCISES_DATA
from data.ingest_catalog import parse_ingredients_csv
from data.ingredients_dataset import INGREDIENTS_DATA
import data.ingest_catalog as ingest_catalog
from database.database import exercise_row, ingredient_row
from database.deps import csv_catalog_provider, get_ingredient_catalog
from database.models import Base
from services.catalog import ExerciseCatalog, CatalogProvider, IngredientCatalog

FIXTURE_CSV = Path(__file__).resolve().parent.parent / "data" / "fixtures" / "ingredients.csv"


@pytest.fixture(scope="module")
def session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    db = sessionmaker(bind=engine)()
    db.add_all([exercise_row(item) for item in EXERCISES_DATA])
    db.add_all([ingredient_row(item) for item in INGREDIENTS_DATA])
    db.commit()
    yield db
    db.close()


def test_parse_csv_skips_unknown_category_and_unnamed_rows():
    """11 rows in the fixture, 9 usable."""
    rows = parse_ingredients_csv(str(FIXTURE_CSV))
    assert len(rows) == 9
    names = {r["name"] for r in rows}
    assert "Mystery Item" not in names


def test_parse_csv_portion_metadata():
    """Piece columns become integer piece counts; gram columns floats."""
    rows = {r["id"]: r for r in parse_ingredients_csv(str(FIXTURE_CSV))}
    eggs = rows["eggs_csv"]["portion"]
    assert eggs["unit"] == "piece"
    assert eggs["grams_per_piece"] == 50
    assert eggs["min_pieces"] == 2 and isinstance(eggs["min_pieces"], int)
    assert "typical_g" not in eggs
    assert rows["turkey_breast"]["portion"]["typical_g"] == 150


def test_csv_catalog_by_category():
    """The CSV catalog is usable by the allocator."""
    catalog = IngredientCatalog.from_csv(str(FIXTURE_CSV))
    assert len(catalog.by_category("protein")) == 3
    assert len(catalog.by_category("carb")) == 2
    assert len(catalog.by_category("veg")) == 2
    assert len(catalog.by_category("fat")) == 2


def test_csv_recomputes_inconsistent_kcal(tmp_path):
    """A stated kcal far from 4P+4C+9F is replaced."""
    csv = tmp_path / "bad.csv"
    csv.write_text("name,category,budget_tier,kcal,protein,carbs,fat\nRice,carb,low,999,2,28,0\n", encoding="utf-8")
    rows = parse_ingredients_csv(str(csv))
    assert rows[0]["macro_per_100g"]["kcal"] == 120.0
    assert rows[0]["id"] == "Rice"


def test_exercise_catalog_from_session(session):
    """JSON list columns decode back into lists."""
    catalog = ExerciseCatalog.from_session(session)
    assert len(catalog) == len(EXERCISES_DATA)
    bench = catalog.get("bench_press")
    assert bench.muscles == ["chest", "triceps", "shoulders"]
    assert bench.movement == "compound"


def test_ingredient_catalog_from_session_by_tier(session):
    """Only rows of the requested tier are loaded; portion metadata survives."""
    catalog = IngredientCatalog.from_session(session, "high")
    expected = [i for i in INGREDIENTS_DATA if i["budget_tier"] == "high"]
    assert len(catalog) == len(expected)
    sourdough = next(i for i in catalog if i.key == "sourdough")
    assert sourdough.portion.unit == "piece"
    assert sourdough.portion.grams_per_piece == 40


def test_for_tier_filters_snapshot():
    """Filtering a snapshot returns a new catalog of that tier."""
    catalog = IngredientCatalog.from_dicts(INGREDIENTS_DATA)
    low = catalog.for_tier("low")
    assert len(low) > 0
    assert all(i.budget_tier == "low" for i in low)
    assert len(catalog) == len(INGREDIENTS_DATA)


def test_provider_loads_once():
    """The exercise catalog is loaded on first use and then cached."""
    calls = []

    def loader():
        calls.append(1)
        return ExerciseCatalog.from_dicts(EXERCISES_DATA[:3])

    provider = CatalogProvider(loader)
    assert len(provider.get()) == 3
    assert provider.get() is provider.get()
    assert len(calls) == 1


def test_provider_wraps_loader_failure():
    """Loader errors surface as DatabaseError."""
    def loader():
        raise RuntimeError("db down")

    with pytest.raises(DatabaseError) as exc_info:
        CatalogProvider(loader).get()
    assert "db down" in exc_info.value.message
    assert exc_info.value.status_code == 500


def test_ingredient_dependency_filters_database_read_by_tier(session):
    """Without a CSV the tier filter is applied in the database query."""
    settings = EngineSettings(ingredient_csv_path=None)
    low = get_ingredient_catalog("low", session, settings)
    assert len(low) == sum(1 for i in INGREDIENTS_DATA if i["budget_tier"] == "low")
    assert all(i.budget_tier == "low" for i in low)
    assert len(get_ingredient_catalog(None, session, settings)) == len(INGREDIENTS_DATA)


def test_csv_catalog_is_parsed_once(monkeypatch, tmp_path):
    """Repeated requests reuse the parsed CSV snapshot and filter it by tier."""
    csv = tmp_path / "catalog.csv"
    csv.write_text(FIXTURE_CSV.read_text(encoding="utf-8"), encoding="utf-8")
    calls = []
    parse = ingest_catalog.parse_ingredients_csv

    def counting_parse(path):
        calls.append(path)
        return parse(path)

    monkeypatch.setattr(ingest_catalog, "parse_ingredients_csv", counting_parse)
    settings = EngineSettings(ingredient_csv_path=str(csv))
    full = get_ingredient_catalog(None, None, settings)
    again = get_ingredient_catalog(None, None, settings)
    tiered = get_ingredient_catalog("medium", None, settings)

    assert len(calls) == 1
    assert again is full
    assert len(full) == 9
    assert all(i.budget_tier == "medium" for i in tiered)
    assert csv_catalog_provider(str(csv)) is csv_catalog_provider(str(csv))
