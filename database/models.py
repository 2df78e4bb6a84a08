"""SQLAlchemy ORM models for the reference catalogs.

The plan engine only reads these tables. List and dict fields (muscles,
equipment, portion metadata) are stored as JSON-encoded strings.
"""

from sqlalchemy import Column, String, Float, DateTime, Text
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class Exercise(Base):
    """ORM model representing an exercise catalog entry."""

    __tablename__ = "exercises"
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    muscles = Column(Text, nullable=False)
    equipment = Column(Text, nullable=False)
    movement = Column(String, nullable=False, default="compound")
    cues = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class Ingredient(Base):
    """ORM model representing an ingredient with macros per 100 g."""

    __tablename__ = "ingredients"
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    budget_tier = Column(String, nullable=False, index=True)
    kcal = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fat = Column(Float, nullable=False)
    typical_portion_g = Column(Float, nullable=True)
    portion = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
