"""Runtime configuration read from environment variables.

Settings are resolved once per call to the loader functions so tests can
patch the environment. Invalid values raise `ConfigurationError` naming the
offending variable instead of silently falling back.
"""

from typing import Dict, Literal, Optional

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError

TOLERANCE_BY_MODE = {"tight": 0.07, "normal": 0.10, "loose": 0.15}

ToleranceMode = Literal["tight", "normal", "loose"]

# fields whose environment name is not derived from the field name
ENV_NAMES = {
    "tolerance_mode": "MEAL_TOLERANCE",
    "ingredient_csv_path": "INGREDIENT_CATALOG_CSV",
    "random_seed": "ENGINE_RANDOM_SEED",
    "max_workers": "ENGINE_MAX_WORKERS",
}


class AllocatorSettings(BaseSettings):
    """Tunable constants of the meal allocator beam search (`MEAL_*`)."""

    model_config = SettingsConfigDict(
        env_prefix="MEAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    tolerance_mode: ToleranceMode = Field(
        "normal", validation_alias=AliasChoices("tolerance_mode", "MEAL_TOLERANCE")
    )
    beam_widths: Dict[str, int] = Field(
        default_factory=lambda: {"protein": 40, "carb": 60, "veg": 60, "fat": 60}
    )
    variety_probability: float = Field(0.6, ge=0.0, le=1.0)
    choice_limit: int = Field(20, ge=1)
    candidates_per_ingredient: int = Field(4, ge=1)
    target_perturbation: float = Field(0.15, ge=0.0, lt=1.0)
    negligible_carb_g: float = Field(15.0, ge=0.0)
    negligible_fat_g: float = Field(10.0, ge=0.0)
    kcal_penalty: float = Field(0.05, ge=0.0)

    @property
    def tolerance(self) -> float:
        return TOLERANCE_BY_MODE[self.tolerance_mode]


class EngineSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    database_url: str = "sqlite:///fitplan.db"
    ingredient_csv_path: Optional[str] = Field(
        None, validation_alias=AliasChoices("ingredient_csv_path", "INGREDIENT_CATALOG_CSV")
    )
    random_seed: Optional[int] = Field(
        None, validation_alias=AliasChoices("random_seed", "ENGINE_RANDOM_SEED")
    )
    max_workers: int = Field(
        4, ge=1, validation_alias=AliasChoices("max_workers", "ENGINE_MAX_WORKERS")
    )
    allocator: AllocatorSettings = Field(default_factory=AllocatorSettings)


def _config_key(exc: ValidationError, prefix: str = "") -> str:
    """Environment variable name behind the first validation error."""
    loc = exc.errors()[0]["loc"]
    name = str(loc[0]) if loc else ""
    if name.lower() in ENV_NAMES:
        return ENV_NAMES[name.lower()]
    key = name.upper()
    if key in ENV_NAMES.values() or key.startswith(prefix):
        return key
    return prefix + key


def _configuration_error(exc: ValidationError, prefix: str = "") -> ConfigurationError:
    key = _config_key(exc, prefix)
    err = exc.errors()[0]
    return ConfigurationError(f"{key}: {err['msg']} (got {err.get('input')!r})", config_key=key)


def load_allocator_settings() -> AllocatorSettings:
    """Build allocator settings from `MEAL_*` environment variables."""
    try:
        return AllocatorSettings()
    except ValidationError as exc:
        raise _configuration_error(exc, prefix="MEAL_") from exc


def load_settings() -> EngineSettings:
    """Return engine settings for the current process environment."""
    allocator = load_allocator_settings()
    try:
        return EngineSettings(allocator=allocator)
    except ValidationError as exc:
        raise _configuration_error(exc) from exc
