"""Physiological index calculations.

Provides BMR (Katch-McArdle / Mifflin-St Jeor / override), TDEE, BMI, WHtR
and FFMI, the accuracy band describing how complete a profile is, and
warnings for overrides that disagree with the computed values.
"""

from typing import Dict, List, Optional, Tuple

from core.logger import get_logger
from core.numeric import clamp, round_half_up
from schemas.plan_schema import AccuracyBand, Indices, IndicesResponse
from schemas.profile_schema import Profile

logger = get_logger("services.index_calculator")

AGE_BY_RANGE = {
    "<18": 16,
    "18–24": 21,
    "25–34": 29,
    "35–44": 39,
    "45–54": 49,
    "55–60": 57,
    ">60": 65,
}
DEFAULT_AGE = 29

ACTIVITY_BY_DAYS = {1: 1.375, 2: 1.375, 3: 1.55, 4: 1.55, 5: 1.725, 6: 1.725}
DEFAULT_SCHEDULE_DAYS = 3
FALLBACK_BMR = 1500

BMR_RANGE = (800, 3000)
TDEE_RANGE = (1200, 5000)
BMI_RANGE = (10, 60)
OVERRIDE_WARN_RATIO = 0.15

# low-band hint order, most valuable first
MISSING_INPUT_PRIORITY = ("height_cm", "weight_kg", "age_range", "bodyfat_pct", "sex")


class IndexCalculator:
    """Class-based index calculator used by the plan engine."""

    def age_from_range(self, age_range: Optional[str]) -> int:
        """Map an age bucket such as '25-34' or '25–34' to its midpoint."""
        if not age_range:
            return DEFAULT_AGE
        return AGE_BY_RANGE.get(age_range.strip().replace("-", "–"), DEFAULT_AGE)

    def mifflin(self, sex: Optional[str], weight_kg: Optional[float], height_cm: Optional[float], age: Optional[int]) -> Optional[int]:
        """Mifflin-St Jeor BMR; None when weight, height or age is missing."""
        if not weight_kg or not height_cm or not age:
            return None
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        return round_half_up(base + 5 if sex == "male" else base - 161)

    def katch(self, weight_kg: Optional[float], bodyfat_pct: Optional[float]) -> Optional[int]:
        """Katch-McArdle BMR from lean body mass."""
        if not weight_kg or bodyfat_pct is None:
            return None
        lean_kg = weight_kg * (1 - bodyfat_pct / 100)
        return round_half_up(370 + 21.6 * lean_kg)

    def activity_multiplier(self, schedule_days: int) -> float:
        days = int(clamp(int(schedule_days), 1, 6))
        return ACTIVITY_BY_DAYS[days]

    def calculate_bmi(self, height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
        if not height_cm or not weight_kg:
            return None
        h_m = height_cm / 100.0
        return round_half_up(weight_kg / (h_m * h_m), 1)

    def calculate_whtr(self, waist_cm: Optional[float], height_cm: Optional[float]) -> Optional[float]:
        if not waist_cm or not height_cm:
            return None
        return round_half_up(waist_cm / height_cm, 2)

    def calculate_ffmi(self, weight_kg: Optional[float], height_cm: Optional[float], bodyfat_pct: Optional[float]) -> Optional[float]:
        if not weight_kg or not height_cm or bodyfat_pct is None:
            return None
        h_m = height_cm / 100.0
        lean_kg = weight_kg * (1 - bodyfat_pct / 100)
        return round_half_up(lean_kg / (h_m * h_m), 1)

    def computed_bmr(self, profile: Profile) -> Tuple[Optional[int], str]:
        """BMR from body data alone, ignoring overrides."""
        katch = self.katch(profile.weight_kg, profile.bodyfat_pct)
        if katch is not None:
            return katch, "katch"
        age = self.age_from_range(profile.age_range)
        return self.mifflin(profile.sex, profile.weight_kg, profile.height_cm, age), "mifflin"

    def calculate_tdee(self, bmr: Optional[int], schedule_days: int) -> Optional[int]:
        if not bmr:
            return None
        return round_half_up(bmr * self.activity_multiplier(schedule_days))

    def calculate_indices(self, profile: Profile, schedule_days: int = DEFAULT_SCHEDULE_DAYS) -> Tuple[Indices, List[str]]:
        """Compute all indices for a profile.

        Overrides win over computed values and are clamped to their ranges.
        Whenever both a computed value and an override exist and they differ
        by more than 15% of the computed value, a warning is produced.

        Args:
            profile: Biometric profile.
            schedule_days: Training days per week used for the activity multiplier.

        Returns:
            Tuple of (`Indices`, list of warning strings).
        """
        overrides = profile.overrides
        bmr_computed, method = self.computed_bmr(profile)
        bmr = bmr_computed
        if overrides.BMR is not None:
            bmr = round_half_up(clamp(overrides.BMR, *BMR_RANGE))
            method = "override"

        tdee_computed = self.calculate_tdee(bmr_computed, schedule_days)
        tdee = self.calculate_tdee(bmr, schedule_days)
        if overrides.TDEE is not None:
            tdee = round_half_up(clamp(overrides.TDEE, *TDEE_RANGE))

        bmi_computed = self.calculate_bmi(profile.height_cm, profile.weight_kg)
        bmi = bmi_computed
        if overrides.BMI is not None:
            bmi = float(clamp(overrides.BMI, *BMI_RANGE))

        warnings = []
        warnings += self.override_warnings(bmr_computed, bmr if overrides.BMR is not None else None, "BMR")
        warnings += self.override_warnings(tdee_computed, tdee if overrides.TDEE is not None else None, "TDEE")
        warnings += self.override_warnings(bmi_computed, bmi if overrides.BMI is not None else None, "BMI")

        indices = Indices(
            BMR=bmr,
            method=method,
            TDEE=tdee,
            BMI=bmi,
            WHtR=self.calculate_whtr(profile.waist_cm, profile.height_cm),
            FFMI=self.calculate_ffmi(profile.weight_kg, profile.height_cm, profile.bodyfat_pct),
        )
        logger.debug("Indices calculated: %s", indices)
        return indices, warnings

    def override_warnings(self, computed, override, label: str) -> List[str]:
        if computed is None or override is None or computed == 0:
            return []
        if abs(override - computed) / computed > OVERRIDE_WARN_RATIO:
            logger.info("%s override diverges from computed value (%s vs %s)", label, computed, override)
            return [f"{label} override differs >15% from computed ({computed} vs {override})."]
        return []

    def accuracy_band(self, profile: Profile) -> AccuracyBand:
        """Place a profile on the completeness ladder low < med < high < highest."""
        present: Dict[str, bool] = {
            "sex": profile.sex is not None,
            "age_range": bool(profile.age_range),
            "height_cm": profile.height_cm is not None,
            "weight_kg": profile.weight_kg is not None,
            "bodyfat_pct": profile.bodyfat_pct is not None,
            "waist_cm": profile.waist_cm is not None,
        }
        base = present["sex"] and present["age_range"] and present["height_cm"] and present["weight_kg"]
        if base and present["bodyfat_pct"] and present["waist_cm"]:
            return AccuracyBand(accuracy="highest", next_best_input=None)
        if base and present["bodyfat_pct"]:
            return AccuracyBand(accuracy="high", next_best_input="waist_cm")
        if base:
            return AccuracyBand(accuracy="med", next_best_input="bodyfat_pct")
        missing = next(name for name in MISSING_INPUT_PRIORITY if not present[name])
        return AccuracyBand(accuracy="low", next_best_input=missing)

    def recalculate(self, profile: Profile) -> IndicesResponse:
        """Indices, accuracy band and warnings for a standalone recalculation."""
        indices, warnings = self.calculate_indices(profile, DEFAULT_SCHEDULE_DAYS)
        band = self.accuracy_band(profile)
        return IndicesResponse(
            indices=indices,
            accuracy=band.accuracy,
            next_best_input=band.next_best_input,
            warnings=warnings,
        )


# export singleton
index_calculator = IndexCalculator()
__all__ = ["IndexCalculator", "index_calculator", "FALLBACK_BMR"]
