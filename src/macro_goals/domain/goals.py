"""Domain models for calorie and macronutrient goals."""

from dataclasses import dataclass
from enum import Enum

CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_FAT = 9
CALORIES_PER_GRAM_CARBS = 4


class Gender(Enum):
    """Biological sex used by the energy formulas."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class BodyType(Enum):
    """Self-reported body composition."""

    LEAN = "LEAN"
    NORMAL = "NORMAL"
    HIGH_BODY_FAT = "HIGH_BODY_FAT"


class ActivityLevel(Enum):
    """Typical weekly activity."""

    SEDENTARY = "SEDENTARY"
    LIGHTLY_ACTIVE = "LIGHTLY_ACTIVE"
    MODERATELY_ACTIVE = "MODERATELY_ACTIVE"
    VERY_ACTIVE = "VERY_ACTIVE"
    EXTRA_ACTIVE = "EXTRA_ACTIVE"


class Goal(Enum):
    """Weight goal."""

    LOSE = "LOSE"
    MAINTAIN = "MAINTAIN"
    GAIN = "GAIN"


class BmrFormula(Enum):
    """Formula used to estimate basal metabolic rate."""

    LEAN_MASS = "LEAN_MASS"
    MIFFLIN_ST_JEOR = "MIFFLIN_ST_JEOR"


@dataclass(frozen=True)
class Profile:
    """Biometric profile; weight in kg, height in cm, age in years.

    Values are expected to be validated by the caller.
    """

    gender: Gender
    age: int
    height: float
    weight: float
    body_type: BodyType
    activity_level: ActivityLevel
    goal: Goal


@dataclass(frozen=True)
class MacroPlan:
    """Daily calorie target and macronutrient grams."""

    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int

    @property
    def macro_calories(self) -> int:
        """Energy carried by the macronutrient grams."""
        return (
            self.protein_g * CALORIES_PER_GRAM_PROTEIN
            + self.fat_g * CALORIES_PER_GRAM_FAT
            + self.carbs_g * CALORIES_PER_GRAM_CARBS
        )


@dataclass(frozen=True)
class GoalBreakdown:
    """Intermediate values of a goal calculation."""

    bmi: float
    effective_body_type: BodyType
    body_fat_pct: float
    lean_body_mass: float
    bmr: float
    bmr_formula: BmrFormula
    activity_multiplier: float
    tdee: float
    effective_goal: Goal
    raw_target_calories: int
    target_calories: int
    protein_multiplier: float
    plan: MacroPlan
