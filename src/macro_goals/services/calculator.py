"""Daily calorie target and macronutrient split calculation.

The pipeline runs in a fixed order: body composition, BMR, TDEE, goal
resolution, target calories, macronutrients. Later steps read the
effective body type and effective goal resolved by earlier ones.
"""

from collections.abc import Callable

from macro_goals.domain.goals import (
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FAT,
    CALORIES_PER_GRAM_PROTEIN,
    ActivityLevel,
    BmrFormula,
    BodyType,
    Gender,
    Goal,
    GoalBreakdown,
    MacroPlan,
    Profile,
)

OBESE_BMI = 30.0
ALTERNATE_BMR_BMI = 28.0
SEVERELY_OBESE_BMI = 35.0
MORBIDLY_OBESE_BMI = 40.0

MIN_CALORIES = {
    Gender.MALE: 1500,
    Gender.FEMALE: 1200,
}
MAX_SAFE_PROTEIN_G = 220
MIN_SAFE_FAT_G = 50
MAX_SAFE_FAT_G = 110
FAT_G_PER_KG = 0.9
MAX_ACTIVITY_MULTIPLIER_SEVERELY_OBESE = 1.5
GAIN_SURPLUS_KCAL = 300
LOSE_DEFICIT_RATIO = 0.80

_BASE_BODY_FAT = {
    (Gender.MALE, BodyType.LEAN): 0.10,
    (Gender.MALE, BodyType.NORMAL): 0.15,
    (Gender.MALE, BodyType.HIGH_BODY_FAT): 0.30,
    (Gender.FEMALE, BodyType.LEAN): 0.18,
    (Gender.FEMALE, BodyType.NORMAL): 0.25,
    (Gender.FEMALE, BodyType.HIGH_BODY_FAT): 0.40,
}
_BODY_FAT_AGE_THRESHOLD = 30
_BODY_FAT_PER_YEAR = 0.001

_MIFFLIN_SEX_OFFSET = {
    Gender.MALE: 5,
    Gender.FEMALE: -161,
}

_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

# Keyed by (effective body type, effective goal is MAINTAIN).
_PROTEIN_MULTIPLIERS = {
    (BodyType.HIGH_BODY_FAT, True): 1.4,
    (BodyType.HIGH_BODY_FAT, False): 1.6,
    (BodyType.LEAN, True): 2.0,
    (BodyType.LEAN, False): 2.4,
    (BodyType.NORMAL, True): 1.8,
    (BodyType.NORMAL, False): 2.0,
}

_GOAL_ADJUSTMENTS: dict[Goal, Callable[[float], float]] = {
    Goal.LOSE: lambda tdee: tdee * LOSE_DEFICIT_RATIO,
    Goal.MAINTAIN: lambda tdee: tdee,
    Goal.GAIN: lambda tdee: tdee + GAIN_SURPLUS_KCAL,
}

# Ordered, first match wins: (predicate(bmi, stated goal, body type), goal).
# A GAIN goal above 35 BMI becomes MAINTAIN even for HIGH_BODY_FAT.
_GOAL_OVERRIDES: list[tuple[Callable[[float, Goal, BodyType], bool], Goal]] = [
    (lambda bmi, goal, body: bmi > MORBIDLY_OBESE_BMI, Goal.LOSE),
    (
        lambda bmi, goal, body: bmi > SEVERELY_OBESE_BMI and goal == Goal.GAIN,
        Goal.MAINTAIN,
    ),
    (
        lambda bmi, goal, body: (
            bmi > SEVERELY_OBESE_BMI and body == BodyType.HIGH_BODY_FAT
        ),
        Goal.LOSE,
    ),
    (
        lambda bmi, goal, body: bmi > OBESE_BMI and body == BodyType.HIGH_BODY_FAT,
        Goal.LOSE,
    ),
]


def calculate_goal(profile: Profile) -> MacroPlan:
    """Return the daily calorie target and macro split for a profile."""
    return calculate_goal_breakdown(profile).plan


def calculate_goal_breakdown(profile: Profile) -> GoalBreakdown:
    """Run the full calculation and keep every intermediate value."""
    bmi = calculate_bmi(profile.weight, profile.height)
    body_type = resolve_body_type(profile.body_type, bmi)
    body_fat = estimate_body_fat(profile.gender, body_type, profile.age)
    lean_mass = profile.weight * (1 - body_fat)

    formula = select_bmr_formula(body_type, bmi)
    if formula is BmrFormula.MIFFLIN_ST_JEOR:
        bmr = mifflin_st_jeor_bmr(
            profile.gender, profile.weight, profile.height, profile.age
        )
    else:
        bmr = lean_mass_bmr(lean_mass)

    multiplier = activity_multiplier(profile.activity_level, bmi)
    tdee = bmr * multiplier

    goal = resolve_goal(profile.goal, body_type, bmi)
    raw_target = int(_GOAL_ADJUSTMENTS[goal](tdee))
    target = max(raw_target, MIN_CALORIES[profile.gender])

    protein_multiplier = _PROTEIN_MULTIPLIERS[(body_type, goal == Goal.MAINTAIN)]
    plan = allocate_macros(
        target_calories=target,
        lean_body_mass=lean_mass,
        weight=profile.weight,
        protein_multiplier=protein_multiplier,
    )
    return GoalBreakdown(
        bmi=bmi,
        effective_body_type=body_type,
        body_fat_pct=body_fat,
        lean_body_mass=lean_mass,
        bmr=bmr,
        bmr_formula=formula,
        activity_multiplier=multiplier,
        tdee=tdee,
        effective_goal=goal,
        raw_target_calories=raw_target,
        target_calories=target,
        protein_multiplier=protein_multiplier,
        plan=plan,
    )


def calculate_bmi(weight: float, height: float) -> float:
    """Body mass index from kg and cm."""
    height_m = height / 100
    return weight / (height_m * height_m)


def resolve_body_type(declared: BodyType, bmi: float) -> BodyType:
    """Treat any BMI above 30 as high body fat, whatever was declared."""
    if bmi > OBESE_BMI:
        return BodyType.HIGH_BODY_FAT
    return declared


def estimate_body_fat(gender: Gender, body_type: BodyType, age: int) -> float:
    """Estimate body fat fraction from the lookup table plus an age penalty."""
    body_fat = _BASE_BODY_FAT[(gender, body_type)]
    if age > _BODY_FAT_AGE_THRESHOLD:
        body_fat += (age - _BODY_FAT_AGE_THRESHOLD) * _BODY_FAT_PER_YEAR
    return body_fat


def select_bmr_formula(body_type: BodyType, bmi: float) -> BmrFormula:
    if body_type == BodyType.HIGH_BODY_FAT or bmi > ALTERNATE_BMR_BMI:
        return BmrFormula.MIFFLIN_ST_JEOR
    return BmrFormula.LEAN_MASS


def mifflin_st_jeor_bmr(
    gender: Gender, weight: float, height: float, age: int
) -> float:
    return 10 * weight + 6.25 * height - 5 * age + _MIFFLIN_SEX_OFFSET[gender]


def lean_mass_bmr(lean_body_mass: float) -> float:
    return 370 + 21.6 * lean_body_mass


def activity_multiplier(level: ActivityLevel, bmi: float) -> float:
    """Activity multiplier, capped for severely obese profiles."""
    multiplier = _ACTIVITY_MULTIPLIERS[level]
    if bmi > SEVERELY_OBESE_BMI:
        return min(multiplier, MAX_ACTIVITY_MULTIPLIER_SEVERELY_OBESE)
    return multiplier


def resolve_goal(stated: Goal, body_type: BodyType, bmi: float) -> Goal:
    """Apply BMI and body type overrides to the stated goal."""
    for predicate, forced in _GOAL_OVERRIDES:
        if predicate(bmi, stated, body_type):
            return forced
    return stated


def allocate_macros(
    *,
    target_calories: int,
    lean_body_mass: float,
    weight: float,
    protein_multiplier: float,
) -> MacroPlan:
    """Split a calorie target into protein, fat and carbohydrate grams.

    Protein and fat are fixed first; carbohydrates take what is left. When
    protein and fat alone exceed the target, the target is raised to match.
    """
    protein = min(int(lean_body_mass * protein_multiplier), MAX_SAFE_PROTEIN_G)
    fat = max(min(int(weight * FAT_G_PER_KG), MAX_SAFE_FAT_G), MIN_SAFE_FAT_G)

    protein_fat_calories = (
        protein * CALORIES_PER_GRAM_PROTEIN + fat * CALORIES_PER_GRAM_FAT
    )
    remaining = target_calories - protein_fat_calories
    if remaining < 0:
        return MacroPlan(
            calories=protein_fat_calories, protein_g=protein, fat_g=fat, carbs_g=0
        )
    return MacroPlan(
        calories=target_calories,
        protein_g=protein,
        fat_g=fat,
        carbs_g=remaining // CALORIES_PER_GRAM_CARBS,
    )
