"""Pydantic models for goal API payloads."""

from pydantic import BaseModel, ConfigDict, Field

from macro_goals.domain.goals import (
    ActivityLevel,
    BmrFormula,
    BodyType,
    Gender,
    Goal,
    GoalBreakdown,
    MacroPlan,
    Profile,
)


class GoalRequest(BaseModel):
    """User details submitted for a goal calculation."""

    model_config = ConfigDict(populate_by_name=True)

    gender: Gender
    age: int = Field(gt=0, le=120)
    height: float = Field(gt=0, le=300, description="Height in centimeters")
    weight: float = Field(gt=0, le=500, description="Weight in kilograms")
    body_type: BodyType = Field(alias="bodyType")
    activity_level: ActivityLevel = Field(alias="activityLevel")
    goal: Goal

    def to_profile(self) -> Profile:
        """Build the domain profile from validated request data."""
        return Profile(
            gender=self.gender,
            age=self.age,
            height=self.height,
            weight=self.weight,
            body_type=self.body_type,
            activity_level=self.activity_level,
            goal=self.goal,
        )


class GoalResponse(BaseModel):
    """Daily calorie target and macronutrient grams."""

    calories: int
    protein: int
    fat: int
    carbs: int

    @classmethod
    def from_plan(cls, plan: MacroPlan) -> "GoalResponse":
        return cls(
            calories=plan.calories,
            protein=plan.protein_g,
            fat=plan.fat_g,
            carbs=plan.carbs_g,
        )


class GoalBreakdownResponse(BaseModel):
    """Goal calculation with its intermediate values."""

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
    plan: GoalResponse

    @classmethod
    def from_breakdown(cls, breakdown: GoalBreakdown) -> "GoalBreakdownResponse":
        return cls(
            bmi=round(breakdown.bmi, 2),
            effective_body_type=breakdown.effective_body_type,
            body_fat_pct=round(breakdown.body_fat_pct, 4),
            lean_body_mass=round(breakdown.lean_body_mass, 2),
            bmr=round(breakdown.bmr, 1),
            bmr_formula=breakdown.bmr_formula,
            activity_multiplier=breakdown.activity_multiplier,
            tdee=round(breakdown.tdee, 1),
            effective_goal=breakdown.effective_goal,
            raw_target_calories=breakdown.raw_target_calories,
            target_calories=breakdown.target_calories,
            protein_multiplier=breakdown.protein_multiplier,
            plan=GoalResponse.from_plan(breakdown.plan),
        )
