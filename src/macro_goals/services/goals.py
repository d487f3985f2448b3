"""Goal service wrapping the calorie calculator."""

import logging
from dataclasses import dataclass

from macro_goals.domain.goals import GoalBreakdown, MacroPlan, Profile
from macro_goals.services.calculator import calculate_goal_breakdown

_logger = logging.getLogger(__name__)


@dataclass
class GoalService:
    """Application service computing daily calorie and macro goals."""

    debug: bool = False

    def calculate(self, profile: Profile) -> MacroPlan:
        """Return the macro plan for a profile."""
        return self.explain(profile).plan

    def explain(self, profile: Profile) -> GoalBreakdown:
        """Return the macro plan with every intermediate value."""
        breakdown = calculate_goal_breakdown(profile)
        if breakdown.effective_goal != profile.goal:
            _logger.info(
                "Goal overridden: stated=%s effective=%s bmi=%.1f",
                profile.goal.value,
                breakdown.effective_goal.value,
                breakdown.bmi,
            )
        if breakdown.target_calories != breakdown.raw_target_calories:
            _logger.info(
                "Calorie floor applied: computed=%s floor=%s gender=%s",
                breakdown.raw_target_calories,
                breakdown.target_calories,
                profile.gender.value,
            )
        if self.debug:
            plan = breakdown.plan
            _logger.info(
                "Goal calculated: bmi=%.1f body_type=%s bmr=%.1f (%s) tdee=%.1f "
                "goal=%s calories=%s protein=%s fat=%s carbs=%s",
                breakdown.bmi,
                breakdown.effective_body_type.value,
                breakdown.bmr,
                breakdown.bmr_formula.value,
                breakdown.tdee,
                breakdown.effective_goal.value,
                plan.calories,
                plan.protein_g,
                plan.fat_g,
                plan.carbs_g,
            )
        return breakdown
