"""Dependency container wiring for the application."""

from dataclasses import dataclass

from macro_goals.config import Settings
from macro_goals.services.goals import GoalService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    goal_service: GoalService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    goal_service = GoalService(debug=resolved_settings.debug_calculations)
    return AppContainer(settings=resolved_settings, goal_service=goal_service)
