"""Shared test fixtures."""

from collections.abc import Callable

import pytest

from macro_goals.config import Settings
from macro_goals.containers import AppContainer
from macro_goals.domain.goals import ActivityLevel, BodyType, Gender, Goal, Profile
from macro_goals.services.goals import GoalService


def make_profile(**overrides: object) -> Profile:
    """Build a profile from a reference adult male, overriding fields."""
    values: dict[str, object] = {
        "gender": Gender.MALE,
        "age": 25,
        "height": 180.0,
        "weight": 80.0,
        "body_type": BodyType.NORMAL,
        "activity_level": ActivityLevel.MODERATELY_ACTIVE,
        "goal": Goal.MAINTAIN,
    }
    values.update(overrides)
    return Profile(**values)


@pytest.fixture
def profile_factory() -> Callable[..., Profile]:
    return make_profile


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="INFO", debug_calculations=True)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return AppContainer(
        settings=settings,
        goal_service=GoalService(debug=settings.debug_calculations),
    )
