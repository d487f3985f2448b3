"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request

from macro_goals.api.models import GoalBreakdownResponse, GoalRequest, GoalResponse
from macro_goals.app_logging import configure_logging
from macro_goals.config import parse_log_level
from macro_goals.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Macro Goals")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/goals")
    async def calculate_goal(payload: GoalRequest, request: Request) -> GoalResponse:
        """Return the daily calorie target and macro split."""
        state_container: AppContainer = request.app.state.container
        profile = payload.to_profile()
        try:
            plan = state_container.goal_service.calculate(profile)
        except Exception:
            logger.exception("Goal calculation failed", extra={"profile": profile})
            raise
        return GoalResponse.from_plan(plan)

    @app.post("/goals/breakdown")
    async def explain_goal(
        payload: GoalRequest, request: Request
    ) -> GoalBreakdownResponse:
        """Return the goal calculation with its intermediate values."""
        state_container: AppContainer = request.app.state.container
        profile = payload.to_profile()
        try:
            breakdown = state_container.goal_service.explain(profile)
        except Exception:
            logger.exception("Goal breakdown failed", extra={"profile": profile})
            raise
        return GoalBreakdownResponse.from_breakdown(breakdown)

    return app
