"""Daily log endpoints."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from ...formatter import format_weekly_log
from ...models import WeeklyLog
from ...parser import parse_daily_log
from ...stats import summarize_weekly_log
from ...validator import validate_daily_log
from ..schemas import (
    DailyLogTextRequest,
    FormattedTextResponse,
    ValidationResponse,
    WeeklyLogPayload,
    WeekStatsResponse,
)

logger = logging.getLogger(__name__)


def register_daily_log_routes(app: FastAPI) -> None:
    """Register parse / validate / format endpoints."""

    @app.post("/api/daily-log/parse", response_model=WeeklyLogPayload)
    async def parse_log(request: DailyLogTextRequest) -> WeeklyLogPayload:
        """Parse raw text into a weekly log."""
        weekly_log = parse_daily_log(request.text)
        return WeeklyLogPayload(**weekly_log.to_dict())

    @app.post("/api/daily-log/validate", response_model=ValidationResponse)
    async def validate_log(request: DailyLogTextRequest) -> ValidationResponse:
        """Classify raw text as valid / warning / error."""
        result = validate_daily_log(request.text)
        return ValidationResponse(**result.to_dict())

    @app.post("/api/daily-log/format", response_model=FormattedTextResponse)
    async def format_log(payload: WeeklyLogPayload) -> FormattedTextResponse:
        """Render a weekly log as canonical text."""
        weekly_log = WeeklyLog.from_dict(payload.model_dump())
        return FormattedTextResponse(text=format_weekly_log(weekly_log))

    @app.post("/api/daily-log/normalize", response_model=FormattedTextResponse)
    async def normalize_log(request: DailyLogTextRequest) -> FormattedTextResponse:
        """Validate raw text, then return its canonical form with any warnings."""
        validation = validate_daily_log(request.text)
        if validation.is_error:
            logger.info("Rejected daily log: %s", validation.error)
            raise HTTPException(status_code=400, detail=validation.error)

        try:
            text = format_weekly_log(parse_daily_log(request.text))
        except Exception as exc:
            logger.exception("Failed to normalize daily log: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to normalize daily log") from exc

        return FormattedTextResponse(
            text=text,
            warnings=[warning.to_dict() for warning in validation.warnings],
        )

    @app.post("/api/daily-log/stats", response_model=WeekStatsResponse)
    async def stats_log(request: DailyLogTextRequest) -> WeekStatsResponse:
        """Count entries and items of raw text."""
        stats = summarize_weekly_log(parse_daily_log(request.text))
        return WeekStatsResponse(**stats.to_dict())
