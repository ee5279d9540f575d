"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..models import ValidationStatus, ValidationWarningType


class DailyLogTextRequest(BaseModel):
    """Request body carrying raw daily log text."""

    text: str = Field(..., description="Raw daily log text, one line per item")


class DailyLogEntryPayload(BaseModel):
    """One day of a parsed weekly log."""

    date: str = Field(..., description="MM-DD, YYYY-MM-DD or the unlabeled placeholder for undated text")
    day_of_week: str = Field(default="", description="Weekday label taken from the date line")
    plan: List[str] = Field(default_factory=list)
    result: List[str] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)
    raw_content: str = Field(default="", description="Source text slice of this entry")


class WeeklyLogPayload(BaseModel):
    """Parsed weekly log."""

    entries: List[DailyLogEntryPayload] = Field(default_factory=list)
    start_date: str = ""
    end_date: str = ""


class ValidationWarningPayload(BaseModel):
    """Non-fatal validation finding."""

    kind: ValidationWarningType
    message: str
    suggestion: str


class ValidationResponse(BaseModel):
    """Response body for the validate endpoint."""

    status: ValidationStatus
    error: Optional[str] = None
    warnings: List[ValidationWarningPayload] = Field(default_factory=list)


class FormattedTextResponse(BaseModel):
    """Canonical text rendered from a weekly log."""

    text: str
    warnings: List[ValidationWarningPayload] = Field(
        default_factory=list,
        description="Validation warnings of the source text (normalize only)",
    )


class WeekStatsResponse(BaseModel):
    """Response body for the stats endpoint."""

    start_date: str
    end_date: str
    total_days: int
    filled_days: int
    item_counts: Dict[str, int] = Field(default_factory=dict)
