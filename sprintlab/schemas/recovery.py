"""
Recovery tool schemas — neural budget and the morning check-in.
"""

import datetime
from typing import Literal

from pydantic import BaseModel, Field

NeuralBudgetEntryType = Literal["high-intensity", "oscillatory", "sleep", "tempo"]
BudgetColor = Literal["green", "amber", "red"]


class NeuralBudgetEntry(BaseModel):
    """One contribution to the daily neural budget."""

    date: datetime.date
    type: NeuralBudgetEntryType
    value: float = Field(
        ..., ge=0.0,
        description="Hours slept for 'sleep'; number of sessions for everything else",
    )


class BudgetBreakdown(BaseModel):
    sleep_contribution: float
    session_cost: float
    baseline: float


class DailyBudgetSummary(BaseModel):
    """Neural budget for one day."""

    budget: int = Field(..., ge=0, le=100)
    color: BudgetColor
    requires_reset: bool
    breakdown: BudgetBreakdown


class NeuralBudgetRequest(BaseModel):
    entries: list[NeuralBudgetEntry]
    previous_budget: int | None = Field(
        None, ge=0, le=100,
        description="Yesterday's budget, used for the reset-day check",
    )


class MorningCheckIn(BaseModel):
    """Subjective and quick-test readings taken on waking."""

    date: datetime.date
    grip_score: Literal["ok", "reduced"]
    tap_test_ratio: float = Field(
        ..., ge=0.0,
        description="Today's tap-test speed / 7-day average (1.0 = baseline)",
    )
    hrv: float | None = Field(None, ge=0.0, description="Optional waking HRV (ms)")
    muscle_feeling: Literal["twitchy", "normal", "heavy"]
    morning_stiffness_cleared: bool = Field(
        ...,
        description="True when stiffness cleared within ~10 minutes of waking",
    )


class CheckInResult(BaseModel):
    """Outcome of the morning check-in."""

    overall_status: Literal["ready", "caution", "reduce-volume"]
    red_flags: list[str]
    recommendations: list[str]
    neural_score: int = Field(..., ge=0, le=100, description="25 points per healthy dimension")
