"""
Daily neural budget ("training bank").

Every day starts from a baseline of 50; sessions spend from it, sleep and
easy tempo pay back into it:

    high-intensity session (sprints, plyos)   −30
    oscillatory / heavy lifting               −20
    sleep                                     +5 per hour
    low-HR recovery tempo                     +10

The total is rounded and clamped to [0, 100].  Two consecutive days
below 20 call for a neural reset day.
"""

from __future__ import annotations

from typing import Iterable, Optional

from sprintlab.engine.utils import clamp, round_half_up
from sprintlab.schemas.recovery import (
    BudgetBreakdown,
    BudgetColor,
    DailyBudgetSummary,
    NeuralBudgetEntry,
    NeuralBudgetEntryType,
)

BASELINE = 50

BUDGET_COSTS: dict[NeuralBudgetEntryType, float] = {
    "high-intensity": -30,
    "oscillatory": -20,
    "sleep": 5,
    "tempo": 10,
}

RESET_THRESHOLD = 20
GREEN_BUDGET = 60
AMBER_BUDGET = 30


def daily_budget(entries: Iterable[NeuralBudgetEntry]) -> int:
    """Budget after applying every entry to the baseline."""
    total = BASELINE + sum(BUDGET_COSTS[e.type] * e.value for e in entries)
    return int(clamp(round_half_up(total), 0, 100))


def requires_reset_day(last_two_budgets: tuple[int, int]) -> bool:
    """True when both budgets are strictly below the reset threshold."""
    return all(b < RESET_THRESHOLD for b in last_two_budgets)


def budget_color(budget: int) -> BudgetColor:
    if budget >= GREEN_BUDGET:
        return "green"
    if budget >= AMBER_BUDGET:
        return "amber"
    return "red"


def summarize_budget(
    entries: Iterable[NeuralBudgetEntry],
    previous_budget: Optional[int] = None,
) -> DailyBudgetSummary:
    """Budget, colour, reset flag and breakdown for one day.

    Args:
        entries: The day's entries.
        previous_budget: Yesterday's budget; without it no reset is flagged.
    """
    entries = list(entries)
    budget = daily_budget(entries)

    sleep = sum(BUDGET_COSTS[e.type] * e.value for e in entries if e.type == "sleep")
    sessions = sum(BUDGET_COSTS[e.type] * e.value for e in entries if e.type != "sleep")

    return DailyBudgetSummary(
        budget=budget,
        color=budget_color(budget),
        requires_reset=(
            previous_budget is not None and requires_reset_day((previous_budget, budget))
        ),
        breakdown=BudgetBreakdown(
            sleep_contribution=sleep,
            session_cost=sessions,
            baseline=BASELINE,
        ),
    )
