"""Tests for multi-race planning."""

import datetime

import pytest

from sprintlab.engine.race_plan import (
    COMPLEMENTARY_BUILD_NOTE,
    build_multi_race_plans,
    build_plan,
    estimate_goal_time,
    phase_for,
    recovery_days,
)
from sprintlab.schemas.race_plan import RaceEvent

TODAY = datetime.date(2026, 5, 1)


def _make_event(days_until: int, distance_m: int = 100, name: str | None = None) -> RaceEvent:
    return RaceEvent(
        id=f"evt-{days_until}",
        name=name or f"{distance_m}m in {days_until}d",
        date=TODAY + datetime.timedelta(days=days_until),
        distance_m=distance_m,
        days_until=days_until,
    )


# ======================================================================
# Building blocks
# ======================================================================


class TestPhaseFor:
    @pytest.mark.parametrize(
        "days, label",
        [
            (0, "Race Prep"),
            (3, "Race Prep"),
            (4, "Final Taper"),
            (7, "Final Taper"),
            (8, "Race-Specific"),
            (14, "Race-Specific"),
            (15, "Sharpen"),
            (28, "Sharpen"),
            (29, "Build"),
            (365, "Build"),
        ],
    )
    def test_thresholds(self, days, label):
        assert phase_for(days).label == label

    def test_returns_copy(self):
        phase = phase_for(40)
        phase.sessions.append("Extra")
        phase.strength_note = "Changed"
        fresh = phase_for(40)
        assert "Extra" not in fresh.sessions
        assert fresh.strength_note == "Full strength block: max effort lifts at 85–90%"


class TestRecoveryDays:
    @pytest.mark.parametrize(
        "distance, days",
        [(60, 4), (100, 4), (150, 5), (200, 5), (300, 7), (400, 7), (600, 9)],
    )
    def test_by_distance(self, distance, days):
        assert recovery_days(distance) == days


class TestEstimateGoalTime:
    def test_no_velocity(self):
        assert estimate_goal_time(100, 0.0, 30) == "--"

    def test_short_sprint_in_seconds(self):
        assert estimate_goal_time(100, 10.0, 30) == "11.14s"
        assert estimate_goal_time(60, 10.0, 30) == "6.53s"

    def test_long_sprint_in_minutes(self):
        assert estimate_goal_time(800, 10.0, 30) == "2:03.23"

    def test_age_slows_goal(self):
        young = float(estimate_goal_time(100, 10.0, 30).rstrip("s"))
        older = float(estimate_goal_time(100, 10.0, 50).rstrip("s"))
        assert older > young


# ======================================================================
# Multi-race plans
# ======================================================================


class TestBuildMultiRacePlans:
    def test_no_events(self):
        assert build_multi_race_plans([], 10.0, 45) == []

    def test_single_race(self):
        plans = build_multi_race_plans([_make_event(20)], 10.0, 45)
        assert len(plans) == 1
        assert plans[0].current_phase.label == "Sharpen"
        assert plans[0].prior_race_context is None
        assert plans[0].goal_time.endswith("s")

    def test_sorted_nearest_first(self):
        plans = build_multi_race_plans([_make_event(40), _make_event(10)], 10.0, 45)
        assert [p.race.days_until for p in plans] == [10, 40]
        assert plans[0].prior_race_context is None
        assert plans[1].prior_race_context is not None

    def test_deferred_behind_close_race(self):
        primary = _make_event(10, name="County Champs")
        plans = build_multi_race_plans([primary, _make_event(40, 200)], 10.0, 45)

        later = plans[1]
        assert later.current_phase.label == "Deferred"
        ctx = later.prior_race_context
        assert ctx.priority_race_name == "County Champs"
        assert ctx.priority_race_days_until == 10
        assert ctx.priority_phase_label == "Race-Specific"
        assert ctx.recovery_days_after == 4
        assert ctx.effective_training_days == 26
        assert ctx.post_recovery_phase.label == "Sharpen"
        assert ctx.is_constrained is True

    def test_complementary_build(self):
        plans = build_multi_race_plans([_make_event(35), _make_event(60)], 10.0, 45)

        later = plans[1]
        assert later.current_phase.label == "Build"
        assert later.current_phase.strength_note.endswith(COMPLEMENTARY_BUILD_NOTE)
        assert later.prior_race_context.is_constrained is False
        assert later.prior_race_context.effective_training_days == 21

    def test_reduced_volume_in_between(self):
        primary = _make_event(20, name="Club Open")
        plans = build_multi_race_plans([primary, _make_event(50)], 10.0, 45)

        phase = plans[1].current_phase
        assert phase.label == "Build"
        assert phase.focus.endswith("volume capped to support Club Open prep")
        assert all(s.endswith("(reduced volume)") for s in phase.sessions)
        assert "Keep intensity moderate while sharpening for Club Open" in phase.strength_note
        assert plans[1].prior_race_context.is_constrained is False

    def test_effective_days_floored_at_zero(self):
        plans = build_multi_race_plans([_make_event(10, 200), _make_event(12)], 10.0, 45)
        ctx = plans[1].prior_race_context
        assert ctx.recovery_days_after == 5
        assert ctx.effective_training_days == 0
        assert ctx.post_recovery_phase.label == "Race Prep"

    def test_every_later_race_uses_nearest_as_priority(self):
        events = [_make_event(5), _make_event(30), _make_event(60)]
        plans = build_multi_race_plans(events, 10.0, 45)
        assert all(p.prior_race_context.priority_race_days_until == 5 for p in plans[1:])

    def test_no_velocity_goal(self):
        plans = build_multi_race_plans([_make_event(5)], 0.0, 45)
        assert plans[0].goal_time == "--"


class TestBuildPlan:
    def test_single_event(self):
        plan = build_plan(_make_event(2), 10.0, 30)
        assert plan.current_phase.label == "Race Prep"
        assert plan.goal_time == "11.14s"
