"""
Multi-race planning.

Phase thresholds (days until race):

    Race Prep        ≤ 3    CNS rest, activation strides only
    Final Taper      ≤ 7    volume drop, sharpening
    Race-Specific    ≤ 14   race-pace efforts, taper begins
    Sharpen          ≤ 28   speed specificity + moderate strength
    Build            > 28   max velocity development + full strength block

The nearest race is the master constraint.  While it is ≤14 days away
later races are *deferred* behind its taper; while it is still >28 days
away every race shares the same build block (*complementary*); in between
later races keep their own phase at reduced volume.
"""

from __future__ import annotations

import math
from typing import Iterable

from sprintlab.engine.race_estimator import REACTION_TIME, age_penalty, format_time
from sprintlab.schemas.race_plan import PriorRaceContext, RaceEvent, RacePlan, RacePlanPhase

# ======================================================================
# Phase table
# ======================================================================

_PHASES: list[tuple[float, RacePlanPhase]] = [
    (3, RacePlanPhase(
        label="Race Prep",
        timeframe="1–3 days out",
        focus="Stay sharp — rest CNS, no max efforts",
        sessions=[
            "2–3 × 30m accelerations at 80%",
            "Activation strides only, no near-maximal work",
            "Full race warm-up protocol rehearsal",
        ],
        strength_note="No strength work — full CNS rest",
    )),
    (7, RacePlanPhase(
        label="Final Taper",
        timeframe="4–7 days out",
        focus="Reduce volume, maintain sharpness",
        sessions=[
            "3 × 30m block starts at 95%",
            "2 × 60m build-up runs",
            "Technical drills: A-skips, B-skips, wickets",
        ],
        strength_note="Bodyweight plyometrics only (pogo jumps, hurdle hops)",
    )),
    (14, RacePlanPhase(
        label="Race-Specific",
        timeframe="1–2 weeks out",
        focus="Race-pace efforts + taper begins",
        sessions=[
            "4 × race-distance at 90–95%",
            "Block start practice: 6 × 20m",
            "Speed endurance: 2 × 150m @ 85%",
        ],
        strength_note="Strength maintenance: 2 sets only, reduce volume 40%",
    )),
    (28, RacePlanPhase(
        label="Sharpen",
        timeframe="2–4 weeks out",
        focus="Speed development & event specificity",
        sessions=[
            "5 × 60m flying starts at 95%",
            "3 × race distance at 90%",
            "Speed endurance: 2–3 × 200m at 85%",
        ],
        strength_note="Moderate strength: plyometrics + power lifts at 75%",
    )),
    (math.inf, RacePlanPhase(
        label="Build",
        timeframe="4+ weeks out",
        focus="Max velocity development & strength base",
        sessions=[
            "6 × 30m acceleration sprints",
            "3 × 60m max velocity (flying start)",
            "Flying 30s: 4–5 reps at >95%",
        ],
        strength_note="Full strength block: max effort lifts at 85–90%",
    )),
]

DEFERRED_PHASE = RacePlanPhase(
    label="Deferred",
    timeframe="Until prior race",
    focus="Support primary race taper — no conflicting high-intensity work",
    sessions=[
        "Short acceleration strides only (20–30m)",
        "Technical drills at low intensity",
        "Active recovery: mobility & easy running",
    ],
    strength_note="Bodyweight mobility only — no heavy lifting while in taper for prior race",
)

COMPLEMENTARY_BUILD_NOTE = "Build phase serves both races — Vmax development transfers directly."

# Nearest race within this many days puts later races on hold.
TAPER_CONSTRAINT_DAYS = 14
# Nearest race beyond this many days shares the build block.
SHARED_BUILD_DAYS = 28

# (max distance in m, sustain fraction) for goal-time estimates.
_GOAL_SUSTAIN: list[tuple[float, float]] = [
    (60, 0.94),
    (100, 0.91),
    (200, 0.88),
    (400, 0.78),
    (600, 0.70),
    (math.inf, 0.65),
]


# ======================================================================
# Building blocks
# ======================================================================


def phase_for(days_until: int) -> RacePlanPhase:
    """Training phase for a race *days_until* days away (a fresh copy)."""
    for max_days, phase in _PHASES:
        if days_until <= max_days:
            return phase.model_copy(deep=True)
    return _PHASES[-1][1].model_copy(deep=True)


def recovery_days(distance_m: int) -> int:
    """Masters recovery days after racing *distance_m*."""
    if distance_m <= 100:
        return 4
    if distance_m <= 200:
        return 5
    if distance_m <= 400:
        return 7
    return 9


def estimate_goal_time(distance_m: int, best_vmax: float, age: int) -> str:
    """Best-case finish time for any sprint distance.

    Distance-only sustain table plus the masters age penalty; no readiness
    adjustment, so the figure reads as a goal rather than a forecast.
    """
    if best_vmax <= 0:
        return "--"

    sustain = next(f for limit, f in _GOAL_SUSTAIN if distance_m <= limit)
    avg_speed = best_vmax * sustain * age_penalty(age)
    seconds = distance_m / avg_speed + REACTION_TIME

    if seconds < 60:
        return f"{seconds:.2f}s"
    return format_time(seconds)


def _deferred_phase() -> RacePlanPhase:
    return DEFERRED_PHASE.model_copy(deep=True)


def _complementary_phase(days_until: int) -> RacePlanPhase:
    base = phase_for(days_until)
    base.strength_note = f"{base.strength_note} · {COMPLEMENTARY_BUILD_NOTE}"
    return base


def _reduced_volume_phase(days_until: int, primary_name: str) -> RacePlanPhase:
    base = phase_for(days_until)
    return RacePlanPhase(
        label=base.label,
        timeframe=base.timeframe,
        focus=f"{base.focus} — volume capped to support {primary_name} prep",
        sessions=[f"{s} (reduced volume)" for s in base.sessions],
        strength_note=(
            f"{base.strength_note} · Keep intensity moderate while sharpening for {primary_name}"
        ),
    )


def _secondary_plan(race: RaceEvent, primary: RaceEvent, goal_time: str) -> RacePlan:
    recov = recovery_days(primary.distance_m)
    effective = max(0, race.days_until - primary.days_until - recov)
    constrained = primary.days_until <= TAPER_CONSTRAINT_DAYS

    if constrained:
        current = _deferred_phase()
    elif primary.days_until > SHARED_BUILD_DAYS:
        current = _complementary_phase(race.days_until)
    else:
        current = _reduced_volume_phase(race.days_until, primary.name)

    return RacePlan(
        race=race,
        goal_time=goal_time,
        current_phase=current,
        prior_race_context=PriorRaceContext(
            priority_race_name=primary.name,
            priority_race_date=primary.date,
            priority_race_days_until=primary.days_until,
            priority_phase_label=phase_for(primary.days_until).label,
            recovery_days_after=recov,
            effective_training_days=effective,
            post_recovery_phase=phase_for(effective),
            is_constrained=constrained,
        ),
    )


# ======================================================================
# Main entry points
# ======================================================================


def build_multi_race_plans(
    events: Iterable[RaceEvent],
    best_vmax: float,
    age: int,
) -> list[RacePlan]:
    """Mutually compatible plans for every upcoming race.

    Args:
        events: Upcoming races in any order; they are sorted nearest-first.
        best_vmax: Best peak velocity (m/s) for goal times.
        age: Athlete age for the masters penalty.

    Returns:
        One plan per race, nearest first.  Only later races carry a
        :class:`PriorRaceContext`.
    """
    races = sorted(events, key=lambda e: e.days_until)
    if not races:
        return []

    primary = races[0]
    plans = [RacePlan(
        race=primary,
        goal_time=estimate_goal_time(primary.distance_m, best_vmax, age),
        current_phase=phase_for(primary.days_until),
    )]
    for race in races[1:]:
        goal = estimate_goal_time(race.distance_m, best_vmax, age)
        plans.append(_secondary_plan(race, primary, goal))
    return plans


def build_plan(event: RaceEvent, best_vmax: float, age: int) -> RacePlan:
    """Plan for a single race."""
    return build_multi_race_plans([event], best_vmax, age)[0]
