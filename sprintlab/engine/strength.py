"""
Strength auto-regulation driven by training stress balance.

    TSB ≥ 0          fresh     high intensity, low volume (max strength)
    −20 ≤ TSB < 0    tired     moderate intensity (stiffened plyometrics)
    TSB < −20        fatigued  rest or active mobility only

Each zone has a fixed exercise list.  Strength lifts carry a body-weight
multiplier so a load can be suggested once the athlete's weight is known;
bodyweight, plyometric and mobility work has none.
"""

from __future__ import annotations

from typing import Optional

from sprintlab.engine.utils import round_half_up
from sprintlab.schemas.prescription import (
    Exercise,
    StrengthPrescription,
    StrengthZone,
    StrengthZoneName,
)

FATIGUED_TSB_LIMIT = -20

# ======================================================================
# Zone table
# ======================================================================

_ZONES: dict[StrengthZoneName, StrengthZone] = {
    "fresh": StrengthZone(
        zone="fresh", intensity="high",
        focus="Max Strength — High Intensity, Low Volume",
    ),
    "tired": StrengthZone(
        zone="tired", intensity="moderate",
        focus="Stiffened Plyometrics — Moderate Intensity",
    ),
    "fatigued": StrengthZone(
        zone="fatigued", intensity="none",
        focus="Rest or Active Mobility only",
    ),
}

# ======================================================================
# Exercise catalog
# ======================================================================

EXERCISE_CATALOG: dict[StrengthZoneName, list[Exercise]] = {
    "fresh": [
        Exercise(
            name="Trap Bar Deadlift", type="strength", sets=3, reps=3, intensity="85%",
            weight_guidance="~1.7× BW (85% est. 1RM)", bw_multiplier=1.7,
        ),
        Exercise(
            name="Weighted Step-Up", type="strength", sets=3, reps=5, intensity="80%",
            weight_guidance="~0.5× BW per hand (DB)", bw_multiplier=0.5,
        ),
        Exercise(
            name="Hang Power Clean", type="strength", sets=3, reps=3, intensity="80%",
            weight_guidance="~0.95× BW (80% est. 1RM)", bw_multiplier=0.95,
        ),
    ],
    "tired": [
        Exercise(
            name="Pogo Jumps", type="plyometric", sets=3, reps=10,
            intensity="Max Stiffness", weight_guidance="Bodyweight",
        ),
        Exercise(
            name="Hurdle Hops", type="plyometric", sets=3, reps=6,
            intensity="Reactive", weight_guidance="Bodyweight",
        ),
        Exercise(
            name="Single-Leg Bounds", type="plyometric", sets=3, reps=8,
            intensity="Moderate", weight_guidance="Bodyweight",
        ),
    ],
    "fatigued": [
        Exercise(name="Foam Rolling", type="mobility", sets=1, reps="10 min", intensity="Low"),
        Exercise(name="Hip Flexor Stretch", type="mobility", sets=2, reps="60s hold", intensity="Low"),
        Exercise(name="Active Walking", type="rest", sets=1, reps="15 min", intensity="Very Low"),
    ],
}


def get_exercises(zone: StrengthZoneName) -> list[Exercise]:
    """Copies of the catalog exercises for *zone*."""
    return [e.model_copy() for e in EXERCISE_CATALOG[zone]]


# ======================================================================
# Public API
# ======================================================================


def strength_zone(tsb: float) -> StrengthZone:
    """Select the strength zone for a training stress balance."""
    if tsb >= 0:
        return _ZONES["fresh"]
    if tsb >= FATIGUED_TSB_LIMIT:
        return _ZONES["tired"]
    return _ZONES["fatigued"]


def estimate_weight_kg(exercise: Exercise, body_weight_kg: float) -> Optional[int]:
    """Suggested load in kg, or ``None`` for exercises without a multiplier."""
    if not exercise.bw_multiplier:
        return None
    return round_half_up(exercise.bw_multiplier * body_weight_kg)


def strength_prescription(
    tsb: float,
    body_weight_kg: Optional[float] = None,
) -> StrengthPrescription:
    """Zone, focus and exercises, with load estimates when weight is known."""
    zone = strength_zone(tsb)
    exercises = get_exercises(zone.zone)

    if body_weight_kg is not None and body_weight_kg > 0:
        exercises = [
            e.model_copy(update={"estimated_load_kg": estimate_weight_kg(e, body_weight_kg)})
            for e in exercises
        ]

    return StrengthPrescription(**zone.model_dump(), exercises=exercises)
