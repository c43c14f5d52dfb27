"""
Training profile builder.

Aggregates the intervals of a training window into three capability
figures used by the race-time estimator:

* **Speed endurance index** — how much of peak velocity the athlete holds
  over 80 m+ efforts (mean of ``avg speed / peak`` over endurance reps).
* **Best flying velocity** — sustained top speed across the window.
* **Average acceleration time** — mean duration of ≤40 m starts.

The caller must pass the complete interval set for the window; the
profile is recomputed from scratch every time.
"""

from __future__ import annotations

from typing import Iterable

from sprintlab.schemas.interval import ENDURANCE_CLASSES, IntervalClass, TrackInterval
from sprintlab.schemas.profile import TrainingProfile


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def build_training_profile(
    intervals: Iterable[TrackInterval],
    peak_velocity: float,
) -> TrainingProfile:
    """Build a :class:`TrainingProfile` from parsed intervals.

    Args:
        intervals: Every interval in the window (any number of sessions).
        peak_velocity: Reference peak velocity (m/s) used to normalise
            endurance reps.  With ``peak_velocity <= 0`` the speed
            endurance index is 0.

    Returns:
        The aggregated profile.  Empty input gives an all-zero profile.
    """
    intervals = list(intervals)

    endurance = [i for i in intervals if i.classification in ENDURANCE_CLASSES]
    acceleration = [i for i in intervals if i.classification == IntervalClass.ACCELERATION]

    speed_endurance_index = 0.0
    if endurance and peak_velocity > 0:
        speed_endurance_index = _mean(
            [(i.distance_m / i.duration_s) / peak_velocity for i in endurance]
        )

    flying = [i.flying_velocity for i in intervals if i.flying_velocity > 0]

    return TrainingProfile(
        speed_endurance_index=speed_endurance_index,
        best_flying_velocity=max(flying) if flying else 0.0,
        avg_acceleration_time_s=_mean([float(i.duration_s) for i in acceleration]),
        endurance_interval_count=len(endurance),
        acceleration_interval_count=len(acceleration),
    )
