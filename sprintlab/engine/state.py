"""
Athlete state — the full daily analysis for one athlete.

Loads the lookback window through the repositories and runs the pure
engine functions over it:

1. The newest activity is *today*.  Its peak against the mean peak of the
   previous 30 activities gives the fatigue index.
2. HRV: newest wellness reading against the mean of the newest 7 positive
   readings.
3. TSB = CTL − ATL of the newest activity.
4. Every activity in the window is parsed into intervals; the combined
   interval set builds the training profile used by the race estimator.
5. Prescriptions: strength zone from TSB, sprint workout from the band
   (with the stale-signal override), race plans from upcoming sprint events.
6. A per-day series over the window for charting.

Days without data use neutral fallbacks (fatigue index 1.0, TSB 0, HRV
ratio 1.0).
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from sprintlab.core.config import settings
from sprintlab.core.timeutils import day_bounds
from sprintlab.db.repositories.activity import ActivityRepository
from sprintlab.db.repositories.athlete import AthleteRepository
from sprintlab.db.repositories.race_event import RaceEventRepository
from sprintlab.db.repositories.wellness import WellnessRepository
from sprintlab.engine.intervals import parse_sessions, parse_track_session
from sprintlab.engine.profile import build_training_profile
from sprintlab.engine.race_estimator import estimate, estimate_recovered
from sprintlab.engine.race_plan import build_multi_race_plans
from sprintlab.engine.readiness import assess_readiness, smart_recovery_window
from sprintlab.engine.strength import strength_prescription
from sprintlab.engine.workouts import sprint_workout
from sprintlab.models.activity import Activity
from sprintlab.models.athlete import Athlete
from sprintlab.models.race_event import RaceEventRecord
from sprintlab.models.wellness import WellnessEntry
from sprintlab.schemas.prescription import SprintContext
from sprintlab.schemas.profile import TrainingProfile
from sprintlab.schemas.race import RaceEstimatorInput
from sprintlab.schemas.race_plan import RaceEvent
from sprintlab.schemas.readiness import HRVSignal, StatusBand
from sprintlab.schemas.state import AthleteStateResponse, DailyDataPoint

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


# ======================================================================
# Pure helpers
# ======================================================================


def _age_on(date_of_birth: Optional[datetime.date], as_of: datetime.date) -> int:
    """Completed years on *as_of*; 0 when the birth date is unknown."""
    if date_of_birth is None:
        return 0
    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return max(age, 0)


def baseline_vmax(activities: Sequence[Activity], count: Optional[int] = None) -> float:
    """Mean peak of the activities before today (newest first input).

    Falls back to today's peak when there is no earlier positive peak.
    """
    count = count or settings.BASELINE_ACTIVITY_COUNT
    if not activities:
        return 0.0
    previous = [a.max_speed for a in activities[1:count + 1] if a.max_speed > 0]
    if not previous:
        return activities[0].max_speed
    return sum(previous) / len(previous)


def _hrv_signal(
    wellness: Sequence[WellnessEntry],
    window: Optional[int] = None,
    default: Optional[float] = None,
) -> HRVSignal:
    """Current HRV and its rolling average from newest-first entries."""
    window = window or settings.HRV_WINDOW
    default = default if default is not None else settings.DEFAULT_HRV

    latest = wellness[0].hrv if wellness else None
    current = latest if latest else default

    recent = [w.hrv for w in wellness[:window] if w.hrv is not None and w.hrv > 0]
    avg = sum(recent) / len(recent) if recent else current
    return HRVSignal(current_hrv=current, avg_hrv_7d=avg)


def _tsb(activity: Optional[Activity]) -> float:
    if activity is None:
        return 0.0
    return (activity.ctl or 0.0) - (activity.atl or 0.0)


def _body_weight(athlete: Athlete, wellness: Sequence[WellnessEntry]) -> Optional[float]:
    """Athlete record first, then the newest wellness entry with a weight."""
    if athlete.weight_kg and athlete.weight_kg > 0:
        return athlete.weight_kg
    for entry in wellness:
        if entry.weight_kg and entry.weight_kg > 0:
            return entry.weight_kg
    return None


def _sprint_events(
    records: Sequence[RaceEventRecord],
    as_of: datetime.date,
    max_distance_m: Optional[int] = None,
) -> list[RaceEvent]:
    """Running events strictly under the sprint distance limit, soonest first."""
    max_distance_m = max_distance_m or settings.SPRINT_EVENT_MAX_DISTANCE_M
    events: list[RaceEvent] = []
    for record in records:
        distance = record.distance_m or 0
        if record.type != "Run" or not 0 < distance < max_distance_m:
            continue
        events.append(RaceEvent(
            id=str(record.id),
            name=record.name or f"{distance}m Race",
            date=record.date,
            distance_m=distance,
            days_until=max(0, (record.date - as_of).days),
        ))
    return sorted(events, key=lambda e: e.days_until)


def _day_label(day: datetime.date) -> str:
    return f"{day.day} {_MONTHS[day.month - 1]}"


def _daily_series(
    activities: Sequence[Activity],
    wellness: Sequence[WellnessEntry],
    baseline: float,
    avg_hrv_7d: float,
    age: int,
    as_of: datetime.date,
    days: Optional[int] = None,
) -> list[DailyDataPoint]:
    """One point per day, oldest first, ending on *as_of*.

    Recovery hours use a per-day rolling 7-day HRV average built only from
    entries up to and including that day.
    """
    days = days or settings.LOOKBACK_DAYS

    # Newest-first input: the first activity seen for a date is its latest.
    by_date: dict[datetime.date, Activity] = {}
    for activity in activities:
        by_date.setdefault(activity.start_time.date(), activity)

    hrv_by_date: dict[datetime.date, float] = {}
    for entry in wellness:
        if entry.hrv and entry.hrv > 0:
            hrv_by_date.setdefault(entry.date, entry.hrv)

    series: list[DailyDataPoint] = []
    last_tsb: Optional[float] = None
    for offset in range(days - 1, -1, -1):
        day = as_of - datetime.timedelta(days=offset)
        activity = by_date.get(day)

        fi = None
        if activity is not None and baseline > 0:
            fi = round(activity.max_speed / baseline, 3)

        tsb = _tsb(activity) if activity is not None else last_tsb
        if tsb is not None:
            last_tsb = tsb

        week_start = day - datetime.timedelta(days=7)
        week = [h for d, h in hrv_by_date.items() if week_start < d <= day]
        rolling = sum(week) / len(week) if week else avg_hrv_7d

        window = smart_recovery_window(
            age,
            HRVSignal(current_hrv=hrv_by_date.get(day, rolling), avg_hrv_7d=rolling),
            tsb if tsb is not None else 0.0,
            fi if fi is not None else 1.0,
        )
        series.append(DailyDataPoint(
            date=day,
            day_label=_day_label(day),
            fatigue_index=fi,
            tsb=tsb,
            recovery_hours=window.hours,
        ))

    return series


# ======================================================================
# Main entry point
# ======================================================================


def compute_athlete_state(
    session: Session,
    athlete_id: int,
    as_of: Optional[datetime.date] = None,
) -> AthleteStateResponse:
    """Compute the full analysis snapshot for *athlete_id* on *as_of*.

    Raises:
        HTTPException: 404 if the athlete does not exist.
    """
    as_of = as_of or datetime.date.today()
    prefix = f"[athlete:{athlete_id}]"

    athlete = AthleteRepository(session).get_by_id(athlete_id)
    if athlete is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found")

    window_start = as_of - datetime.timedelta(days=settings.LOOKBACK_DAYS)
    activities = ActivityRepository(session).get_window(
        athlete_id, *day_bounds(window_start, as_of),
    )
    wellness = WellnessRepository(session).get_window(athlete_id, window_start, as_of)
    logger.info(
        f"{prefix} Computing state for {as_of}: "
        f"{len(activities)} activities, {len(wellness)} wellness entries"
    )

    age = _age_on(athlete.date_of_birth, as_of)
    body_weight = _body_weight(athlete, wellness)

    latest = activities[0] if activities else None
    today_vmax = latest.max_speed if latest else 0.0
    baseline = baseline_vmax(activities)
    best_vmax = max((a.max_speed for a in activities), default=0.0)
    hrv = _hrv_signal(wellness)
    tsb = _tsb(latest)

    readiness = assess_readiness(today_vmax, baseline, hrv, tsb, age)
    if readiness.is_stale_signal:
        logger.info(
            f"{prefix} Stale signal: NFI={readiness.fatigue_index:.3f} with TSB={tsb:+.1f}"
        )

    latest_intervals = parse_track_session(latest.velocity) if latest else []
    all_intervals = parse_sessions(a.velocity for a in activities)
    logger.debug(
        f"{prefix} Parsed {len(all_intervals)} training intervals from {len(activities)} activities"
    )

    peak = max(best_vmax, baseline)
    profile = build_training_profile(all_intervals, peak) if peak > 0 else TrainingProfile()

    race_input = RaceEstimatorInput(
        best_vmax_60d=best_vmax,
        avg_vmax=baseline,
        fatigue_index=readiness.fatigue_index,
        status_band=readiness.status_band,
        tsb=tsb,
        age=age,
        activity_count=len(activities),
        training_intervals=all_intervals,
    )
    predictions = estimate(race_input)
    recovered = []
    if readiness.status_band != StatusBand.GREEN:
        recovered = estimate_recovered(race_input)

    records = RaceEventRepository(session).get_upcoming(
        athlete_id, as_of, as_of + datetime.timedelta(days=settings.RACE_LOOKAHEAD_DAYS),
    )
    events = _sprint_events(records, as_of)
    skipped = len(records) - len(events)
    if skipped:
        logger.debug(f"{prefix} Skipped {skipped} non-sprint event(s)")
    race_plans = build_multi_race_plans(events, best_vmax, age)

    state = AthleteStateResponse(
        athlete_id=athlete_id,
        as_of=as_of,
        age=age,
        body_weight_kg=body_weight,
        activity_count=len(activities),
        today_vmax=today_vmax,
        baseline_vmax=baseline,
        best_vmax_60d=best_vmax,
        tsb=tsb,
        hrv=hrv,
        readiness=readiness,
        latest_intervals=latest_intervals,
        profile=profile,
        race_predictions=predictions,
        recovered_race_predictions=recovered,
        strength=strength_prescription(tsb, body_weight),
        sprint_workout=sprint_workout(
            readiness.status_band, readiness.fatigue_index, SprintContext(tsb=tsb),
        ),
        race_plans=race_plans,
        daily_series=_daily_series(
            activities, wellness, baseline, hrv.avg_hrv_7d, age, as_of,
        ),
    )
    logger.info(
        f"{prefix} State complete: NFI={readiness.fatigue_index:.3f} "
        f"({readiness.status_band.value}), SRS={readiness.recovery_score}, "
        f"window={readiness.recovery_window_hours}h, races={len(race_plans)}"
    )
    return state
