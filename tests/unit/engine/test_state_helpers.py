"""Tests for the athlete-state helpers.

Model instances are built in memory; nothing touches the database.
"""

import datetime

import pytest

from sprintlab.engine.state import (
    _age_on,
    _body_weight,
    _daily_series,
    _day_label,
    _hrv_signal,
    _sprint_events,
    _tsb,
    baseline_vmax,
)
from sprintlab.models.activity import Activity
from sprintlab.models.athlete import Athlete
from sprintlab.models.race_event import RaceEventRecord
from sprintlab.models.wellness import WellnessEntry

AS_OF = datetime.date(2026, 5, 10)


# ======================================================================
# Helpers
# ======================================================================


def _make_activity(
    day: datetime.date,
    max_speed: float,
    ctl: float = 50.0,
    atl: float = 50.0,
) -> Activity:
    return Activity(
        athlete_id=1,
        start_time=datetime.datetime.combine(day, datetime.time(18, 0), tzinfo=datetime.timezone.utc),
        max_speed=max_speed,
        ctl=ctl,
        atl=atl,
    )


def _make_wellness(day: datetime.date, hrv=None, weight=None) -> WellnessEntry:
    return WellnessEntry(athlete_id=1, date=day, hrv=hrv, weight_kg=weight)


def _make_event(days_until: int, distance, type_: str = "Run", name: str = "Meet") -> RaceEventRecord:
    return RaceEventRecord(
        id=days_until,
        athlete_id=1,
        name=name,
        date=AS_OF + datetime.timedelta(days=days_until),
        type=type_,
        distance_m=distance,
    )


def _days_ago(n: int) -> datetime.date:
    return AS_OF - datetime.timedelta(days=n)


# ======================================================================
# Scalar helpers
# ======================================================================


class TestAgeOn:
    def test_before_birthday(self):
        assert _age_on(datetime.date(1980, 6, 15), datetime.date(2026, 6, 14)) == 45

    def test_on_birthday(self):
        assert _age_on(datetime.date(1980, 6, 15), datetime.date(2026, 6, 15)) == 46

    def test_unknown(self):
        assert _age_on(None, AS_OF) == 0


class TestBaselineVmax:
    def test_empty(self):
        assert baseline_vmax([]) == 0.0

    def test_excludes_today(self):
        activities = [
            _make_activity(AS_OF, 9.0),
            _make_activity(_days_ago(2), 10.0),
            _make_activity(_days_ago(4), 10.4),
        ]
        assert baseline_vmax(activities) == pytest.approx(10.2)

    def test_only_today(self):
        assert baseline_vmax([_make_activity(AS_OF, 9.0)]) == 9.0

    def test_ignores_zero_peaks(self):
        activities = [_make_activity(AS_OF, 9.0), _make_activity(_days_ago(1), 0.0)]
        assert baseline_vmax(activities) == 9.0

    def test_count_limits_window(self):
        activities = [
            _make_activity(AS_OF, 9.0),
            _make_activity(_days_ago(1), 10.0),
            _make_activity(_days_ago(2), 6.0),
        ]
        assert baseline_vmax(activities, count=1) == 10.0


class TestHrvSignal:
    def test_newest_against_average(self):
        wellness = [
            _make_wellness(AS_OF, 55.0),
            _make_wellness(_days_ago(1), 60.0),
            _make_wellness(_days_ago(2), 65.0),
        ]
        signal = _hrv_signal(wellness)
        assert signal.current_hrv == 55.0
        assert signal.avg_hrv_7d == pytest.approx(60.0)

    def test_no_entries_uses_default(self):
        signal = _hrv_signal([], default=62.0)
        assert signal.current_hrv == 62.0
        assert signal.avg_hrv_7d == 62.0

    def test_missing_latest_reading(self):
        wellness = [_make_wellness(AS_OF), _make_wellness(_days_ago(1), 70.0)]
        signal = _hrv_signal(wellness, default=60.0)
        assert signal.current_hrv == 60.0
        assert signal.avg_hrv_7d == 70.0

    def test_window(self):
        wellness = [_make_wellness(_days_ago(i), 50.0 + i) for i in range(10)]
        assert _hrv_signal(wellness, window=2).avg_hrv_7d == pytest.approx(50.5)


class TestTsb:
    def test_fitness_minus_fatigue(self):
        assert _tsb(_make_activity(AS_OF, 9.0, ctl=50.0, atl=55.0)) == -5.0

    def test_no_activity(self):
        assert _tsb(None) == 0.0


class TestBodyWeight:
    def test_athlete_record_first(self):
        athlete = Athlete(name="A", weight_kg=80.0)
        assert _body_weight(athlete, [_make_wellness(AS_OF, weight=78.0)]) == 80.0

    def test_falls_back_to_wellness(self):
        athlete = Athlete(name="A")
        wellness = [_make_wellness(AS_OF), _make_wellness(_days_ago(1), weight=78.0)]
        assert _body_weight(athlete, wellness) == 78.0

    def test_unknown(self):
        assert _body_weight(Athlete(name="A"), []) is None


class TestSprintEvents:
    def test_filters_and_sorts(self):
        records = [
            _make_event(30, 200, name="Regionals"),
            _make_event(10, 100, name="Club Night"),
            _make_event(12, 800),
            _make_event(14, 200, type_="Ride"),
            _make_event(16, None),
        ]
        events = _sprint_events(records, AS_OF)
        assert [e.name for e in events] == ["Club Night", "Regionals"]
        assert [e.days_until for e in events] == [10, 30]
        assert events[0].id == "10"

    def test_name_fallback(self):
        events = _sprint_events([_make_event(5, 400, name="")], AS_OF)
        assert events[0].name == "400m Race"

    def test_custom_limit(self):
        events = _sprint_events([_make_event(5, 400)], AS_OF, max_distance_m=300)
        assert events == []


class TestDayLabel:
    def test_format(self):
        assert _day_label(datetime.date(2026, 3, 5)) == "5 Mar"
        assert _day_label(datetime.date(2026, 12, 31)) == "31 Dec"


# ======================================================================
# Daily series
# ======================================================================


class TestDailySeries:
    def test_one_point_per_day_oldest_first(self):
        activities = [
            _make_activity(AS_OF, 9.5, ctl=50.0, atl=45.0),
            _make_activity(_days_ago(2), 10.0, ctl=50.0, atl=60.0),
        ]
        series = _daily_series(activities, [], 10.0, 60.0, 30, AS_OF, days=4)

        assert [p.date for p in series] == [_days_ago(3), _days_ago(2), _days_ago(1), AS_OF]
        assert [p.fatigue_index for p in series] == [None, 1.0, None, 0.95]
        assert [p.tsb for p in series] == [None, -10.0, -10.0, 5.0]
        assert series[-1].day_label == "10 May"

    def test_recovery_hours_never_below_base(self):
        activities = [_make_activity(_days_ago(1), 9.0, ctl=40.0, atl=70.0)]
        wellness = [_make_wellness(_days_ago(1), 40.0), _make_wellness(_days_ago(3), 60.0)]
        series = _daily_series(activities, wellness, 10.0, 55.0, 45, AS_OF, days=5)
        assert len(series) == 5
        assert all(p.recovery_hours >= 48 for p in series)

    def test_fatigued_day_needs_longer_recovery(self):
        activities = [
            _make_activity(AS_OF, 8.5, ctl=40.0, atl=70.0),
            _make_activity(_days_ago(1), 10.0, ctl=60.0, atl=50.0),
        ]
        series = _daily_series(activities, [], 10.0, 60.0, 45, AS_OF, days=2)
        assert series[-1].recovery_hours > series[0].recovery_hours

    def test_no_baseline(self):
        series = _daily_series([_make_activity(AS_OF, 9.0)], [], 0.0, 60.0, 30, AS_OF, days=1)
        assert series[0].fatigue_index is None
