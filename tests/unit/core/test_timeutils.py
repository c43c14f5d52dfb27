"""Tests for UTC helpers and the timestamp defaults of the table models."""

import datetime

import pytest

from sprintlab.core.timeutils import day_bounds, utc_now
from sprintlab.models.activity import Activity
from sprintlab.models.athlete import Athlete
from sprintlab.models.race_event import RaceEventRecord
from sprintlab.models.wellness import WellnessEntry

UTC = datetime.timezone.utc


class TestUtcNow:
    def test_is_aware_utc(self):
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == datetime.timedelta(0)


class TestDayBounds:
    def test_spans_whole_days(self):
        start, end = day_bounds(datetime.date(2026, 3, 1), datetime.date(2026, 5, 10))
        assert start == datetime.datetime(2026, 3, 1, tzinfo=UTC)
        assert end == datetime.datetime(2026, 5, 10, 23, 59, 59, 999999, tzinfo=UTC)

    def test_single_day(self):
        start, end = day_bounds(datetime.date(2026, 5, 10), datetime.date(2026, 5, 10))
        assert start.date() == end.date() == datetime.date(2026, 5, 10)
        assert start.tzinfo is UTC and end.tzinfo is UTC


class TestModelTimestamps:
    @pytest.mark.parametrize(
        "instance",
        [
            Athlete(name="A"),
            Activity(athlete_id=1, start_time=datetime.datetime(2026, 5, 10, tzinfo=UTC)),
            WellnessEntry(athlete_id=1, date=datetime.date(2026, 5, 10)),
            RaceEventRecord(athlete_id=1, name="Club 100m", date=datetime.date(2026, 5, 20), distance_m=100),
        ],
        ids=["athlete", "activity", "wellness", "race_event"],
    )
    def test_defaults_are_aware(self, instance):
        assert instance.created_at.tzinfo is not None
        assert instance.updated_at.tzinfo is not None
        assert instance.created_at.utcoffset() == datetime.timedelta(0)
