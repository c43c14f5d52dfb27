"""Tests for the velocity-stream interval parser.

Pure unit tests: streams are plain lists of per-second samples.
"""

import pytest

from sprintlab.engine.intervals import (
    ParserConfig,
    classify_distance,
    parse_sessions,
    parse_track_session,
)
from sprintlab.schemas.interval import IntervalClass


# ======================================================================
# Classification
# ======================================================================


class TestClassifyDistance:
    @pytest.mark.parametrize(
        "distance, expected",
        [
            (10, IntervalClass.ACCELERATION),
            (40, IntervalClass.ACCELERATION),
            (40.5, IntervalClass.MAX_VELOCITY),
            (80, IntervalClass.MAX_VELOCITY),
            (81, IntervalClass.SPEED_ENDURANCE),
            (150, IntervalClass.SPEED_ENDURANCE),
            (151, IntervalClass.SPECIAL_ENDURANCE),
            (400, IntervalClass.SPECIAL_ENDURANCE),
        ],
    )
    def test_band_boundaries(self, distance, expected):
        assert classify_distance(distance) == expected


# ======================================================================
# parse_track_session
# ======================================================================


class TestParseTrackSession:
    def test_single_short_acceleration(self):
        stream = [0, 0.5, 2, 5, 7.5, 9, 9.2, 3, 0.5, 0]
        intervals = parse_track_session(stream)

        assert len(intervals) == 1
        rep = intervals[0]
        assert rep.classification == IntervalClass.ACCELERATION
        assert rep.distance_m == 36
        assert rep.distance_m <= 40
        assert rep.duration_s == 6
        assert rep.peak_velocity == 9.2
        assert rep.flying_velocity == pytest.approx(8.57)

    def test_empty_stream(self):
        assert parse_track_session([]) == []

    def test_missing_stream(self):
        assert parse_track_session(None) == []

    def test_standing_only(self):
        assert parse_track_session([0, 0.2, 0.9, 0.5]) == []

    def test_short_burst_is_discarded(self):
        # 7 m total, below the 10 m minimum
        assert parse_track_session([0, 2, 3, 2, 0]) == []

    def test_threshold_sample_counts_as_moving(self):
        intervals = parse_track_session([1.0] * 12)
        assert len(intervals) == 1
        assert intervals[0].duration_s == 12
        assert intervals[0].distance_m == 12

    def test_burst_open_at_end_is_closed(self):
        intervals = parse_track_session([0, 9, 9, 9])
        assert len(intervals) == 1
        assert intervals[0].distance_m == 27

    def test_multiple_reps_in_order(self):
        stream = [5.0] * 8 + [0.0, 0.0] + [8.0] * 9 + [0.3] + [9.0] * 12
        intervals = parse_track_session(stream)

        assert [i.classification for i in intervals] == [
            IntervalClass.ACCELERATION,
            IntervalClass.MAX_VELOCITY,
            IntervalClass.SPEED_ENDURANCE,
        ]
        assert [i.distance_m for i in intervals] == [40, 72, 108]

    def test_flying_velocity_short_burst(self):
        """Bursts under 3 samples average over their own length."""
        intervals = parse_track_session([10.0, 11.0])
        assert intervals[0].flying_velocity == pytest.approx(10.5)

    def test_flying_velocity_is_best_window(self):
        intervals = parse_track_session([6.0, 8.0, 10.0, 10.0, 10.0, 7.0])
        assert intervals[0].flying_velocity == pytest.approx(10.0)
        assert intervals[0].peak_velocity == 10.0

    def test_custom_min_rep_distance(self):
        cfg = ParserConfig(min_rep_distance=30.0)
        assert parse_track_session([9, 9, 9], cfg) == []

    def test_custom_moving_threshold(self):
        cfg = ParserConfig(moving_threshold=3.0)
        intervals = parse_track_session([2.5, 4, 4, 4, 2.5], cfg)
        assert len(intervals) == 1
        assert intervals[0].duration_s == 3


# ======================================================================
# parse_sessions
# ======================================================================


class TestParseSessions:
    def test_concatenates_in_order(self):
        intervals = parse_sessions([[9.0] * 4, None, [], [8.0] * 10])
        assert [i.distance_m for i in intervals] == [36, 80]

    def test_no_sessions(self):
        assert parse_sessions([]) == []
