"""Tests for the training profile builder."""

import pytest

from sprintlab.engine.profile import build_training_profile
from sprintlab.schemas.interval import IntervalClass, TrackInterval


def _make_interval(
    classification: IntervalClass,
    distance: int,
    duration: int,
    flying: float = 0.0,
    peak: float = 10.0,
) -> TrackInterval:
    return TrackInterval(
        classification=classification,
        distance_m=distance,
        peak_velocity=peak,
        duration_s=duration,
        flying_velocity=flying,
    )


class TestBuildTrainingProfile:
    def test_empty_input(self):
        profile = build_training_profile([], 10.0)
        assert profile.speed_endurance_index == 0.0
        assert profile.best_flying_velocity == 0.0
        assert profile.avg_acceleration_time_s == 0.0
        assert profile.endurance_interval_count == 0
        assert profile.acceleration_interval_count == 0

    def test_speed_endurance_index(self):
        intervals = [
            _make_interval(IntervalClass.SPEED_ENDURANCE, 100, 12),
            _make_interval(IntervalClass.SPECIAL_ENDURANCE, 200, 25),
        ]
        profile = build_training_profile(intervals, 10.0)
        # (100/12/10 + 200/25/10) / 2
        assert profile.speed_endurance_index == pytest.approx((0.83333 + 0.8) / 2, abs=1e-4)
        assert profile.endurance_interval_count == 2

    def test_zero_peak_gives_zero_index(self):
        intervals = [_make_interval(IntervalClass.SPEED_ENDURANCE, 100, 12)]
        assert build_training_profile(intervals, 0.0).speed_endurance_index == 0.0

    def test_best_flying_velocity_across_classes(self):
        intervals = [
            _make_interval(IntervalClass.ACCELERATION, 30, 4, flying=8.9),
            _make_interval(IntervalClass.MAX_VELOCITY, 60, 7, flying=9.6),
            _make_interval(IntervalClass.SPEED_ENDURANCE, 120, 14, flying=9.3),
        ]
        assert build_training_profile(intervals, 10.0).best_flying_velocity == 9.6

    def test_average_acceleration_time(self):
        intervals = [
            _make_interval(IntervalClass.ACCELERATION, 30, 4),
            _make_interval(IntervalClass.ACCELERATION, 35, 5),
            _make_interval(IntervalClass.MAX_VELOCITY, 60, 7),
        ]
        profile = build_training_profile(intervals, 10.0)
        assert profile.avg_acceleration_time_s == pytest.approx(4.5)
        assert profile.acceleration_interval_count == 2
        assert profile.endurance_interval_count == 0

    def test_accepts_generator(self):
        intervals = (
            _make_interval(IntervalClass.ACCELERATION, 30, 4, flying=8.0) for _ in range(3)
        )
        profile = build_training_profile(intervals, 10.0)
        assert profile.acceleration_interval_count == 3
        assert profile.best_flying_velocity == 8.0
