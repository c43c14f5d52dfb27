"""Tests for readiness scoring: fatigue index, recovery score and window."""

import pytest

from sprintlab.engine.readiness import (
    assess_readiness,
    fatigue_index,
    freshness_adjusted_recovery_score,
    is_stale_signal,
    recovery_score,
    recovery_window_hours,
    smart_recovery_window,
    status_band,
)
from sprintlab.engine.utils import clamp, round_half_up
from sprintlab.schemas.readiness import HRVSignal, StatusBand


def _baseline_hrv() -> HRVSignal:
    return HRVSignal(current_hrv=60.0, avg_hrv_7d=60.0)


# ======================================================================
# Helpers
# ======================================================================


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (82.5, 83), (2.49, 2), (0.0, 0)],
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected


class TestClamp:
    def test_inside(self):
        assert clamp(5, 0, 10) == 5

    def test_bounds(self):
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10


# ======================================================================
# Fatigue index
# ======================================================================


class TestFatigueIndex:
    def test_no_baseline_is_neutral(self):
        assert fatigue_index(9.0, 0.0) == 1.0
        assert fatigue_index(9.0, -1.0) == 1.0

    def test_equal_peaks(self):
        assert fatigue_index(9.5, 9.5) == 1.0

    def test_ratio_rounded(self):
        assert fatigue_index(9.0, 10.0) == 0.9
        assert fatigue_index(2.0, 3.0) == 0.667

    def test_monotonic_in_current_peak(self):
        assert fatigue_index(9.0, 10.0) < fatigue_index(9.5, 10.0) < fatigue_index(10.5, 10.0)


class TestStatusBand:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.05, StatusBand.GREEN),
            (0.971, StatusBand.GREEN),
            (0.97, StatusBand.AMBER),
            (0.95, StatusBand.AMBER),
            (0.94, StatusBand.AMBER),
            (0.939, StatusBand.RED),
            (0.80, StatusBand.RED),
        ],
    )
    def test_bands(self, value, expected):
        assert status_band(value) == expected


# ======================================================================
# Recovery score and window
# ======================================================================


class TestRecoveryScore:
    def test_ceiling_at_baseline_hrv(self):
        # 37.5 + 30 + 25 = 92.5, rounded half up
        assert recovery_score(_baseline_hrv(), 20.0, 1.0) == 93

    def test_maximum(self):
        hrv = HRVSignal(current_hrv=72.0, avg_hrv_7d=60.0)
        assert recovery_score(hrv, 30.0, 1.05) == 100

    def test_floor(self):
        hrv = HRVSignal(current_hrv=30.0, avg_hrv_7d=60.0)
        assert recovery_score(hrv, -40.0, 0.80) == 0

    def test_missing_hrv_average_is_neutral(self):
        hrv = HRVSignal(current_hrv=50.0, avg_hrv_7d=0.0)
        assert recovery_score(hrv, 20.0, 1.0) == 93

    def test_always_in_range(self):
        for tsb in (-100.0, -20.0, 0.0, 20.0, 100.0):
            for fi in (0.0, 0.9, 1.0, 2.0):
                assert 0 <= recovery_score(_baseline_hrv(), tsb, fi) <= 100


class TestRecoveryWindowHours:
    def test_age_45_full_score(self):
        assert recovery_window_hours(45, 100) == 78

    def test_age_45_zero_score(self):
        assert recovery_window_hours(45, 0) == 126

    def test_age_45_half_score(self):
        assert recovery_window_hours(45, 50) == 102

    def test_no_age_tax_under_40(self):
        assert recovery_window_hours(35, 100) == 48

    def test_never_below_base(self):
        for age in (0, 20, 40, 60):
            assert recovery_window_hours(age, 100) >= 48


# ======================================================================
# Stale signal
# ======================================================================


class TestStaleSignal:
    def test_red_with_positive_tsb(self):
        assert is_stale_signal(StatusBand.RED, 5.0) is True

    def test_amber_with_zero_tsb(self):
        assert is_stale_signal(StatusBand.AMBER, 0.0) is True

    def test_red_with_negative_tsb(self):
        assert is_stale_signal(StatusBand.RED, -10.0) is False

    def test_green_is_never_stale(self):
        assert is_stale_signal(StatusBand.GREEN, 5.0) is False


class TestSmartRecoveryWindow:
    def test_stale_signal_neutralises_fatigue_penalty(self):
        # Age 49, HRV at baseline, TSB +2, NFI 0.92
        assert recovery_score(_baseline_hrv(), 2.0, 0.92) == 59
        assert recovery_window_hours(49, 59) == 122

        window = smart_recovery_window(49, _baseline_hrv(), 2.0, 0.92)
        assert window.is_stale_signal is True
        assert window.recovery_score == 79
        assert window.hours == 112

    def test_no_adjustment_when_fatigued(self):
        adjusted = freshness_adjusted_recovery_score(_baseline_hrv(), -5.0, 0.92)
        assert adjusted == recovery_score(_baseline_hrv(), -5.0, 0.92)

        window = smart_recovery_window(49, _baseline_hrv(), -5.0, 0.92)
        assert window.is_stale_signal is False

    def test_green_band_unchanged(self):
        adjusted = freshness_adjusted_recovery_score(_baseline_hrv(), 5.0, 0.99)
        assert adjusted == recovery_score(_baseline_hrv(), 5.0, 0.99)


# ======================================================================
# assess_readiness
# ======================================================================


class TestAssessReadiness:
    def test_fatigued_athlete(self):
        state = assess_readiness(9.0, 10.0, _baseline_hrv(), -5.0, 45)
        assert state.fatigue_index == 0.9
        assert state.status_band == StatusBand.RED
        assert state.is_stale_signal is False
        assert state.recovery_score == state.raw_recovery_score
        assert state.recovery_window_hours == recovery_window_hours(45, state.recovery_score)

    def test_stale_athlete(self):
        state = assess_readiness(9.2, 10.0, _baseline_hrv(), 2.0, 49)
        assert state.status_band == StatusBand.RED
        assert state.is_stale_signal is True
        assert state.recovery_score > state.raw_recovery_score

    def test_no_baseline(self):
        state = assess_readiness(9.0, 0.0, _baseline_hrv(), 0.0, 30)
        assert state.fatigue_index == 1.0
        assert state.status_band == StatusBand.GREEN
