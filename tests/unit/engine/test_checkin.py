"""Tests for the morning check-in."""

import datetime

from sprintlab.engine.checkin import assess_check_in, is_rsi_dropping
from sprintlab.schemas.recovery import MorningCheckIn


def _make_check_in(**overrides) -> MorningCheckIn:
    """A check-in with every reading in range."""
    defaults = {
        "date": datetime.date(2026, 5, 1),
        "grip_score": "ok",
        "tap_test_ratio": 1.0,
        "muscle_feeling": "normal",
        "morning_stiffness_cleared": True,
    }
    defaults.update(overrides)
    return MorningCheckIn(**defaults)


class TestAssessCheckIn:
    def test_all_clear(self):
        result = assess_check_in(_make_check_in())
        assert result.overall_status == "ready"
        assert result.red_flags == []
        assert result.neural_score == 100
        assert result.recommendations == [
            "All systems ready. Proceed with planned session at full intensity."
        ]

    def test_single_flag_is_caution(self):
        result = assess_check_in(_make_check_in(grip_score="reduced"))
        assert result.overall_status == "caution"
        assert result.neural_score == 75
        assert len(result.red_flags) == 1
        assert result.red_flags[0].startswith("Grip strength reduced")

    def test_tap_test_drop_percent(self):
        result = assess_check_in(_make_check_in(tap_test_ratio=0.80))
        assert result.red_flags == [
            "Tap test 20% below baseline — CNS firing rate suppressed"
        ]
        assert result.recommendations == [
            "Cut sprint volume by 50%. Prioritise breathing and tempo only."
        ]

    def test_tap_test_threshold_not_flagged(self):
        result = assess_check_in(_make_check_in(tap_test_ratio=0.85))
        assert result.overall_status == "ready"

    def test_twitchy_is_not_a_flag(self):
        result = assess_check_in(_make_check_in(muscle_feeling="twitchy"))
        assert result.overall_status == "ready"

    def test_two_flags_reduce_volume(self):
        result = assess_check_in(
            _make_check_in(morning_stiffness_cleared=False, muscle_feeling="heavy")
        )
        assert result.overall_status == "reduce-volume"
        assert result.neural_score == 50
        assert len(result.recommendations) == 2

    def test_all_flags(self):
        result = assess_check_in(_make_check_in(
            grip_score="reduced",
            tap_test_ratio=0.5,
            morning_stiffness_cleared=False,
            muscle_feeling="heavy",
        ))
        assert result.overall_status == "reduce-volume"
        assert result.neural_score == 0
        assert len(result.red_flags) == 4


class TestRsiDrop:
    def test_below_ninety_percent(self):
        assert is_rsi_dropping(0.89, 1.0) is True

    def test_at_ninety_percent(self):
        assert is_rsi_dropping(0.9, 1.0) is False

    def test_above_baseline(self):
        assert is_rsi_dropping(2.5, 2.0) is False
