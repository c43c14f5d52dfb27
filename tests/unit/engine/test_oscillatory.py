"""Tests for the oscillatory-isometric progression."""

import pytest

from sprintlab.engine.oscillatory import (
    OI_EXERCISES,
    assess_oi_feedback,
    is_velocity_loss_fatigue,
    oi_exercises,
    oi_phase,
    oi_phase_number,
    oi_protocol,
    relaxation_assessment,
)


# ======================================================================
# Phase selection
# ======================================================================


class TestOIPhase:
    @pytest.mark.parametrize(
        "week, phase, number",
        [
            (1, "catch-and-hold", 1),
            (2, "catch-and-hold", 1),
            (3, "rapid-pulses", 2),
            (4, "reactive-switch", 3),
            (9, "reactive-switch", 3),
        ],
    )
    def test_phase_by_week(self, week, phase, number):
        assert oi_phase(week) == phase
        assert oi_phase_number(week) == number

    def test_protocol(self):
        protocol = oi_protocol(3)
        assert protocol.phase == "rapid-pulses"
        assert protocol.phase_number == 2
        assert [e.name for e in protocol.exercises] == [
            "OI Split Squat — Rapid Pulses",
            "Pogo Pulse Jumps",
            "OI RDL — Single Leg Pulses",
        ]


class TestOIExercises:
    @pytest.mark.parametrize(
        "phase, number",
        [("catch-and-hold", 1), ("rapid-pulses", 2), ("reactive-switch", 3)],
    )
    def test_three_per_phase_tagged_with_phase(self, phase, number):
        exercises = OI_EXERCISES[phase]
        assert len(exercises) == 3
        assert {e.phase for e in exercises} == {number}

    def test_returns_copy(self):
        exercises = oi_exercises("catch-and-hold")
        exercises.clear()
        assert len(oi_exercises("catch-and-hold")) == 3

    def test_wall_press_has_two_sets(self):
        wall = next(e for e in oi_exercises("catch-and-hold") if e.name == "Wall Hip Flexor Press")
        assert wall.sets == 2
        assert wall.focus_area == "Iliopsoas"


# ======================================================================
# Feedback
# ======================================================================


class TestRelaxationAssessment:
    @pytest.mark.parametrize(
        "score, label, adequate",
        [
            (1, "Poor", False),
            (2, "Poor", False),
            (3, "Low", False),
            (4, "Borderline", False),
            (5, "Adequate", True),
            (6, "Adequate", True),
            (7, "Good", True),
            (8, "Good", True),
            (9, "Excellent", True),
            (10, "Excellent", True),
        ],
    )
    def test_bands(self, score, label, adequate):
        result = relaxation_assessment(score)
        assert result.score == score
        assert result.label == label
        assert result.is_adequate is adequate

    @pytest.mark.parametrize("score, expected", [(0, 1), (-3, 1), (14, 10), (4.5, 5), (4.49, 4)])
    def test_rounded_and_clamped(self, score, expected):
        assert relaxation_assessment(score).score == expected

    def test_poor_replaces_session(self):
        assert "90/90 breathing" in relaxation_assessment(1).assessment


class TestVelocityLoss:
    @pytest.mark.parametrize("rate, fatigued", [(2.9, True), (0.0, True), (3.0, False), (4.5, False)])
    def test_threshold(self, rate, fatigued):
        assert is_velocity_loss_fatigue(rate) is fatigued

    def test_feedback_without_rate(self):
        result = assess_oi_feedback(7)
        assert result.relaxation.label == "Good"
        assert result.velocity_loss_fatigue is None

    def test_feedback_with_slow_rate(self):
        result = assess_oi_feedback(8, pulses_per_second=2.5)
        assert result.velocity_loss_fatigue is True
