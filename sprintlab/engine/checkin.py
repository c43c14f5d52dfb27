"""
Morning check-in.

Four quick readings are taken on waking; each one out of range is a red
flag with an attached recommendation:

    grip strength reduced              neural drive compromised
    tap-test ratio < 0.85              CNS firing rate suppressed
    stiffness not cleared              fascial dehydration / inflammation
    muscles feel heavy                 contractile fatigue

0 flags → ready, 1 → caution, 2+ → reduce-volume.
"""

from __future__ import annotations

from sprintlab.engine.utils import round_half_up
from sprintlab.schemas.recovery import CheckInResult, MorningCheckIn

TAP_TEST_THRESHOLD = 0.85
RSI_DROP_RATIO = 0.90
POINTS_PER_DIMENSION = 25


def grip_flag(check_in: MorningCheckIn) -> bool:
    return check_in.grip_score == "reduced"


def tap_test_flag(check_in: MorningCheckIn) -> bool:
    return check_in.tap_test_ratio < TAP_TEST_THRESHOLD


def stiffness_flag(check_in: MorningCheckIn) -> bool:
    return not check_in.morning_stiffness_cleared


def muscle_flag(check_in: MorningCheckIn) -> bool:
    return check_in.muscle_feeling == "heavy"


def is_rsi_dropping(current_rsi: float, baseline_rsi: float) -> bool:
    """True when reactive strength is below 90 % of its baseline."""
    return current_rsi < baseline_rsi * RSI_DROP_RATIO


def assess_check_in(check_in: MorningCheckIn) -> CheckInResult:
    """Score a morning check-in."""
    red_flags: list[str] = []
    recommendations: list[str] = []

    if grip_flag(check_in):
        red_flags.append("Grip strength reduced — neural drive to hand/forearm compromised")
        recommendations.append("Avoid max-effort sprints. Replace with OI catch-and-hold protocol.")

    if tap_test_flag(check_in):
        drop = round_half_up((1 - check_in.tap_test_ratio) * 100)
        red_flags.append(f"Tap test {drop}% below baseline — CNS firing rate suppressed")
        recommendations.append("Cut sprint volume by 50%. Prioritise breathing and tempo only.")

    if stiffness_flag(check_in):
        red_flags.append(
            "Morning stiffness has not cleared — fascial dehydration or inflammation present"
        )
        recommendations.append(
            "Add 15 min hot shower before training. Delay session by 90 minutes if possible."
        )

    if muscle_flag(check_in):
        red_flags.append("Muscle tone heavy — accumulated fatigue in contractile tissue")
        recommendations.append(
            "Downgrade to recovery modalities: extensive tempo or hydrotherapy only."
        )

    if not red_flags:
        status = "ready"
        recommendations.append("All systems ready. Proceed with planned session at full intensity.")
    elif len(red_flags) == 1:
        status = "caution"
    else:
        status = "reduce-volume"

    healthy = 4 - len(red_flags)
    return CheckInResult(
        overall_status=status,
        red_flags=red_flags,
        recommendations=recommendations,
        neural_score=healthy * POINTS_PER_DIMENSION,
    )
