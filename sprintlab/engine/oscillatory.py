"""
Oscillatory-isometric (OI) progression.

Three phases, chosen by training week:

    weeks 1–2   catch-and-hold    eccentric "brakes", tendon stiffness
    week 3      rapid-pulses      on/off switching at 3 Hz or faster
    week 4+     reactive-switch   drop into oscillation

OI work is neurally demanding: it goes after plyometrics and before heavy
strength.  A pulse rate under 3 Hz means the set is training fatigue, not
speed-strength, and the set ends there.  After the session the athlete
rates how fluid the pulses felt on a 1–10 scale.
"""

from __future__ import annotations

from typing import Optional

from sprintlab.engine.utils import clamp, round_half_up
from sprintlab.schemas.periodization import (
    OIExercise,
    OIFeedbackResult,
    OIPhaseName,
    OIPhaseNumber,
    OIProtocol,
    RelaxationAssessment,
)

MIN_PULSE_RATE_HZ = 3.0

_PHASE_NUMBERS: dict[OIPhaseName, OIPhaseNumber] = {
    "catch-and-hold": 1,
    "rapid-pulses": 2,
    "reactive-switch": 3,
}

# ======================================================================
# Exercise catalog
# ======================================================================

OI_EXERCISES: dict[OIPhaseName, tuple[OIExercise, ...]] = {
    "catch-and-hold": (
        OIExercise(
            name="Isometric Split Squat Hold",
            benefit='Tendon stiffness accumulation — builds eccentric "brakes"',
            focus_area="Hip flexor / extensor switch",
            sets=3,
            duration="3×15s progressive hold at 70% effort",
            cue="Drop to full depth, absorb instantly, hold without wavering. "
                "Time to stabilisation is the metric.",
            phase=1,
        ),
        OIExercise(
            name="Ankle Bounce + Pause",
            benefit="Achilles tendon loading — accumulates connective tissue stress",
            focus_area="Achilles / calf complex",
            sets=3,
            duration="3×10 bounces then 5s hold",
            cue="Land softly, feel the spring load, pause at lowest point. "
                "Heel should not fully contact floor.",
            phase=1,
        ),
        OIExercise(
            name="Wall Hip Flexor Press",
            benefit="Hip flexor elastic strength — mirrors sprint stance phase",
            focus_area="Iliopsoas",
            sets=2,
            duration="2×20s pressing knee into wall at full hip flexion",
            cue="Press knee into wall, shoulder-width stance, breath out on hold. "
                "Never push through sharp pain.",
            phase=1,
        ),
    ),
    "rapid-pulses": (
        OIExercise(
            name="OI Split Squat — Rapid Pulses",
            benefit="Rate-of-force development at sprint stance angles",
            focus_area="Hip flexor / extensor switch",
            sets=3,
            duration='3 sets of 10 seconds of 1–2" pulses per limb',
            cue="Think guitar string vibrating. Pulses should be as fast as possible. "
                "Set terminates if speed slows.",
            phase=2,
        ),
        OIExercise(
            name="Pogo Pulse Jumps",
            benefit="Ground contact stiffness — pure ankle elasticity",
            focus_area="Ankle / calf complex",
            sets=3,
            duration="3×8 rapid pogos then 4s pause",
            cue="Minimal ground time. Pure ankle spring — no knee bend permitted. Rhythm is queen.",
            phase=2,
        ),
        OIExercise(
            name="OI RDL — Single Leg Pulses",
            benefit="Hamstring ability to fire-and-relax during high-speed leg turnover",
            focus_area="Posterior chain elasticity",
            sets=3,
            duration="3×10s pulses in mid-range at 80% effort",
            cue="Hold TRX or post at pelvis height. Pulse in the lengthened range only — "
                "shoulder stays tall.",
            phase=2,
        ),
    ),
    "reactive-switch": (
        OIExercise(
            name="Drop-Catch Depth Jump",
            benefit="Reactive strength index development",
            focus_area="Full kinetic chain",
            sets=3,
            duration="3×5 — drop from 20cm box, catch and immediately jump",
            cue='Zero dwell time on landing — think "hot floor". Measure jump height each rep.',
            phase=3,
        ),
        OIExercise(
            name="Explosive Hip Flexor Switch",
            benefit="Sprinting hip drive and antagonist relaxation",
            focus_area="Hip flexors and extensors",
            sets=3,
            duration="3×6 per side at maximum switch speed",
            cue="Drive front knee up aggressively while pushing rear foot down. "
                "Each switch < 1 second.",
            phase=3,
        ),
        OIExercise(
            name="OI Push-Up Rapid Pulse",
            benefit="Upper body fascial sling — arm-punch and shoulder stability",
            focus_area="Upper body fascial sling",
            sets=3,
            duration="3×8s rapid pulses at bottom of push-up position",
            cue='Hold bottom of push-up. Pulse 1–2" as fast as possible. '
                "Elbows stay loaded throughout.",
            phase=3,
        ),
    ),
}

# ======================================================================
# Relaxation score table
# ======================================================================

# (lowest score, label, adequate, assessment), highest band first
_RELAXATION_BANDS: tuple[tuple[int, str, bool, str], ...] = (
    (9, "Excellent", True,
     "CNS is primed. Execute full protocol and consider a test effort or block-start today."),
    (7, "Good", True,
     "Full protocol. Push pulse quality and speed in final sets."),
    (5, "Adequate", True,
     "Proceed with full protocol at moderate effort. Reserve 1 set in the tank."),
    (4, "Borderline", False,
     "Proceed cautiously with reduced OI sets. Stop if pulses feel sluggish or sticky."),
    (3, "Low", False,
     "Below optimal. Cut OI sets in half. Monitor pulse quality carefully and stop any set that slows."),
    (1, "Poor", False,
     "Significant neural inhibition detected. Replace OI today with 90/90 breathing "
     "and light mobilisation."),
)


def oi_phase(week: int) -> OIPhaseName:
    """Named OI phase for a training week (1-based)."""
    if week <= 2:
        return "catch-and-hold"
    if week == 3:
        return "rapid-pulses"
    return "reactive-switch"


def oi_phase_number(week: int) -> OIPhaseNumber:
    return _PHASE_NUMBERS[oi_phase(week)]


def oi_exercises(phase: OIPhaseName) -> list[OIExercise]:
    return list(OI_EXERCISES[phase])


def oi_protocol(week: int) -> OIProtocol:
    phase = oi_phase(week)
    return OIProtocol(
        week=week,
        phase=phase,
        phase_number=_PHASE_NUMBERS[phase],
        exercises=oi_exercises(phase),
    )


def relaxation_assessment(score: float) -> RelaxationAssessment:
    """Interpret a self-reported pulse fluidity score.

    The score is rounded half-up and clamped to 1–10 first, so out-of-range
    input maps to the nearest band.
    """
    clamped = int(clamp(round_half_up(score), 1, 10))
    for lowest, label, adequate, assessment in _RELAXATION_BANDS:
        if clamped >= lowest:
            break
    return RelaxationAssessment(
        score=clamped, label=label, assessment=assessment, is_adequate=adequate,
    )


def is_velocity_loss_fatigue(pulses_per_second: float) -> bool:
    """True when the oscillation rate has dropped below 3 Hz."""
    return pulses_per_second < MIN_PULSE_RATE_HZ


def assess_oi_feedback(relaxation_score: float, pulses_per_second: Optional[float] = None) -> OIFeedbackResult:
    fatigue = None if pulses_per_second is None else is_velocity_loss_fatigue(pulses_per_second)
    return OIFeedbackResult(
        relaxation=relaxation_assessment(relaxation_score),
        velocity_loss_fatigue=fatigue,
    )
