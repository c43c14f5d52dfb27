"""
Sprint workout selection from the fatigue-index band.

    green  (NFI > 97 %)    max-velocity session — block starts, flying 30s, 60 m reps
    amber  (94–97 %)       technical session — drills and short accelerations
    red    (NFI < 94 %)    recovery — no sprinting

When a training stress balance is supplied and the signal is stale
(amber/red band with TSB ≥ 0), the band is overridden by a controlled
re-activation session: the athlete is fresh, the low peak is detraining,
and resting further would only deepen it.
"""

from __future__ import annotations

from typing import Optional

from sprintlab.engine.readiness import is_stale_signal
from sprintlab.schemas.prescription import SprintBlock, SprintContext, SprintWorkout
from sprintlab.schemas.readiness import StatusBand

_STATUS_LABELS = {
    StatusBand.GREEN: "🟢 GREEN",
    StatusBand.AMBER: "🟡 AMBER",
    StatusBand.RED: "🔴 RED",
}


def _pct(fatigue_idx: float) -> str:
    return f"{fatigue_idx * 100:.1f}%"


def format_description(
    status: StatusBand,
    fatigue_idx: float,
    warmup: list[str],
    main_set: list[SprintBlock],
    cooldown: list[str],
    volume: str,
) -> str:
    """Plain-text rendering of a session, ready to paste into a calendar."""
    lines = [
        "🏃 SprintLab Recommended Session",
        f"Status: {_STATUS_LABELS[status]} (NFI: {_pct(fatigue_idx)})",
        "",
        "WARM-UP",
        *(f"• {w}" for w in warmup),
        "",
        "MAIN SET",
        *(
            f"• {b.reps}× {b.name} — {b.distance} @ {b.intensity} | Rest: {b.rest}\n  → {b.cue}"
            for b in main_set
        ),
        "",
        "COOL-DOWN",
        *(f"• {c}" for c in cooldown),
        "",
        f"Total Sprint Volume: {volume}",
    ]
    return "\n".join(lines)


def _workout(
    name: str,
    status: StatusBand,
    fatigue_idx: float,
    rationale: str,
    warmup: list[str],
    main_set: list[SprintBlock],
    cooldown: list[str],
    volume: str,
    volume_label: str,
) -> SprintWorkout:
    return SprintWorkout(
        name=name,
        status=status,
        rationale=rationale,
        warmup=warmup,
        main_set=main_set,
        cooldown=cooldown,
        total_sprint_volume=volume_label,
        description=format_description(status, fatigue_idx, warmup, main_set, cooldown, volume),
    )


# ======================================================================
# Sessions
# ======================================================================


def _max_velocity_session(fatigue_idx: float) -> SprintWorkout:
    return _workout(
        name="Max Velocity — Neural Priming Session",
        status=StatusBand.GREEN,
        fatigue_idx=fatigue_idx,
        rationale=(
            f"NFI at {_pct(fatigue_idx)} — CNS is fully primed. Today is a day for "
            "maximal speed work with full recovery between reps."
        ),
        warmup=[
            "10 min easy jog",
            "Dynamic stretching circuit (leg swings, walking lunges, high knees)",
            "3 × 60m progressive build-ups (60%, 75%, 90%)",
        ],
        main_set=[
            SprintBlock(
                name="Block Starts", reps=3, distance="30m",
                rest="3–4 min walk", intensity="100%",
                cue="Explosive first step, drive for 15m then transition to upright.",
            ),
            SprintBlock(
                name="Flying 30s", reps=3, distance="30m (20m run-in)",
                rest="4 min walk-back", intensity="100%",
                cue="Hit top speed in the run-in zone, maintain mechanics through the timing gates.",
            ),
            SprintBlock(
                name="Full 60m", reps=2, distance="60m from blocks",
                rest="5–6 min full recovery", intensity="95–100%",
                cue="Aggressive drive phase, upright by 30m, hold form to the line.",
            ),
        ],
        cooldown=[
            "10 min easy jog",
            "Static stretching — hamstrings, hip flexors, calves (30s holds)",
        ],
        volume="~300m",
        volume_label="~300m total sprint distance",
    )


def _technical_session(fatigue_idx: float) -> SprintWorkout:
    return _workout(
        name="Technical Sprint — CNS Management Session",
        status=StatusBand.AMBER,
        fatigue_idx=fatigue_idx,
        rationale=(
            f"NFI at {_pct(fatigue_idx)} — moderate CNS suppression. Focus on technical "
            "quality with reduced intensity. Keep total volume low."
        ),
        warmup=[
            "10 min easy jog",
            "Dynamic stretching circuit",
            "2 × 60m build-ups (60%, 80%)",
        ],
        main_set=[
            SprintBlock(
                name="Wicket Runs", reps=4, distance="20m (mini-hurdle spacing)",
                rest="2 min walk-back", intensity="Controlled",
                cue="Focus on cadence and front-side mechanics. Smooth, not forced.",
            ),
            SprintBlock(
                name="Short Accelerations", reps=3, distance="20m from 3-point stance",
                rest="3 min walk", intensity="90%",
                cue="Clean lines — shin angle, arm drive, no over-striding.",
            ),
            SprintBlock(
                name="A-Skip + B-Skip Complex", reps=3, distance="30m each drill",
                rest="90s walk-back", intensity="Technical",
                cue="Tall posture, active ground contact, rhythmic tempo.",
            ),
        ],
        cooldown=[
            "10 min easy jog",
            "Light stretching + foam roll",
        ],
        volume="~150m",
        volume_label="~150m sprint equivalent",
    )


def _recovery_session(fatigue_idx: float) -> SprintWorkout:
    return _workout(
        name="Recovery — Neural Restoration",
        status=StatusBand.RED,
        fatigue_idx=fatigue_idx,
        rationale=(
            f"NFI at {_pct(fatigue_idx)} — significant neural fatigue detected. No sprinting "
            "today. Focus on recovery to restore CNS readiness."
        ),
        warmup=["5 min easy walk"],
        main_set=[
            SprintBlock(
                name="Active Recovery Walk", reps=1, distance="15–20 min",
                rest="N/A", intensity="Very Low",
                cue="Easy pace, focus on breathing and relaxation.",
            ),
            SprintBlock(
                name="Dynamic Mobility Circuit", reps=2, distance="10 min total",
                rest="Continuous", intensity="Low",
                cue="Leg swings, hip circles, ankle mobilization. No ballistic movements.",
            ),
        ],
        cooldown=[
            "Foam rolling — quads, hamstrings, glutes (10 min)",
            "Gentle static stretching (optional)",
        ],
        volume="0m",
        volume_label="0m sprint distance",
    )


def _reactivation_session(fatigue_idx: float, tsb: float) -> SprintWorkout:
    sign = "+" if tsb > 0 else ""
    return _workout(
        name="Neural Re-Activation — Restore Sprint Speed",
        status=StatusBand.RED,
        fatigue_idx=fatigue_idx,
        rationale=(
            f"NFI at {_pct(fatigue_idx)} but TSB is {sign}{tsb:.1f} (fresh). Low Vmax is likely "
            "from detraining, not fatigue. This controlled re-activation session will "
            "restore neuromuscular coordination."
        ),
        warmup=[
            "10 min easy jog",
            "Dynamic stretching circuit (leg swings, walking lunges, high knees)",
            "4 × 60m progressive build-ups (50%, 65%, 80%, 90%)",
        ],
        main_set=[
            SprintBlock(
                name="Standing Accelerations", reps=3, distance="30m",
                rest="3 min walk-back", intensity="90–95%",
                cue="Smooth acceleration. Focus on shin angles and arm drive — no straining.",
            ),
            SprintBlock(
                name="Flying 20s", reps=3, distance="20m (15m run-in)",
                rest="3 min walk-back", intensity="93–97%",
                cue="Re-engage top-speed neural pathways. Relaxed face, fast feet, tall hips.",
            ),
            SprintBlock(
                name="Wicket Runs", reps=3, distance="20m (mini-hurdle spacing)",
                rest="2 min walk-back", intensity="Controlled",
                cue="Cadence and front-side mechanics. Reinforce stride pattern.",
            ),
        ],
        cooldown=[
            "10 min easy jog",
            "Static stretching — hamstrings, hip flexors, calves (30s holds)",
        ],
        volume="~150m",
        volume_label="~150m sprint distance",
    )


# ======================================================================
# Main entry point
# ======================================================================


def sprint_workout(
    band: StatusBand,
    fatigue_idx: float,
    context: Optional[SprintContext] = None,
) -> SprintWorkout:
    """Select today's track session.

    Args:
        band: Fatigue-index status band.
        fatigue_idx: Fatigue index, shown in the rationale.
        context: Training stress balance; enables the stale-signal override.
    """
    if context is not None and is_stale_signal(band, context.tsb):
        return _reactivation_session(fatigue_idx, context.tsb)

    if band == StatusBand.GREEN:
        return _max_velocity_session(fatigue_idx)
    if band == StatusBand.AMBER:
        return _technical_session(fatigue_idx)
    return _recovery_session(fatigue_idx)
