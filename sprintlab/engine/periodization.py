"""
Four-week fascia-driven training block.

    weeks 1–2   Accumulation      tendon loading, structural integrity
    week 3      Intensification   shift from building to using elastic recoil
    week 4      Deload            volume × 0.55, intensity kept

Each week follows a High-Low-High-Low-High CNS pattern over Mon–Fri.  OI
movements are adjusted to the athlete type: fascia-dominant athletes get
one extra set, muscle-dominant athletes one set fewer (never below one).
"""

from __future__ import annotations

from dataclasses import dataclass

from sprintlab.engine.oscillatory import oi_phase_number
from sprintlab.engine.utils import round_half_up
from sprintlab.schemas.periodization import (
    AthleteType,
    BlockWeek,
    CNSDemand,
    DayOfWeek,
    FasciaDayPlan,
    MacroPhase,
    PrimaryMovement,
)

DAYS: tuple[DayOfWeek, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri")

DELOAD_WEEK = 4
DELOAD_VOLUME_MODIFIER = 0.55

_OI_NAME_MARKERS = ("isometric", "oi ", "oscillatory")


@dataclass(frozen=True)
class _DayTemplate:
    phase_name: MacroPhase
    cns_demand: CNSDemand
    movements: list[PrimaryMovement]
    exercises: list[str]


def _move(name: str, sets: int, reps_or_duration: str, notes: str | None = None) -> PrimaryMovement:
    return PrimaryMovement(name=name, sets=sets, reps_or_duration=reps_or_duration, notes=notes)


# ======================================================================
# Templates
# ======================================================================

_ACCUMULATION: dict[DayOfWeek, _DayTemplate] = {
    "Mon": _DayTemplate("Accumulation", "high", [
        _move("20m Fly Sprints (25m build-up)", 5, "4–6 reps @ 95–100%"),
        _move('Depth Jumps (18–24" box)', 3, "3×5", "Measure RSI each set"),
    ], [
        "Ankle bounce warm-up 3 min",
        "Hip 90-90 stretch 2×60s",
        "A-skip 3×20m as sprint activation",
    ]),
    "Tue": _DayTemplate("Accumulation", "low", [
        _move("Ankle Hops (stiff knee)", 4, "4×10m"),
        _move("Trap Bar Deadlift (sub-maximal)", 3, "3×3 @ 75% 1RM"),
    ], [
        "Banded clamshell 2×15",
        "Nordic curl eccentric 2×6",
        "Core anti-rotation 2×30s",
    ]),
    "Wed": _DayTemplate("Accumulation", "high", [
        _move("10m Sled Sprints (10% bodyweight)", 7, "6–8 reps"),
        _move("Yielding Isometrics — Split Squat", 2, "2×2 min/leg", "OI Phase 1: catch-and-hold"),
    ], [
        "Foam roll ITB 5 min",
        "Hip flexor stretch 2×60s",
        "Diaphragm breathing 5 min post-session",
    ]),
    "Thu": _DayTemplate("Accumulation", "low", [
        _move("Hurdle Hop Series", 4, "4×6 hurdles", "Focus on front-side mechanics"),
        _move("OI Split Squat Hold", 3, "3×15s hold @ 70% effort"),
    ], [
        "A-skip 3×20m",
        "Ankle stiffness drill 3×30s",
        "Hip 90-90 mobility 2 min",
    ]),
    "Fri": _DayTemplate("Accumulation", "high", [
        _move("Ankle Hops (stiff knee)", 4, "4×10m", "Maintain contact-time below 130ms"),
        _move("Trap Bar Deadlift (sub-maximal)", 3, "3×3 @ 75% 1RM"),
    ], [
        "Supine breathing 5 min",
        "Calf soleus stretch 2×60s",
        "Single-leg calf raise 3×12 (cool-down)",
    ]),
}

_INTENSIFICATION: dict[DayOfWeek, _DayTemplate] = {
    "Mon": _DayTemplate("Intensification", "high", [
        _move("Wicket Runs (6–8 hurdles)", 3, "3×6 hurdles @ 95%",
              "Replace 20m Flys — focus on vertical force"),
        _move('Depth Jumps (18–24" box)', 3, "3×4", "Measure RSI — benchmark vs weeks 1–2"),
    ], [
        "Sprint warm-up progressions 3×60m @ 60/75/90%",
        "Hip flexor activation drill 3 min",
        "A-run 3×20m",
    ]),
    "Tue": _DayTemplate("Intensification", "high", [
        _move("Trap Bar Deadlift", 4, "4×3 @ 85%"),
        _move("Hang Power Clean", 3, "3×3 @ 80%"),
    ], [
        "Post-strength depth jump 3×2 (potentiation)",
        "Core Pallof press 3×10",
        "90/90 breathing 5 min",
    ]),
    "Wed": _DayTemplate("Intensification", "high", [
        _move("Hill Sprints 15–20m", 6, "6–8 reps", "Replace sled — incline forces better shin angles"),
        _move("Oscillatory Isometrics — Split Squat", 3, '3×10s rapid pulses (1–2" range)',
              "OI Phase 2: rapid pulses"),
    ], [
        "Reactive ankle work 3×30s",
        "90-90 breathing 5 min",
    ]),
    "Thu": _DayTemplate("Intensification", "low", [
        _move("Speed-Endurance Runs", 2, "2×150m @ 90%", "Walk-back recovery 6 min per rep"),
    ], [
        "Rolling leg swing 3 min",
        "Foam roll full-body 10 min",
        "Static hold circuit 10 min",
    ]),
    "Fri": _DayTemplate("Intensification", "rest", [
        _move("Active Recovery Walk", 1, "20 min @ easy pace"),
        _move("Contrast Hydrotherapy", 1, "4 cycles hot/cold", "Recommended after max-velocity week"),
    ], [
        "Foam roll full-body 10 min",
        "Static stretch circuit 15 min",
    ]),
}

_DELOAD: dict[DayOfWeek, _DayTemplate] = {
    "Mon": _DayTemplate("Deload", "low", [
        _move("Short Acceleration", 2, "2×20m @ 80–85%", "−40–50% volume; stop 1–2 reps early"),
        _move("OI Reactive Switch", 2, "2×10s oscillation after drop", "Phase 3: drop then oscillate"),
    ], [
        "Easy walk warm-up 10 min",
        "Hip 90-90 mobility 2 min",
    ]),
    "Tue": _DayTemplate("Deload", "low", [
        _move("Goblet Squat", 2, "2×6 @ 60%"),
        _move("Glute Bridge", 2, "2×10"),
    ], [
        "Banded hip distraction 2×60s",
        "Box breathing 5 min",
    ]),
    "Wed": _DayTemplate("Deload", "rest", [
        _move("Easy Walk", 1, "15 min relaxed pace"),
        _move("RPR Breathing Drills", 1, "10 min", "Reflexive Performance Reset"),
    ], [
        "Full-body foam roll 15 min",
        "Box breathing 5 min",
    ]),
    "Thu": _DayTemplate("Deload", "low", [
        _move("Box Step-Up", 2, "2×5 @ 50%"),
        _move("Single-Leg Balance", 2, "2×30s each side"),
    ], [
        "A-march 2×20m",
        "Ankle circles 2 min",
    ]),
    "Fri": _DayTemplate("Deload", "rest", [
        _move("Short Contrast Hydrotherapy", 1, "3 cycles hot/cold", "Shorter than intensification protocol"),
        _move("Yoga / Mobility Flow", 1, "20 min"),
    ], [
        "Box breathing 5 min",
        "Supine 90-90 stretch 5 min",
    ]),
}


def _templates_for_week(week: BlockWeek) -> dict[DayOfWeek, _DayTemplate]:
    if week <= 2:
        return _ACCUMULATION
    if week == 3:
        return _INTENSIFICATION
    return _DELOAD


# ======================================================================
# Plan generation
# ======================================================================


def is_oi_movement(name: str) -> bool:
    lowered = name.lower()
    return any(marker in lowered for marker in _OI_NAME_MARKERS)


def adjust_sets(movement: PrimaryMovement, athlete_type: AthleteType, volume_modifier: float) -> int:
    """Sets after the athlete-type OI adjustment and the deload modifier (min 1)."""
    sets = movement.sets
    if is_oi_movement(movement.name):
        sets = sets + 1 if athlete_type == "fascia" else max(1, sets - 1)
    return max(1, round_half_up(sets * volume_modifier))


def generate_weekly_plan(week: BlockWeek, athlete_type: AthleteType = "fascia") -> list[FasciaDayPlan]:
    """All five training days of one block week.

    Raises:
        ValueError: If *week* is not 1–4.
    """
    if week not in (1, 2, 3, 4):
        raise ValueError(f"Block week must be 1-4, got {week}")

    templates = _templates_for_week(week)
    volume_modifier = DELOAD_VOLUME_MODIFIER if week == DELOAD_WEEK else 1.0
    oi_phase = oi_phase_number(week)

    plan = []
    for day in DAYS:
        template = templates[day]
        plan.append(FasciaDayPlan(
            week=week,
            day=day,
            phase_name=template.phase_name,
            cns_demand=template.cns_demand,
            primary_movements=[
                m.model_copy(update={"sets": adjust_sets(m, athlete_type, volume_modifier)})
                for m in template.movements
            ],
            exercises=list(template.exercises),
            oi_phase=oi_phase,
            volume_modifier=volume_modifier,
        ))
    return plan


def day_plan(week: BlockWeek, day: DayOfWeek, athlete_type: AthleteType = "fascia") -> FasciaDayPlan:
    """A single day of the block."""
    return next(p for p in generate_weekly_plan(week, athlete_type) if p.day == day)
