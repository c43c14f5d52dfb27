"""
Interval parser — segments a 1 Hz velocity stream into effort bursts.

Every sample is one second of motion, so the displacement contributed by a
sample equals its velocity in metres.  A *burst* is a maximal run of
consecutive samples at or above the moving threshold.  Bursts shorter than
the minimum rep distance are noise (jogging back, shuffling in the blocks)
and are dropped.

Each kept burst becomes a :class:`~sprintlab.schemas.interval.TrackInterval`
classified by covered distance:

    ≤ 40 m    Acceleration
    ≤ 80 m    MaxVelocity (flying zone)
    ≤ 150 m   SpeedEndurance
    > 150 m   SpecialEndurance

The *flying velocity* of a burst is the best average over a sliding window
of up to 3 samples.  It tracks sustained top speed and is far less
sensitive to a single noisy GPS sample than the raw peak.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from loguru import logger
from pydantic import BaseModel, Field

from sprintlab.engine.utils import round_half_up
from sprintlab.schemas.interval import IntervalClass, TrackInterval

# ======================================================================
# Configuration
# ======================================================================

# Upper bound (inclusive) of each distance band, in metres.
_DISTANCE_BANDS: list[tuple[IntervalClass, float]] = [
    (IntervalClass.ACCELERATION, 40.0),
    (IntervalClass.MAX_VELOCITY, 80.0),
    (IntervalClass.SPEED_ENDURANCE, 150.0),
    (IntervalClass.SPECIAL_ENDURANCE, float("inf")),
]

_FLYING_WINDOW = 3


class ParserConfig(BaseModel):
    """Thresholds for burst detection."""

    moving_threshold: float = Field(
        1.0, gt=0.0,
        description="Samples below this velocity (m/s) count as standing",
    )
    min_rep_distance: float = Field(
        10.0, ge=0.0,
        description="Bursts covering less than this (m) are discarded",
    )


DEFAULT_PARSER_CONFIG = ParserConfig()


# ======================================================================
# Classification
# ======================================================================


def classify_distance(distance: float) -> IntervalClass:
    """Map a burst distance (m) to its interval class."""
    for label, upper in _DISTANCE_BANDS:
        if distance <= upper:
            return label
    return IntervalClass.SPECIAL_ENDURANCE


def _flying_velocity(burst: Sequence[float]) -> float:
    """Best sliding-window average over ``min(3, len(burst))`` samples."""
    if not burst:
        return 0.0

    window = min(_FLYING_WINDOW, len(burst))
    best = 0.0
    for start in range(len(burst) - window + 1):
        avg = sum(burst[start:start + window]) / window
        if avg > best:
            best = avg
    return round(best, 2)


def _close_burst(burst: list[float], min_rep_distance: float) -> Optional[TrackInterval]:
    """Turn a finished burst into an interval, or ``None`` if it is noise."""
    distance = sum(burst)
    if distance < min_rep_distance:
        logger.debug(
            f"Discarding burst of {len(burst)} samples ({distance:.1f} m < {min_rep_distance} m)"
        )
        return None

    return TrackInterval(
        classification=classify_distance(distance),
        distance_m=round_half_up(distance),
        peak_velocity=max(burst),
        duration_s=len(burst),
        flying_velocity=_flying_velocity(burst),
    )


# ======================================================================
# Main entry points
# ======================================================================


def parse_track_session(
    stream: Optional[Sequence[float]],
    config: Optional[ParserConfig] = None,
) -> list[TrackInterval]:
    """Parse one session's velocity stream into classified intervals.

    Args:
        stream: Per-second velocity samples (m/s).  ``None`` and empty
            streams yield an empty list.
        config: Optional :class:`ParserConfig` override.

    Returns:
        Intervals in session order.
    """
    cfg = config or DEFAULT_PARSER_CONFIG
    intervals: list[TrackInterval] = []
    burst: list[float] = []

    # One trailing standing sample closes a burst still open at the end.
    for v in [*(stream or ()), 0.0]:
        if v >= cfg.moving_threshold:
            burst.append(v)
            continue
        if burst:
            interval = _close_burst(burst, cfg.min_rep_distance)
            if interval is not None:
                intervals.append(interval)
            burst = []

    return intervals


def parse_sessions(
    streams: Iterable[Optional[Sequence[float]]],
    config: Optional[ParserConfig] = None,
) -> list[TrackInterval]:
    """Parse several sessions and concatenate their intervals in order."""
    intervals: list[TrackInterval] = []
    for stream in streams:
        intervals.extend(parse_track_session(stream, config))
    return intervals
