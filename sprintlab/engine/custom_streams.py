"""Fatigue-index custom stream payload for write-back to the activity platform."""

from __future__ import annotations

from typing import Optional, Sequence

from sprintlab.schemas.stream import CustomStream

NFI_STREAM_NAME = "Neural Fatigue Index"
NFI_STREAM_SHORT_NAME = "NFI"
NFI_STREAM_UNITS = "index"
NFI_STREAM_COLOR = "#FF4500"


def fatigue_index_stream(values: Sequence[float]) -> CustomStream:
    """Wrap per-sample fatigue-index values in a custom stream payload."""
    return CustomStream(
        name=NFI_STREAM_NAME,
        short_name=NFI_STREAM_SHORT_NAME,
        units=NFI_STREAM_UNITS,
        data=list(values),
        color=NFI_STREAM_COLOR,
    )


def broadcast_fatigue_index_stream(
    velocity: Optional[Sequence[float]],
    fatigue_idx: float,
) -> CustomStream:
    """One fatigue-index value per velocity sample of an activity."""
    return fatigue_index_stream([fatigue_idx] * len(velocity or ()))
