"""Training profile schema — capabilities derived from parsed intervals."""

from pydantic import BaseModel, Field


class TrainingProfile(BaseModel):
    """Compact capability profile aggregated over many intervals."""

    speed_endurance_index: float = Field(
        0.0, ge=0.0,
        description="Mean of (avg speed / reference peak) over endurance intervals; 0 if undefined",
    )
    best_flying_velocity: float = Field(
        0.0, ge=0.0,
        description="Best flying velocity seen across all intervals (m/s)",
    )
    avg_acceleration_time_s: float = Field(
        0.0, ge=0.0,
        description="Mean duration of Acceleration intervals (s)",
    )
    endurance_interval_count: int = Field(0, ge=0)
    acceleration_interval_count: int = Field(0, ge=0)
