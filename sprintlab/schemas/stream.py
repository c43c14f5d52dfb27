"""Custom data-stream payload handed to the write-back collaborator."""

from pydantic import BaseModel


class CustomStream(BaseModel):
    """A named per-sample data series."""

    name: str
    short_name: str
    units: str
    data: list[float]
    color: str
