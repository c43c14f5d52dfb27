"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from sprintlab.models.athlete import Athlete  # noqa: F401
from sprintlab.models.activity import Activity  # noqa: F401
from sprintlab.models.wellness import WellnessEntry  # noqa: F401
from sprintlab.models.race_event import RaceEventRecord  # noqa: F401
