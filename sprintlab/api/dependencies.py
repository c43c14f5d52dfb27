"""
Shared API dependencies.

Reusable FastAPI dependencies for athlete lookup and database access.
"""

from fastapi import Depends
from sqlmodel import Session

from sprintlab.db.session import get_db
from sprintlab.models.athlete import Athlete
from sprintlab.services.athlete_service import AthleteService


def get_athlete_or_404(athlete_id: int, db: Session = Depends(get_db)) -> Athlete:
    """Resolve the ``athlete_id`` path parameter, 404 if it does not exist."""
    return AthleteService(db).get(athlete_id)
