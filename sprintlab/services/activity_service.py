"""
Activity service.

Business logic for recorded activities: ingestion, per-activity interval
parsing and the fatigue-index stream payload.
"""

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from sprintlab.db.repositories.activity import ActivityRepository
from sprintlab.engine.custom_streams import broadcast_fatigue_index_stream
from sprintlab.engine.intervals import parse_track_session
from sprintlab.engine.readiness import fatigue_index
from sprintlab.engine.state import baseline_vmax
from sprintlab.models.activity import Activity
from sprintlab.schemas.activity import ActivityCreate, ActivityResponse
from sprintlab.schemas.interval import TrackInterval
from sprintlab.schemas.stream import CustomStream


class ActivityService:
    """Service for activity business logic."""

    def __init__(self, session: Session):
        self.repository = ActivityRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, athlete_id: int, data: ActivityCreate) -> ActivityResponse:
        """Store an activity.

        Raises:
            HTTPException: 409 if the external id is already stored for the athlete.
        """
        if data.external_id and self.repository.get_by_external_id(athlete_id, data.external_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Activity {data.external_id} already recorded",
            )

        values = data.model_dump()
        if values["max_speed"] is None:
            values["max_speed"] = max(0.0, max(data.velocity or [], default=0.0))

        entry = self.repository.create(Activity(athlete_id=athlete_id, **values))
        logger.info(
            f"[athlete:{athlete_id}] Stored activity {entry.id} "
            f"({len(entry.velocity or [])} samples, vmax={entry.max_speed:.2f} m/s)"
        )
        return self._to_response(entry)

    def get_by_id(self, athlete_id: int, activity_id: int) -> ActivityResponse:
        return self._to_response(self._get_owned_activity(athlete_id, activity_id))

    def get_all(self, athlete_id: int, skip: int = 0, limit: int = 100) -> list[ActivityResponse]:
        entries = self.repository.get_all_by_athlete(athlete_id, skip, limit)
        return [self._to_response(e) for e in entries]

    def delete(self, athlete_id: int, activity_id: int) -> None:
        self._get_owned_activity(athlete_id, activity_id)
        self.repository.delete(activity_id)

    def intervals(self, athlete_id: int, activity_id: int) -> list[TrackInterval]:
        """Parse the stored velocity stream of one activity."""
        entry = self._get_owned_activity(athlete_id, activity_id)
        return parse_track_session(entry.velocity)

    def fatigue_stream(self, athlete_id: int, activity_id: int) -> CustomStream:
        """Fatigue-index stream for one activity against the activities before it."""
        entry = self._get_owned_activity(athlete_id, activity_id)
        earlier = [
            a for a in self.repository.get_all_by_athlete(athlete_id, limit=1000)
            if a.start_time < entry.start_time
        ]
        history = [entry, *earlier]
        fi = fatigue_index(entry.max_speed, baseline_vmax(history))
        return broadcast_fatigue_index_stream(entry.velocity, fi)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_activity(self, athlete_id: int, activity_id: int) -> Activity:
        """Get activity by id and verify ownership."""
        entry = self.repository.get_by_id(activity_id)
        if not entry or entry.athlete_id != athlete_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Activity not found",
            )
        return entry

    @staticmethod
    def _to_response(entry: Activity) -> ActivityResponse:
        return ActivityResponse(
            id=entry.id,
            athlete_id=entry.athlete_id,
            external_id=entry.external_id,
            start_time=entry.start_time,
            type=entry.type,
            name=entry.name,
            sample_count=len(entry.velocity or []),
            max_speed=entry.max_speed,
            training_load=entry.training_load,
            atl=entry.atl,
            ctl=entry.ctl,
            tsb=entry.ctl - entry.atl,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
