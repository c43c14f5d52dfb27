"""SprintLab core algorithms — interval parsing, readiness, race prediction, prescriptions."""

from sprintlab.engine.intervals import ParserConfig, parse_track_session
from sprintlab.engine.profile import build_training_profile
from sprintlab.engine.race_estimator import estimate
from sprintlab.engine.readiness import assess_readiness, smart_recovery_window
from sprintlab.engine.strength import strength_prescription
from sprintlab.engine.workouts import sprint_workout

__all__ = [
    "ParserConfig",
    "parse_track_session",
    "build_training_profile",
    "estimate",
    "assess_readiness",
    "smart_recovery_window",
    "strength_prescription",
    "sprint_workout",
]
