from dataclasses import dataclass


@dataclass(frozen=True)
class TrajectoryError:
    message: str
    pitch_uid: str | None = None


@dataclass(frozen=True)
class MissingTrajectoryData(TrajectoryError):
    field: str = ""


@dataclass(frozen=True)
class InvalidDuration(TrajectoryError):
    duration_name: str = ""
    value: float | None = None


@dataclass(frozen=True)
class AlignmentFailure(TrajectoryError):
    reason: str = ""
