"""Pitch flight reconstruction from quadratic trajectory coefficients."""

import math

import numpy as np

from trackman_trajectory.domain.errors import InvalidDuration, MissingTrajectoryData, TrajectoryError
from trackman_trajectory.domain.geometry import PHYSICAL_FRAME, TrajectoryCurve
from trackman_trajectory.domain.pitch import Pitch, PitchTrajectoryCoefficients
from trackman_trajectory.domain.result import Err, Ok, Result
from trackman_trajectory.exceptions import FrameMismatchError
from trackman_trajectory.trajectory.polynomial import evaluate_many

DEFAULT_PITCH_SAMPLES = 150
FALLBACK_ZONE_TIME = 0.5
PLATE_FRAME = "plate"


def resolve_zone_time(raw: float | None, fallback: float = FALLBACK_ZONE_TIME) -> float:
    """Return the recorded zone time when it is usable, otherwise ``fallback``."""
    if raw is not None and math.isfinite(raw) and raw > 0:
        return raw
    return fallback


def _missing_field(coeffs: PitchTrajectoryCoefficients) -> str | None:
    for name, value in coeffs.fields().items():
        if value is None or not math.isfinite(value):
            return name
    return None


def reconstruct_pitch(
    coeffs: PitchTrajectoryCoefficients | None,
    zone_time: float | None,
    sample_count: int = DEFAULT_PITCH_SAMPLES,
    *,
    fallback_zone_time: float = FALLBACK_ZONE_TIME,
    pitch_uid: str | None = None,
) -> Result[TrajectoryCurve, TrajectoryError]:
    """Sample the pitch path from release (t=0) to the plate (t=zone time).

    Samples are evenly spaced in time, ``t_i = i * zone_time / (N - 1)``, so
    the first point is the earliest and the last is the plate crossing.
    """
    if sample_count < 2:
        msg = f"sample_count must be at least 2, got {sample_count}"
        raise ValueError(msg)
    if coeffs is None:
        return Err(MissingTrajectoryData(message="pitch has no trajectory", pitch_uid=pitch_uid, field="pitch_trajectory"))
    missing = _missing_field(coeffs)
    if missing is not None:
        return Err(MissingTrajectoryData(message=f"missing or invalid value for {missing}", pitch_uid=pitch_uid, field=missing))

    duration = resolve_zone_time(zone_time, fallback_zone_time)
    if not math.isfinite(duration) or duration <= 0:
        return Err(
            InvalidDuration(
                message=f"zone time {duration!r} is not a positive duration",
                pitch_uid=pitch_uid,
                duration_name="zone_time",
                value=duration,
            )
        )

    ts = np.arange(sample_count, dtype=float) * duration / (sample_count - 1)
    points = np.column_stack([evaluate_many(ts, coeffs.x), evaluate_many(ts, coeffs.y), evaluate_many(ts, coeffs.z)])
    return Ok(TrajectoryCurve(points=points, frame=PHYSICAL_FRAME, times=ts))


def reconstruct_pitch_for(
    pitch: Pitch,
    sample_count: int = DEFAULT_PITCH_SAMPLES,
    *,
    fallback_zone_time: float = FALLBACK_ZONE_TIME,
) -> Result[TrajectoryCurve, TrajectoryError]:
    return reconstruct_pitch(
        pitch.trajectory,
        pitch.metrics.zone_time,
        sample_count,
        fallback_zone_time=fallback_zone_time,
        pitch_uid=pitch.pitch_uid,
    )


def plate_frame_path(curve: TrajectoryCurve) -> TrajectoryCurve:
    """Re-axis a physical pitch curve for the standalone pitch scene.

    Lateral comes from the z axis, forward from the x axis shifted so the
    plate crossing sits at forward == 0, vertical from the y axis.
    """
    if not curve.is_physical:
        raise FrameMismatchError(PHYSICAL_FRAME, curve.frame)
    lateral = curve.points[:, 2]
    forward = curve.points[:, 0] - curve.points[-1, 0]
    vertical = curve.points[:, 1]
    return TrajectoryCurve(points=np.column_stack([lateral, forward, vertical]), frame=PLATE_FRAME, times=curve.times)
