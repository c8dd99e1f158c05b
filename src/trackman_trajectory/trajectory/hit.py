"""Batted-ball flight reconstruction from degree-8 trajectory coefficients."""

import math
import numbers
from collections.abc import Mapping

import numpy as np

from trackman_trajectory.domain.errors import InvalidDuration, MissingTrajectoryData, TrajectoryError
from trackman_trajectory.domain.geometry import PHYSICAL_FRAME, PhysicalPoint, TrajectoryCurve
from trackman_trajectory.domain.pitch import HIT_DEGREE, HitTrajectoryCoefficients, Pitch
from trackman_trajectory.domain.result import Err, Ok, Result
from trackman_trajectory.trajectory.polynomial import evaluate, evaluate_many

DEFAULT_HIT_STEPS = 100

HIT_FIELDS: tuple[str, ...] = tuple(
    f"hit_trajectory_{axis}c{i}" for axis in ("x", "y", "z") for i in range(HIT_DEGREE + 1)
)


def _is_numeric(value: object) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, numbers.Real):
        return not math.isnan(float(value))
    if isinstance(value, str):
        try:
            return not math.isnan(float(value))
        except ValueError:
            return False
    return False


def is_trajectory_absent(coeffs: HitTrajectoryCoefficients | Mapping[str, object] | None) -> bool:
    """True when none of the 27 hit coefficients holds a number.

    Accepts either typed coefficients or the raw field mapping, where the
    string ``"NA"`` and other non-numeric values count as absent.
    """
    if coeffs is None:
        return True
    values = coeffs.fields() if isinstance(coeffs, HitTrajectoryCoefficients) else coeffs
    return not any(_is_numeric(values.get(name)) for name in HIT_FIELDS)


def landing_point_at(coeffs: HitTrajectoryCoefficients, elapsed: float) -> PhysicalPoint:
    """Position of the ball ``elapsed`` seconds after contact.

    No range check is applied; times outside [0, hang time] extrapolate.
    """
    return PhysicalPoint(evaluate(elapsed, coeffs.x), evaluate(elapsed, coeffs.y), evaluate(elapsed, coeffs.z))


def validate_hang_time(raw: float | None, pitch_uid: str | None = None) -> Result[float, InvalidDuration]:
    if raw is None or not math.isfinite(raw) or raw <= 0:
        return Err(
            InvalidDuration(
                message=f"hang time {raw!r} is not a positive duration",
                pitch_uid=pitch_uid,
                duration_name="hang_time",
                value=raw,
            )
        )
    return Ok(raw)


def sample_hit(
    coeffs: HitTrajectoryCoefficients | None,
    hang_time: float | None,
    steps: int = DEFAULT_HIT_STEPS,
    *,
    pitch_uid: str | None = None,
) -> Result[TrajectoryCurve, TrajectoryError]:
    """Sample the batted-ball path at ``t_i = hang_time * i / steps`` for i in 0..steps."""
    if steps < 1:
        msg = f"steps must be at least 1, got {steps}"
        raise ValueError(msg)
    if coeffs is None or is_trajectory_absent(coeffs):
        return Err(MissingTrajectoryData(message="pitch has no hit trajectory", pitch_uid=pitch_uid, field="hit_trajectory"))
    match validate_hang_time(hang_time, pitch_uid):
        case Err(e):
            return Err(e)
        case Ok(duration):
            return _sample(coeffs, duration, steps, pitch_uid)


def _sample(
    coeffs: HitTrajectoryCoefficients, duration: float, steps: int, pitch_uid: str | None
) -> Result[TrajectoryCurve, TrajectoryError]:
    ts = np.arange(steps + 1, dtype=float) * duration / steps
    points = np.column_stack([evaluate_many(ts, coeffs.x), evaluate_many(ts, coeffs.y), evaluate_many(ts, coeffs.z)])
    curve = TrajectoryCurve(points=points, frame=PHYSICAL_FRAME, times=ts)
    if not curve.is_finite():
        return Err(
            MissingTrajectoryData(
                message="hit trajectory has missing coefficients", pitch_uid=pitch_uid, field="hit_trajectory"
            )
        )
    return Ok(curve)


def sample_hit_for(pitch: Pitch, steps: int = DEFAULT_HIT_STEPS) -> Result[TrajectoryCurve, TrajectoryError]:
    hang_time = pitch.hitting_metrics.hang_time if pitch.hitting_metrics is not None else None
    return sample_hit(pitch.hit_trajectory, hang_time, steps, pitch_uid=pitch.pitch_uid)
