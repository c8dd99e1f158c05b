"""Joining the batted-ball path onto the end of the pitch path.

Pitch tracking and hit tracking do not share an origin at the moment of
contact. The hit path is therefore translated in render space by

    shift = pitch_end - hit_transform(contact_position)

so that it starts where the pitch path finishes. ``pitch_end`` is taken from
the pitch curve already mapped by the pitch transform; the contact position
is mapped by the hit transform.
"""

import logging

import numpy as np

from trackman_trajectory.domain.errors import AlignmentFailure, TrajectoryError
from trackman_trajectory.domain.geometry import PhysicalPoint, StitchedCurve, TrajectoryCurve, Vector3
from trackman_trajectory.domain.pitch import HittingMetrics
from trackman_trajectory.domain.result import Err, Ok, Result
from trackman_trajectory.exceptions import FrameMismatchError
from trackman_trajectory.render.transforms import HIT_TRANSFORM, PITCH_TRANSFORM, AffineTransform

logger = logging.getLogger(__name__)


def contact_position_of(metrics: HittingMetrics | None) -> PhysicalPoint | None:
    if metrics is None:
        return None
    coords = (metrics.contact_position_x, metrics.contact_position_y, metrics.contact_position_z)
    if any(c is None for c in coords):
        return None
    return PhysicalPoint(*coords)  # type: ignore[arg-type]


def align_hit_to_pitch(
    pitch_curve: TrajectoryCurve | None,
    contact: PhysicalPoint | None,
    hit_transform: AffineTransform = HIT_TRANSFORM,
    pitch_transform: AffineTransform = PITCH_TRANSFORM,
    *,
    pitch_uid: str | None = None,
) -> Result[Vector3, AlignmentFailure]:
    """Compute the render-space shift that carries the hit path onto the pitch end."""
    if pitch_curve is None or len(pitch_curve) == 0:
        return Err(AlignmentFailure(message="no pitch curve to align against", pitch_uid=pitch_uid, reason="no_pitch_curve"))
    if pitch_curve.frame != pitch_transform.name:
        raise FrameMismatchError(pitch_transform.name, pitch_curve.frame)
    if contact is None or not contact.is_finite():
        return Err(
            AlignmentFailure(message=f"contact position {contact!r} is not finite", pitch_uid=pitch_uid, reason="contact")
        )

    pitch_end = pitch_curve.last_render_point()
    contact_render = hit_transform.apply(contact)
    shift = pitch_end - contact_render
    logger.debug("Hit shift for %s: (%.4f, %.4f, %.4f)", pitch_uid, shift.x, shift.y, shift.z)
    return Ok(shift)


def stitch(
    pitch_curve: TrajectoryCurve,
    hit_curve: TrajectoryCurve,
    shift: Vector3,
    hit_transform: AffineTransform = HIT_TRANSFORM,
) -> StitchedCurve:
    """Map the physical hit curve into render space, shift it and join it to the pitch curve.

    The first hit sample (contact) is replaced by the pitch end point, so the
    join is exact rather than merely within floating-point error.
    """
    shifted = hit_transform.apply_curve(hit_curve).shifted(shift)
    points = np.vstack([pitch_curve.points[-1:], shifted.points[1:]])
    hit_segment = TrajectoryCurve(points=points, frame=pitch_curve.frame, times=shifted.times)
    return StitchedCurve(pitch=pitch_curve, hit=hit_segment, shift=shift)


def stitch_trajectories(
    pitch_curve: TrajectoryCurve | None,
    hit_curve: TrajectoryCurve,
    contact: PhysicalPoint | None,
    hit_transform: AffineTransform = HIT_TRANSFORM,
    pitch_transform: AffineTransform = PITCH_TRANSFORM,
    *,
    pitch_uid: str | None = None,
) -> Result[StitchedCurve, TrajectoryError]:
    """Align and join a render-space pitch curve with a physical hit curve."""
    match align_hit_to_pitch(pitch_curve, contact, hit_transform, pitch_transform, pitch_uid=pitch_uid):
        case Err(e):
            return Err(e)
        case Ok(shift):
            return Ok(stitch(pitch_curve, hit_curve, shift, hit_transform))  # type: ignore[arg-type]
