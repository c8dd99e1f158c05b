"""Fixed affine maps from the tracking frame into the drawing frames.

Each transform is a 3x4 matrix whose rows are ``[cx, cy, cz, translation]``.
The hit and pitch transforms differ in their third row; the stitcher relies
on that difference, so the constants are kept exactly as calibrated.
"""

from dataclasses import dataclass
from typing import TypeAlias

import numpy as np

from trackman_trajectory.domain.geometry import PHYSICAL_FRAME, PhysicalPoint, RenderPoint, TrajectoryCurve
from trackman_trajectory.exceptions import FrameMismatchError

Row: TypeAlias = tuple[float, float, float, float]


@dataclass(frozen=True)
class AffineTransform:
    name: str
    rows: tuple[Row, Row, Row]

    def __post_init__(self) -> None:
        if self.name == PHYSICAL_FRAME:
            msg = f"'{PHYSICAL_FRAME}' is reserved for untransformed curves"
            raise ValueError(msg)
        if len(self.rows) != 3 or any(len(row) != 4 for row in self.rows):
            msg = f"transform '{self.name}' must be 3x4"
            raise ValueError(msg)

    @property
    def matrix(self) -> np.ndarray:
        return np.array(self.rows, dtype=float)

    def apply(self, point: PhysicalPoint) -> RenderPoint:
        if not isinstance(point, PhysicalPoint):
            raise FrameMismatchError(PHYSICAL_FRAME, type(point).__name__)
        x, y, z = self.matrix @ np.array([point.x, point.y, point.z, 1.0])
        return RenderPoint(float(x), float(y), float(z))

    def apply_curve(self, curve: TrajectoryCurve) -> TrajectoryCurve:
        if not curve.is_physical:
            raise FrameMismatchError(PHYSICAL_FRAME, curve.frame)
        m = self.matrix
        points = curve.points @ m[:, :3].T + m[:, 3]
        return TrajectoryCurve(points=points, frame=self.name, times=curve.times)


def apply(transform: AffineTransform, point: PhysicalPoint) -> RenderPoint:
    return transform.apply(point)


HIT_TRANSFORM = AffineTransform(
    name="hit",
    rows=(
        (0.0, 0.0, 0.254, 0.0),
        (0.0, 0.254, 0.0, 0.3),
        (-0.253578, 0.0, 0.0, 38.0),
    ),
)

PITCH_TRANSFORM = AffineTransform(
    name="pitch",
    rows=(
        (0.0, 0.0, 0.254, 0.0),
        (0.0, 0.254, 0.0, 0.3),
        (-0.33, 0.0, 0.0, 38.47),
    ),
)

ZONE_TRANSFORM = AffineTransform(
    name="zone",
    rows=(
        (0.254, 0.0, 0.0, 0.0),
        (0.0, 0.0, 0.254, 0.3),
        (0.0, -0.253578, 0.0, 38.0),
    ),
)

TRANSFORMS: dict[str, AffineTransform] = {t.name: t for t in (HIT_TRANSFORM, PITCH_TRANSFORM, ZONE_TRANSFORM)}


def get_transform(name: str) -> AffineTransform:
    try:
        return TRANSFORMS[name]
    except KeyError:
        msg = f"unknown transform '{name}'; expected one of {sorted(TRANSFORMS)}"
        raise KeyError(msg) from None
