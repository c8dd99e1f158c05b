"""Moving-marker timing over a sampled curve.

Curves are built once per selected pitch. Per frame, only the elapsed time
is mapped to a progress value in [0, 1] and the curve is interpolated there.
"""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from trackman_trajectory.domain.geometry import RenderPoint, TrajectoryCurve

if TYPE_CHECKING:
    from collections.abc import Iterator

# squared-distance exponent for centripetal parameterization
_CENTRIPETAL_POWER = 0.25
_MIN_KNOT_SPACING = 1e-4


def _hermite(x0: np.ndarray, x1: np.ndarray, t0: np.ndarray, t1: np.ndarray, w: float) -> np.ndarray:
    c2 = -3 * x0 + 3 * x1 - 2 * t0 - t1
    c3 = 2 * x0 - 2 * x1 + t0 + t1
    return x0 + t0 * w + c2 * w * w + c3 * w * w * w


@dataclass(frozen=True, eq=False)
class CatmullRomCurve:
    """Centripetal Catmull-Rom spline through a run of points.

    ``get_point(0)`` is the first point and ``get_point(1)`` the last. The
    parameter is spread evenly over the segments, not over arc length.
    """

    points: np.ndarray

    def __post_init__(self) -> None:
        points = np.array(self.points, dtype=float)
        if points.ndim != 2 or points.shape[0] < 2:
            msg = f"a curve needs at least two points, got shape {points.shape}"
            raise ValueError(msg)
        points.setflags(write=False)
        object.__setattr__(self, "points", points)

    @classmethod
    def through(cls, curve: TrajectoryCurve) -> CatmullRomCurve:
        return cls(points=curve.points)

    def get_point(self, u: float) -> np.ndarray:
        pts = self.points
        n = pts.shape[0]
        u = min(max(u, 0.0), 1.0)
        p = (n - 1) * u
        i = math.floor(p)
        w = p - i
        if i >= n - 1:
            i, w = n - 2, 1.0

        p1 = pts[i]
        p2 = pts[i + 1]
        p0 = pts[i - 1] if i > 0 else 2 * pts[0] - pts[1]
        p3 = pts[i + 2] if i + 2 < n else 2 * pts[-1] - pts[-2]

        dt0 = float(np.sum((p1 - p0) ** 2)) ** _CENTRIPETAL_POWER
        dt1 = float(np.sum((p2 - p1) ** 2)) ** _CENTRIPETAL_POWER
        dt2 = float(np.sum((p3 - p2) ** 2)) ** _CENTRIPETAL_POWER
        if dt1 < _MIN_KNOT_SPACING:
            dt1 = 1.0
        if dt0 < _MIN_KNOT_SPACING:
            dt0 = dt1
        if dt2 < _MIN_KNOT_SPACING:
            dt2 = dt1

        t1 = ((p1 - p0) / dt0 - (p2 - p0) / (dt0 + dt1) + (p2 - p1) / dt1) * dt1
        t2 = ((p2 - p1) / dt1 - (p3 - p1) / (dt1 + dt2) + (p3 - p2) / dt2) * dt1
        return _hermite(p1, p2, t1, t2, w)

    def sample(self, divisions: int) -> np.ndarray:
        """Return ``divisions + 1`` points evenly spaced in curve parameter."""
        if divisions < 1:
            msg = f"divisions must be at least 1, got {divisions}"
            raise ValueError(msg)
        return np.array([self.get_point(i / divisions) for i in range(divisions + 1)])


class LoopMode(Enum):
    PHYSICAL = "physical"
    FIXED = "fixed"


def resolve_loop_duration(
    physical_duration: float,
    *,
    mode: LoopMode = LoopMode.PHYSICAL,
    fixed_duration: float | None = None,
    time_scale: float = 1.0,
) -> float:
    """Pick how long one pass of the animation lasts.

    In physical mode the pass lasts the measured flight time (hang time or
    zone time) divided by ``time_scale``; in fixed mode it lasts
    ``fixed_duration`` seconds regardless of the flight.
    """
    if mode is LoopMode.FIXED:
        if fixed_duration is None:
            msg = "fixed loop mode needs a fixed_duration"
            raise ValueError(msg)
        return fixed_duration
    if time_scale <= 0:
        msg = f"time_scale must be positive, got {time_scale}"
        raise ValueError(msg)
    return physical_duration / time_scale


@dataclass(frozen=True, eq=False)
class LoopingAnimation:
    curve: CatmullRomCurve
    duration: float
    loop: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.duration) or self.duration <= 0:
            msg = f"animation duration must be positive, got {self.duration}"
            raise ValueError(msg)

    def progress(self, elapsed: float) -> float:
        if not math.isfinite(elapsed):
            msg = f"elapsed time must be finite, got {elapsed}"
            raise ValueError(msg)
        if self.loop:
            return (elapsed % self.duration) / self.duration
        return min(max(elapsed / self.duration, 0.0), 1.0)

    def position_at(self, elapsed: float) -> RenderPoint:
        x, y, z = self.curve.get_point(self.progress(elapsed))
        return RenderPoint(float(x), float(y), float(z))

    def frames(self, frame_interval: float, start: float = 0.0) -> Iterator[RenderPoint]:
        """Yield marker positions at a fixed frame interval, forever."""
        if frame_interval <= 0:
            msg = f"frame_interval must be positive, got {frame_interval}"
            raise ValueError(msg)
        for frame in itertools.count():
            yield self.position_at(start + frame * frame_interval)
