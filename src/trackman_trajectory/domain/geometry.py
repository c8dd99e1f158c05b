"""Points, vectors and sampled curves.

Physical points live in the tracking frame (feet, plate-centered). Render
points are the output of an affine transform into a drawing context and are
deliberately a separate type so they cannot be transformed a second time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

PHYSICAL_FRAME = "physical"


@dataclass(frozen=True)
class Vector3:
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True)
class PhysicalPoint:
    x: float
    y: float
    z: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True)
class RenderPoint:
    x: float
    y: float
    z: float

    def __add__(self, shift: Vector3) -> RenderPoint:
        return RenderPoint(self.x + shift.x, self.y + shift.y, self.z + shift.z)

    def __sub__(self, other: RenderPoint) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class SvgPoint:
    x: float
    y: float

    def as_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, eq=False)
class TrajectoryCurve:
    """An ordered, finite run of sampled points in a single coordinate frame.

    ``points`` has shape (N, 3). ``times`` holds the elapsed time of each
    sample when the curve came straight from a polynomial, and is None for
    curves that were assembled from other curves.
    """

    points: np.ndarray
    frame: str = PHYSICAL_FRAME
    times: np.ndarray | None = field(default=None)

    def __post_init__(self) -> None:
        points = np.array(self.points, dtype=float)
        if points.ndim != 2 or points.shape[1] != 3:
            msg = f"curve points must have shape (N, 3), got {points.shape}"
            raise ValueError(msg)
        points.setflags(write=False)
        object.__setattr__(self, "points", points)
        if self.times is not None:
            times = np.array(self.times, dtype=float)
            if times.shape != (points.shape[0],):
                msg = f"curve times must have shape ({points.shape[0]},), got {times.shape}"
                raise ValueError(msg)
            times.setflags(write=False)
            object.__setattr__(self, "times", times)

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __iter__(self) -> Iterator[tuple[float, float, float]]:
        for row in self.points:
            yield (float(row[0]), float(row[1]), float(row[2]))

    @property
    def is_physical(self) -> bool:
        return self.frame == PHYSICAL_FRAME

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.points).all())

    def first(self) -> tuple[float, float, float]:
        row = self.points[0]
        return (float(row[0]), float(row[1]), float(row[2]))

    def last(self) -> tuple[float, float, float]:
        row = self.points[-1]
        return (float(row[0]), float(row[1]), float(row[2]))

    def first_render_point(self) -> RenderPoint:
        return RenderPoint(*self.first())

    def last_render_point(self) -> RenderPoint:
        return RenderPoint(*self.last())

    def shifted(self, shift: Vector3) -> TrajectoryCurve:
        return TrajectoryCurve(points=self.points + shift.as_array(), frame=self.frame, times=self.times)

    def to_list(self) -> list[dict[str, float]]:
        return [{"x": x, "y": y, "z": z} for x, y, z in self]


@dataclass(frozen=True, eq=False)
class StitchedCurve:
    """A pitch segment followed by a hit segment that was shifted to meet it.

    The first point of ``hit`` is the last point of ``pitch``.
    """

    pitch: TrajectoryCurve
    hit: TrajectoryCurve
    shift: Vector3

    @property
    def frame(self) -> str:
        return self.pitch.frame

    @property
    def join_point(self) -> RenderPoint:
        return self.pitch.last_render_point()

    def combined(self) -> TrajectoryCurve:
        # the hit segment repeats the join point, so drop it once
        points = np.vstack([self.pitch.points, self.hit.points[1:]])
        return TrajectoryCurve(points=points, frame=self.frame)

    def to_dict(self) -> dict[str, object]:
        return {
            "pitch": self.pitch.to_list(),
            "hit": self.hit.to_list(),
            "shift": {"x": self.shift.x, "y": self.shift.y, "z": self.shift.z},
        }
