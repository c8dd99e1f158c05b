from dataclasses import dataclass
from typing import TypeAlias

PITCH_DEGREE = 2
HIT_DEGREE = 8

Coefficients: TypeAlias = tuple[float | None, ...]


def _check_length(name: str, coeffs: Coefficients, degree: int) -> None:
    if len(coeffs) != degree + 1:
        msg = f"{name} needs {degree + 1} coefficients, got {len(coeffs)}"
        raise ValueError(msg)


@dataclass(frozen=True)
class PitchTrajectoryCoefficients:
    """Quadratic position-vs-time coefficients (c0, c1, c2) per axis."""

    x: Coefficients
    y: Coefficients
    z: Coefficients

    def __post_init__(self) -> None:
        for axis in ("x", "y", "z"):
            _check_length(f"pitch trajectory {axis}", getattr(self, axis), PITCH_DEGREE)

    def fields(self) -> dict[str, float | None]:
        return _field_map("pitch_trajectory", self.x, self.y, self.z)


@dataclass(frozen=True)
class HitTrajectoryCoefficients:
    """Degree-8 position-vs-time-since-contact coefficients (c0..c8) per axis."""

    x: Coefficients
    y: Coefficients
    z: Coefficients

    def __post_init__(self) -> None:
        for axis in ("x", "y", "z"):
            _check_length(f"hit trajectory {axis}", getattr(self, axis), HIT_DEGREE)

    def fields(self) -> dict[str, float | None]:
        return _field_map("hit_trajectory", self.x, self.y, self.z)


def _field_map(prefix: str, x: Coefficients, y: Coefficients, z: Coefficients) -> dict[str, float | None]:
    out: dict[str, float | None] = {}
    for axis, coeffs in (("x", x), ("y", y), ("z", z)):
        for i, c in enumerate(coeffs):
            out[f"{prefix}_{axis}c{i}"] = c
    return out


@dataclass(frozen=True)
class PitchingMetrics:
    zone_time: float | None = None
    plate_loc_side: float | None = None
    plate_loc_height: float | None = None
    rel_speed: float | None = None


@dataclass(frozen=True)
class HittingMetrics:
    hang_time: float | None = None
    contact_position_x: float | None = None
    contact_position_y: float | None = None
    contact_position_z: float | None = None
    exit_speed: float | None = None
    angle: float | None = None
    distance: float | None = None


@dataclass(frozen=True)
class Pitch:
    pitch_uid: str
    metrics: PitchingMetrics = PitchingMetrics()
    trajectory: PitchTrajectoryCoefficients | None = None
    hit_trajectory: HitTrajectoryCoefficients | None = None
    hitting_metrics: HittingMetrics | None = None
    pitch_call: str | None = None
    play_result: str | None = None
    tagged_pitch_type: str | None = None
    auto_pitch_type: str | None = None
