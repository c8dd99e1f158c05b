import logging
import math
from collections.abc import Mapping
from typing import Any

from trackman_trajectory.domain.pitch import (
    HIT_DEGREE,
    PITCH_DEGREE,
    HitTrajectoryCoefficients,
    HittingMetrics,
    Pitch,
    PitchingMetrics,
    PitchTrajectoryCoefficients,
)
from trackman_trajectory.trajectory.hit import is_trajectory_absent

logger = logging.getLogger(__name__)

_AXES = ("x", "y", "z")


def _to_optional_float(value: Any) -> float | None:
    """Numbers pass through; None, "", "NA" and anything unparsable become None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(f):
        return None
    return f


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    s = str(value)
    if s == "":
        return None
    return s


def _coeffs(values: Mapping[str, Any], prefix: str, axis: str, degree: int) -> tuple[float | None, ...]:
    return tuple(_to_optional_float(values.get(f"{prefix}_{axis}c{i}")) for i in range(degree + 1))


def _pitch_coefficients(values: Mapping[str, Any] | None) -> PitchTrajectoryCoefficients | None:
    if not isinstance(values, Mapping) or not values:
        return None
    x, y, z = (_coeffs(values, "pitch_trajectory", axis, PITCH_DEGREE) for axis in _AXES)
    coeffs = PitchTrajectoryCoefficients(x=x, y=y, z=z)
    if all(c is None for c in coeffs.fields().values()):
        return None
    return coeffs


def _hit_coefficients(values: Mapping[str, Any] | None) -> HitTrajectoryCoefficients | None:
    if not isinstance(values, Mapping) or not values or is_trajectory_absent(values):
        return None
    x, y, z = (_coeffs(values, "hit_trajectory", axis, HIT_DEGREE) for axis in _AXES)
    return HitTrajectoryCoefficients(x=x, y=y, z=z)


def _pitching_metrics(values: Mapping[str, Any] | None) -> PitchingMetrics:
    if not isinstance(values, Mapping) or not values:
        return PitchingMetrics()
    return PitchingMetrics(
        zone_time=_to_optional_float(values.get("zone_time")),
        plate_loc_side=_to_optional_float(values.get("plate_loc_side")),
        plate_loc_height=_to_optional_float(values.get("plate_loc_height")),
        rel_speed=_to_optional_float(values.get("rel_speed")),
    )


def _hitting_metrics(values: Mapping[str, Any] | None) -> HittingMetrics | None:
    if not isinstance(values, Mapping) or not values:
        return None
    return HittingMetrics(
        hang_time=_to_optional_float(values.get("hang_time")),
        contact_position_x=_to_optional_float(values.get("contact_position_x")),
        contact_position_y=_to_optional_float(values.get("contact_position_y")),
        contact_position_z=_to_optional_float(values.get("contact_position_z")),
        exit_speed=_to_optional_float(values.get("exit_speed")),
        angle=_to_optional_float(values.get("angle")),
        distance=_to_optional_float(values.get("distance")),
    )


def pitch_from_record(record: Mapping[str, Any]) -> Pitch | None:
    """Map a stored pitch with nested trajectory and metric sub-records."""
    pitch_uid = _to_optional_str(record.get("pitch_uid"))
    if pitch_uid is None:
        logger.debug("Skipping record without pitch_uid")
        return None
    return Pitch(
        pitch_uid=pitch_uid,
        metrics=_pitching_metrics(record.get("pitching_metrics")),
        trajectory=_pitch_coefficients(record.get("pitch_trajectory")),
        hit_trajectory=_hit_coefficients(record.get("hit_trajectory")),
        hitting_metrics=_hitting_metrics(record.get("hitting_metrics")),
        pitch_call=_to_optional_str(record.get("pitch_call")),
        play_result=_to_optional_str(record.get("play_result")),
        tagged_pitch_type=_to_optional_str(record.get("tagged_pitch_type")),
        auto_pitch_type=_to_optional_str(record.get("auto_pitch_type")),
    )


# -- Flat Trackman export rows -----------------------------------------------


def _camel(snake: str) -> str:
    head, *rest = snake.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _pascal(snake: str) -> str:
    return "".join(part.capitalize() for part in snake.split("_"))


def _get_field(row: Mapping[str, Any], snake: str) -> Any:
    """Look a column up by its Trackman, snake_case or camelCase name."""
    special = _TRACKMAN_NAMES.get(snake)
    for name in (special or _pascal(snake), snake, _camel(snake)):
        value = row.get(name)
        if value is not None and value != "":
            return value
    return None


_TRACKMAN_NAMES: dict[str, str] = {
    "pitch_uid": "PitchUID",
}

_PITCHING_METRIC_FIELDS = ("zone_time", "plate_loc_side", "plate_loc_height", "rel_speed")
_HITTING_METRIC_FIELDS = (
    "hang_time",
    "contact_position_x",
    "contact_position_y",
    "contact_position_z",
    "exit_speed",
    "angle",
    "distance",
)
_PITCH_FIELDS = ("pitch_uid", "pitch_call", "play_result", "tagged_pitch_type", "auto_pitch_type")


def _trajectory_fields(prefix: str, degree: int) -> tuple[str, ...]:
    return tuple(f"{prefix}_{axis}c{i}" for axis in _AXES for i in range(degree + 1))


def pitch_from_trackman_row(row: Mapping[str, Any]) -> Pitch | None:
    """Map one row of a Trackman CSV export by regrouping it into a nested record."""
    record: dict[str, Any] = {name: _get_field(row, name) for name in _PITCH_FIELDS}
    record["pitching_metrics"] = {name: _get_field(row, name) for name in _PITCHING_METRIC_FIELDS}
    record["pitch_trajectory"] = {
        name: _get_field(row, name) for name in _trajectory_fields("pitch_trajectory", PITCH_DEGREE)
    }
    record["hit_trajectory"] = {name: _get_field(row, name) for name in _trajectory_fields("hit_trajectory", HIT_DEGREE)}
    hitting = {name: _get_field(row, name) for name in _HITTING_METRIC_FIELDS}
    record["hitting_metrics"] = hitting if any(v is not None for v in hitting.values()) else None
    return pitch_from_record(record)
