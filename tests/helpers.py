from typing import Any

from trackman_trajectory.domain.pitch import (
    HitTrajectoryCoefficients,
    HittingMetrics,
    Pitch,
    PitchingMetrics,
    PitchTrajectoryCoefficients,
)

# Straight-line pitch: x runs 55 -> 0 ft, height 6 -> 2 ft, side 0, over 0.4 s.
STRAIGHT_PITCH = PitchTrajectoryCoefficients(
    x=(55.0, -137.5, 0.0),
    y=(6.0, -10.0, 0.0),
    z=(0.0, 0.0, 0.0),
)
STRAIGHT_ZONE_TIME = 0.4


def hit_coefficients(
    x: tuple[float, ...] = (1.0, 80.0),
    y: tuple[float, ...] = (2.5, 40.0, -16.0),
    z: tuple[float, ...] = (0.5, 10.0),
) -> HitTrajectoryCoefficients:
    """Pad low-order coefficients out to degree 8."""

    def pad(c: tuple[float, ...]) -> tuple[float | None, ...]:
        return tuple(c) + (0.0,) * (9 - len(c))

    return HitTrajectoryCoefficients(x=pad(x), y=pad(y), z=pad(z))


# Parabolic arc starting at the contact position (1.0, 2.5, 0.5).
PARABOLIC_HIT = hit_coefficients()


def make_pitch(
    *,
    pitch_uid: str = "pitch-1",
    trajectory: PitchTrajectoryCoefficients | None = STRAIGHT_PITCH,
    zone_time: float | None = STRAIGHT_ZONE_TIME,
    plate_loc_side: float | None = 0.2,
    plate_loc_height: float | None = 2.5,
    hit_trajectory: HitTrajectoryCoefficients | None = None,
    hang_time: float | None = 3.0,
    contact: tuple[float | None, float | None, float | None] = (1.0, 2.5, 0.5),
    pitch_call: str | None = "StrikeCalled",
    play_result: str | None = None,
) -> Pitch:
    hitting = None
    if hit_trajectory is not None:
        hitting = HittingMetrics(
            hang_time=hang_time,
            contact_position_x=contact[0],
            contact_position_y=contact[1],
            contact_position_z=contact[2],
        )
    return Pitch(
        pitch_uid=pitch_uid,
        metrics=PitchingMetrics(zone_time=zone_time, plate_loc_side=plate_loc_side, plate_loc_height=plate_loc_height),
        trajectory=trajectory,
        hit_trajectory=hit_trajectory,
        hitting_metrics=hitting,
        pitch_call=pitch_call,
        play_result=play_result,
    )


def make_batted_pitch(**overrides: Any) -> Pitch:
    defaults: dict[str, Any] = {
        "pitch_uid": "batted-1",
        "hit_trajectory": PARABOLIC_HIT,
        "pitch_call": "InPlay",
        "play_result": "Double",
    }
    defaults.update(overrides)
    return make_pitch(**defaults)


def nested_record(pitch_uid: str = "rec-1", *, with_hit: bool = True) -> dict[str, Any]:
    """A stored pitch record in the nested shape the data store returns."""
    record: dict[str, Any] = {
        "pitch_uid": pitch_uid,
        "pitch_call": "InPlay" if with_hit else "BallCalled",
        "play_result": "Single" if with_hit else None,
        "auto_pitch_type": "Four-Seam",
        "pitching_metrics": {"zone_time": "0.4", "plate_loc_side": "-0.3", "plate_loc_height": "2.1", "rel_speed": "91.2"},
        "pitch_trajectory": {
            "pitch_trajectory_xc0": "55",
            "pitch_trajectory_xc1": "-137.5",
            "pitch_trajectory_xc2": "0",
            "pitch_trajectory_yc0": "6",
            "pitch_trajectory_yc1": "-10",
            "pitch_trajectory_yc2": "0",
            "pitch_trajectory_zc0": "0",
            "pitch_trajectory_zc1": "0",
            "pitch_trajectory_zc2": "0",
        },
    }
    if with_hit:
        hit = {f"hit_trajectory_{a}c{i}": 0.0 for a in ("x", "y", "z") for i in range(9)}
        hit.update({"hit_trajectory_xc0": 1.0, "hit_trajectory_xc1": 80.0})
        hit.update({"hit_trajectory_yc0": 2.5, "hit_trajectory_yc1": 40.0, "hit_trajectory_yc2": -16.0})
        hit.update({"hit_trajectory_zc0": 0.5, "hit_trajectory_zc1": 10.0})
        record["hit_trajectory"] = hit
        record["hitting_metrics"] = {
            "hang_time": 3.0,
            "contact_position_x": 1.0,
            "contact_position_y": 2.5,
            "contact_position_z": 0.5,
            "exit_speed": 98.1,
        }
    else:
        record["hit_trajectory"] = {f"hit_trajectory_{a}c{i}": "NA" for a in ("x", "y", "z") for i in range(9)}
        record["hitting_metrics"] = None
    return record
