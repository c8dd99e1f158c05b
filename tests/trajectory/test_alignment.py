import numpy as np
import pytest

from tests.helpers import PARABOLIC_HIT, STRAIGHT_PITCH, STRAIGHT_ZONE_TIME, hit_coefficients
from trackman_trajectory.domain.errors import AlignmentFailure
from trackman_trajectory.domain.geometry import PhysicalPoint, TrajectoryCurve, Vector3
from trackman_trajectory.domain.pitch import HittingMetrics
from trackman_trajectory.domain.result import Err, Ok
from trackman_trajectory.exceptions import FrameMismatchError
from trackman_trajectory.render.transforms import HIT_TRANSFORM, PITCH_TRANSFORM
from trackman_trajectory.trajectory.alignment import (
    align_hit_to_pitch,
    contact_position_of,
    stitch,
    stitch_trajectories,
)
from trackman_trajectory.trajectory.hit import sample_hit
from trackman_trajectory.trajectory.pitch import reconstruct_pitch


def _pitch_curve() -> TrajectoryCurve:
    result = reconstruct_pitch(STRAIGHT_PITCH, STRAIGHT_ZONE_TIME, 30)
    assert isinstance(result, Ok)
    return PITCH_TRANSFORM.apply_curve(result.value)


def _hit_curve(contact: tuple[float, float, float]) -> TrajectoryCurve:
    cx, cy, cz = contact
    result = sample_hit(hit_coefficients(x=(cx, 80.0), y=(cy, 40.0, -16.0), z=(cz, 10.0)), 2.5, 20)
    assert isinstance(result, Ok)
    return result.value


class TestContactPositionOf:
    def test_complete(self) -> None:
        metrics = HittingMetrics(contact_position_x=1.0, contact_position_y=2.0, contact_position_z=3.0)
        assert contact_position_of(metrics) == PhysicalPoint(1.0, 2.0, 3.0)

    def test_partial(self) -> None:
        assert contact_position_of(HittingMetrics(contact_position_x=1.0, contact_position_y=2.0)) is None

    def test_no_metrics(self) -> None:
        assert contact_position_of(None) is None


class TestAlignHitToPitch:
    @pytest.mark.parametrize(
        "contact",
        [(0.0, 0.0, 0.0), (1.0, 2.5, 0.5), (-3.2, 4.1, 1.7), (250.0, -80.0, 120.0), (1e-6, 1e-6, -1e-6)],
    )
    def test_contact_lands_on_pitch_end(self, contact: tuple[float, float, float]) -> None:
        curve = _pitch_curve()
        result = align_hit_to_pitch(curve, PhysicalPoint(*contact))
        assert isinstance(result, Ok)
        moved = HIT_TRANSFORM.apply(PhysicalPoint(*contact)) + result.value
        end = curve.last_render_point()
        assert abs(moved.x - end.x) < 1e-9
        assert abs(moved.y - end.y) < 1e-9
        assert abs(moved.z - end.z) < 1e-9

    def test_known_shift(self) -> None:
        # pitch ends at physical (0, 2, 0) -> render (0, 0.808, 38.47)
        result = align_hit_to_pitch(_pitch_curve(), PhysicalPoint(0.0, 0.0, 0.0))
        assert isinstance(result, Ok)
        shift = result.value
        assert shift.x == pytest.approx(0.0)
        assert shift.y == pytest.approx(0.808 - 0.3)
        assert shift.z == pytest.approx(0.47)

    def test_missing_pitch_curve(self) -> None:
        result = align_hit_to_pitch(None, PhysicalPoint(1.0, 1.0, 1.0), pitch_uid="p")
        match result:
            case Err(AlignmentFailure(reason=reason, pitch_uid=uid)):
                assert reason == "no_pitch_curve"
                assert uid == "p"
            case _:
                pytest.fail(f"expected AlignmentFailure, got {result!r}")

    def test_non_finite_contact(self) -> None:
        result = align_hit_to_pitch(_pitch_curve(), PhysicalPoint(float("nan"), 0.0, 0.0))
        assert isinstance(result, Err)
        assert result.error.reason == "contact"

    def test_missing_contact(self) -> None:
        result = align_hit_to_pitch(_pitch_curve(), None)
        assert isinstance(result, Err)
        assert isinstance(result.error, AlignmentFailure)

    def test_physical_curve_rejected(self) -> None:
        result = reconstruct_pitch(STRAIGHT_PITCH, STRAIGHT_ZONE_TIME, 5)
        assert isinstance(result, Ok)
        with pytest.raises(FrameMismatchError):
            align_hit_to_pitch(result.value, PhysicalPoint(0.0, 0.0, 0.0))


class TestStitch:
    def test_join_is_exact(self) -> None:
        pitch_curve = _pitch_curve()
        hit_curve = _hit_curve((1.0, 2.5, 0.5))
        shift = align_hit_to_pitch(pitch_curve, PhysicalPoint(1.0, 2.5, 0.5))
        assert isinstance(shift, Ok)
        stitched = stitch(pitch_curve, hit_curve, shift.value)
        assert stitched.hit.first() == pitch_curve.last()
        assert stitched.join_point == pitch_curve.last_render_point()

    def test_hit_segment_is_shifted(self) -> None:
        pitch_curve = _pitch_curve()
        hit_curve = _hit_curve((1.0, 2.5, 0.5))
        shift = Vector3(1.0, -2.0, 0.5)
        stitched = stitch(pitch_curve, hit_curve, shift)
        expected = HIT_TRANSFORM.apply(PhysicalPoint(*hit_curve.points[5])) + shift
        assert stitched.hit.points[5] == pytest.approx(expected.as_array())

    def test_frame_and_lengths(self) -> None:
        pitch_curve = _pitch_curve()
        hit_curve = _hit_curve((0.0, 3.0, 0.0))
        stitched = stitch(pitch_curve, hit_curve, Vector3(0.0, 0.0, 0.0))
        assert stitched.frame == PITCH_TRANSFORM.name
        assert stitched.hit.frame == PITCH_TRANSFORM.name
        assert len(stitched.hit) == len(hit_curve)
        assert len(stitched.combined()) == len(pitch_curve) + len(hit_curve) - 1

    def test_to_dict(self) -> None:
        stitched = stitch(_pitch_curve(), _hit_curve((0.0, 3.0, 0.0)), Vector3(1.0, 2.0, 3.0))
        data = stitched.to_dict()
        assert data["shift"] == {"x": 1.0, "y": 2.0, "z": 3.0}
        assert len(data["hit"]) == 21


class TestStitchTrajectories:
    @pytest.mark.parametrize("contact", [(1.0, 2.5, 0.5), (-2.0, 1.0, 3.0), (40.0, 10.0, -25.0)])
    def test_continuity(self, contact: tuple[float, float, float]) -> None:
        pitch_curve = _pitch_curve()
        result = stitch_trajectories(pitch_curve, _hit_curve(contact), PhysicalPoint(*contact))
        assert isinstance(result, Ok)
        gap = np.linalg.norm(result.value.hit.points[0] - pitch_curve.points[-1])
        assert gap < 1e-9

    def test_contact_maps_onto_join(self) -> None:
        pitch_curve = _pitch_curve()
        hit_curve = _hit_curve((1.0, 2.5, 0.5))
        result = stitch_trajectories(pitch_curve, hit_curve, PhysicalPoint(1.0, 2.5, 0.5))
        assert isinstance(result, Ok)
        moved = HIT_TRANSFORM.apply(PhysicalPoint(*hit_curve.points[0])) + result.value.shift
        assert moved.as_array() == pytest.approx(pitch_curve.points[-1])

    def test_without_pitch_curve(self) -> None:
        result = stitch_trajectories(None, _hit_curve((1.0, 2.5, 0.5)), PhysicalPoint(1.0, 2.5, 0.5))
        assert isinstance(result, Err)

    def test_parabolic_fixture_matches_contact(self) -> None:
        result = sample_hit(PARABOLIC_HIT, 3.0, 5)
        assert isinstance(result, Ok)
        assert result.value.first() == pytest.approx((1.0, 2.5, 0.5))
