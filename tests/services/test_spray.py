import pytest

from tests.helpers import PARABOLIC_HIT, make_batted_pitch, make_pitch
from trackman_trajectory.domain.pitch import Pitch
from trackman_trajectory.render.classifier import HitCategory
from trackman_trajectory.render.transforms import HIT_TRANSFORM
from trackman_trajectory.services.spray import landing_marker, landing_points
from trackman_trajectory.trajectory.hit import landing_point_at


class TestLandingMarker:
    def test_batted_ball(self, batted_ball: Pitch) -> None:
        marker = landing_marker(batted_ball)
        assert marker is not None
        assert marker.pitch_uid == "batted-1"
        assert marker.position == HIT_TRANSFORM.apply(landing_point_at(PARABOLIC_HIT, 3.0))
        assert marker.category is HitCategory.DOUBLE
        assert marker.color == "#fbbf24"

    def test_missing_play_result_is_out(self) -> None:
        marker = landing_marker(make_batted_pitch(play_result=None))
        assert marker is not None
        assert marker.play_result == "Out"
        assert marker.category is HitCategory.OUT

    def test_unrecognized_play_result(self) -> None:
        marker = landing_marker(make_batted_pitch(play_result="Error"))
        assert marker is not None
        assert marker.category is HitCategory.UNKNOWN
        assert marker.color == "#9ca3af"

    def test_no_hit(self, called_strike: Pitch) -> None:
        assert landing_marker(called_strike) is None

    @pytest.mark.parametrize("hang_time", [None, 0.0, -1.0])
    def test_bad_hang_time(self, hang_time: float | None) -> None:
        assert landing_marker(make_batted_pitch(hang_time=hang_time)) is None

    def test_as_dict(self, batted_ball: Pitch) -> None:
        marker = landing_marker(batted_ball)
        assert marker is not None
        data = marker.as_dict()
        assert data["category"] == "double"
        assert data["play_result"] == "Double"
        assert set(data["position"]) == {"x", "y", "z"}  # type: ignore[arg-type]


class TestLandingPoints:
    def test_filters_unplaceable(self) -> None:
        pitches = [
            make_batted_pitch(pitch_uid="a", play_result="Single"),
            make_pitch(pitch_uid="b"),
            make_batted_pitch(pitch_uid="c", play_result="HomeRun"),
        ]
        markers = landing_points(pitches)
        assert [m.pitch_uid for m in markers] == ["a", "c"]
        assert [m.category for m in markers] == [HitCategory.SINGLE, HitCategory.HOME_RUN]

    def test_empty(self) -> None:
        assert landing_points([]) == []
