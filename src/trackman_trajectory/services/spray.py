import logging
from collections.abc import Iterable
from dataclasses import dataclass

from trackman_trajectory.domain.geometry import RenderPoint
from trackman_trajectory.domain.pitch import Pitch
from trackman_trajectory.domain.result import Err, Ok
from trackman_trajectory.render.classifier import HitCategory, classify
from trackman_trajectory.render.transforms import HIT_TRANSFORM
from trackman_trajectory.trajectory.hit import is_trajectory_absent, landing_point_at, validate_hang_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LandingMarker:
    pitch_uid: str
    position: RenderPoint
    play_result: str
    category: HitCategory

    @property
    def color(self) -> str:
        return self.category.color

    def as_dict(self) -> dict[str, object]:
        return {
            "pitch_uid": self.pitch_uid,
            "position": self.position.as_dict(),
            "play_result": self.play_result,
            "category": self.category.value,
            "color": self.color,
        }


def landing_marker(pitch: Pitch) -> LandingMarker | None:
    """Where a batted ball finished, in hit-scene space, or None if it cannot be placed."""
    if pitch.hit_trajectory is None or pitch.hitting_metrics is None or is_trajectory_absent(pitch.hit_trajectory):
        return None
    match validate_hang_time(pitch.hitting_metrics.hang_time, pitch.pitch_uid):
        case Err(e):
            logger.debug("No landing point for %s: %s", pitch.pitch_uid, e.message)
            return None
        case Ok(hang_time):
            landing = landing_point_at(pitch.hit_trajectory, hang_time)
    if not landing.is_finite():
        logger.debug("No landing point for %s: trajectory evaluates to a non-finite point", pitch.pitch_uid)
        return None
    play_result = pitch.play_result or "Out"
    return LandingMarker(
        pitch_uid=pitch.pitch_uid,
        position=HIT_TRANSFORM.apply(landing),
        play_result=play_result,
        category=classify(play_result),
    )


def landing_points(pitches: Iterable[Pitch]) -> list[LandingMarker]:
    markers = [m for m in (landing_marker(p) for p in pitches) if m is not None]
    logger.debug("Placed %d landing markers", len(markers))
    return markers
