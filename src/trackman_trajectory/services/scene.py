"""Everything a renderer needs for one selected pitch, derived once.

Data problems never raise here: each failed segment is recorded in
``PitchScene.skipped`` and simply left out of the scene.
"""

import logging
from dataclasses import dataclass

from trackman_trajectory.config import TrajectorySettings
from trackman_trajectory.domain.errors import TrajectoryError
from trackman_trajectory.domain.geometry import RenderPoint, StitchedCurve, SvgPoint, TrajectoryCurve
from trackman_trajectory.domain.pitch import Pitch
from trackman_trajectory.domain.result import Err, Ok
from trackman_trajectory.render.animation import CatmullRomCurve, LoopingAnimation, resolve_loop_duration
from trackman_trajectory.render.classifier import HitCategory, classify
from trackman_trajectory.render.projector import project
from trackman_trajectory.render.transforms import HIT_TRANSFORM, PITCH_TRANSFORM
from trackman_trajectory.render.view import HIT_SCENE_VIEWS, PITCH_SCENE_VIEWS, ViewPreset
from trackman_trajectory.render.zone import FIELD_BOXES, STRIKE_ZONE_POLYGON, Box, is_in_zone, plate_location_marker
from trackman_trajectory.trajectory.alignment import contact_position_of, stitch_trajectories
from trackman_trajectory.trajectory.hit import landing_point_at, sample_hit_for
from trackman_trajectory.trajectory.pitch import plate_frame_path, reconstruct_pitch_for, resolve_zone_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PitchScene:
    pitch_uid: str
    zone_time: float
    hit_category: HitCategory
    in_zone: bool
    pitch_curve: TrajectoryCurve | None = None
    pitch_line: tuple[RenderPoint, ...] = ()
    stitched: StitchedCurve | None = None
    landing_point: RenderPoint | None = None
    hang_time: float | None = None
    plate_location_svg: SvgPoint | None = None
    plate_location_3d: RenderPoint | None = None
    animation: LoopingAnimation | None = None
    views: ViewPreset = HIT_SCENE_VIEWS
    skipped: tuple[TrajectoryError, ...] = ()

    @property
    def has_pitch(self) -> bool:
        return self.pitch_curve is not None

    @property
    def has_hit(self) -> bool:
        return self.stitched is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "pitch_uid": self.pitch_uid,
            "zone_time": self.zone_time,
            "hang_time": self.hang_time,
            "hit_category": self.hit_category.value,
            "hit_color": self.hit_category.color,
            "in_zone": self.in_zone,
            "pitch_curve": self.pitch_curve.to_list() if self.pitch_curve is not None else None,
            "pitch_line": [p.as_dict() for p in self.pitch_line],
            "stitched": self.stitched.to_dict() if self.stitched is not None else None,
            "landing_point": self.landing_point.as_dict() if self.landing_point is not None else None,
            "plate_location_svg": self.plate_location_svg.as_dict() if self.plate_location_svg is not None else None,
            "plate_location_3d": self.plate_location_3d.as_dict() if self.plate_location_3d is not None else None,
            "animation_duration": self.animation.duration if self.animation is not None else None,
            "skipped": [{"kind": type(e).__name__, "message": e.message} for e in self.skipped],
        }


def _skip(skipped: list[TrajectoryError], error: TrajectoryError) -> None:
    logger.debug("Skipping segment for %s: %s", error.pitch_uid, error.message)
    skipped.append(error)


def _line(curve: TrajectoryCurve, points: int) -> tuple[RenderPoint, ...]:
    sampled = CatmullRomCurve.through(curve).sample(points)
    return tuple(RenderPoint(float(x), float(y), float(z)) for x, y, z in sampled)


def build_pitch_scene(pitch: Pitch, settings: TrajectorySettings | None = None) -> PitchScene:
    if settings is None:
        settings = TrajectorySettings()
    anim = settings.animation
    skipped: list[TrajectoryError] = []
    zone_time = resolve_zone_time(pitch.metrics.zone_time, settings.fallback_zone_time)

    pitch_curve: TrajectoryCurve | None = None
    match reconstruct_pitch_for(pitch, settings.pitch_sample_count, fallback_zone_time=settings.fallback_zone_time):
        case Ok(physical):
            pitch_curve = PITCH_TRANSFORM.apply_curve(physical)
        case Err(e):
            _skip(skipped, e)

    stitched: StitchedCurve | None = None
    landing: RenderPoint | None = None
    hang_time: float | None = None
    match sample_hit_for(pitch, settings.hit_sample_steps):
        case Ok(hit_curve):
            hang_time = pitch.hitting_metrics.hang_time  # type: ignore[union-attr]
            landing = HIT_TRANSFORM.apply(landing_point_at(pitch.hit_trajectory, hang_time))  # type: ignore[arg-type]
            match stitch_trajectories(
                pitch_curve,
                hit_curve,
                contact_position_of(pitch.hitting_metrics),
                pitch_uid=pitch.pitch_uid,
            ):
                case Ok(s):
                    stitched = s
                case Err(e):
                    _skip(skipped, e)
        case Err(e):
            _skip(skipped, e)

    animation: LoopingAnimation | None = None
    if stitched is not None and hang_time is not None:
        duration = resolve_loop_duration(
            hang_time, mode=anim.mode, fixed_duration=anim.hit_loop_seconds, time_scale=anim.time_scale
        )
        animation = LoopingAnimation(CatmullRomCurve.through(stitched.hit), duration, loop=anim.loop)
    elif pitch_curve is not None:
        duration = resolve_loop_duration(
            zone_time, mode=anim.mode, fixed_duration=anim.pitch_loop_seconds, time_scale=anim.time_scale
        )
        animation = LoopingAnimation(CatmullRomCurve.through(pitch_curve), duration, loop=anim.loop)

    pitch_line = _line(pitch_curve, settings.curve_line_points) if pitch_curve is not None else ()

    side, height = pitch.metrics.plate_loc_side, pitch.metrics.plate_loc_height
    svg: SvgPoint | None = None
    marker: RenderPoint | None = None
    if side is not None and height is not None:
        svg = project(side, height, settings.projector)
        marker = plate_location_marker(side, height)

    return PitchScene(
        pitch_uid=pitch.pitch_uid,
        zone_time=zone_time,
        hit_category=classify(pitch.play_result),
        in_zone=is_in_zone(side, height),
        pitch_curve=pitch_curve,
        pitch_line=pitch_line,
        stitched=stitched,
        landing_point=landing,
        hang_time=hang_time,
        plate_location_svg=svg,
        plate_location_3d=marker,
        animation=animation,
        skipped=tuple(skipped),
    )


@dataclass(frozen=True, eq=False)
class PitchPathScene:
    """The standalone pitch view: the flight re-axised onto the plate, with the field around it."""

    pitch_uid: str
    zone_time: float
    path: TrajectoryCurve | None = None
    path_line: tuple[RenderPoint, ...] = ()
    animation: LoopingAnimation | None = None
    zone_outline: tuple[RenderPoint, ...] = tuple(RenderPoint(p.x, p.y, p.z) for p in STRIKE_ZONE_POLYGON)
    field: tuple[Box, ...] = FIELD_BOXES
    views: ViewPreset = PITCH_SCENE_VIEWS
    skipped: tuple[TrajectoryError, ...] = ()

    @property
    def has_path(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "pitch_uid": self.pitch_uid,
            "zone_time": self.zone_time,
            "path": self.path.to_list() if self.path is not None else None,
            "path_line": [p.as_dict() for p in self.path_line],
            "zone_outline": [p.as_dict() for p in self.zone_outline],
            "field": [b.as_dict() for b in self.field],
            "animation_duration": self.animation.duration if self.animation is not None else None,
            "skipped": [{"kind": type(e).__name__, "message": e.message} for e in self.skipped],
        }


def build_pitch_path_scene(pitch: Pitch, settings: TrajectorySettings | None = None) -> PitchPathScene:
    if settings is None:
        settings = TrajectorySettings()
    anim = settings.animation
    skipped: list[TrajectoryError] = []
    zone_time = resolve_zone_time(pitch.metrics.zone_time, settings.fallback_zone_time)

    path: TrajectoryCurve | None = None
    match reconstruct_pitch_for(pitch, settings.pitch_sample_count, fallback_zone_time=settings.fallback_zone_time):
        case Ok(physical):
            path = plate_frame_path(physical)
        case Err(e):
            _skip(skipped, e)

    if path is None:
        return PitchPathScene(pitch_uid=pitch.pitch_uid, zone_time=zone_time, skipped=tuple(skipped))

    duration = resolve_loop_duration(
        zone_time, mode=anim.mode, fixed_duration=anim.pitch_loop_seconds, time_scale=anim.time_scale
    )
    return PitchPathScene(
        pitch_uid=pitch.pitch_uid,
        zone_time=zone_time,
        path=path,
        path_line=_line(path, settings.curve_line_points),
        animation=LoopingAnimation(CatmullRomCurve.through(path), duration, loop=anim.loop),
        skipped=tuple(skipped),
    )


class SceneController:
    """Holds the scene for the currently selected pitch.

    Selecting a pitch replaces whatever was selected before; the previous
    scene and its animation are dropped. ``generation`` increases on every
    new selection so a frame callback started for an older selection can
    tell that it is stale.
    """

    def __init__(self, settings: TrajectorySettings | None = None) -> None:
        self._settings = settings if settings is not None else TrajectorySettings()
        self._scene: PitchScene | None = None
        self._generation = 0

    @property
    def current(self) -> PitchScene | None:
        return self._scene

    @property
    def generation(self) -> int:
        return self._generation

    def select(self, pitch: Pitch) -> PitchScene:
        if self._scene is not None and self._scene.pitch_uid == pitch.pitch_uid:
            return self._scene
        self._generation += 1
        self._scene = build_pitch_scene(pitch, self._settings)
        logger.debug("Selected pitch %s (generation %d)", pitch.pitch_uid, self._generation)
        return self._scene

    def frame(self, elapsed: float, generation: int | None = None) -> RenderPoint | None:
        if generation is not None and generation != self._generation:
            return None
        if self._scene is None or self._scene.animation is None:
            return None
        return self._scene.animation.position_at(elapsed)

    def clear(self) -> None:
        self._scene = None
        self._generation += 1
