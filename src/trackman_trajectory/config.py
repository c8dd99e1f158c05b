import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from trackman_trajectory.exceptions import TrajectoryException
from trackman_trajectory.render.animation import LoopMode
from trackman_trajectory.render.projector import ProjectorConfig, ProjectorConfigError

_CONFIG_FILENAME = "trackman.toml"


class SettingsError(TrajectoryException):
    """Raised when trajectory settings are invalid."""


@dataclass(frozen=True)
class AnimationSettings:
    mode: LoopMode = LoopMode.PHYSICAL
    hit_loop_seconds: float = 3.0
    pitch_loop_seconds: float = 2.0
    time_scale: float = 1.0
    loop: bool = True


@dataclass(frozen=True)
class TrajectorySettings:
    pitch_sample_count: int = 150
    hit_sample_steps: int = 100
    fallback_zone_time: float = 0.5
    curve_line_points: int = 100
    animation: AnimationSettings = field(default_factory=AnimationSettings)
    projector: ProjectorConfig = field(default_factory=ProjectorConfig)


# -- Parsing -----------------------------------------------------------------


def _get_int(raw: dict[str, Any], key: str, default: int, minimum: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"'{key}' must be an integer, got {value!r}")
    if value < minimum:
        raise SettingsError(f"'{key}' must be >= {minimum}, got {value}")
    return value


def _get_positive_float(raw: dict[str, Any], key: str, default: float) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SettingsError(f"'{key}' must be a number, got {value!r}")
    if value <= 0:
        raise SettingsError(f"'{key}' must be > 0, got {value}")
    return float(value)


def _get_float(raw: dict[str, Any], key: str, default: float) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SettingsError(f"'{key}' must be a number, got {value!r}")
    return float(value)


def parse_animation(raw: dict[str, Any]) -> AnimationSettings:
    defaults = AnimationSettings()
    raw_mode = raw.get("mode", defaults.mode.value)
    try:
        mode = LoopMode(raw_mode)
    except ValueError:
        raise SettingsError(f"animation: invalid mode '{raw_mode}'")
    loop = raw.get("loop", defaults.loop)
    if not isinstance(loop, bool):
        raise SettingsError(f"'loop' must be true or false, got {loop!r}")
    return AnimationSettings(
        mode=mode,
        hit_loop_seconds=_get_positive_float(raw, "hit_loop_seconds", defaults.hit_loop_seconds),
        pitch_loop_seconds=_get_positive_float(raw, "pitch_loop_seconds", defaults.pitch_loop_seconds),
        time_scale=_get_positive_float(raw, "time_scale", defaults.time_scale),
        loop=loop,
    )


def parse_projector(raw: dict[str, Any]) -> ProjectorConfig:
    defaults = ProjectorConfig()
    try:
        return ProjectorConfig(
            width=_get_float(raw, "width", defaults.width),
            height=_get_float(raw, "height", defaults.height),
            x_min=_get_float(raw, "x_min", defaults.x_min),
            x_max=_get_float(raw, "x_max", defaults.x_max),
            z_min=_get_float(raw, "z_min", defaults.z_min),
            z_max=_get_float(raw, "z_max", defaults.z_max),
        )
    except ProjectorConfigError as e:
        raise SettingsError(f"projector: {e}") from e


def parse_settings(raw: dict[str, Any]) -> TrajectorySettings:
    defaults = TrajectorySettings()
    animation = raw.get("animation", {})
    projector = raw.get("projector", {})
    if not isinstance(animation, dict):
        raise SettingsError("[trajectory.animation] must be a table")
    if not isinstance(projector, dict):
        raise SettingsError("[trajectory.projector] must be a table")
    return TrajectorySettings(
        pitch_sample_count=_get_int(raw, "pitch_sample_count", defaults.pitch_sample_count, minimum=2),
        hit_sample_steps=_get_int(raw, "hit_sample_steps", defaults.hit_sample_steps, minimum=1),
        fallback_zone_time=_get_positive_float(raw, "fallback_zone_time", defaults.fallback_zone_time),
        curve_line_points=_get_int(raw, "curve_line_points", defaults.curve_line_points, minimum=1),
        animation=parse_animation(animation),
        projector=parse_projector(projector),
    )


# -- TOML loading ------------------------------------------------------------


def load_settings(config_dir: Path | None = None) -> TrajectorySettings:
    """Read ``trackman.toml`` from ``config_dir``; defaults when the file is absent."""
    if config_dir is None:
        return TrajectorySettings()
    toml_path = config_dir / _CONFIG_FILENAME
    if not toml_path.exists():
        return TrajectorySettings()

    with toml_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise SettingsError(f"{_CONFIG_FILENAME}: {e}") from e

    section = data.get("trajectory", {})
    if not isinstance(section, dict):
        raise SettingsError(f"[trajectory] in {_CONFIG_FILENAME} must be a table")
    return parse_settings(section)
