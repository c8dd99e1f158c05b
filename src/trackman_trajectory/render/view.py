from dataclasses import dataclass
from enum import Enum


class ViewMode(Enum):
    DEFAULT = "default"
    CATCHER = "catcher"


@dataclass(frozen=True)
class CameraPose:
    position: tuple[float, float, float]
    look_at: tuple[float, float, float]

    def as_dict(self) -> dict[str, list[float]]:
        return {"position": list(self.position), "look_at": list(self.look_at)}


@dataclass(frozen=True)
class ViewPreset:
    default: CameraPose
    catcher: CameraPose


HIT_SCENE_VIEWS = ViewPreset(
    default=CameraPose(position=(0.0, 60.0, 120.0), look_at=(0.0, 0.0, 0.0)),
    catcher=CameraPose(position=(0.0, 0.7, 40.0), look_at=(0.0, 0.0, 0.0)),
)

PITCH_SCENE_VIEWS = ViewPreset(
    default=CameraPose(position=(10.0, -20.0, 8.0), look_at=(0.0, 0.0, 0.0)),
    catcher=CameraPose(position=(0.03, -7.74, 2.62), look_at=(0.0, 5.0, 0.0)),
)


class ViewController:
    """Holds the camera state for one scene.

    The rendering layer reads ``pose`` each frame and disables orbit
    controls while ``controls_enabled`` is False.
    """

    def __init__(self, preset: ViewPreset = HIT_SCENE_VIEWS) -> None:
        self._preset = preset
        self._mode = ViewMode.DEFAULT

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def pose(self) -> CameraPose:
        if self._mode is ViewMode.CATCHER:
            return self._preset.catcher
        return self._preset.default

    @property
    def controls_enabled(self) -> bool:
        return self._mode is ViewMode.DEFAULT

    def set_catcher_view(self) -> CameraPose:
        self._mode = ViewMode.CATCHER
        return self.pose

    def set_default_view(self) -> CameraPose:
        self._mode = ViewMode.DEFAULT
        return self.pose
