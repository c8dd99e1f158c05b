from dataclasses import dataclass

from trackman_trajectory.domain.geometry import SvgPoint
from trackman_trajectory.exceptions import TrajectoryException


class ProjectorConfigError(TrajectoryException):
    """Raised when a projector config has an empty or inverted range."""


@dataclass(frozen=True)
class ProjectorConfig:
    """Canvas size in pixels and the plate-relative window (feet) it shows."""

    width: float = 400.0
    height: float = 500.0
    x_min: float = -2.0
    x_max: float = 2.0
    z_min: float = 0.0
    z_max: float = 5.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ProjectorConfigError(f"canvas must have positive size, got {self.width}x{self.height}")
        if self.x_max <= self.x_min:
            raise ProjectorConfigError(f"x range [{self.x_min}, {self.x_max}] is empty")
        if self.z_max <= self.z_min:
            raise ProjectorConfigError(f"z range [{self.z_min}, {self.z_max}] is empty")


DEFAULT_PROJECTOR = ProjectorConfig()


def project(plate_loc_side: float, plate_loc_height: float, config: ProjectorConfig = DEFAULT_PROJECTOR) -> SvgPoint:
    """Map a plate location in feet to SVG pixels.

    Side is negated to give the catcher's-eye view, and y is flipped because
    pixel rows grow downward while height grows upward.
    """
    x = ((-plate_loc_side - config.x_min) / (config.x_max - config.x_min)) * config.width
    y = config.height - ((plate_loc_height - config.z_min) / (config.z_max - config.z_min)) * config.height
    return SvgPoint(x, y)
