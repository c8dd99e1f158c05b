"""Strike zone, plate and mound geometry.

Zone and plate points are laid out as (side, depth, height) in feet. The 3D
scenes draw them through the zone transform; the flat SVG view draws them
through the plate projector. Neither path feeds the other.
"""

from dataclasses import dataclass

from trackman_trajectory.domain.geometry import PhysicalPoint, RenderPoint, SvgPoint
from trackman_trajectory.render.projector import DEFAULT_PROJECTOR, ProjectorConfig, project
from trackman_trajectory.render.transforms import ZONE_TRANSFORM, AffineTransform

ZONE_HALF_WIDTH = 0.83
ZONE_BOTTOM = 1.5
ZONE_TOP = 3.5

PLATE_WIDTH = 1.4
PLATE_THICKNESS = 0.05
MOUND_DISTANCE = 60.5

STRIKE_ZONE_POLYGON: tuple[PhysicalPoint, ...] = (
    PhysicalPoint(-ZONE_HALF_WIDTH, 0.0, ZONE_BOTTOM),
    PhysicalPoint(ZONE_HALF_WIDTH, 0.0, ZONE_BOTTOM),
    PhysicalPoint(ZONE_HALF_WIDTH, 0.0, ZONE_TOP),
    PhysicalPoint(-ZONE_HALF_WIDTH, 0.0, ZONE_TOP),
    PhysicalPoint(-ZONE_HALF_WIDTH, 0.0, ZONE_BOTTOM),
)

_HALF_PLATE = PLATE_WIDTH / 2

# top face of the plate, on the ground
PLATE_POLYGON: tuple[PhysicalPoint, ...] = (
    PhysicalPoint(-_HALF_PLATE, -_HALF_PLATE, PLATE_THICKNESS),
    PhysicalPoint(_HALF_PLATE, -_HALF_PLATE, PLATE_THICKNESS),
    PhysicalPoint(_HALF_PLATE, _HALF_PLATE, PLATE_THICKNESS),
    PhysicalPoint(-_HALF_PLATE, _HALF_PLATE, PLATE_THICKNESS),
    PhysicalPoint(-_HALF_PLATE, -_HALF_PLATE, PLATE_THICKNESS),
)

MOUND_CENTER = PhysicalPoint(0.0, MOUND_DISTANCE, 0.0)

# The flat zone view draws the plate as a pentagon icon below the zone rather
# than to scale: (side, height) in feet, point first.
PLATE_ICON: tuple[tuple[float, float], ...] = (
    (0.0, 0.15),
    (0.45, 0.45),
    (0.45, 0.9),
    (-0.45, 0.9),
    (-0.45, 0.45),
)


@dataclass(frozen=True)
class Box:
    """An axis-aligned solid in the pitch-path frame (lateral, forward, vertical), feet."""

    name: str
    center: tuple[float, float, float]
    size: tuple[float, float, float]

    def as_dict(self) -> dict[str, object]:
        return {"name": self.name, "center": list(self.center), "size": list(self.size)}


PLATE_BOX = Box("plate", center=(0.0, 0.0, 0.1), size=(PLATE_WIDTH, PLATE_WIDTH, PLATE_THICKNESS))
MOUND_BOX = Box("mound", center=(0.0, MOUND_DISTANCE, 0.1), size=(2.0, 2.0, 0.2))
RUBBER_BOX = Box("rubber", center=(0.0, MOUND_DISTANCE, 1.0), size=(0.5, 0.2, 0.1))
FIELD_BOXES: tuple[Box, ...] = (PLATE_BOX, MOUND_BOX, RUBBER_BOX)


def zone_outline_3d(transform: AffineTransform = ZONE_TRANSFORM) -> list[RenderPoint]:
    return [transform.apply(p) for p in STRIKE_ZONE_POLYGON]


def zone_outline_2d(config: ProjectorConfig = DEFAULT_PROJECTOR) -> list[SvgPoint]:
    return [project(p.x, p.z, config) for p in STRIKE_ZONE_POLYGON]


def plate_outline_3d(transform: AffineTransform = ZONE_TRANSFORM) -> list[RenderPoint]:
    return [transform.apply(p) for p in PLATE_POLYGON]


def plate_outline_2d(config: ProjectorConfig = DEFAULT_PROJECTOR) -> list[SvgPoint]:
    return [project(side, height, config) for side, height in PLATE_ICON]


def mound_marker(transform: AffineTransform = ZONE_TRANSFORM) -> RenderPoint:
    return transform.apply(MOUND_CENTER)


def is_in_zone(plate_loc_side: float | None, plate_loc_height: float | None) -> bool:
    if plate_loc_side is None or plate_loc_height is None:
        return False
    return -ZONE_HALF_WIDTH <= plate_loc_side <= ZONE_HALF_WIDTH and ZONE_BOTTOM <= plate_loc_height <= ZONE_TOP


def plate_location_marker(
    plate_loc_side: float, plate_loc_height: float, transform: AffineTransform = ZONE_TRANSFORM
) -> RenderPoint:
    """Place a pitch's plate crossing in the 3D zone overlay (side mirrored to the catcher's view)."""
    return transform.apply(PhysicalPoint(-plate_loc_side, 0.0, plate_loc_height))
