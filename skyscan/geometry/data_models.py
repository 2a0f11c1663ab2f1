# skyscan/geometry/data_models.py
"""
Plain geometry value types shared by the hull, bounding-box and polygon
helpers. Everything here lives in the horizontal (x, y) plane of the local
mission frame, in metres.
"""
from dataclasses import dataclass
from typing import List, Tuple

Point2D = Tuple[float, float]
Vector2D = Tuple[float, float]


@dataclass(frozen=True)
class OBBResult:
    """Minimal-area rectangle enclosing a point set.

    axis1 is the unit vector along the longer side, axis2 along the shorter
    one. length is measured along axis1 and width along axis2.
    """
    center: Point2D
    axis1: Vector2D
    axis2: Vector2D
    length: float
    width: float
    is_fallback: bool = False

    @property
    def area(self) -> float:
        return self.length * self.width

    def corners(self) -> List[Point2D]:
        """Returns the four corners counter-clockwise, starting at (-L/2, -W/2)."""
        cx, cy = self.center
        hl, hw = self.length / 2.0, self.width / 2.0
        result = []
        for su, sv in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
            result.append((
                cx + su * hl * self.axis1[0] + sv * hw * self.axis2[0],
                cy + su * hl * self.axis1[1] + sv * hw * self.axis2[1],
            ))
        return result

    def to_local(self, point: Point2D) -> Point2D:
        """Projects a point onto the box frame as (along axis1, along axis2)."""
        dx, dy = point[0] - self.center[0], point[1] - self.center[1]
        return (dx * self.axis1[0] + dy * self.axis1[1],
                dx * self.axis2[0] + dy * self.axis2[1])

    def from_local(self, u: float, v: float) -> Point2D:
        return (self.center[0] + u * self.axis1[0] + v * self.axis2[0],
                self.center[1] + u * self.axis1[1] + v * self.axis2[1])
