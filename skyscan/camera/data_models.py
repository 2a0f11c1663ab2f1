# skyscan/camera/data_models.py
"""
Camera and lens value types. The catalog lookup that produces CameraSpecs is
an external concern; these dataclasses only describe what the planner needs.
"""
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .constants import CameraConstants
from .exceptions import InvalidCameraSpecsError

FocalLength = Union[float, Sequence[float]]


@dataclass(frozen=True)
class CameraSpecs:
    """
    Sensor and lens description.

    focal_length is a single value (prime) or a (min, max) pair (zoom), in mm.
    Sensor dimensions are in mm, image dimensions in pixels.
    """
    focal_length: FocalLength
    sensor_width: float
    sensor_height: float
    image_width: int = 0
    image_height: int = 0
    sensor_type: Optional[str] = None

    def effective_focal_length(self, zoom_position: float = CameraConstants.DEFAULT_ZOOM_POSITION) -> float:
        """Prime focal length, or the zoom range interpolated at zoom_position (0..1)."""
        if isinstance(self.focal_length, numbers.Real):
            return float(self.focal_length)
        try:
            f_min, f_max = (float(f) for f in self.focal_length)
        except (TypeError, ValueError) as exc:
            raise InvalidCameraSpecsError("focal_length", self.focal_length) from exc
        position = min(1.0, max(0.0, zoom_position))
        return f_min + (f_max - f_min) * position

    @property
    def aspect_ratio(self) -> float:
        if self.sensor_height <= 0:
            return 0.0
        return self.sensor_width / self.sensor_height


@dataclass(frozen=True)
class Footprint:
    """Ground area covered by one frame at a given altitude (m, degrees)."""
    width: float
    height: float
    horizontal_fov_deg: float
    vertical_fov_deg: float
    altitude: float

    @property
    def diagonal(self) -> float:
        return (self.width ** 2 + self.height ** 2) ** 0.5


@dataclass(frozen=True)
class OverlapSpacing:
    """Distance between image centres along track and between adjacent lines."""
    along_track: float
    cross_track: float
    footprint: Footprint


@dataclass(frozen=True)
class DepthOfField:
    hyperfocal_m: float
    near_limit_m: float
    far_limit_m: float
    total_m: float
    circle_of_confusion_mm: float
