# skyscan/camera/footprint.py
"""
Field of view and ground footprint of a nadir camera over flat ground.

Assumes the camera points straight down, the sensor width maps to the
horizontal footprint dimension and no lens distortion.
"""
import logging
import math
import numbers
from typing import Tuple

from .constants import CameraConstants
from .data_models import CameraSpecs, Footprint, OverlapSpacing
from .exceptions import InvalidCameraSpecsError

logger = logging.getLogger(__name__)


def field_of_view_deg(focal_length_mm: float, sensor_dimension_mm: float) -> float:
    """FOV = 2 * atan(dimension / (2 * focal length)), in degrees."""
    if focal_length_mm <= 0 or sensor_dimension_mm <= 0:
        return 0.0
    return math.degrees(2.0 * math.atan(sensor_dimension_mm / (2.0 * focal_length_mm)))


def _require_dimension(field_name: str, value) -> float:
    """Coerces a lens or sensor dimension to float; only finite positive numbers pass."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidCameraSpecsError(field_name, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidCameraSpecsError(field_name, value)
    return float(value)


class CameraFootprintModel:
    """Computes FOV and ground coverage for one camera/lens configuration."""

    def __init__(self, specs: CameraSpecs, zoom_position: float = CameraConstants.DEFAULT_ZOOM_POSITION):
        """
        Args:
            specs: Sensor and lens description.
            zoom_position: 0..1 position inside a zoom lens range.
        """
        if specs is None:
            raise InvalidCameraSpecsError("specs", None, "Camera specification is missing")
        self.specs = specs
        self.focal_length_mm = _require_dimension("focal_length", specs.effective_focal_length(zoom_position))
        _require_dimension("sensor_width", specs.sensor_width)
        _require_dimension("sensor_height", specs.sensor_height)

    def field_of_view(self) -> Tuple[float, float]:
        """Returns (horizontal, vertical) FOV in degrees."""
        return (field_of_view_deg(self.focal_length_mm, self.specs.sensor_width),
                field_of_view_deg(self.focal_length_mm, self.specs.sensor_height))

    def footprint(self, altitude_m: float) -> Footprint:
        """Ground footprint at altitude_m AGL. Altitude is clamped to a positive minimum."""
        altitude = max(CameraConstants.MIN_ALTITUDE_M, altitude_m)
        if altitude != altitude_m:
            logger.debug(f"Footprint altitude {altitude_m} clamped to {altitude} m")

        h_fov, v_fov = self.field_of_view()
        width = 2.0 * altitude * math.tan(math.radians(h_fov) / 2.0)
        height = 2.0 * altitude * math.tan(math.radians(v_fov) / 2.0)
        return Footprint(
            width=max(CameraConstants.MIN_FOOTPRINT_M, width),
            height=max(CameraConstants.MIN_FOOTPRINT_M, height),
            horizontal_fov_deg=h_fov,
            vertical_fov_deg=v_fov,
            altitude=altitude,
        )

    def overlap_spacing(self, overlap_h: float, overlap_v: float, altitude_m: float) -> OverlapSpacing:
        """
        Spacing between image centres for the requested overlap fractions.

        overlap_h applies along track (footprint width), overlap_v between
        adjacent lines (footprint height). Both must lie in [0, 1).
        """
        for name, value in (("overlap_h", overlap_h), ("overlap_v", overlap_v)):
            if value < 0 or value >= 1:
                raise InvalidCameraSpecsError(name, value, "Overlap must be in [0, 1)")
        fp = self.footprint(altitude_m)
        return OverlapSpacing(
            along_track=fp.width * (1.0 - overlap_h),
            cross_track=fp.height * (1.0 - overlap_v),
            footprint=fp,
        )
