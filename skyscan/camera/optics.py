# skyscan/camera/optics.py
"""
Photogrammetry optics: ground sampling distance and depth of field.

Focus formulas become unstable near the hyperfocal distance; those cases are
guarded by an epsilon test and resolve to defined values (far limit becomes
infinite, near limit half the hyperfocal distance).
"""
import math
from typing import Optional

from .constants import CameraConstants
from .data_models import CameraSpecs, DepthOfField


def circle_of_confusion(sensor_type: Optional[str], sensor_width_mm: Optional[float]) -> float:
    """Circle of confusion in mm, by sensor class or scaled from full frame."""
    if not sensor_type or not sensor_width_mm:
        return CameraConstants.DEFAULT_COC_FULL_FRAME_MM
    if sensor_type in CameraConstants.COC_BY_SENSOR_TYPE:
        return CameraConstants.COC_BY_SENSOR_TYPE[sensor_type]
    scale = sensor_width_mm / CameraConstants.FULL_FRAME_WIDTH_MM
    return min(CameraConstants.DEFAULT_COC_FULL_FRAME_MM, CameraConstants.DEFAULT_COC_FULL_FRAME_MM * scale)


def ground_sampling_distance_cm(altitude_m: float, specs: CameraSpecs,
                                zoom_position: float = CameraConstants.DEFAULT_ZOOM_POSITION) -> float:
    """GSD in cm/pixel. Returns 0.0 when the inputs cannot produce a value."""
    if specs is None or altitude_m <= 0:
        return 0.0
    focal_length = specs.effective_focal_length(zoom_position)
    if focal_length <= 0 or specs.sensor_width <= 0 or specs.image_width <= 0:
        return 0.0
    return (specs.sensor_width * altitude_m * 100.0) / (focal_length * specs.image_width)


def altitude_for_gsd(target_gsd_cm: float, specs: CameraSpecs,
                     zoom_position: float = CameraConstants.DEFAULT_ZOOM_POSITION) -> float:
    """Altitude (m) that yields target_gsd_cm. Returns 0.0 for unusable inputs."""
    if specs is None or target_gsd_cm <= 0:
        return 0.0
    focal_length = specs.effective_focal_length(zoom_position)
    if focal_length <= 0 or specs.sensor_width <= 0 or specs.image_width <= 0:
        return 0.0
    return (target_gsd_cm * focal_length * specs.image_width) / (specs.sensor_width * 100.0)


def hyperfocal_distance_m(focal_length_mm: float, aperture: float, coc_mm: float) -> float:
    if aperture <= 0 or coc_mm <= 0:
        return math.inf
    return (focal_length_mm * focal_length_mm) / (aperture * coc_mm) / 1000.0


def near_limit_m(focus_distance_m: float, hyperfocal_m: float, focal_length_mm: float) -> float:
    focal_length_m = focal_length_mm / 1000.0
    denominator = hyperfocal_m + focus_distance_m - 2.0 * focal_length_m
    if abs(denominator) < CameraConstants.DENOMINATOR_EPSILON:
        return hyperfocal_m / 2.0
    return (focus_distance_m * (hyperfocal_m - focal_length_m)) / denominator


def far_limit_m(focus_distance_m: float, hyperfocal_m: float, focal_length_mm: float) -> float:
    if focus_distance_m >= hyperfocal_m:
        return math.inf
    denominator = hyperfocal_m - focus_distance_m
    if abs(denominator) < CameraConstants.DENOMINATOR_EPSILON:
        return math.inf
    focal_length_m = focal_length_mm / 1000.0
    return (focus_distance_m * (hyperfocal_m - focal_length_m)) / denominator


def depth_of_field(focus_distance_m: float, specs: CameraSpecs, aperture: float,
                   zoom_position: float = CameraConstants.DEFAULT_ZOOM_POSITION) -> DepthOfField:
    """All depth-of-field quantities for one focus distance. Invalid inputs give an empty range."""
    if specs is None or aperture <= 0 or focus_distance_m <= 0:
        return DepthOfField(hyperfocal_m=math.inf, near_limit_m=0.0, far_limit_m=0.0, total_m=0.0,
                            circle_of_confusion_mm=CameraConstants.DEFAULT_COC_FULL_FRAME_MM)

    focal_length = specs.effective_focal_length(zoom_position)
    coc = circle_of_confusion(specs.sensor_type, specs.sensor_width)
    hyperfocal = hyperfocal_distance_m(focal_length, aperture, coc)
    near = near_limit_m(focus_distance_m, hyperfocal, focal_length)
    far = far_limit_m(focus_distance_m, hyperfocal, focal_length)
    total = math.inf if math.isinf(far) else far - near
    return DepthOfField(hyperfocal_m=hyperfocal, near_limit_m=near, far_limit_m=far, total_m=total,
                        circle_of_confusion_mm=coc)
