# skyscan/path_planner/data_models.py
"""
Core data structures for flight path synthesis. All coordinates are in the
local ENU mission frame (metres, z up); geodetic lat/lng are optional tags
filled in when the mission supplies a local origin.
"""
import math
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple


class AltitudeReference(Enum):
    RELATIVE = "RELATIVE"
    ABSOLUTE = "ABSOLUTE"
    TERRAIN = "TERRAIN"


class ActionType(Enum):
    TAKE_PHOTO = "TAKE_PHOTO"
    START_VIDEO = "START_VIDEO"
    STOP_VIDEO = "STOP_VIDEO"
    START_RECORDING = "START_RECORDING"
    STOP_RECORDING = "STOP_RECORDING"
    ROTATE_GIMBAL = "ROTATE_GIMBAL"
    CUSTOM_PAYLOAD = "CUSTOM_PAYLOAD"


class PathType(Enum):
    STRAIGHT = "STRAIGHT"
    BEZIER = "BEZIER"
    ORBIT = "ORBIT"
    GRID = "GRID"
    POLYGON = "POLYGON"
    PERIMETER = "PERIMETER"
    CUSTOM = "CUSTOM"


class MissionEndAction(Enum):
    RTL = "RTL"
    LAND = "LAND"
    HOLD = "HOLD"


class CoverageStrategy(Enum):
    RASTER_LINES = "raster_lines"
    IMAGE_CENTERS = "image_centers"


class RasterOrientation(Enum):
    HORIZONTAL = "horizontal"  # passes along +X, stepping along +Y
    VERTICAL = "vertical"      # passes along +Y, stepping along +X


class ScanDirection(Enum):
    HORIZONTAL = "horizontal"  # rows along the long axis, stepping across
    VERTICAL = "vertical"      # columns across the long axis, stepping along


class MissionType(Enum):
    PHOTOGRAMMETRY = "photogrammetry"
    LIDAR = "lidar"


@dataclass(frozen=True)
class LocalCoord:
    """A point in the local tangent-plane frame (x east, y north, z up)."""
    x: float
    y: float
    z: float = 0.0

    def distance_to(self, other: "LocalCoord") -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def with_z(self, z: float) -> "LocalCoord":
        return LocalCoord(self.x, self.y, z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class LatLng:
    latitude: float
    longitude: float


@dataclass
class CameraPose:
    fov: float
    aspect_ratio: float
    near: float
    far: float
    heading: float
    pitch: float
    roll: float = 0.0


@dataclass
class MissionAction:
    type: ActionType
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Waypoint:
    """
    One flight-path vertex. altitude is local.z minus the reference elevation
    of alt_reference; use path_planner.utils.waypoints.make_waypoint to keep
    the two consistent.
    """
    local: LocalCoord
    altitude: float
    alt_reference: AltitudeReference
    camera: CameraPose
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    lat: Optional[float] = None
    lng: Optional[float] = None
    actions: List[MissionAction] = field(default_factory=list)
    speed: Optional[float] = None
    hold_time: Optional[float] = None
    path_order: Optional[int] = None
    display_options: Dict[str, Any] = field(default_factory=dict)

    def has_action(self, action_type: ActionType) -> bool:
        return any(a.type == action_type for a in self.actions)


@dataclass
class PathSegment:
    """One continuous planned route. Waypoint order is authoritative."""
    type: PathType
    waypoints: List[Waypoint]
    speed: float
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    ground_projections: Optional[List[Waypoint]] = None
    display_options: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def local_points(self) -> List[Tuple[float, float, float]]:
        return [wp.local.as_tuple() for wp in self.waypoints]


@dataclass(frozen=True)
class ObstacleFootprint:
    """Simplified collision object: a circle in plan with a top height."""
    center_x: float
    center_y: float
    width: float
    length: float
    height: float
    base_z: float = 0.0
    object_class: str = "obstacle"
    name: Optional[str] = None
    radius_m: Optional[float] = None

    @property
    def radius(self) -> float:
        """Explicit radius when given, otherwise the circle circumscribing width x length."""
        if self.radius_m is not None:
            return self.radius_m
        return math.hypot(self.width, self.length) / 2.0

    @property
    def top(self) -> float:
        return self.base_z + self.height


@dataclass
class TargetSurface:
    """A planar target polygon (>= 3 vertices) with optional orientation hints."""
    vertices: Sequence[Sequence[float]]
    normal: Optional[Tuple[float, float, float]] = None
    rotation_hint: Optional[Tuple[float, float, float]] = None
    name: Optional[str] = None

    @property
    def max_z(self) -> float:
        return max(float(v[2]) if len(v) > 2 else 0.0 for v in self.vertices)


@dataclass
class MissionContext:
    """Where the vehicle starts, how high it must climb and how it ends the mission."""
    takeoff: Optional[LocalCoord]
    safety_climb: float = 30.0
    end_action: MissionEndAction = MissionEndAction.RTL
    cruise_speed: float = 5.0
    local_origin: Optional[LatLng] = None
    alt_reference: AltitudeReference = AltitudeReference.RELATIVE

    @property
    def reference_elevation(self) -> float:
        if self.alt_reference == AltitudeReference.ABSOLUTE or self.takeoff is None:
            return 0.0
        return self.takeoff.z


@dataclass
class RasterParams:
    """Manual lawnmower pattern parameters. start is an absolute local coordinate."""
    start: LocalCoord
    length: float
    spacing: float
    passes: int
    altitude_agl: float
    orientation: RasterOrientation = RasterOrientation.HORIZONTAL
    snake: bool = True
    speed: Optional[float] = None
    camera_pose: Optional[CameraPose] = None


@dataclass
class CoverageResult:
    """2-D coverage points at a constant altitude, plus the spacing that produced them."""
    points: List[Tuple[float, float]]
    altitude: float
    strategy: CoverageStrategy
    line_spacing: float
    row_spacing: Optional[float] = None
    warnings: List[str] = field(default_factory=list)


@dataclass
class StitchResult:
    waypoints: List[Waypoint]
    safe_altitude: float
    detour_count: int = 0
    warnings: List[str] = field(default_factory=list)


@dataclass
class MissionStatistics:
    waypoint_count: int
    photo_count: int
    total_distance_m: float
    estimated_time_s: float
    battery_percent: float

    @property
    def estimated_time_min(self) -> float:
        return self.estimated_time_s / 60.0


@dataclass
class GenerationResult:
    """Either a complete segment or an explicit failure reason; never a partial path."""
    segment: Optional[PathSegment] = None
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    statistics: Optional[MissionStatistics] = None

    @property
    def success(self) -> bool:
        return self.segment is not None and self.error is None
