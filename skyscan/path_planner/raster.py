# skyscan/path_planner/raster.py
"""
User-parameterised lawnmower pattern. This is the one place manual raster
passes are built; the face-survey planner uses CoverageGridGenerator instead.
"""
import copy
import logging
import numbers
from typing import List, Optional

from .config import PlannerConfig
from .constants import PlannerConstants
from .data_models import AltitudeReference, LatLng, LocalCoord, RasterOrientation, RasterParams, Waypoint
from .exceptions import InvalidParameterError, MissingInputError
from .utils.validation import require_finite_coord, require_positive
from .utils.waypoints import make_waypoint

logger = logging.getLogger(__name__)


class RasterPatternGenerator:
    """
    Builds a deterministic pass-by-pass pattern.

    With snake=True every pass contributes its start and end (2 * passes
    waypoints). With snake=False every pass after the first flies back to the
    pass start on the previous line, steps across, then flies the pass, giving
    2 * passes + (passes - 1) waypoints.
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()

    @staticmethod
    def validate(params: RasterParams) -> None:
        if params is None:
            raise MissingInputError("raster parameters")
        if params.start is None:
            raise MissingInputError("raster start coordinate")
        passes = params.passes
        if isinstance(passes, bool) or not isinstance(passes, numbers.Integral) or passes <= 0:
            raise InvalidParameterError("passes", passes)
        if 3 * passes > PlannerConstants.MAX_GRID_POINTS:
            raise InvalidParameterError("passes", passes,
                                        f"Pattern would exceed {PlannerConstants.MAX_GRID_POINTS} waypoints")
        require_finite_coord("start", params.start)
        require_positive("length", params.length)
        require_positive("spacing", params.spacing)
        require_positive("altitude_agl", params.altitude_agl)
        if params.speed is not None:
            require_positive("speed", params.speed)

    def generate(self, params: RasterParams,
                 alt_reference: AltitudeReference = AltitudeReference.RELATIVE,
                 reference_elevation: Optional[float] = None,
                 origin: Optional[LatLng] = None) -> List[Waypoint]:
        """
        Args:
            params: Pattern description; params.start is absolute.
            reference_elevation: Elevation RELATIVE altitudes are measured from.
                Defaults to params.start.z.
            origin: Optional geodetic origin for lat/lng tagging.
        """
        self.validate(params)
        if reference_elevation is None:
            reference_elevation = params.start.z

        horizontal = params.orientation == RasterOrientation.HORIZONTAL
        along0 = params.start.x if horizontal else params.start.y
        cross0 = params.start.y if horizontal else params.start.x
        z = params.start.z + params.altitude_agl
        pose = params.camera_pose or self.config.default_camera_pose()

        def emit(along: float, cross: float, heading: float) -> Waypoint:
            local = LocalCoord(along, cross, z) if horizontal else LocalCoord(cross, along, z)
            camera = copy.copy(pose)
            camera.heading = heading
            return make_waypoint(local, camera, alt_reference=alt_reference,
                                 reference_elevation=reference_elevation,
                                 speed=params.speed, origin=origin)

        forward = PlannerConstants.HEADING_EAST if horizontal else PlannerConstants.HEADING_NORTH
        backward = PlannerConstants.HEADING_WEST if horizontal else PlannerConstants.HEADING_SOUTH

        waypoints: List[Waypoint] = []
        for i in range(params.passes):
            cross = cross0 + i * params.spacing
            reverse = params.snake and i % 2 == 1
            pass_start = along0 + params.length if reverse else along0
            pass_end = along0 if reverse else along0 + params.length
            heading = backward if reverse else forward

            if not params.snake and i > 0:
                previous_cross = cross0 + (i - 1) * params.spacing
                waypoints.append(emit(pass_start, previous_cross, heading))
                waypoints.append(emit(pass_start, cross, heading))
            else:
                waypoints.append(emit(pass_start, cross, heading))
            waypoints.append(emit(pass_end, cross, heading))

        logger.info(f"Raster pattern: {params.passes} passes ({params.orientation.value}, "
                    f"snake={params.snake}) -> {len(waypoints)} waypoints")
        return waypoints
