# skyscan/path_planner/__init__.py
"""
Initializes the path_planner module, defining its public API.

Coverage, raster, stitching, simplification and statistics are reachable
from here; SurveyPlanner ties them together.
"""
# Orchestrator
from .core import SurveyPlanner

# Configuration
from .config import PlannerConfig, VehicleProfile

# Public data models
from .data_models import (ActionType, AltitudeReference, CameraPose, CoverageResult, CoverageStrategy,
                          GenerationResult, LatLng, LocalCoord, MissionAction, MissionContext,
                          MissionEndAction, MissionStatistics, MissionType, ObstacleFootprint, PathSegment,
                          PathType, RasterOrientation, RasterParams, ScanDirection, StitchResult, TargetSurface,
                          Waypoint)
from .exceptions import EmptyCoverageError, InvalidParameterError, MissingInputError, PathPlanningError

# Building blocks
from .coverage import CoverageGridGenerator, line_spacing
from .raster import RasterPatternGenerator
from .simplifier import chunk_segment, douglas_peucker, preview_segment, simplify_segment
from .statistics import MissionStatisticsEstimator
from .stitcher import PathStitcher, assign_path_order, deduplicate_waypoints, filter_obstacles
