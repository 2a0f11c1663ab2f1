# skyscan/__init__.py
"""
Aerial-imaging flight path synthesis: camera footprints, target coverage and
mission stitching in a local ENU frame.
"""
from .camera import CameraFootprintModel, CameraSpecs
from .path_planner import (GenerationResult, LocalCoord, MissionContext, PlannerConfig, RasterParams,
                           SurveyPlanner, TargetSurface)

__version__ = "0.1.0"
