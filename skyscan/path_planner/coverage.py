# skyscan/path_planner/coverage.py
"""
Coverage point generation over a target polygon.

Two interchangeable strategies share one entry point (CoverageGridGenerator.generate):

* RASTER_LINES  - parallel sweep lines along the long axis of the target's
                  oriented bounding box, extended by a turnaround buffer.
* IMAGE_CENTERS - a grid of image centres in the bounding-box frame, clipped
                  to the polygon (plus a boundary tolerance) and ordered as a
                  snake, sweeping rows (HORIZONTAL) or columns (VERTICAL).

Both return points in the horizontal plane plus one constant altitude.
"""
import logging
import math
from collections import defaultdict
from typing import List, Optional, Sequence, Tuple

from ..camera.data_models import Footprint
from ..geometry.bounding_box import minimum_area_rectangle
from ..geometry.data_models import OBBResult, Point2D
from ..geometry.polygon import distance_to_boundary, is_point_in_polygon, polygon_centroid
from .constants import PlannerConstants
from .data_models import CoverageResult, CoverageStrategy, ScanDirection
from .exceptions import EmptyCoverageError, InvalidParameterError

logger = logging.getLogger(__name__)


def check_grid_size(count: int) -> None:
    if count > PlannerConstants.MAX_GRID_POINTS:
        raise InvalidParameterError("coverage grid", count,
                                    f"Coverage grid exceeds {PlannerConstants.MAX_GRID_POINTS} points; "
                                    f"raise the altitude or lower the overlap")


def clamp_overlap(overlap: float) -> float:
    return min(PlannerConstants.MAX_OVERLAP, max(PlannerConstants.MIN_OVERLAP, overlap))


def line_spacing(footprint_dimension: float, overlap: float) -> float:
    """Distance between adjacent lines/images: footprint * (1 - overlap), floored."""
    return max(PlannerConstants.MIN_SPACING_M, footprint_dimension * (1.0 - clamp_overlap(overlap)))


class CoverageGridGenerator:
    """Produces ordered 2-D coverage points for a planar target."""

    def __init__(self, turnaround_buffer_m: float = 5.0):
        if turnaround_buffer_m < 0:
            raise InvalidParameterError("turnaround_buffer_m", turnaround_buffer_m)
        self.turnaround_buffer_m = turnaround_buffer_m

    def generate(self, strategy: CoverageStrategy, polygon: Sequence[Point2D], footprint: Footprint,
                 overlap: float, altitude: float, obb: Optional[OBBResult] = None,
                 scan_direction: ScanDirection = ScanDirection.HORIZONTAL) -> CoverageResult:
        """
        Runs the requested strategy. Computes the bounding box when none is
        supplied. scan_direction only affects IMAGE_CENTERS ordering.
        """
        if obb is None:
            obb = minimum_area_rectangle(polygon)
        if strategy == CoverageStrategy.RASTER_LINES:
            return self.raster_lines(obb, footprint, overlap, altitude)
        if strategy == CoverageStrategy.IMAGE_CENTERS:
            return self.image_centers(polygon, obb, footprint, overlap, altitude, scan_direction)
        raise InvalidParameterError("strategy", strategy)

    def raster_lines(self, obb: OBBResult, footprint: Footprint, overlap: float, altitude: float) -> CoverageResult:
        warnings = self._overlap_warnings(overlap)
        spacing = line_spacing(footprint.width, overlap)
        line_count = max(PlannerConstants.MIN_RASTER_LINES, math.ceil(obb.width / spacing))
        check_grid_size(2 * line_count)

        # Lines sit at the centres of equal bands across the short axis
        band = obb.width / line_count
        half_run = obb.length / 2.0 + self.turnaround_buffer_m

        points: List[Point2D] = []
        for i in range(line_count):
            v = -obb.width / 2.0 + (i + 0.5) * band
            start = obb.from_local(-half_run, v)
            end = obb.from_local(half_run, v)
            if i % 2 == 1:
                start, end = end, start
            points.extend([start, end])

        logger.info(f"Raster-line coverage: {line_count} lines, spacing {spacing:.2f} m "
                    f"(band {band:.2f} m), run length {2 * half_run:.1f} m")
        if not points:
            raise EmptyCoverageError(CoverageStrategy.RASTER_LINES.value)
        return CoverageResult(points=points, altitude=altitude, strategy=CoverageStrategy.RASTER_LINES,
                              line_spacing=spacing, row_spacing=None, warnings=warnings)

    def image_centers(self, polygon: Sequence[Point2D], obb: OBBResult, footprint: Footprint,
                      overlap: float, altitude: float,
                      scan_direction: ScanDirection = ScanDirection.HORIZONTAL) -> CoverageResult:
        if len(polygon) < 3:
            raise EmptyCoverageError(CoverageStrategy.IMAGE_CENTERS.value,
                                     f"Polygon needs at least 3 vertices, got {len(polygon)}")
        warnings = self._overlap_warnings(overlap)
        step_u = line_spacing(footprint.width, overlap)
        step_v = line_spacing(footprint.height, overlap)
        threshold = (PlannerConstants.COVERAGE_DISTANCE_FACTOR * footprint.diagonal
                     * (1.0 + clamp_overlap(overlap)))

        cx, cy = polygon_centroid(polygon)
        a1, a2 = obb.axis1, obb.axis2

        def project(p: Point2D) -> Tuple[float, float]:
            dx, dy = p[0] - cx, p[1] - cy
            return dx * a1[0] + dy * a1[1], dx * a2[0] + dy * a2[1]

        projected = [project(p) for p in polygon]
        us = [p[0] for p in projected]
        vs = [p[1] for p in projected]
        u_min, u_max = min(us) - footprint.width, max(us) + footprint.width
        v_min, v_max = min(vs) - footprint.height, max(vs) + footprint.height
        cols = int(math.floor((u_max - u_min) / step_u + 1e-9)) + 1
        rows = int(math.floor((v_max - v_min) / step_v + 1e-9)) + 1
        check_grid_size(rows * cols)

        kept: List[Point2D] = []
        for j in range(rows):
            v = v_min + j * step_v
            for i in range(cols):
                u = u_min + i * step_u
                x = cx + u * a1[0] + v * a2[0]
                y = cy + u * a1[1] + v * a2[1]
                if is_point_in_polygon(x, y, polygon) or distance_to_boundary(x, y, polygon) <= threshold:
                    kept.append((x, y))

        if not kept:
            raise EmptyCoverageError(CoverageStrategy.IMAGE_CENTERS.value)

        points = self._snake_order(kept, project, scan_direction)
        logger.info(f"Image-centre coverage: {len(points)} of {rows * cols} grid points kept "
                    f"(steps {step_u:.2f} x {step_v:.2f} m, threshold {threshold:.2f} m, {scan_direction.value} sweep)")
        return CoverageResult(points=points, altitude=altitude, strategy=CoverageStrategy.IMAGE_CENTERS,
                              line_spacing=step_u, row_spacing=step_v, warnings=warnings)

    @staticmethod
    def _snake_order(points: List[Point2D], project,
                     scan_direction: ScanDirection = ScanDirection.HORIZONTAL) -> List[Point2D]:
        """
        Groups points into rows (by short-axis projection) or columns (by
        long-axis projection) and alternates the sweep direction of each.
        """
        rows = defaultdict(list)
        for p in points:
            u, v = project(p)
            if scan_direction == ScanDirection.VERTICAL:
                u, v = v, u
            rows[round(v, PlannerConstants.ROW_KEY_DECIMALS)].append((u, p))

        ordered: List[Point2D] = []
        for row_index, key in enumerate(sorted(rows)):
            row = sorted(rows[key], key=lambda item: item[0])
            if row_index % 2 == 1:
                row.reverse()
            ordered.extend(p for _, p in row)
        return ordered

    @staticmethod
    def _overlap_warnings(overlap: float) -> List[str]:
        clamped = clamp_overlap(overlap)
        if clamped != overlap:
            message = f"Overlap {overlap} clamped to {clamped}"
            logger.warning(message)
            return [message]
        return []
