#!/usr/bin/env python3
# examples/E020_manual_raster.py
"""
[MANUAL RASTER DEMO]

Builds a lidar lawnmower pattern from explicit pass parameters, lands at the
end of the last pass and splits the result into display chunks.
"""
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from skyscan.path_planner import (LocalCoord, MissionContext, MissionEndAction, MissionType, RasterOrientation,
                                  RasterParams, SurveyPlanner, VehicleProfile, chunk_segment)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def main():
    params = RasterParams(start=LocalCoord(20.0, 20.0, 0.0), length=120.0, spacing=15.0, passes=8,
                          altitude_agl=40.0, orientation=RasterOrientation.VERTICAL, snake=True, speed=8.0)
    mission = MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0), safety_climb=20.0,
                             end_action=MissionEndAction.LAND)

    planner = SurveyPlanner()
    result = planner.generate_raster_mission(params, mission, mission_type=MissionType.LIDAR)
    if not result.success:
        print(f"Raster mission failed: {result.error}")
        return 1

    segment = result.segment
    heavy_lifter = VehicleProfile(name="heavy_lift_octocopter", battery_drain_per_minute=4.5)
    stats = planner.estimate_statistics(segment, heavy_lifter)
    print(f"\n{len(segment.waypoints)} waypoints, {stats.total_distance_m:.0f} m, "
          f"{stats.estimated_time_min:.1f} min, battery {stats.battery_percent:.0f}% ({heavy_lifter.name})")

    for chunk in chunk_segment(segment, chunk_size=10):
        first, last = chunk.waypoints[0], chunk.waypoints[-1]
        print(f"  chunk {chunk.metadata['chunk_index'] + 1}/{chunk.metadata['total_chunks']}: "
              f"#{first.path_order} -> #{last.path_order}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
