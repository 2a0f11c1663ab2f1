#!/usr/bin/env python3
# examples/E010_face_survey.py
"""
[FACE SURVEY DEMO]

Plans a photogrammetry survey of a rotated rooftop, prints the mission
summary and a waypoint table, then writes a 3D preview to HTML.
"""
import logging
import math
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from skyscan.camera import CameraSpecs, ground_sampling_distance_cm
from skyscan.path_planner import (CoverageStrategy, LatLng, LocalCoord, MissionContext, MissionEndAction,
                                  ObstacleFootprint, PlannerConfig, SurveyPlanner, TargetSurface,
                                  preview_segment, simplify_segment)
from skyscan.path_planner.visualization import PathVisualizer

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# --- [1. SCENE] ---
CAMERA = CameraSpecs(focal_length=8.8, sensor_width=13.2, sensor_height=8.8,
                     image_width=5472, image_height=3648, sensor_type='1-inch')
ALTITUDE_AGL_M = 25.0
OVERLAP = 0.75


def _rooftop(center_x: float, center_y: float, length: float, width: float, angle_deg: float, z: float):
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    corners = [(-length / 2, -width / 2), (length / 2, -width / 2), (length / 2, width / 2), (-length / 2, width / 2)]
    return [(center_x + u * c - v * s, center_y + u * s + v * c, z) for u, v in corners]


def main():
    target = TargetSurface(vertices=_rooftop(80.0, 60.0, 70.0, 30.0, 25.0, 12.0), normal=(0.0, 0.0, 1.0),
                           name='Warehouse roof')
    mission = MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0), safety_climb=30.0,
                             end_action=MissionEndAction.RTL, cruise_speed=6.0,
                             local_origin=LatLng(27.7172, 85.3240))
    obstacles = [ObstacleFootprint(center_x=40.0, center_y=30.0, width=12.0, length=12.0, height=35.0,
                                   name='Mast')]

    planner = SurveyPlanner(PlannerConfig(include_ground_projections=True))
    result = planner.generate_face_mission(target, CAMERA, mission, OVERLAP, ALTITUDE_AGL_M,
                                           strategy=CoverageStrategy.IMAGE_CENTERS, obstacles=obstacles)
    if not result.success:
        print(f"Mission generation failed: {result.error}")
        return 1

    segment = result.segment
    stats = result.statistics
    print("\n--- MISSION SUMMARY ---")
    print(f"  GSD:            {ground_sampling_distance_cm(ALTITUDE_AGL_M, CAMERA):.2f} cm/px")
    print(f"  Waypoints:      {stats.waypoint_count} ({stats.photo_count} photos)")
    print(f"  Distance:       {stats.total_distance_m:.0f} m")
    print(f"  Flight time:    {stats.estimated_time_min:.1f} min")
    print(f"  Battery:        {stats.battery_percent:.0f}%")
    print(f"  Safe altitude:  {segment.metadata['safe_altitude']:.1f} m")
    for warning in result.warnings:
        print(f"  WARNING: {warning}")

    print("\n--- WAYPOINTS ---")
    for wp in preview_segment(segment, 20).waypoints:
        actions = ",".join(a.type.value for a in wp.actions) or "-"
        print(f"  #{wp.path_order:<3} x={wp.local.x:8.1f} y={wp.local.y:8.1f} alt={wp.altitude:6.1f} "
              f"lat={wp.lat:.6f} lng={wp.lng:.6f} hdg={wp.camera.heading:6.1f} {actions}")

    simplified = simplify_segment(segment, 1.0)
    print(f"\nSimplified (1 m tolerance): {len(segment.waypoints)} -> {len(simplified.waypoints)} waypoints")

    visualizer = PathVisualizer()
    fig = visualizer.create_path_figure(segment, target, title='Warehouse Roof Survey')
    output = Path(__file__).resolve().parent / "face_survey.html"
    visualizer.save_path_figure(fig, str(output))
    print(f"3D preview written to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
