# skyscan/camera/__init__.py
"""
Camera footprint and optics models.
"""
from .data_models import CameraSpecs, DepthOfField, Footprint, OverlapSpacing
from .exceptions import CameraModelError, InvalidCameraSpecsError
from .footprint import CameraFootprintModel, field_of_view_deg
from .optics import altitude_for_gsd, depth_of_field, ground_sampling_distance_cm

__all__ = [
    'CameraSpecs',
    'Footprint',
    'OverlapSpacing',
    'DepthOfField',
    'CameraModelError',
    'InvalidCameraSpecsError',
    'CameraFootprintModel',
    'field_of_view_deg',
    'ground_sampling_distance_cm',
    'altitude_for_gsd',
    'depth_of_field',
]
