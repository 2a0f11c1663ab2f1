# skyscan/camera/constants.py

class CameraConstants:
    # Altitude clamp for footprint maths (m)
    MIN_ALTITUDE_M: float = 1.0

    # Floor for each footprint dimension (m)
    MIN_FOOTPRINT_M: float = 0.01

    # Midpoint of a zoom range
    DEFAULT_ZOOM_POSITION: float = 0.5

    # Guard for near-zero denominators in focus formulas
    DENOMINATOR_EPSILON: float = 1e-6

    # Circle of confusion (mm)
    DEFAULT_COC_FULL_FRAME_MM: float = 0.030
    FULL_FRAME_WIDTH_MM: float = 36.0
    COC_BY_SENSOR_TYPE = {
        'Full Frame': 0.030,
        'APS-C': 0.020,
        '1-inch': 0.011,
        '1/2-inch': 0.006,
    }

