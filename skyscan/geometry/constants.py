# skyscan/geometry/constants.py

class GeometryConstants:
    """Numerical thresholds for the planar geometry helpers."""

    # Hull edges shorter than this (squared length, m^2) are skipped by the calipers
    MIN_EDGE_LENGTH_SQ: float = 0.001

    # Dot product above which two axes are re-orthogonalised
    ORTHOGONALITY_TOLERANCE: float = 1e-8

    # Floor applied to both OBB dimensions (m)
    MIN_BOX_DIMENSION: float = 0.1

    # Generic zero test for lengths and areas
    EPSILON: float = 1e-9
