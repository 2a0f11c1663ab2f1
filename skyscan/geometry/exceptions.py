# skyscan/geometry/exceptions.py

class GeometryError(Exception):
    """Base exception for planar geometry failures."""
    pass

class DegenerateGeometryError(GeometryError):
    """Raised when an input shape cannot support the requested operation."""
    def __init__(self, message: str, point_count: int = 0):
        self.point_count = point_count
        super().__init__(f"{message} [points: {point_count}]")
