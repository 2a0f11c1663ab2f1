# skyscan/path_planner/constants.py

class PlannerConstants:
    EARTH_RADIUS_M: float = 6371000.0

    # Smallest spacing the coverage generators will step by (m)
    MIN_SPACING_M: float = 0.1

    # Overlap is clamped into this range before spacing maths
    MIN_OVERLAP: float = 0.0
    MAX_OVERLAP: float = 0.95

    # Minimum number of raster lines over any target
    MIN_RASTER_LINES = 2

    # Boundary tolerance for image-centre retention, as a fraction of the footprint diagonal
    COVERAGE_DISTANCE_FACTOR: float = 0.5

    # Row grouping precision (decimal places of the short-axis projection)
    ROW_KEY_DECIMALS = 3

    # Upper bound on candidate points a coverage grid or raster pattern may hold
    MAX_GRID_POINTS = 10000

    # Consecutive waypoints closer than this on every axis are merged (m)
    DEDUPE_EPSILON_M: float = 0.1

    # Faces whose normal has a smaller vertical component are reported as steep
    STEEP_FACE_NORMAL_Z: float = 0.5

    # Segment bookkeeping
    LARGE_PATH_THRESHOLD = 200
    CHUNK_SIZE = 200
    PREVIEW_POINT_LIMIT = 50

    # Headings used by the manual raster pattern (degrees)
    HEADING_EAST: float = 90.0
    HEADING_WEST: float = -90.0
    HEADING_NORTH: float = 0.0
    HEADING_SOUTH: float = 180.0

    # Battery reserve applied to estimates
    BATTERY_SAFETY_MARGIN: float = 1.15
    BATTERY_MAX_PERCENT: float = 100.0
