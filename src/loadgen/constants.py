"""Constants describing the tile workloads."""


class WorkloadConstants:
    """Centralized constants for the tile workloads."""
    # Zoom levels, upper bound excluded
    MIN_ZOOM = 14
    MAX_ZOOM = 22
    # Luxembourg bounding box
    MIN_LAT = 49.4426671413
    MAX_LAT = 50.1280516628
    MIN_LNG = 5.67405195478
    MAX_LNG = 6.24275109216
    FIXED_TILE_PATH = "14/8471/5564.png"
    GEO_LABEL = "URL"
    IMAGE_LABEL = "IMG"
