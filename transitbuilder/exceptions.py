"""
Error types for OSM data ingestion

SourceUnavailable and MalformedResponse are expected network conditions:
AreaCache catches them and turns them into failure results.
"""

from typing import Optional


class OSMDataError(RuntimeError):
    """Base class for OSM ingestion errors"""


class SourceUnavailable(OSMDataError):
    """Overpass endpoint failed (HTTP error, timeout, connection error)"""

    def __init__(self, message: str, endpoint: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class MalformedResponse(OSMDataError):
    """Response body is not JSON or lacks the 'elements' list"""


class AreaTooLarge(OSMDataError):
    """Requested bounding box exceeds the configured maximum area"""

    def __init__(self, area_deg2: float, max_area_deg2: float):
        super().__init__(
            f"Bounding box area {area_deg2:.6f} deg² exceeds maximum {max_area_deg2:.6f} deg²"
        )
        self.area_deg2 = area_deg2
        self.max_area_deg2 = max_area_deg2
