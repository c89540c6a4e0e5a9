"""Data models exchanged between the flyover stages.

- NetworkAddress: Public IPv4 address of the caller (opaque text)
- GeoCoordinate: Latitude/longitude as returned by the geolocation service
- PassWindow: One predicted ISS visibility window
- PipelineState / PipelineRun: Per-invocation orchestrator record
"""

from iss_flyover.models.flyover import (
    GeoCoordinate,
    NetworkAddress,
    PassWindow,
    PipelineRun,
    PipelineState,
)

__all__ = [
    "GeoCoordinate",
    "NetworkAddress",
    "PassWindow",
    "PipelineRun",
    "PipelineState",
]
