"""ISS Flyover.

Predicts the next visible passes of the International Space Station over
the caller's current location by chaining three web lookups: public IP
address, IP geolocation, and pass prediction.
"""

__version__ = "0.1.0"

from iss_flyover.orchestrators.flyover_pipeline import (  # noqa: E402
    FlyoverPipeline,
    next_passes_for_current_location,
)

__all__ = ["FlyoverPipeline", "__version__", "next_passes_for_current_location"]
