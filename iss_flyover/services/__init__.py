"""Stage services for the flyover pipeline.

Each stage is a thin JSON-over-HTTP client sharing one request/error
contract (``JsonService``):

- AddressLocator: public IP address of the caller
- CoordinateResolver: IP address -> latitude/longitude
- PassPredictor: latitude/longitude -> upcoming ISS pass windows
"""

from iss_flyover.services.address_locator import AddressLocator
from iss_flyover.services.base import JsonService
from iss_flyover.services.coordinate_resolver import CoordinateResolver
from iss_flyover.services.http_client import build_client
from iss_flyover.services.pass_predictor import PassPredictor

__all__ = [
    "AddressLocator",
    "CoordinateResolver",
    "JsonService",
    "PassPredictor",
    "build_client",
]
