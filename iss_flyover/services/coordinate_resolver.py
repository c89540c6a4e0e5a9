"""Coordinate lookup stage — IP address to latitude/longitude."""

from __future__ import annotations

import logging

from iss_flyover.core.constants import STAGE_RESOLVE_COORDINATES
from iss_flyover.models.flyover import GeoCoordinate, NetworkAddress
from iss_flyover.services.base import JsonService

logger = logging.getLogger(__name__)


class CoordinateResolver(JsonService):
    """Geolocate a network address.

    Requests ``<geo_service_url>/<address>`` and expects
    ``{"data": {"latitude": ..., "longitude": ...}}``.  The address is
    embedded as-is; an empty or malformed address is left for the remote
    service to reject.
    """

    stage = STAGE_RESOLVE_COORDINATES
    action = "fetching coordinates for IP"

    @property
    def url(self) -> str:
        return self._config.geo_service_url

    def resolve(self, address: NetworkAddress) -> GeoCoordinate:
        """Return the coordinates of *address*, values passed through unchanged.

        Raises:
            TransportError: If the request could not be completed.
            ServiceError: If the service returned a non-200 status.
            ParseError: If ``data.latitude`` or ``data.longitude`` is missing.
        """
        url = f"{self.url.rstrip('/')}/{address}"
        payload = self._require_object(self._get_json(url), "body")
        data = self._require_object(self._require_field(payload, "data"), "'data'")

        coordinate = GeoCoordinate(
            latitude=self._require_field(data, "latitude"),
            longitude=self._require_field(data, "longitude"),
        )
        logger.info(
            "Coordinates resolved | ip=%s | lat=%s | lon=%s",
            address,
            coordinate.latitude,
            coordinate.longitude,
        )
        return coordinate
