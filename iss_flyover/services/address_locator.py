"""Address lookup stage — public IP address of the caller."""

from __future__ import annotations

import logging

from iss_flyover.core.constants import STAGE_LOCATE_ADDRESS
from iss_flyover.core.exceptions import ParseError
from iss_flyover.models.flyover import NetworkAddress
from iss_flyover.services.base import JsonService

logger = logging.getLogger(__name__)


class AddressLocator(JsonService):
    """Resolve the caller's public IPv4 address.

    Requests ``<ip_service_url>?format=json`` and expects
    ``{"ip": "<address>"}``.
    """

    stage = STAGE_LOCATE_ADDRESS
    action = "fetching IP"

    @property
    def url(self) -> str:
        return self._config.ip_service_url

    def locate(self) -> NetworkAddress:
        """Return the public address as reported by the IP service.

        Raises:
            TransportError: If the request could not be completed.
            ServiceError: If the service returned a non-200 status.
            ParseError: If the body is not JSON or lacks a string ``ip``.
        """
        payload = self._require_object(self._get_json(self.url, params={"format": "json"}), "body")
        ip = self._require_field(payload, "ip")
        if not isinstance(ip, str):
            msg = f"Field 'ip' must be a string when {self.action}, got {ip!r}"
            raise ParseError(msg, stage=self.stage)

        logger.info("Address located | ip=%s", ip)
        return NetworkAddress(ip)
