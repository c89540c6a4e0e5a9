"""Pass prediction stage — coordinates to upcoming ISS fly-overs."""

from __future__ import annotations

import logging

from iss_flyover.core.constants import STAGE_PREDICT_PASSES
from iss_flyover.core.exceptions import ParseError
from iss_flyover.models.flyover import GeoCoordinate, PassWindow
from iss_flyover.services.base import JsonService

logger = logging.getLogger(__name__)


class PassPredictor(JsonService):
    """Fetch predicted ISS passes for a coordinate.

    Requests ``<pass_service_url>?lat=<lat>&lon=<lon>`` and expects
    ``{"response": [{"risetime": int, "duration": int}, ...]}``.
    """

    stage = STAGE_PREDICT_PASSES
    action = "fetching fly-over times for ISS"

    @property
    def url(self) -> str:
        return self._config.pass_service_url

    def predict(self, coordinate: GeoCoordinate) -> list[PassWindow]:
        """Return every pass window in upstream order.

        No filtering, sorting or truncation is applied.

        Raises:
            TransportError: If the request could not be completed.
            ServiceError: If the service returned a non-200 status.
            ParseError: If ``response`` is missing, not a list, or holds a
                malformed entry.
        """
        payload = self._require_object(
            self._get_json(self.url, params=coordinate.as_query_params()), "body"
        )
        entries = self._require_field(payload, "response")
        if not isinstance(entries, list):
            msg = f"Field 'response' must be a list when {self.action}, got {type(entries).__name__}"
            raise ParseError(msg, stage=self.stage)

        passes = [PassWindow.from_dict(entry, stage=self.stage) for entry in entries]
        logger.info(
            "Passes predicted | lat=%s | lon=%s | count=%d",
            coordinate.latitude,
            coordinate.longitude,
            len(passes),
        )
        return passes
