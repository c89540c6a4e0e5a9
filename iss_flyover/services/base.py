"""JsonService abstract base class.

Defines the request/response contract shared by the three flyover
stages.  A stage issues exactly one GET request and either returns the
decoded JSON body or raises one of:

- ``TransportError`` — the request did not complete.
- ``ServiceError``   — the service answered with a non-200 status.
- ``ParseError``     — the body is not JSON.

Concrete stages add their own shape checks on top of the decoded body
and raise ``ParseError`` for missing fields.
"""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING, Any

import httpx

from iss_flyover.core.config import FlyoverConfig
from iss_flyover.core.exceptions import ParseError, ServiceError, TransportError
from iss_flyover.services.http_client import build_client

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class JsonService(abc.ABC):
    """Base class for a single-request JSON stage.

    Subclasses set ``stage`` (the name reported on every error) and
    ``action`` (how the stage is described in error messages, e.g.
    ``"fetching IP"``).

    Without an injected ``client`` every request opens and closes its own
    ``httpx.Client``, so a service instance holds no per-request state.
    """

    stage: str = ""
    action: str = ""

    def __init__(
        self,
        config: FlyoverConfig | None = None,
        *,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or FlyoverConfig()
        self._client = client
        self._transport = transport

    @property
    def config(self) -> FlyoverConfig:
        """Return the configuration (read-only)."""
        return self._config

    @property
    @abc.abstractmethod
    def url(self) -> str:
        """Base URL of the remote service for this stage."""

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    def _get_json(self, url: str, *, params: Mapping[str, Any] | None = None) -> Any:
        """Issue one GET request and return the decoded JSON body."""
        logger.debug("GET %s | stage=%s | params=%s", url, self.stage, params)
        try:
            if self._client is not None:
                response = self._client.get(url, params=params)
            else:
                with build_client(self._config, transport=self._transport) as client:
                    response = client.get(url, params=params)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            msg = f"Request failed when {self.action}: {exc}"
            raise TransportError(msg, stage=self.stage) from exc

        if response.status_code != httpx.codes.OK:
            body = response.text
            msg = f"Status Code {response.status_code} when {self.action}. Response: {body}"
            raise ServiceError(
                msg,
                status_code=response.status_code,
                body=body,
                stage=self.stage,
            )

        try:
            return response.json()
        except ValueError as exc:
            msg = f"Response body is not valid JSON when {self.action}: {exc}"
            raise ParseError(msg, stage=self.stage) from exc

    def _require_object(self, payload: Any, what: str) -> dict[str, Any]:
        """Return *payload* if it is a JSON object, else raise ``ParseError``."""
        if not isinstance(payload, dict):
            msg = f"Expected a JSON object for {what} when {self.action}, got {type(payload).__name__}"
            raise ParseError(msg, stage=self.stage)
        return payload

    def _require_field(self, payload: dict[str, Any], key: str) -> Any:
        """Return ``payload[key]``; a missing or ``null`` field raises ``ParseError``."""
        value = payload.get(key)
        if value is None:
            msg = f"Response is missing field {key!r} when {self.action}"
            raise ParseError(msg, stage=self.stage)
        return value
