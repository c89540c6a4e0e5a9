"""Flyover exception taxonomy.

Every stage of the flyover pipeline reports failure by raising exactly
one ``FlyoverError`` subclass.  The orchestrator forwards that exception
unchanged, so callers can tell *how* a lookup failed from the class and
*where* it failed from ``stage``.

Taxonomy categories
-------------------
- ``TransportError`` — the request never produced a response
  (connection refused, DNS failure, TLS failure).
- ``ServiceError``   — the remote service answered with a non-success
  status code.
- ``ParseError``     — the response body did not match the expected
  JSON shape.

None of these are retried.  Every exception exposes ``to_error_dict()``
for a stable structured payload suitable for logging and JSON output.
"""

from __future__ import annotations


class FlyoverError(Exception):
    """Base exception for all flyover-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"locate_address"``, ``"predict_passes"``).
        code: Machine-readable error code (e.g. ``"SERVICE_ERROR"``).
    """

    #: Category reported by ``to_error_dict()``.
    default_category: str = "unknown"
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category of the concrete class."""
        return self.default_category

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


class TransportError(FlyoverError):
    """The outbound request could not be completed.

    The underlying ``httpx`` exception is chained as ``__cause__``.
    """

    default_category = "transport"
    default_code = "TRANSPORT_FAILED"


class ServiceError(FlyoverError):
    """The remote service responded with a non-success status.

    Attributes:
        status_code: HTTP status code returned by the service.
        body: Raw response body text, kept for diagnosis.
    """

    default_category = "service"
    default_code = "SERVICE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        stage: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message, stage=stage)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["status_code"] = self.status_code
        return payload


class ParseError(FlyoverError):
    """The response body did not match the expected JSON shape."""

    default_category = "parse"
    default_code = "PARSE_FAILED"
