"""Shared constants — single source of truth.

Default service endpoints, stage names, and environment variable names
used by the configuration layer, the stage services, and the orchestrator.
"""

from __future__ import annotations

from iss_flyover import __version__

# ---------------------------------------------------------------------------
# Default service endpoints
# ---------------------------------------------------------------------------

DEFAULT_IP_SERVICE_URL: str = "https://api.ipify.org"
"""Public IP identification service (``?format=json`` is appended)."""

DEFAULT_GEO_SERVICE_URL: str = "https://ipvigilante.com"
"""IP geolocation service (the address is appended as a path segment)."""

DEFAULT_PASS_SERVICE_URL: str = "http://api.open-notify.org/iss-pass.json"
"""ISS pass prediction service (``lat``/``lon`` query parameters)."""

DEFAULT_LOG_LEVEL: str = "WARNING"

# ---------------------------------------------------------------------------
# Stage names (used as ``FlyoverError.stage``)
# ---------------------------------------------------------------------------

STAGE_LOCATE_ADDRESS = "locate_address"
STAGE_RESOLVE_COORDINATES = "resolve_coordinates"
STAGE_PREDICT_PASSES = "predict_passes"

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

ENV_PREFIX = "ISS_FLYOVER_"

ENV_IP_SERVICE_URL = f"{ENV_PREFIX}IP_SERVICE_URL"
ENV_GEO_SERVICE_URL = f"{ENV_PREFIX}GEO_SERVICE_URL"
ENV_PASS_SERVICE_URL = f"{ENV_PREFIX}PASS_SERVICE_URL"
ENV_USER_AGENT = f"{ENV_PREFIX}USER_AGENT"
ENV_LOG_LEVEL = f"{ENV_PREFIX}LOG_LEVEL"

DEFAULT_USER_AGENT: str = f"iss-flyover/{__version__}"
