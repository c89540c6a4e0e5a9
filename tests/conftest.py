"""Shared pytest fixtures for the ISS Flyover test suite."""

from __future__ import annotations

import pytest

from iss_flyover.core.config import FlyoverConfig
from tests.stubs import (
    GEO_HOST,
    IP_HOST,
    PASS_HOST,
    SAMPLE_IP,
    SAMPLE_LATITUDE,
    SAMPLE_LONGITUDE,
    SAMPLE_PASSES,
    StubServices,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def flyover_config() -> FlyoverConfig:
    """Configuration pointing every stage at a stub host."""
    return FlyoverConfig(
        ip_service_url=f"https://{IP_HOST}",
        geo_service_url=f"https://{GEO_HOST}",
        pass_service_url=f"http://{PASS_HOST}/iss-pass.json",
    )


@pytest.fixture()
def stub_services() -> StubServices:
    """Stub services pre-loaded with a successful three-stage chain."""
    stubs = StubServices()
    stubs.respond(IP_HOST, json={"ip": SAMPLE_IP})
    stubs.respond(
        GEO_HOST,
        json={"data": {"latitude": SAMPLE_LATITUDE, "longitude": SAMPLE_LONGITUDE}},
    )
    stubs.respond(PASS_HOST, json={"message": "success", "response": SAMPLE_PASSES})
    return stubs
