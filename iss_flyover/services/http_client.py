"""``httpx`` client builder shared by every stage service."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from iss_flyover.core.config import FlyoverConfig


def build_client(
    config: FlyoverConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` with the configured headers.

    Args:
        config: Source of the ``User-Agent`` header.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).

    Returns:
        A client the caller is responsible for closing.
    """
    headers = {
        "User-Agent": config.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(headers=headers, follow_redirects=True, transport=transport)
