"""Typed models for the flyover pipeline.

Design notes:
- Stage outputs are frozen dataclasses; nothing is shared between runs.
- Upstream values are passed through without coercion.  Latitude and
  longitude keep whatever representation (string or number) the
  geolocation service used.
- ``PipelineRun`` is the only mutable model and lives for exactly one
  orchestrator invocation.
"""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, NewType

from iss_flyover.core.constants import STAGE_PREDICT_PASSES
from iss_flyover.core.exceptions import ParseError

if TYPE_CHECKING:
    from iss_flyover.core.exceptions import FlyoverError

NetworkAddress = NewType("NetworkAddress", str)
"""Textual IPv4 address, e.g. ``"162.245.144.188"``.  Not validated locally."""

CoordinateValue = str | int | float


# ---------------------------------------------------------------------------
# Stage outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GeoCoordinate:
    """Latitude/longitude pair, e.g. ``GeoCoordinate("49.27670", "-123.13000")``."""

    latitude: CoordinateValue
    longitude: CoordinateValue

    def as_query_params(self) -> dict[str, CoordinateValue]:
        """Return the ``lat``/``lon`` query parameters for the pass service."""
        return {"lat": self.latitude, "lon": self.longitude}


@dataclass(frozen=True, slots=True)
class PassWindow:
    """A single predicted visibility window.

    Attributes:
        risetime: Start of the pass as Unix epoch seconds (UTC).
        duration: Length of the pass in seconds.
    """

    risetime: int
    duration: int

    @classmethod
    def from_dict(cls, data: Any, *, stage: str = STAGE_PREDICT_PASSES) -> PassWindow:
        """Build a ``PassWindow`` from one element of the ``response`` array.

        Raises:
            ParseError: If *data* is not an object or a field is missing
                or not an integer, or if ``risetime`` is outside the
                range ``datetime`` can represent.
        """
        if not isinstance(data, dict):
            msg = f"Pass entry is not a JSON object: {data!r}"
            raise ParseError(msg, stage=stage)

        values: dict[str, int] = {}
        for key in ("risetime", "duration"):
            value = data.get(key)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"Pass entry field {key!r} must be an integer, got {value!r}"
                raise ParseError(msg, stage=stage)
            values[key] = value

        try:
            datetime.fromtimestamp(values["risetime"], tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            msg = f"Pass entry field 'risetime' is not a valid timestamp: {values['risetime']!r}"
            raise ParseError(msg, stage=stage) from exc

        return cls(risetime=values["risetime"], duration=values["duration"])

    @property
    def rise_datetime(self) -> datetime:
        """Return ``risetime`` as a timezone-aware UTC ``datetime``."""
        return datetime.fromtimestamp(self.risetime, tz=UTC)

    def to_dict(self) -> dict[str, int]:
        return {"risetime": self.risetime, "duration": self.duration}


# ---------------------------------------------------------------------------
# Orchestrator state
# ---------------------------------------------------------------------------


class PipelineState(enum.Enum):
    """Lifecycle state of one pipeline invocation.

    ``DONE`` and ``FAILED`` are terminal.  ``FAILED`` is reachable from
    each of the three working states.
    """

    LOCATING_ADDRESS = "locating_address"
    RESOLVING_COORDINATES = "resolving_coordinates"
    PREDICTING_PASSES = "predicting_passes"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.DONE, PipelineState.FAILED)


_TRANSITIONS: dict[PipelineState, frozenset[PipelineState]] = {
    PipelineState.LOCATING_ADDRESS: frozenset(
        {PipelineState.RESOLVING_COORDINATES, PipelineState.FAILED}
    ),
    PipelineState.RESOLVING_COORDINATES: frozenset(
        {PipelineState.PREDICTING_PASSES, PipelineState.FAILED}
    ),
    PipelineState.PREDICTING_PASSES: frozenset({PipelineState.DONE, PipelineState.FAILED}),
    PipelineState.DONE: frozenset(),
    PipelineState.FAILED: frozenset(),
}


@dataclass(slots=True)
class PipelineRun:
    """Record of a single orchestrator invocation.

    Exactly one of ``passes`` and ``error`` is set once the run reaches a
    terminal state.

    Attributes:
        state: Current lifecycle state.
        address: Result of the address lookup, once known.
        coordinate: Result of the coordinate lookup, once known.
        passes: Pass windows on success.
        error: The stage error on failure, unmodified.
        failed_state: The working state that was active when the run failed.
        history: Every state the run has entered, in order.
        run_id: Short random identifier used to correlate log lines.
    """

    state: PipelineState = PipelineState.LOCATING_ADDRESS
    address: NetworkAddress | None = None
    coordinate: GeoCoordinate | None = None
    passes: list[PassWindow] | None = None
    error: FlyoverError | None = None
    failed_state: PipelineState | None = None
    history: list[PipelineState] = field(
        default_factory=lambda: [PipelineState.LOCATING_ADDRESS]
    )
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])

    def advance(self, new_state: PipelineState) -> None:
        """Move to *new_state*.

        Raises:
            RuntimeError: If the transition is not allowed.
        """
        if new_state not in _TRANSITIONS[self.state]:
            msg = f"Illegal pipeline transition {self.state.value} -> {new_state.value}"
            raise RuntimeError(msg)
        self.state = new_state
        self.history.append(new_state)

    def fail(self, error: FlyoverError) -> None:
        """Record *error* and move to ``FAILED``."""
        failed_in = self.state
        self.advance(PipelineState.FAILED)
        self.failed_state = failed_in
        self.error = error

    def succeed(self, passes: list[PassWindow]) -> None:
        """Record *passes* and move to ``DONE``."""
        self.advance(PipelineState.DONE)
        self.passes = passes

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE
