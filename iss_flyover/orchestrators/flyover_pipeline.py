"""Flyover pipeline orchestrator.

Runs the three stages strictly in sequence, each stage consuming the
previous stage's output:

    LOCATING_ADDRESS -> RESOLVING_COORDINATES -> PREDICTING_PASSES -> DONE

Any stage error moves the run to ``FAILED`` and ends it; no later stage
is invoked.  The error is forwarded as the very exception object the
stage raised, and its ``stage`` attribute names where it happened.

A ``FlyoverPipeline`` holds only configuration and stage services.  All
per-invocation data lives in a fresh ``PipelineRun``, so one pipeline
instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from iss_flyover.core.config import FlyoverConfig
from iss_flyover.core.exceptions import FlyoverError
from iss_flyover.models.flyover import PipelineRun, PipelineState
from iss_flyover.services.address_locator import AddressLocator
from iss_flyover.services.coordinate_resolver import CoordinateResolver
from iss_flyover.services.pass_predictor import PassPredictor

if TYPE_CHECKING:
    import httpx

    from iss_flyover.models.flyover import PassWindow

logger = logging.getLogger("iss_flyover.orchestrators.flyover_pipeline")


class FlyoverPipeline:
    """Three-stage orchestrator with strict short-circuit on failure.

    Stage services default to instances built from *config*; pass your
    own to substitute any of them.

    Example usage::

        pipeline = FlyoverPipeline(FlyoverConfig.from_env())
        for window in pipeline.run():
            print(window.rise_datetime, window.duration)
    """

    def __init__(
        self,
        config: FlyoverConfig | None = None,
        *,
        locator: AddressLocator | None = None,
        resolver: CoordinateResolver | None = None,
        predictor: PassPredictor | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or FlyoverConfig()
        self._locator = locator or AddressLocator(self._config, transport=transport)
        self._resolver = resolver or CoordinateResolver(self._config, transport=transport)
        self._predictor = predictor or PassPredictor(self._config, transport=transport)

    @property
    def config(self) -> FlyoverConfig:
        return self._config

    def execute(self) -> PipelineRun:
        """Run every stage and return the completed ``PipelineRun``.

        Stage errors are captured on the run rather than raised; the
        returned run is always terminal.
        """
        run = PipelineRun()
        logger.info("Flyover pipeline started | run_id=%s", run.run_id)

        try:
            run.address = self._locator.locate()
            run.advance(PipelineState.RESOLVING_COORDINATES)

            run.coordinate = self._resolver.resolve(run.address)
            run.advance(PipelineState.PREDICTING_PASSES)

            passes = self._predictor.predict(run.coordinate)
        except FlyoverError as exc:
            logger.warning(
                "Flyover pipeline failed | run_id=%s | state=%s | stage=%s | code=%s | error=%s",
                run.run_id,
                run.state.value,
                exc.stage,
                exc.code,
                exc.message,
            )
            run.fail(exc)
            return run

        run.succeed(passes)
        logger.info(
            "Flyover pipeline completed | run_id=%s | ip=%s | passes=%d",
            run.run_id,
            run.address,
            len(passes),
        )
        return run

    def run(self) -> list[PassWindow]:
        """Return the predicted passes for the caller's current location.

        Raises:
            FlyoverError: The first stage error, unmodified.
        """
        result = self.execute()
        if result.error is not None:
            raise result.error
        return result.passes if result.passes is not None else []


def next_passes_for_current_location(
    config: FlyoverConfig | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> list[PassWindow]:
    """Return upcoming ISS passes over the caller's current location.

    Args:
        config: Service configuration; defaults to ``FlyoverConfig.from_env()``.
        transport: Optional ``httpx`` transport override.

    Raises:
        FlyoverError: If any stage fails.
    """
    if config is None:
        config = FlyoverConfig.from_env()
    return FlyoverPipeline(config, transport=transport).run()
