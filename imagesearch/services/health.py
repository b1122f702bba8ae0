"""Startup liveness probe for the search backends."""

from __future__ import annotations

import asyncio
from typing import Any

from imagesearch.domain.models import unhealthy
from imagesearch.logging import logger
from imagesearch.services.dispatcher import FailoverDispatcher

HEALTH_PATH = "/api/health"


class HealthProbe:
    def __init__(self, dispatcher: FailoverDispatcher) -> None:
        self._dispatcher = dispatcher

    async def check_health(self) -> Any:
        """Return the backend health payload, or a degraded value on failure."""

        try:
            return await self._dispatcher.request(HEALTH_PATH)
        except Exception as exc:
            logger.warning(
                "backend_health_degraded",
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            return unhealthy(str(exc) or exc.__class__.__name__)

    def start(self) -> asyncio.Task:
        """Run one probe in the background and log its outcome."""

        task = asyncio.create_task(self.check_health(), name="backend-health-probe")
        task.add_done_callback(_log_outcome)
        return task


def _log_outcome(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("backend_health_check_failed", error=str(exc))
        return
    logger.info("backend_health", health=task.result())


__all__ = ["HEALTH_PATH", "HealthProbe"]
