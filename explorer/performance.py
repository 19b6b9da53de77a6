import logging
import time
from typing import Any, Awaitable, Callable

from explorer.entities import PerformanceResult

DEFAULT_LIMIT_MS = 1000


class PerformanceTimer:
    """
    Service timing request-producing operations.

    The limit is advisory: slow operations are awaited to completion and
    only flagged in the result.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    async def measure(
        self,
        operation: Callable[[], Awaitable[Any]],
        limit_ms: int = DEFAULT_LIMIT_MS
    ) -> PerformanceResult:
        """
        Await operation and measure its wall-clock duration.

        Parameters
        ----------
        operation : Callable[[], Awaitable[Any]]
            Zero-argument coroutine function, typically an executor call
        limit_ms : int
            Ceiling the duration is compared against

        Returns
        -------
        PerformanceResult
            Duration, limit flag and the untouched operation result
        """
        started = time.perf_counter()
        response = await operation()
        duration_ms = int((time.perf_counter() - started) * 1000)

        result = PerformanceResult(
            duration_ms=duration_ms,
            limit_ms=limit_ms,
            response=response
        )
        if result.is_within_limit:
            self.logger.info(f"Operation took {duration_ms} ms (limit {limit_ms} ms)")
        else:
            self.logger.warning(f"Operation took {duration_ms} ms, over the {limit_ms} ms limit")
        return result
