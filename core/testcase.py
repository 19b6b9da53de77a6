import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable
import pytest

from core.environment.config import Settings
from core.logging.providers import LOGGER_NAME

AsyncBody = Callable[..., Awaitable[Any]]


def create_test_case(
    name: str,
    timeout_ms: int | None = None,
    logger: logging.Logger | None = None
) -> Callable[[AsyncBody], AsyncBody]:
    """
    Register an async test body under a display name and a time budget.

    The body runs under pytest-asyncio and is cancelled once the budget is
    spent. Any failure is logged with the test name and re-raised for pytest
    to report.

    Parameters
    ----------
    name : str
        Display name, e.g. ``"TC001: Should return historical data"``
    timeout_ms : int | None
        Positive test time budget; ``test_timeout_ms`` from settings when omitted
    logger : logging.Logger | None
        Logger for failures; the suite logger when omitted

    Returns
    -------
    Callable[[AsyncBody], AsyncBody]
        Decorator for the test function

    Raises
    ------
    ValueError
        If ``timeout_ms`` is zero or negative
    """
    if timeout_ms is None:
        budget_ms = Settings().test_timeout_ms
    elif timeout_ms > 0:
        budget_ms = timeout_ms
    else:
        raise ValueError(f"Test time budget must be positive, got {timeout_ms} ms")
    log = logger or logging.getLogger(LOGGER_NAME)

    def decorator(test_fn: AsyncBody) -> AsyncBody:
        @functools.wraps(test_fn)
        async def wrapper(*args, **kwargs):
            try:
                await asyncio.wait_for(test_fn(*args, **kwargs), timeout=budget_ms / 1000)
            except Exception as e:
                log.error(f"Test failed: {name} {str(e) or type(e).__name__}")
                raise

        wrapper.test_case_name = name
        wrapper.timeout_ms = budget_ms
        return pytest.mark.asyncio(wrapper)

    return decorator
