import asyncio
import logging
import httpx
from pydantic import ValidationError

from core.exceptions import (
    TransportException,
    NoResponseException,
    RequestSetupException
)


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        field_path = ".".join(str(x) for x in error["loc"])
        problems.append(f"{field_path or 'options'}: {error['msg']}")
    return "Invalid request options: " + "; ".join(problems)


def transport_exception_handler(
    url: str,
    exc: Exception,
    logger: logging.Logger
) -> TransportException:
    """
    Handler for failures raised while building or sending a request.

    Parameters
    ----------
    url : str
        Target URL
    exc : Exception
        Raised exception
    logger : logging.Logger
        Logger for diagnostics

    Returns
    -------
    TransportException
        Classified failure: ``NoResponseException`` when the request went out
        and nothing came back, ``RequestSetupException`` when it never left
    """
    if isinstance(exc, TransportException):
        classified = exc
    elif isinstance(exc, ValidationError):
        classified = RequestSetupException(_describe_validation_error(exc))
    elif isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        classified = RequestSetupException(str(exc) or type(exc).__name__)
    elif isinstance(exc, (httpx.TransportError, asyncio.TimeoutError)):
        classified = NoResponseException()
    else:
        classified = RequestSetupException(str(exc) or type(exc).__name__)

    logger.error(f"Request failed: {url} {str(exc) or type(exc).__name__}")
    if isinstance(classified, NoResponseException):
        logger.error("No response received")
    else:
        logger.error(f"Request setup error: {classified.message}")

    return classified
