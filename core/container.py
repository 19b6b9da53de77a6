import httpx
from dishka import AsyncContainer, make_async_container

from core.environment.config import Settings
from core.environment.providers import EnvironmentProvider
from core.logging.providers import LoggerProvider
from explorer.providers import ExplorerProvider


def build_container(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None
) -> AsyncContainer:
    """
    Build the dependency container.

    Parameters
    ----------
    settings : Settings | None
        Preset settings; read from the environment when omitted
    transport : httpx.AsyncBaseTransport | None
        HTTP transport; the network when omitted

    Returns
    -------
    AsyncContainer
        Container to be closed by the caller
    """
    return make_async_container(
        EnvironmentProvider(settings),
        LoggerProvider(),
        ExplorerProvider(transport)
    )
