import pytest
import pytest_asyncio
from httpx import ASGITransport
import os

from fake_explorer import create_fake_explorer

# Keep a developer .env from leaking into the suite
os.environ.setdefault('ENV_FILE', os.devnull)

from core.container import build_container  # noqa: E402
from core.environment.config import Settings  # noqa: E402
from explorer.performance import PerformanceTimer  # noqa: E402
from explorer.services import RequestExecutor  # noqa: E402
from explorer.validation import SchemaValidator  # noqa: E402
from explorer.usecases import (  # noqa: E402
    GetHistoryUseCase,
    GetTokensUseCase,
    GetTokenPairsUseCase
)


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run the endpoint suites against BASE_URL instead of the in-process fake backend",
    )


@pytest.fixture
def live(request) -> bool:
    return request.config.getoption("--live")


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def fake_explorer():
    """Fake explorer backend app."""
    return create_fake_explorer()


@pytest_asyncio.fixture
async def container(settings, fake_explorer, live):
    """
    Fixture for the dependency container.

    Parameters
    ----------
    settings : Settings
        Suite settings
    fake_explorer : FastAPI
        Backend served in-process unless ``--live`` is given
    live : bool
        Whether to hit the real backend

    Yields
    ------
    AsyncContainer
        Container wired to the selected backend
    """
    transport = None if live else ASGITransport(app=fake_explorer)
    container = build_container(settings=settings, transport=transport)
    yield container
    await container.close()


@pytest_asyncio.fixture
async def executor(container) -> RequestExecutor:
    return await container.get(RequestExecutor, component="explorer")


@pytest_asyncio.fixture
async def validator(container) -> SchemaValidator:
    return await container.get(SchemaValidator, component="explorer")


@pytest_asyncio.fixture
async def timer(container) -> PerformanceTimer:
    return await container.get(PerformanceTimer, component="explorer")


@pytest_asyncio.fixture
async def request_container(container):
    async with container() as request_container:
        yield request_container


@pytest_asyncio.fixture
async def get_history(request_container) -> GetHistoryUseCase:
    return await request_container.get(GetHistoryUseCase, component="explorer")


@pytest_asyncio.fixture
async def get_tokens(request_container) -> GetTokensUseCase:
    return await request_container.get(GetTokensUseCase, component="explorer")


@pytest_asyncio.fixture
async def get_token_pairs(request_container) -> GetTokenPairsUseCase:
    return await request_container.get(GetTokenPairsUseCase, component="explorer")
