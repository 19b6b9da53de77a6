from dishka import Provider, Scope, provide, FromComponent
from explorer.services import RequestExecutor
from explorer.validation import SchemaValidator
from explorer.performance import PerformanceTimer
from explorer.usecases import GetHistoryUseCase, GetTokensUseCase, GetTokenPairsUseCase
from typing import Annotated, AsyncIterable
from core.environment.config import Settings
import httpx
import logging


class ExplorerProvider(Provider):
    """
    Provider for explorer API test dependencies.

    Parameters
    ----------
    transport : httpx.AsyncBaseTransport | None
        Transport for the HTTP client; the network when omitted
    """

    component = "explorer"

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__()
        self.transport = transport

    @provide(scope=Scope.APP)
    async def get_http_client(
        self,
        settings: Annotated[Settings, FromComponent("environment")]
    ) -> AsyncIterable[httpx.AsyncClient]:
        """
        Provide shared HTTP client, closed with the container.

        Parameters
        ----------
        settings : Settings
            Suite settings

        Yields
        ------
        httpx.AsyncClient
            HTTP client instance
        """
        async with httpx.AsyncClient(
            transport=self.transport,
            timeout=httpx.Timeout(settings.request_timeout_ms / 1000)
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_request_executor(
        self,
        client: Annotated[httpx.AsyncClient, FromComponent("explorer")],
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> RequestExecutor:
        """
        Provide request executor.

        Parameters
        ----------
        client : httpx.AsyncClient
            HTTP client instance
        settings : Settings
            Suite settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        RequestExecutor
            Request executor instance
        """
        return RequestExecutor(client=client, settings=settings, logger=logger)

    @provide(scope=Scope.APP)
    def get_schema_validator(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> SchemaValidator:
        return SchemaValidator(schemas=settings.schemas, logger=logger)

    @provide(scope=Scope.APP)
    def get_performance_timer(
        self,
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> PerformanceTimer:
        return PerformanceTimer(logger=logger)

    @provide(scope=Scope.REQUEST)
    def get_history_use_case(
        self,
        executor: Annotated[RequestExecutor, FromComponent("explorer")],
        settings: Annotated[Settings, FromComponent("environment")]
    ) -> GetHistoryUseCase:
        return GetHistoryUseCase(executor=executor, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_tokens_use_case(
        self,
        executor: Annotated[RequestExecutor, FromComponent("explorer")],
        settings: Annotated[Settings, FromComponent("environment")]
    ) -> GetTokensUseCase:
        return GetTokensUseCase(executor=executor, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_token_pairs_use_case(
        self,
        executor: Annotated[RequestExecutor, FromComponent("explorer")],
        settings: Annotated[Settings, FromComponent("environment")]
    ) -> GetTokenPairsUseCase:
        return GetTokenPairsUseCase(executor=executor, settings=settings)
