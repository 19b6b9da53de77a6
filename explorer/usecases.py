from urllib.parse import urlencode

from core.environment.config import Settings
from explorer.entities import NormalizedResponse
from explorer.schemas import RequestOptions
from explorer.services import RequestExecutor


class GetHistoryUseCase:
    """
    Use case for fetching OHLCV history.

    Parameters
    ----------
    executor : RequestExecutor
        Request executor
    settings : Settings
        Suite settings
    """

    def __init__(self, executor: RequestExecutor, settings: Settings):
        self.executor = executor
        self.settings = settings

    async def __call__(
        self,
        symbol: str | None = None,
        resolution: str | None = None,
        from_: int | str | None = None,
        to: int | str | None = None,
        options: RequestOptions | dict | None = None
    ) -> NormalizedResponse:
        """
        Execute use case.

        Parameters left as None are not sent, which is how missing-parameter
        requests are made.

        Parameters
        ----------
        symbol : str | None
            Asset symbol
        resolution : str | None
            Bucket granularity, e.g. ``1D``
        from_ : int | str | None
            Window start (unix seconds)
        to : int | str | None
            Window end (unix seconds)
        options : RequestOptions | dict | None
            Request overrides

        Returns
        -------
        NormalizedResponse
            Normalized response
        """
        params = {
            "symbol": symbol,
            "resolution": resolution,
            "from": from_,
            "to": to
        }
        query = urlencode({k: v for k, v in params.items() if v is not None})
        endpoint = self.settings.endpoints.history
        if query:
            endpoint = f"{endpoint}?{query}"
        return await self.executor.execute(endpoint, options)


class GetTokensUseCase:
    """
    Use case for listing tokens.

    Parameters
    ----------
    executor : RequestExecutor
        Request executor
    settings : Settings
        Suite settings
    """

    def __init__(self, executor: RequestExecutor, settings: Settings):
        self.executor = executor
        self.settings = settings

    async def __call__(self, options: RequestOptions | dict | None = None) -> NormalizedResponse:
        return await self.executor.execute(self.settings.endpoints.tokens, options)


class GetTokenPairsUseCase:
    """
    Use case for listing token pairs or fetching one pair.

    Parameters
    ----------
    executor : RequestExecutor
        Request executor
    settings : Settings
        Suite settings
    """

    def __init__(self, executor: RequestExecutor, settings: Settings):
        self.executor = executor
        self.settings = settings

    async def __call__(
        self,
        pair_id: str | None = None,
        options: RequestOptions | dict | None = None
    ) -> NormalizedResponse:
        """
        Execute use case.

        Parameters
        ----------
        pair_id : str | None
            Pair identifier; the whole list is fetched when omitted
        options : RequestOptions | dict | None
            Request overrides

        Returns
        -------
        NormalizedResponse
            Normalized response
        """
        endpoint = self.settings.endpoints.token_pairs
        if pair_id is not None:
            endpoint = f"{endpoint}/{pair_id}"
        return await self.executor.execute(endpoint, options)
