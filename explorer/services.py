import asyncio
import logging
from typing import Any, Mapping
import httpx

from core.environment.config import Settings
from core.exception_handler import transport_exception_handler
from explorer.entities import NormalizedResponse, ReceivedResponse, TransportFailure
from explorer.schemas import RequestOptions

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class RequestExecutor:
    """
    Service issuing single HTTP calls against the explorer backend.

    Every outcome comes back as a ``NormalizedResponse``; nothing is raised.

    Parameters
    ----------
    client : httpx.AsyncClient
        Shared HTTP client
    settings : Settings
        Suite settings (base URL, default timeout)
    logger : logging.Logger
        Logger instance
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Settings,
        logger: logging.Logger
    ):
        self.client = client
        self.settings = settings
        self.logger = logger

    async def execute(
        self,
        endpoint: str,
        options: RequestOptions | Mapping[str, Any] | None = None
    ) -> NormalizedResponse:
        """
        Execute one request.

        Parameters
        ----------
        endpoint : str
            Endpoint path appended verbatim to the base URL
        options : RequestOptions | Mapping[str, Any] | None
            Timeout, method, body and header overrides

        Returns
        -------
        NormalizedResponse
            ``ReceivedResponse`` for any HTTP status,
            ``TransportFailure`` (status 0) when no response was obtained
        """
        url = self.settings.get_url(endpoint)

        try:
            if not isinstance(options, RequestOptions):
                options = RequestOptions.model_validate(options or {})
            timeout_ms = options.timeout_ms or self.settings.request_timeout_ms
            request = self._build_request(url, options, timeout_ms / 1000)

            self.logger.info(f"Making request to: {url}")
            response, body = await asyncio.wait_for(
                self._send(request),
                timeout=timeout_ms / 1000
            )
        except Exception as e:
            failure = transport_exception_handler(url, e, self.logger)
            return TransportFailure.from_exception(failure)

        self.logger.info(f"Response status: {response.status_code}")
        result = ReceivedResponse(
            status=response.status_code,
            data=self._decode_body(response, body),
            headers=dict(response.headers)
        )
        if not result.is_success:
            self.logger.warning(f"Response data: {result.data!r}")
        return result

    def _build_request(
        self,
        url: str,
        options: RequestOptions,
        timeout: float
    ) -> httpx.Request:
        headers = httpx.Headers(DEFAULT_HEADERS)
        headers.update(options.headers)

        if isinstance(options.data, (str, bytes)):
            body = {"content": options.data}
        elif options.data is not None:
            body = {"json": options.data}
        else:
            body = {}

        return self.client.build_request(
            options.method,
            url,
            headers=headers,
            timeout=timeout,
            **body
        )

    async def _send(self, request: httpx.Request) -> tuple[httpx.Response, bytes | None]:
        """
        Send request and read the body.

        Parameters
        ----------
        request : httpx.Request
            Prepared request

        Returns
        -------
        tuple[httpx.Response, bytes | None]
            Response and its body, None when the body could not be read
        """
        response = await self.client.send(request, stream=True)
        try:
            body = await response.aread()
        except httpx.TimeoutException:
            raise
        except httpx.HTTPError as e:
            self.logger.warning(f"Response body unreadable: {request.url} {e}")
            body = None
        finally:
            await response.aclose()
        return response, body

    def _decode_body(self, response: httpx.Response, body: bytes | None) -> Any:
        if body is None:
            return None
        if not body:
            return ""
        try:
            return response.json()
        except ValueError:
            return response.text
