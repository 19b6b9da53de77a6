import os
import time
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Schema(BaseModel):
    """
    Flat record schema: names of fields a record must and may carry.

    Attributes
    ----------
    required : tuple[str, ...]
        Field names that must be present, in reporting order
    optional : tuple[str, ...]
        Field names that may be present (documentation only, never checked)
    """
    required: tuple[str, ...]
    optional: tuple[str, ...] = ()


class EndpointSettings(BaseModel):
    """Endpoint paths appended to the base URL."""
    tokens: str = "/api/tokens"
    token_pairs: str = "/api/token-pairs"
    history: str = "/api/history"
    config: str = "/api/config"
    auth: str = "/api/auth"


def _default_schemas() -> dict[str, Schema]:
    return {
        "token": Schema(
            required=("id", "name", "symbol", "derivedETH", "tradeVolume", "totalLiquidity"),
            optional=("logo", "volume24HrsETH", "volume24HrsUSD"),
        ),
        "token_pair": Schema(
            required=("id", "token0", "token1", "reserve0", "reserve1"),
            optional=("totalSupply", "reserveUSD"),
        ),
        "history": Schema(
            required=("t", "o", "h", "l", "c", "v", "s"),
        ),
    }


class SampleData(BaseModel):
    """
    Known-good and known-bad parameter values used by the suites.

    Attributes
    ----------
    valid_token_id : str
        Address of a listed token (WTFUEL)
    valid_pair_id : str
        Identifier of a listed pair, ``<token0>-<token1>``
    valid_symbol : str
        Symbol accepted by the history endpoint
    valid_resolution : str
        Resolution accepted by the history endpoint
    lookback_seconds : int
        Width of the default history window ending now
    """
    valid_token_id: str = "0x4dc08b15ea0e10b96c41aec22fab934ba15c983e"
    valid_pair_id: str = (
        "0x4dc08b15ea0e10b96c41aec22fab934ba15c983e-0x22cb20636c2d853de2b140c2eaddbfd6c3643a39"
    )
    valid_symbol: str = "TFUEL"
    valid_resolution: str = "1D"
    lookback_seconds: int = Field(default=86400 * 7, gt=0)

    invalid_symbol: str = "INVALID_SYMBOL"
    invalid_resolution: str = "INVALID_RESOLUTION"
    unknown_pair_id: str = (
        "0x1234567890123456789012345678901234567890-0x0987654321098765432109876543210987654321"
    )
    malformed_pair_id: str = "invalid-pair-id"

    def valid_time_range(self, now: int | None = None) -> tuple[int, int]:
        """
        Get the default ``(from, to)`` window in unix seconds.

        Parameters
        ----------
        now : int | None
            Window end; current time when omitted

        Returns
        -------
        tuple[int, int]
            Window start and end
        """
        to = int(time.time()) if now is None else now
        return to - self.lookback_seconds, to


class Settings(BaseSettings):
    """
    Suite settings using Pydantic Settings.

    Attributes
    ----------
    base_url : str
        Explorer backend URL every endpoint path is appended to
    endpoints : EndpointSettings
        Endpoint paths
    schemas : dict[str, Schema]
        Named record schemas (token, token_pair, history)
    sample_data : SampleData
        Parameter values used by the suites
    request_timeout_ms : int
        Default timeout of a single request
    test_timeout_ms : int
        Timeout applied to a whole test case
    log_level : str
        Root logging level
    """

    base_url: str = "http://localhost:5006"
    endpoints: EndpointSettings = Field(default_factory=EndpointSettings)
    schemas: dict[str, Schema] = Field(default_factory=_default_schemas)
    sample_data: SampleData = Field(default_factory=SampleData)

    request_timeout_ms: int = Field(default=5000, gt=0)
    test_timeout_ms: int = Field(default=10000, gt=0)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"
    )

    def get_url(self, endpoint: str) -> str:
        """
        Get full URL for an endpoint path.

        The path is appended verbatim; query strings are the caller's concern.

        Parameters
        ----------
        endpoint : str
            Endpoint path, optionally with a query string

        Returns
        -------
        str
            Full URL
        """
        return f"{self.base_url}{endpoint}"
