from decimal import Decimal
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from web3 import Web3

HTTP_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")


class RequestOptions(BaseModel):
    """
    Per-call overrides accepted by the request executor.

    Attributes
    ----------
    timeout_ms : int | None
        Overrides the default request timeout
    method : str
        HTTP verb
    data : Any
        Request body; mappings and lists are sent as JSON
    headers : dict[str, str]
        Merged over the default headers, these win
    """
    timeout_ms: int | None = Field(default=None, gt=0, description="Request timeout in ms")
    method: str = Field(default="GET", description="HTTP verb")
    data: Any = Field(default=None, description="Request body")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra headers")

    @field_validator('method')
    @classmethod
    def validate_method(cls, v: str) -> str:
        method = v.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f'Unsupported HTTP method: {v}')
        return method

    model_config = ConfigDict(extra="forbid")


def _require_address(value: str) -> str:
    if not Web3.is_address(value):
        raise ValueError(f'Invalid Ethereum address: {value}')
    return value


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError('Must not be blank')
    return value


class TokenRecord(BaseModel):
    """
    Token as listed by the tokens endpoint.

    Attributes
    ----------
    id : str
        Token contract address
    name : str
        Token name
    symbol : str
        Token symbol
    derived_eth : Decimal
        Price in the native coin
    trade_volume : Decimal
        Traded volume
    total_liquidity : Decimal
        Liquidity across pairs
    """
    id: str
    name: str
    symbol: str
    derived_eth: Decimal = Field(..., alias="derivedETH")
    trade_volume: Decimal = Field(..., alias="tradeVolume")
    total_liquidity: Decimal = Field(..., alias="totalLiquidity")
    logo: str | None = None
    volume_24hrs_eth: Decimal | None = Field(default=None, alias="volume24HrsETH")
    volume_24hrs_usd: Decimal | None = Field(default=None, alias="volume24HrsUSD")

    @field_validator('id')
    @classmethod
    def validate_id(cls, v: str) -> str:
        return _require_address(_require_text(v))

    @field_validator('name', 'symbol')
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _require_text(v)

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PairToken(BaseModel):
    """Token side of a pair."""
    id: str

    model_config = ConfigDict(extra="allow")


class TokenPairRecord(BaseModel):
    """
    Pair as listed by the token-pairs endpoint.

    Attributes
    ----------
    id : str
        ``<token0 address>-<token1 address>``
    token0 : PairToken
        First token
    token1 : PairToken
        Second token, distinct from the first
    reserve0 : Decimal
        Reserve of the first token
    reserve1 : Decimal
        Reserve of the second token
    """
    id: str
    token0: PairToken
    token1: PairToken
    reserve0: Decimal
    reserve1: Decimal
    total_supply: Decimal | None = Field(default=None, alias="totalSupply")
    reserve_usd: Decimal | None = Field(default=None, alias="reserveUSD")

    @field_validator('id')
    @classmethod
    def validate_id(cls, v: str) -> str:
        parts = _require_text(v).split('-')
        if len(parts) != 2:
            raise ValueError('Pair id must be <address>-<address>')
        for part in parts:
            _require_address(part)
        return v

    @model_validator(mode='after')
    def validate_distinct_tokens(self) -> "TokenPairRecord":
        if self.token0.id == self.token1.id:
            raise ValueError('token0 and token1 must differ')
        return self

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class HistoryBars(BaseModel):
    """
    Column-oriented OHLCV bars returned by the history endpoint.

    Attributes
    ----------
    t : list[int]
        Bar timestamps (unix seconds), strictly ascending
    o, h, l, c, v : list[float]
        Open, high, low, close and volume per bar
    s : str
        Status marker ("ok", "no_data")
    """
    t: list[int]
    o: list[float]
    h: list[float]
    l: list[float]
    c: list[float]
    v: list[float]
    s: str

    model_config = ConfigDict(strict=True, extra="allow")

    @model_validator(mode='after')
    def validate_bars(self) -> "HistoryBars":
        lengths = {len(self.t), len(self.o), len(self.h), len(self.l), len(self.c), len(self.v)}
        if len(lengths) != 1:
            raise ValueError('OHLCV arrays must have equal length')

        for i, timestamp in enumerate(self.t):
            if timestamp <= 0:
                raise ValueError(f'Bar {i}: timestamp must be positive')
            if i and timestamp <= self.t[i - 1]:
                raise ValueError(f'Bar {i}: timestamps must be strictly ascending')

        for i, bar in enumerate(self.bars()):
            if min(bar.values()) < 0:
                raise ValueError(f'Bar {i}: values must be non-negative')
            if bar['l'] > bar['h']:
                raise ValueError(f'Bar {i}: low above high')
            if not (bar['l'] <= bar['o'] <= bar['h'] and bar['l'] <= bar['c'] <= bar['h']):
                raise ValueError(f'Bar {i}: open/close outside low-high range')
        return self

    def bars(self) -> list[dict[str, float]]:
        """
        Get bars row by row.

        Returns
        -------
        list[dict[str, float]]
            One ``{o, h, l, c, v}`` mapping per timestamp
        """
        return [
            {'o': o, 'h': h, 'l': l, 'c': c, 'v': v}
            for o, h, l, c, v in zip(self.o, self.h, self.l, self.c, self.v)
        ]


class TokensEnvelope(BaseModel):
    tokens: list[TokenRecord]
    success: Literal["ok"]


class TokenPairsEnvelope(BaseModel):
    pairs: list[TokenPairRecord]
    success: Literal["ok"]


class TokenPairEnvelope(BaseModel):
    pair: TokenPairRecord
    success: Literal["ok"]
