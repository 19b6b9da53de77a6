from typing import Annotated, Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field

from core.exceptions import TransportException


class ReceivedResponse(BaseModel):
    """
    Entity representing a response that reached the client.

    Any status counts, 4xx and 5xx included: they are data for the caller.

    Attributes
    ----------
    kind : Literal["received"]
        Variant tag
    status : int
        HTTP status code
    data : Any
        Parsed body (JSON value, text for non-JSON bodies, None if unreadable)
    headers : dict[str, str]
        Response headers with lower-cased names
    """
    kind: Literal["received"] = "received"
    status: int = Field(..., ge=100)
    data: Any = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data, "headers": dict(self.headers)}


class TransportFailure(BaseModel):
    """
    Entity representing a call that produced no response.

    Attributes
    ----------
    kind : Literal["transport_failure"]
        Variant tag
    status : Literal[0]
        Sentinel status, distinct from every real HTTP status
    data : dict[str, str]
        Always ``{"error": <message>}``
    headers : dict[str, str]
        Always empty
    """
    kind: Literal["transport_failure"] = "transport_failure"
    status: Literal[0] = 0
    data: dict[str, str]
    headers: dict[str, str] = Field(default_factory=dict, max_length=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_error(cls, message: str) -> "TransportFailure":
        return cls(data={"error": message})

    @classmethod
    def from_exception(cls, exc: TransportException) -> "TransportFailure":
        return cls.from_error(exc.message)

    @property
    def error(self) -> str:
        return self.data["error"]

    @property
    def is_success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": dict(self.data), "headers": {}}


NormalizedResponse = Annotated[
    Union[ReceivedResponse, TransportFailure],
    Field(discriminator="kind")
]


class ValidationResult(BaseModel):
    """
    Outcome of a schema check.

    Attributes
    ----------
    errors : tuple[str, ...]
        Every violation found, in discovery order
    is_valid : bool
        True when no violation was found
    """
    errors: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


class PerformanceResult(BaseModel):
    """
    Timing of one request-producing operation.

    Attributes
    ----------
    duration_ms : int
        Elapsed wall-clock time
    limit_ms : int
        Advisory ceiling the duration is compared to
    response : Any
        Exactly what the operation returned
    is_within_limit : bool
        ``duration_ms <= limit_ms``
    """
    duration_ms: int = Field(..., ge=0)
    limit_ms: int
    response: Any = None

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_within_limit(self) -> bool:
        return self.duration_ms <= self.limit_ms
