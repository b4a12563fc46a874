"""Firebase REST database client models."""

from typing import Annotated, Any, Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .loggers import get_rest_firebase_logger


@runtime_checkable
class WarnLogger(Protocol):
    """
    Capability receiving the rules debug messages sent by the server.
    """

    def warn(self, message: str) -> Any: ...


class StructlogWarnSink:
    """
    Default `WarnLogger`, forwarding messages to the package logger as
    warning events.
    """

    def __init__(self, logger=None):
        self.logger = logger or get_rest_firebase_logger()

    def warn(self, message: str) -> None:
        self.logger.warning("auth_debug", message=message)


class ReferenceOptions(BaseModel):
    """
    Options accepted by a binder to create a reference.

    paths (str | list[str]): Path, or ordered path segments, relative to
        the database root. Defaults to the root itself.
    auth (str | None): Token sent as the `auth` query parameter.
    logger (WarnLogger): Receives the `X-Firebase-Auth-Debug` messages.
        Defaults to a sink writing to the package structlog logger.
    transport (httpx.AsyncBaseTransport | None): Transport used by the
        HTTP client, e.g. to reach an in-process emulator.
    timeout (float | None): Request timeout in seconds. Defaults to the
        configured `request_timeout`.
    """

    paths: str | list[str] = ""
    auth: str | None = None
    logger: Annotated[Any, Field(default_factory=StructlogWarnSink)]
    transport: httpx.AsyncBaseTransport | None = None
    timeout: Annotated[float | None, Field(default=None, gt=0)]

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("paths", mode="before")
    @classmethod
    def default_paths(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("logger")
    @classmethod
    def check_logger(cls, value: Any) -> Any:
        if value is None:
            return StructlogWarnSink()
        if not isinstance(value, WarnLogger):
            raise ValueError("logger must provide a warn(message) method")
        return value

    def path_segments(self) -> list[str]:
        if isinstance(self.paths, str):
            return [self.paths]
        return list(self.paths)


class RestResponse(BaseModel):
    """
    Successful response of the database.

    status_code (int): The response status code.
    body (Any): The decoded JSON body, or the raw text for rules.
    auth_debug (str | None): The `X-Firebase-Auth-Debug` header value.
    """

    status_code: int
    body: Any = None
    auth_debug: str | None = None
