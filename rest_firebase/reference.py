"""
Python wrapper for a path of a Firebase realtime database REST API.

Every operation sends exactly one request to `<path>.json` (or to
`<path>/.json` for partial updates), with the reference's token as
`auth` query parameter, and returns the decoded body of the response.
"""

from typing import Any, Mapping

import httpx
from fastapi import status

from . import settings
from .errors import AuthMissingError, ResponseError
from .loggers import get_rest_firebase_logger
from .models import RestResponse, StructlogWarnSink, WarnLogger
from .paths import DocumentPath

logger = get_rest_firebase_logger()

UNSET: Any = object()


def build_params(
    query: Mapping[str, Any] | None, auth: str | None
) -> dict[str, Any]:
    """
    Builds the query string parameters of a request.

    The reference token always wins over an `auth` key set by the caller;
    `None` values are dropped.
    """
    params = {k: v for k, v in (query or {}).items() if v is not None}
    params.pop("auth", None)
    if auth is not None:
        params["auth"] = auth
    return params


def decode_body(response: httpx.Response, raw: bool = False) -> Any:
    """
    Decodes a response body: JSON when possible, the text otherwise,
    including bodies which are not valid UTF-8. Empty bodies decode to
    `None`.
    """
    if raw:
        return response.text
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def check_response(
    response: httpx.Response,
    url: str,
    method: str,
    warn_logger: WarnLogger,
    raw: bool = False,
) -> RestResponse:
    """
    Examines a response to raise an error or return its value.

    The `X-Firebase-Auth-Debug` header, when present, is passed to the
    reference logger whatever the status code.

    Raises:
        ResponseError: The status code is 300 or more.

    Returns:
        RestResponse: The status code, decoded body and debug message.
    """
    auth_debug = response.headers.get(settings.AUTH_DEBUG_HEADER)
    if auth_debug:
        warn_logger.warn(auth_debug)

    if response.status_code >= status.HTTP_300_MULTIPLE_CHOICES:
        raise ResponseError(
            message=response.reason_phrase,
            url=url,
            method=method,
            status_code=response.status_code,
            auth_debug=auth_debug,
            body=decode_body(response),
        )
    return RestResponse(
        status_code=response.status_code,
        body=decode_body(response, raw=raw),
        auth_debug=auth_debug,
    )


class Reference:
    """
    Reference to a path of a Firebase realtime database.

    References are cheap: create a new one from the binder for every path
    you need instead of deriving children from an existing one.
    """

    def __init__(
        self,
        url: str,
        auth: str | None = None,
        logger: WarnLogger | None = None,
        root: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        """
        Creates an instance of this class.

        Args:
            url (str): Absolute url of the referenced path.
            auth (str | None): Token sent as `auth` query parameter.
            logger (WarnLogger | None): Receives the rules debug
                messages. Defaults to the package structlog logger.
            root (str | None): Root url of the database, used to reach
                the rules. Defaults to the scheme and host of `url`.
            transport (httpx.AsyncBaseTransport | None): Transport for
                the HTTP client.
            timeout (float | None): Request timeout in seconds.
        """
        self.url = url
        self.auth = auth
        self.logger = logger or StructlogWarnSink()
        self.root = root.rstrip("/") if root else self._path.root
        self.transport = transport
        self.timeout = timeout or settings.database.request_timeout

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._path = DocumentPath.parse(value)
        self._url = value

    @property
    def path(self) -> DocumentPath:
        return self._path

    def __str__(self) -> str:
        return self._path.leaf_url()

    def __repr__(self) -> str:
        return f"<Reference {self._path.leaf_url()}>"

    async def send(
        self,
        url: str,
        method: str,
        query: Mapping[str, Any] | None = None,
        payload: Any = UNSET,
        *,
        raw: bool = False,
    ) -> RestResponse:
        """
        Sends one request and examines its response.

        Args:
            url (str): The url to send the request to. `.json` is appended
                when it does not end with it already.
            method (str): The HTTP method.
            query (Mapping[str, Any] | None): Extra query parameters, e.g.
                `{"shallow": True}` or `{"print": "pretty"}`.
            payload (Any): The request body. Serialized as JSON, unless
                `raw` is set and the payload is a string.
            raw (bool): Send string payloads verbatim and return the body
                text of successful responses without decoding it.

        Raises:
            ResponseError: The server answered with a status of 300+.
            httpx.TransportError: No response was received.

        Returns:
            RestResponse: The successful response.
        """
        if not url.endswith(settings.JSON_SUFFIX):
            url = DocumentPath.parse(url).leaf_url()

        request_kwargs: dict[str, Any] = {
            "params": build_params(query, self.auth)
        }
        if payload is not UNSET:
            if raw and isinstance(payload, str):
                request_kwargs["content"] = payload
            else:
                request_kwargs["json"] = payload

        logger.debug("request", method=method, url=url)
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout), transport=self.transport
        ) as client:
            response = await client.request(method, url, **request_kwargs)
        logger.debug(
            "response",
            method=method,
            url=url,
            status_code=response.status_code,
        )

        return check_response(response, url, method, self.logger, raw=raw)

    async def process(
        self,
        url: str,
        method: str,
        query: Mapping[str, Any] | None = None,
        payload: Any = UNSET,
        *,
        raw: bool = False,
    ) -> Any:
        """
        Same as `send`, returning only the response body.
        """
        response = await self.send(url, method, query, payload, raw=raw)
        return response.body

    async def get(self, query: Mapping[str, Any] | None = None) -> Any:
        """
        Reads the value at this path.

        The `auth` query parameter always comes from the reference: an
        `auth` key in `query` is ignored, so per-call tokens are not
        supported. Create another reference for another token.
        """
        return await self.process(self._path.leaf_url(), "GET", query)

    async def set(
        self, payload: Any, query: Mapping[str, Any] | None = None
    ) -> Any:
        """
        Replaces the value at this path.
        """
        return await self.process(
            self._path.leaf_url(), "PUT", query, payload
        )

    async def update(
        self, payload: Any, query: Mapping[str, Any] | None = None
    ) -> Any:
        """
        Merges `payload` into the children of this path, leaving the
        children it does not name untouched.
        """
        return await self.process(
            self._path.directory_url(), "PATCH", query, payload
        )

    async def push(
        self, payload: Any, query: Mapping[str, Any] | None = None
    ) -> Any:
        """
        Adds `payload` as a new child with a server generated key.

        Returns:
            The server response, e.g. `{"name": "<new key>"}`.
        """
        return await self.process(
            self._path.leaf_url(), "POST", query, payload
        )

    async def remove(self, query: Mapping[str, Any] | None = None) -> Any:
        """
        Deletes the value at this path.
        """
        return await self.process(self._path.leaf_url(), "DELETE", query)

    async def rules(self, payload: Any = None) -> str:
        """
        Reads the database security rules or, when `payload` is given,
        replaces them. The path of the reference is ignored.

        String payloads are sent as is, so rules with comments can be
        uploaded; other payloads are serialized as JSON.

        Raises:
            AuthMissingError: The reference has no auth token.

        Returns:
            str: The undecoded response body.
        """
        url = DocumentPath.parse(self.root).rules_url()
        if not self.auth:
            raise AuthMissingError(url)

        if payload is None:
            return await self.process(url, "GET", raw=True)
        return await self.process(url, "PUT", payload=payload, raw=True)
