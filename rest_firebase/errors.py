"""Firebase REST database errors."""

from typing import Any

from httpx import TransportError

ERR_INVALID_ID = "Invalid Firebase id."
ERR_AUTH_MISSING = "Reading or writing rules requires an auth token."


class RestFirebaseError(Exception):
    """
    Base exception for errors raised by the client itself.
    """


class InvalidTargetError(RestFirebaseError, ValueError):
    """
    Exception for a root target that is neither a database id nor a
    database url.
    """

    def __init__(self, target: str):
        super().__init__(ERR_INVALID_ID)
        self.target = target


class AuthMissingError(RestFirebaseError):
    """
    Exception raised, before any request is sent, when an operation
    requiring credentials is called on a reference without auth token.
    """

    def __init__(self, url: str):
        super().__init__(ERR_AUTH_MISSING)
        self.url = url


class ResponseError(RestFirebaseError):
    """
    Exception for responses with a status code of 300 or more.
    """

    def __init__(
        self,
        message: str,
        url: str,
        method: str,
        status_code: int,
        auth_debug: str | None = None,
        body: Any = None,
    ):
        """
        Inits the instance of this class.

        Args:
            message (str): The response reason phrase.
            url (str): The url the request was sent to, without query
                string.
            method (str): The HTTP method of the request.
            status_code (int): The response status code.
            auth_debug (str | None): The `X-Firebase-Auth-Debug` header
                value, when the server sent one.
            body (Any): The decoded JSON body, or the raw text if it is
                not JSON.
        """
        super().__init__(message)
        self.message = message
        self.url = url
        self.method = method
        self.status_code = status_code
        self.auth_debug = auth_debug
        self.body = body

    @property
    def status(self) -> int:
        return self.status_code

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message}"


__all__ = (
    "AuthMissingError",
    "InvalidTargetError",
    "ResponseError",
    "RestFirebaseError",
    "TransportError",
)
