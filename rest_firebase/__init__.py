"""Firebase realtime database REST client."""

from .errors import (
    AuthMissingError,
    InvalidTargetError,
    ResponseError,
    RestFirebaseError,
    TransportError,
)
from .factory import Binder, factory
from .models import ReferenceOptions, RestResponse, WarnLogger
from .reference import Reference

__all__ = (
    "AuthMissingError",
    "Binder",
    "InvalidTargetError",
    "Reference",
    "ReferenceOptions",
    "ResponseError",
    "RestFirebaseError",
    "RestResponse",
    "TransportError",
    "WarnLogger",
    "factory",
)
