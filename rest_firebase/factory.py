"""
Factory binding references to a Firebase realtime database.

Usage:

    from rest_firebase import factory

    firebase = factory("some-id")
    ref = firebase(paths="some/path", auth="some-oauth-token")

    # query parameters are passed as a mapping
    # (see https://firebase.google.com/docs/reference/rest/database)
    value = await ref.get({"shallow": True})
"""

import re
from typing import Any

from . import settings
from .errors import InvalidTargetError
from .loggers import get_rest_firebase_logger
from .models import ReferenceOptions
from .paths import join_url
from .reference import Reference

logger = get_rest_firebase_logger()

VALID_ID = re.compile(r"^[-0-9a-zA-Z]{2,}$")
VALID_URL = re.compile(r"^https?://[\da-z.-]+(:\d+)?/?$")


def resolve_root(target: str) -> str:
    """
    Resolves a database id or url to the database root url.

    Raises:
        InvalidTargetError: `target` is neither a valid database url nor a
            valid database id.
    """
    if not isinstance(target, str):
        raise InvalidTargetError(target)
    if VALID_URL.match(target):
        return target.rstrip("/")
    if VALID_ID.match(target):
        return f"https://{target}.{settings.database.default_domain}"
    raise InvalidTargetError(target)


class Binder:
    """
    Creates references to paths of the database it is bound to.
    """

    def __init__(self, root: str):
        self.root = root

    def __call__(
        self, options: ReferenceOptions | dict | None = None, **fields: Any
    ) -> Reference:
        """
        Creates a reference.

        Args:
            options (ReferenceOptions | dict | None): The reference
                options, as a model or a mapping of its fields.
            **fields: Options fields, overriding the ones of `options`.

        Returns:
            Reference: The reference to `<root>/<paths>`.
        """
        if options is None:
            options = ReferenceOptions(**fields)
        else:
            options = ReferenceOptions.model_validate(options)
            if fields:
                options = ReferenceOptions(**{**dict(options), **fields})

        return Reference(
            url=join_url(self.root, options.path_segments()),
            auth=options.auth,
            logger=options.logger,
            root=self.root,
            transport=options.transport,
            timeout=options.timeout,
        )

    def __repr__(self) -> str:
        return f"<Binder {self.root}>"


def factory(target: str) -> Binder:
    """
    Creates a reference factory bound to a Firebase database.

    Args:
        target (str): A database id (e.g. "my-app", bound to
            https://my-app.firebaseio.com) or a database url (e.g.
            "http://127.0.0.1:9000" for an emulator).

    Raises:
        InvalidTargetError: `target` is not a valid id or url.

    Returns:
        Binder: Callable creating references relative to the root.
    """
    root = resolve_root(target)
    logger.debug("bound", root=root)
    return Binder(root)
