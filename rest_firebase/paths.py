"""
Parsing of reference urls and rendering of the urls each operation is
dispatched to.

A reference url is held as a root (scheme, host and port), the path
segments below it, whether the path targets a directory (trailing `/`)
and whether it already carries the `.json` suffix. Leaf operations
(get, set, push, remove) dispatch to `<path>.json`, partial updates
to `<path>/.json`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .loggers import get_rest_firebase_logger
from .settings import JSON_SUFFIX, RULES_PATH

logger = get_rest_firebase_logger()

ROOT_RE = re.compile(
    r"^(?P<root>[a-zA-Z][a-zA-Z\d+.-]*://[^/?#]*)(?P<path>.*)$"
)


def join_url(root: str, segments: list[str]) -> str:
    """
    Joins a root url and relative path segments with `/`.

    Leading and trailing slashes of each segment are kept, except that a
    root ending in `/` does not produce a double slash.
    """
    return "/".join([root.rstrip("/"), *segments])


@dataclass(frozen=True)
class DocumentPath:
    root: str
    segments: tuple[str, ...] = ()
    directory: bool = False
    suffixed: bool = False

    @classmethod
    def parse(cls, url: str) -> DocumentPath:
        match = ROOT_RE.match(url)
        if match is None:
            raise ValueError(f"Not an absolute url: {url!r}")

        path = match.group("path")
        suffixed = path.endswith(JSON_SUFFIX)
        if suffixed:
            path = path[: -len(JSON_SUFFIX)]

        directory = path.endswith("/")
        path = path.strip("/")

        return cls(
            root=match.group("root"),
            segments=tuple(path.split("/")) if path else (),
            directory=directory,
            suffixed=suffixed,
        )

    @property
    def path(self) -> str:
        return "/".join(self.segments)

    def _base(self) -> str:
        if not self.segments:
            return f"{self.root}/"
        return f"{self.root}/{self.path}"

    def leaf_url(self) -> str:
        """
        Url of the document itself: `<path>.json`, or `<path>/.json` when
        the path targets a directory.
        """
        base = self._base()
        if self.segments and self.directory:
            base += "/"
        return base + JSON_SUFFIX

    def directory_url(self) -> str:
        """
        Url of the document's children container, as used by partial
        updates: always `<path>/.json`.
        """
        if not self.segments:
            return self._base() + JSON_SUFFIX

        url = f"{self._base()}/{JSON_SUFFIX}"
        if self.suffixed and not self.directory:
            # a key named "data.json" cannot be told apart from the suffix
            logger.debug("json_suffix_reinterpreted", path=self.path, url=url)
        return url

    def rules_url(self) -> str:
        return f"{self.root}/{RULES_PATH}{JSON_SUFFIX}"
