import posixpath
from typing import BinaryIO, Protocol


class Output(Protocol):
    """Remote store a site is published to. Blind writes, no read-back."""

    def set_prefix(self, prefix: str) -> None:
        """Set the path segment placed in front of every key on later calls."""
        ...

    def put_reader(self, key: str, content: BinaryIO, content_type: str) -> None:
        """Upload content at prefix+key as a publicly readable object."""
        ...

    def delete(self, key: str) -> None:
        """Remove the object at prefix+key."""
        ...

    def url_for(self, key: str) -> str:
        """Browsable URL for prefix+key. Never touches the network."""
        ...


def join_path(*parts: str) -> str:
    """Join path segments with single slashes.

    Empty segments are dropped, repeated separators collapsed and '.'/'..'
    resolved the way a POSIX path join would. The result never starts with a slash.
    A key containing ".." can therefore land outside the prefix; see escapes_prefix().

    Examples:
        join_path("", "site", "css/main.css") -> "site/css/main.css"
        join_path("/123/", "//v2", "index.html") -> "123/v2/index.html"
        join_path("", "") -> ""
    """
    joined = "/".join(part for part in parts if part)
    if not joined:
        return ""
    normalized = posixpath.normpath(joined).lstrip("/")
    return "" if normalized == "." else normalized


def escapes_prefix(key: str) -> bool:
    """True when key, once normalized, points above the location it is joined to."""
    normalized = posixpath.normpath("/".join(part for part in key.split("/") if part) or ".")
    return normalized == ".." or normalized.startswith("../")
