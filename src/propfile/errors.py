"""Exceptions raised while loading and querying property files."""

from __future__ import annotations


class PropertyError(Exception):
    """Base class for all propfile errors."""


class PropertyNotFound(PropertyError, LookupError):
    """Raised by lookups when a key is absent from the property table.

    A missing, unreadable or malformed file surfaces the same way, which lets
    callers fall back to a default with a single ``except`` clause.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"property not found: {key!r}")
        self.key = key


class PropertyLoadError(PropertyError):
    """Failure while reading a property resource."""

    category = "load failure"

    def __init__(self, resource: str, reason: str | None = None) -> None:
        message = f"{resource}: {reason}" if reason else resource
        super().__init__(message)
        self.resource = resource
        self.reason = reason


class ResourceNotFound(PropertyLoadError):
    category = "resource not found"


class EncodingUnsupported(PropertyLoadError):
    category = "encoding is not supported"


class IOFailure(PropertyLoadError):
    category = "i/o failure"
