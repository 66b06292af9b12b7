"""Lazily loaded property table backed by a named resource."""

from __future__ import annotations

import codecs
import io
import logging
import threading
from typing import Any, BinaryIO

from .config import PropfileSettings
from .errors import EncodingUnsupported, IOFailure, PropertyLoadError, PropertyNotFound
from .parser import parse_stream
from .resources import open_resource

_MISSING = object()


class Properties:
    """Read-only ``key -> value`` view of a property resource.

    The resource is parsed on first access and the result is cached for the
    lifetime of the object. Load failures are logged once and leave the table
    empty (or holding whatever was parsed before the failure), so every lookup
    then raises :class:`PropertyNotFound`. The failure itself stays available
    through :attr:`load_error`.
    """

    def __init__(
        self,
        owner: Any,
        resource_name: str,
        *,
        settings: PropfileSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._owner = owner
        self._resource_name = resource_name
        self._settings = settings or PropfileSettings()
        self._logger = logger or logging.getLogger(__name__)
        self._table: dict[str, str] | None = None
        self._load_error: PropertyLoadError | None = None
        self._lock = threading.Lock()

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def resource_name(self) -> str:
        return self._resource_name

    @property
    def loaded(self) -> bool:
        return self._table is not None

    @property
    def load_error(self) -> PropertyLoadError | None:
        """Failure raised by the load pass, or None if it succeeded or has not run."""

        return self._load_error

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Return the value for ``key``.

        Raises :class:`PropertyNotFound` when the key is absent and no
        ``default`` is supplied.
        """

        table = self._ensure_loaded()
        if key in table:
            return table[key]
        if default is _MISSING:
            raise PropertyNotFound(key)
        return default

    def get_all(self) -> dict[str, str]:
        """Return the cached table; repeated calls return the same dict."""

        return self._ensure_loaded()

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._ensure_loaded()

    def __len__(self) -> int:
        return len(self._ensure_loaded())

    def __repr__(self) -> str:
        return f"Properties(owner={self._owner!r}, resource_name={self._resource_name!r})"

    def _ensure_loaded(self) -> dict[str, str]:
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                table = {}
                try:
                    self._load(table)
                except PropertyLoadError as exc:
                    self._load_error = exc
                    self._logger.error(
                        "Properties load error (%s): %s",
                        exc.category,
                        exc,
                        extra={"resource": self._resource_name, "category": exc.category},
                    )
                self._table = table
            return self._table

    def _load(self, table: dict[str, str]) -> None:
        settings = self._settings
        name = self._resource_name
        try:
            codec = codecs.lookup(settings.encoding)
            codecs.lookup_error(settings.decode_errors)
        except LookupError as exc:
            raise EncodingUnsupported(name, str(exc)) from exc
        # Bytes-to-bytes codecs such as rot13 or base64 cannot decode text.
        if not getattr(codec, "_is_text_encoding", True):
            raise EncodingUnsupported(name, f"{settings.encoding!r} is not a text encoding")

        stream = open_resource(self._owner, name)
        try:
            self._parse(stream, table)
        finally:
            stream.close()
        self._logger.debug("properties_loaded", extra={"resource": name})

    def _parse(self, stream: BinaryIO, table: dict[str, str]) -> None:
        settings = self._settings
        reader = io.TextIOWrapper(stream, encoding=settings.encoding, errors=settings.decode_errors)
        try:
            parse_stream(reader, settings.syntax.character_classes(), table)
        except (OSError, UnicodeDecodeError) as exc:
            raise IOFailure(self._resource_name, str(exc)) from exc
        finally:
            reader.detach()
