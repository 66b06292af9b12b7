"""Public API facade for reading property files.

``open_properties`` wires settings, optional logging setup and resource
resolution into a ready-to-query :class:`Properties` instance.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import PropfileSettings
from .logging_utils import configure_logging
from .properties import Properties


def open_properties(
    resource: str,
    owner: Any = None,
    settings: PropfileSettings | None = None,
    logger: logging.Logger | None = None,
    configure: bool = False,
) -> Properties:
    """Create a lazily loaded :class:`Properties` for ``resource``.

    With ``owner`` left as None the resource is a filesystem path. Logging is
    only configured when ``configure`` is True.
    """

    settings = settings or PropfileSettings()
    if configure:
        configure_logging(settings.logging)
    return Properties(owner, resource, settings=settings, logger=logger)
