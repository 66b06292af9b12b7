"""Lightweight reader for INI-like ``key = value`` property files."""

from .api import open_properties
from .config import LoggingConfig, PropfileSettings, SyntaxConfig
from .errors import (
    EncodingUnsupported,
    IOFailure,
    PropertyError,
    PropertyLoadError,
    PropertyNotFound,
    ResourceNotFound,
)
from .logging_utils import JsonFormatter, PlainFormatter, configure_logging
from .parser import PropertyTokenizer, crop, parse_stream, parse_text
from .properties import Properties
from .resources import DirectoryLoader, ResourceLoader, open_resource
from .syntax import CharacterClasses, classify

__all__ = [
    "open_properties",
    "LoggingConfig",
    "PropfileSettings",
    "SyntaxConfig",
    "EncodingUnsupported",
    "IOFailure",
    "PropertyError",
    "PropertyLoadError",
    "PropertyNotFound",
    "ResourceNotFound",
    "JsonFormatter",
    "PlainFormatter",
    "configure_logging",
    "PropertyTokenizer",
    "crop",
    "parse_stream",
    "parse_text",
    "Properties",
    "DirectoryLoader",
    "ResourceLoader",
    "open_resource",
    "CharacterClasses",
    "classify",
]
