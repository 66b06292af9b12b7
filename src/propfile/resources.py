"""Resolve a property resource name to a readable byte stream."""

from __future__ import annotations

from importlib import resources as importlib_resources
from pathlib import Path
import sys
import types
from typing import Any, BinaryIO, Protocol, runtime_checkable

from .errors import IOFailure, ResourceNotFound


@runtime_checkable
class ResourceLoader(Protocol):
    """Owner object that knows how to open its own resources."""

    def open_resource(self, name: str) -> BinaryIO:
        """Return a binary stream for ``name``."""


class DirectoryLoader:
    """Open resources relative to a base directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def open_resource(self, name: str) -> BinaryIO:
        return (self._root / name.lstrip("/")).open("rb")

    def __repr__(self) -> str:
        return f"DirectoryLoader({str(self._root)!r})"


def _owner_package(owner: Any) -> str:
    if isinstance(owner, types.ModuleType):
        module_name = owner.__name__
        is_package = hasattr(owner, "__path__")
    else:
        cls = owner if isinstance(owner, type) else type(owner)
        module_name = cls.__module__
        module = sys.modules.get(module_name)
        is_package = module is not None and hasattr(module, "__path__")
    if is_package:
        return module_name
    package, _, _ = module_name.rpartition(".")
    if not package:
        raise ResourceNotFound(module_name, "owner module does not belong to a package")
    return package


def _open_package_resource(owner: Any, name: str) -> BinaryIO:
    package = _owner_package(owner)
    if name.startswith("/"):
        package = package.split(".", 1)[0]
        name = name.lstrip("/")
    try:
        root = importlib_resources.files(package)
    except ModuleNotFoundError as exc:
        raise ResourceNotFound(name, str(exc)) from exc
    resource = root.joinpath(*[part for part in name.split("/") if part])
    return resource.open("rb")


def open_resource(owner: Any, name: str) -> BinaryIO:
    """Open ``name`` on behalf of ``owner``.

    * ``owner`` implementing :class:`ResourceLoader` opens the stream itself.
    * ``owner`` of None treats ``name`` as a filesystem path.
    * any other owner (module, class or instance) resolves ``name`` inside the
      package that defines it; a leading ``/`` starts from the top-level
      package instead. Modules and classes are never used as loaders, even
      when they define an ``open_resource`` function.
    """

    try:
        if not isinstance(owner, (type, types.ModuleType)) and isinstance(owner, ResourceLoader):
            return owner.open_resource(name)
        if owner is None:
            return Path(name).open("rb")
        return _open_package_resource(owner, name)
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
        raise ResourceNotFound(name, exc.strerror or str(exc)) from exc
    except OSError as exc:
        raise IOFailure(name, str(exc)) from exc
