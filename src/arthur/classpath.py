"""Class loading and classpath index collaborators."""

from __future__ import annotations

import importlib
import inspect
import logging
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import Any, Protocol

from .api import find_annotation
from .errors import ClassResolutionError

logger = logging.getLogger(__name__)


class ClassLoader(Protocol):
    def load(self, name: str) -> type: ...


class ClassIndex(Protocol):
    def find_annotated_classes(self, annotation: type) -> list[type]: ...

    def find_annotated_methods(self, annotation: type) -> list[Callable[..., Any]]: ...

    def find_implementations(self, base: type) -> list[type]: ...


class ImportClassLoader:
    """Resolve classes by import path.

    Accepts ``pkg.mod:Outer.Inner`` or the dotted form ``pkg.mod.Outer.Inner``;
    for the latter the longest importable module prefix is used.
    """

    def load(self, name: str) -> type:
        logger.debug("Loading class '%s'", name)
        try:
            obj = self._resolve(name)
        except (ImportError, AttributeError, ValueError) as exc:
            raise ClassResolutionError(name) from exc
        if not isinstance(obj, type):
            raise ClassResolutionError(name)
        return obj

    def _resolve(self, name: str) -> Any:
        if ":" in name:
            module_name, _, qualname = name.partition(":")
            return _getattr_path(importlib.import_module(module_name), qualname)

        parts = name.split(".")
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError:
                continue
            return _getattr_path(module, ".".join(parts[split:]))
        raise ValueError(f"not a class path: '{name}'")


def _getattr_path(obj: Any, path: str) -> Any:
    for attr in path.split("."):
        obj = getattr(obj, attr)
    return obj


class ModuleIndex:
    """Classpath index over the classes defined in a fixed set of modules."""

    def __init__(self, modules: Iterable[ModuleType | str] = ()) -> None:
        self._classes: list[type] = []
        for module in modules:
            if isinstance(module, str):
                module = importlib.import_module(module)
            self._classes.extend(_defined_classes(module))
        logger.debug("Indexed %d class(es)", len(self._classes))

    @property
    def classes(self) -> list[type]:
        return list(self._classes)

    def find_annotated_classes(self, annotation: type) -> list[type]:
        return [cls for cls in self._classes if find_annotation(cls, annotation) is not None]

    def find_annotated_methods(self, annotation: type) -> list[Callable[..., Any]]:
        return [
            member
            for cls in self._classes
            for member in vars(cls).values()
            if inspect.isfunction(member) and find_annotation(member, annotation) is not None
        ]

    def find_implementations(self, base: type) -> list[type]:
        return [cls for cls in self._classes if cls is not base and issubclass(cls, base)]


def _defined_classes(module: ModuleType) -> list[type]:
    """Classes defined in ``module``, including nested ones, in definition order."""
    found: list[type] = []
    pending = [
        obj for obj in vars(module).values() if inspect.isclass(obj) and obj.__module__ == module.__name__
    ]
    while pending:
        cls = pending.pop(0)
        if cls in found:
            continue
        found.append(cls)
        pending[0:0] = [
            obj
            for obj in vars(cls).values()
            if inspect.isclass(obj) and obj.__module__ == module.__name__ and obj.__qualname__.startswith(cls.__qualname__ + ".")
        ]
    return found
