"""Error types raised while generating native-image configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ArthurError(Exception):
    """Base class for all build failures."""


class ClassResolutionError(ArthurError):
    """A named class could not be loaded."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unable to load class '{name}'")
        self.name = name


class UnsupportedUnwrapError(ArthurError):
    """The context cannot be unwrapped to the requested type."""

    def __init__(self, target: type) -> None:
        super().__init__(f"Unsupported unwrapping: {target!r}")
        self.target = target


class ConfigurationWriteError(ArthurError):
    """An artifact (or its directory) could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


class ExtensionError(ArthurError):
    """An extension failed while executing against the build context."""

    def __init__(self, extension: Any) -> None:
        name = type(extension).__qualname__
        super().__init__(f"Extension {name} failed")
        self.extension = extension
