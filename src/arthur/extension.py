"""Extension ABC and extension registration."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import Context

logger = logging.getLogger(__name__)

# -- Extension Registry --

_extension_registry: dict[str, type[Extension]] = {}


def extension(name: str):
    """Register an Extension class under a short name for build files."""

    def decorator(cls):
        _extension_registry[name] = cls
        return cls

    return decorator


# -- Extension ABC --


class Extension(ABC):
    """Contributes native-image metadata to the shared build context."""

    @abstractmethod
    def execute(self, ctx: Context) -> None:
        """Inspect the application and register findings on ``ctx``."""

    def __repr__(self) -> str:
        return type(self).__qualname__
