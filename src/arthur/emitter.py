"""Write accumulated context state out as native-image configuration files."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any, TypeAlias

from pydantic import TypeAdapter

from .context import Context
from .errors import ConfigurationWriteError
from .models import ResourcesModel

logger = logging.getLogger(__name__)

Serializer: TypeAlias = Callable[[Any, IO[str]], None]

REFLECTION_FILE = "reflection.arthur.json"
RESOURCES_FILE = "resources.arthur.json"
DYNAMIC_PROXIES_FILE = "dynamicproxies.arthur.json"

_ANY = TypeAdapter(Any)


def write_json(value: Any, writer: IO[str]) -> None:
    """Serialize models by alias, leaving out unset fields."""
    writer.write(_ANY.dump_json(value, indent=2, by_alias=True, exclude_none=True).decode())


class ConfigurationEmitter:
    """Turn a completed context into artifacts and record their paths."""

    def __init__(self, working_directory: Path, serializer: Serializer = write_json) -> None:
        self.working_directory = Path(working_directory)
        self.serializer = serializer

    def emit(self, ctx: Context) -> None:
        config = ctx.configuration

        if ctx.reflections:
            path = self._write(REFLECTION_FILE, list(ctx.reflections.values()), "reflection")
            config.reflection_configuration_files.append(str(path))

        if ctx.resources or ctx.bundles:
            model = ResourcesModel(
                resources=list(ctx.resources.values()) or None,
                bundles=list(ctx.bundles.values()) or None,
            )
            path = self._write(RESOURCES_FILE, model, "resources")
            config.resources_configuration_files.append(str(path))

        if ctx.dynamic_proxies:
            proxies = [list(proxy.classes) for proxy in ctx.dynamic_proxies.values()]
            path = self._write(DYNAMIC_PROXIES_FILE, proxies, "dynamic proxy")
            config.dynamic_proxy_configuration_files.append(str(path))

    def _ensure_working_directory(self) -> None:
        if self.working_directory.is_dir():
            return
        try:
            self.working_directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationWriteError(self.working_directory, str(exc)) from exc

    def _write(self, filename: str, value: Any, kind: str) -> Path:
        self._ensure_working_directory()
        path = (self.working_directory / filename).absolute()
        logger.info("Creating %s model '%s'", kind, path)
        try:
            with path.open("w", encoding="utf-8") as writer:
                self.serializer(value, writer)
        except OSError as exc:
            raise ConfigurationWriteError(path, str(exc)) from exc
        except Exception as exc:
            path.unlink(missing_ok=True)
            raise ConfigurationWriteError(path, f"serialization failed: {exc}") from exc
        return path
