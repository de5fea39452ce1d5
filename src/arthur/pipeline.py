"""Run extensions in order against a single build context."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from .classpath import ClassIndex, ClassLoader, ImportClassLoader, ModuleIndex
from .context import Context
from .emitter import ConfigurationEmitter, Serializer, write_json
from .errors import ArthurError, ExtensionError
from .extension import Extension
from .models import NativeImageConfiguration

logger = logging.getLogger(__name__)

WORKING_DIRECTORY_PROPERTY = "workingDirectory"


class ExtensionPipeline:
    """Execute extensions once each, in order, then emit configuration files.

    Caller-supplied properties and configuration are copied, never mutated,
    so a pipeline can be run more than once. Any failure aborts
    the run before a single artifact is written.
    """

    def __init__(
        self,
        extensions: Iterable[Extension],
        working_directory: str | Path,
        *,
        configuration: NativeImageConfiguration | None = None,
        index: ClassIndex | None = None,
        loader: ClassLoader | None = None,
        serializer: Serializer = write_json,
        properties: Mapping[str, str] | None = None,
    ) -> None:
        self.extensions = list(extensions)
        self.working_directory = Path(working_directory)
        self.configuration = configuration
        self.index = index if index is not None else ModuleIndex()
        self.loader = loader if loader is not None else ImportClassLoader()
        self.serializer = serializer
        self.properties = properties

    def create_context(self) -> Context:
        """Fresh context per run; a supplied configuration is copied, never mutated."""
        if self.configuration is not None:
            configuration = self.configuration.model_copy(deep=True)
        else:
            configuration = NativeImageConfiguration()
        properties = dict(self.properties or {})
        properties[WORKING_DIRECTORY_PROPERTY] = str(self.working_directory.absolute())
        return Context(configuration, self.index, self.loader, properties)

    def run(self) -> Context:
        ctx = self.create_context()
        logger.info("Running %d extension(s)", len(self.extensions))

        for ext in self.extensions:
            logger.debug("Executing %r", ext)
            ctx.modified = False
            try:
                ext.execute(ctx)
            except ArthurError:
                raise
            except Exception as exc:
                raise ExtensionError(ext) from exc
            if ctx.modified:
                logger.info("Extension %s updated build context", type(ext).__qualname__)

        ConfigurationEmitter(self.working_directory, self.serializer).emit(ctx)
        return ctx
