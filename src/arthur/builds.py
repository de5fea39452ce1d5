"""Build model — the top-level generation target described by a build file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from .classpath import ClassIndex, ClassLoader, ModuleIndex
from .emitter import Serializer, write_json
from .extension import Extension
from .models import NativeImageConfiguration
from .pipeline import ExtensionPipeline

logger = logging.getLogger(__name__)


class Build(BaseModel):
    """Extensions, properties and options for one configuration run."""

    model_config = {"arbitrary_types_allowed": True}

    name: str
    working_directory: Path = Path("arthur_workdir")
    extensions: list[Extension] = Field(default_factory=list)
    modules: list[str] = Field(default_factory=list)
    options: list[str] = Field(default_factory=list)
    properties: dict[str, str] = Field(default_factory=dict)

    def run(
        self,
        *,
        index: ClassIndex | None = None,
        loader: ClassLoader | None = None,
        serializer: Serializer = write_json,
    ) -> NativeImageConfiguration:
        """Run every extension and return the resulting compiler configuration."""
        logger.info("Generating configuration for build '%s'", self.name)
        configuration = NativeImageConfiguration(custom_options=list(self.options))
        pipeline = ExtensionPipeline(
            self.extensions,
            self.working_directory,
            configuration=configuration,
            index=index if index is not None else ModuleIndex(self.modules),
            loader=loader,
            serializer=serializer,
            properties=self.properties,
        )
        return pipeline.run().configuration
