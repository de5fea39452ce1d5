"""Built-in extension handling the ``register_class`` decorator."""

from __future__ import annotations

import dataclasses
import logging

from .api import RegisterClass, find_annotation
from .context import Context
from .extension import Extension, extension
from .hierarchy import class_name
from .models import ClassReflectionModel
from .predicates import PredicateType

logger = logging.getLogger(__name__)

PROPERTY_PREFIX = "register_class."


@extension("register-class")
class RegisterClassExtension(Extension):
    """Register reflection for every class decorated with ``register_class``.

    Classes can be filtered by name with the ``register_class.includes`` and
    ``register_class.excludes`` properties (prefix matching).
    """

    def execute(self, ctx: Context) -> None:
        accept = ctx.create_includes_excludes(PROPERTY_PREFIX, PredicateType.STARTS_WITH)
        for cls in ctx.find_annotated_classes(RegisterClass):
            name = class_name(cls)
            if not accept(name):
                logger.debug("Skipping excluded class '%s'", name)
                continue
            marker = find_annotation(cls, RegisterClass)
            flags = {key: True for key, value in dataclasses.asdict(marker).items() if value}
            ctx.register(ClassReflectionModel(name=name, **flags))
