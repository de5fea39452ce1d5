"""Shared build context that extensions read from and register into."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, MutableMapping
from functools import singledispatchmethod
from typing import Any, TypeVar

from .classpath import ClassIndex, ClassLoader
from .errors import UnsupportedUnwrapError
from .hierarchy import find_hierarchy
from .models import (
    ClassReflectionModel,
    DynamicProxyModel,
    NativeImageConfiguration,
    ResourceBundleModel,
    ResourceModel,
)
from .predicates import Predicate, PredicateType, create_predicate, includes_excludes

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Context:
    """Runtime state passed through the extension chain.

    Reflection entries and bundles are keyed by name and replaced on
    re-registration; resources and dynamic proxies accumulate without
    duplicates. ``modified`` is reset by the pipeline before each extension.
    """

    def __init__(
        self,
        configuration: NativeImageConfiguration,
        index: ClassIndex,
        loader: ClassLoader,
        properties: MutableMapping[str, str] | None = None,
    ) -> None:
        self.configuration = configuration
        self.index = index
        self.loader = loader
        self.properties: MutableMapping[str, str] = properties if properties is not None else {}
        self.reflections: dict[str, ClassReflectionModel] = {}
        self.resources: dict[str, ResourceModel] = {}
        self.bundles: dict[str, ResourceBundleModel] = {}
        self.dynamic_proxies: dict[frozenset[str], DynamicProxyModel] = {}
        self.modified = False

    # -- Registration --

    @singledispatchmethod
    def register(self, model: Any) -> None:
        raise TypeError(f"Cannot register {type(model).__name__}")

    @register.register
    def _(self, model: ClassReflectionModel) -> None:
        self.reflections.pop(model.name, None)
        self.reflections[model.name] = model
        self.modified = True

    @register.register
    def _(self, model: ResourceModel) -> None:
        if model.pattern not in self.resources:
            self.resources[model.pattern] = model
            self.modified = True

    @register.register
    def _(self, model: ResourceBundleModel) -> None:
        self.bundles.pop(model.name, None)
        self.bundles[model.name] = model
        self.modified = True

    @register.register
    def _(self, model: DynamicProxyModel) -> None:
        if model.key not in self.dynamic_proxies:
            self.dynamic_proxies[model.key] = model
            self.modified = True

    # -- Global switches --

    def enable_all_security_services(self) -> None:
        self.configuration.enable_all_security_services = True

    def enable_all_charsets(self) -> None:
        self.configuration.add_all_charsets = True

    def initialize_at_build_time(self, *names: str) -> None:
        self.configuration.initialize_at_build_time.extend(names)

    def add_native_image_option(self, option: str) -> None:
        self.configuration.custom_options.append(option)

    # -- Properties --

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value

    # -- Classpath --

    def load_class(self, name: str) -> type:
        return self.loader.load(name)

    def find_annotated_classes(self, annotation: type) -> list[type]:
        return self.index.find_annotated_classes(annotation)

    def find_annotated_methods(self, annotation: type) -> list[Callable[..., Any]]:
        return self.index.find_annotated_methods(annotation)

    def find_implementations(self, base: type) -> list[type]:
        return self.index.find_implementations(base)

    def find_hierarchy(self, cls: type) -> Iterator[type]:
        return find_hierarchy(cls)

    # -- Predicates --

    def create_predicate(self, key: str, kind: PredicateType) -> Predicate | None:
        """Matcher for the comma-separated property ``key``, or None if unset."""
        return create_predicate(self.get_property(key), kind)

    def create_includes_excludes(self, prefix: str, kind: PredicateType) -> Predicate:
        """Matcher combining the ``<prefix>includes`` and ``<prefix>excludes`` properties."""
        return includes_excludes(
            self.create_predicate(f"{prefix}includes", kind),
            self.create_predicate(f"{prefix}excludes", kind),
        )

    def unwrap(self, target: type[T]) -> T:
        """Expose the underlying configuration (or the context itself)."""
        if target is NativeImageConfiguration:
            return self.configuration  # type: ignore[return-value]
        if isinstance(self, target):
            return self
        raise UnsupportedUnwrapError(target)
