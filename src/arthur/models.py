"""Native-image configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MethodReflectionModel(BaseModel):
    """A single method exposed for reflection."""

    model_config = _MODEL_CONFIG

    name: str
    parameter_types: list[str] | None = None


class FieldReflectionModel(BaseModel):
    """A single field exposed for reflection."""

    model_config = _MODEL_CONFIG

    name: str
    allow_write: bool | None = None
    allow_unsafe_access: bool | None = None


class ClassReflectionModel(BaseModel):
    """Reflective access requested for one class, keyed by its name.

    Unset flags stay ``None`` so they are left out of the generated file.
    ``all`` is a shortcut for every ``allDeclared*`` flag.
    """

    model_config = _MODEL_CONFIG

    name: str
    all_declared_constructors: bool | None = None
    all_public_constructors: bool | None = None
    all_declared_methods: bool | None = None
    all_public_methods: bool | None = None
    all_declared_classes: bool | None = None
    all_public_classes: bool | None = None
    all_declared_fields: bool | None = None
    all_public_fields: bool | None = None
    all: bool | None = Field(default=None, exclude=True)
    methods: list[MethodReflectionModel] | None = None
    fields: list[FieldReflectionModel] | None = None

    @model_validator(mode="after")
    def _expand_all(self) -> ClassReflectionModel:
        if self.all:
            self.all_declared_constructors = True
            self.all_declared_methods = True
            self.all_declared_classes = True
            self.all_declared_fields = True
        return self


class ResourceModel(BaseModel):
    """A resource path pattern to embed in the image."""

    model_config = ConfigDict(frozen=True)

    pattern: str


class ResourceBundleModel(BaseModel):
    """A resource bundle base name."""

    model_config = ConfigDict(frozen=True)

    name: str


class DynamicProxyModel(BaseModel):
    """The interfaces a synthesized proxy class implements."""

    model_config = ConfigDict(frozen=True)

    classes: tuple[str, ...]

    @property
    def key(self) -> frozenset[str]:
        """Order-independent identity of this proxy."""
        return frozenset(self.classes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicProxyModel):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


class ResourcesModel(BaseModel):
    """Combined content of the resources artifact."""

    resources: list[ResourceModel] | None = None
    bundles: list[ResourceBundleModel] | None = None


class NativeImageConfiguration(BaseModel):
    """Options handed to the native-image compiler once generation completes."""

    enable_all_security_services: bool = False
    add_all_charsets: bool = False
    initialize_at_build_time: list[str] = Field(default_factory=list)
    custom_options: list[str] = Field(default_factory=list)
    reflection_configuration_files: list[str] = Field(default_factory=list)
    resources_configuration_files: list[str] = Field(default_factory=list)
    dynamic_proxy_configuration_files: list[str] = Field(default_factory=list)
