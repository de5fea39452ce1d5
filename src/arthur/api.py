"""Decorators applications use to describe their native-image needs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")
A = TypeVar("A")

_ANNOTATIONS_ATTR = "__arthur_annotations__"


def annotate(*markers: Any) -> Callable[[T], T]:
    """Attach marker objects to a class or function."""

    def decorator(obj: T) -> T:
        current = obj.__dict__.get(_ANNOTATIONS_ATTR, ())  # type: ignore[attr-defined]
        setattr(obj, _ANNOTATIONS_ATTR, current + markers)
        return obj

    return decorator


def annotations_of(obj: Any) -> tuple[Any, ...]:
    """Return the markers attached directly to ``obj`` (never inherited ones)."""
    return vars(obj).get(_ANNOTATIONS_ATTR, ()) if hasattr(obj, "__dict__") else ()


def find_annotation(obj: Any, annotation_type: type[A]) -> A | None:
    """Return the first marker of ``annotation_type`` on ``obj``, if any."""
    for marker in annotations_of(obj):
        if isinstance(marker, annotation_type):
            return marker
    return None


@dataclass(frozen=True)
class RegisterClass:
    """Request reflective access to the decorated class."""

    all_declared_constructors: bool = False
    all_public_constructors: bool = False
    all_declared_methods: bool = False
    all_public_methods: bool = False
    all_declared_classes: bool = False
    all_public_classes: bool = False
    all_declared_fields: bool = False
    all_public_fields: bool = False
    all: bool = False


def register_class(**flags: bool) -> Callable[[T], T]:
    """Shortcut for ``annotate(RegisterClass(**flags))``."""
    return annotate(RegisterClass(**flags))
