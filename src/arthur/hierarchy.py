"""Class hierarchy traversal."""

from __future__ import annotations

from collections.abc import Iterator


def class_name(cls: type) -> str:
    """Return the fully-qualified name used in generated configuration."""
    return f"{cls.__module__}.{cls.__qualname__}"


def find_hierarchy(cls: type, *, root: type = object) -> Iterator[type]:
    """Lazily yield ``cls`` and all of its bases, each exactly once.

    ``root`` (``object`` by default) is never yielded. A base reached through
    several paths is expanded only the first time it is visited. The walk
    uses an explicit stack, so depth is not bounded by the recursion limit.
    """
    visited: set[int] = set()
    pending = [cls]
    while pending:
        current = pending.pop()
        if current is root or id(current) in visited:
            continue
        visited.add(id(current))
        yield current
        pending.extend(reversed(current.__bases__))
