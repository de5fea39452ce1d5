"""Workspace — a read-only collection of builds parsed from HCL files."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any, overload

from . import hcl
from .builds import Build
from .classpath import ClassLoader, ImportClassLoader
from .extension import Extension, _extension_registry

logger = logging.getLogger(__name__)

_STRUCTURAL_KEYS = {"extensions", "property"}


def _is_meta(key: str) -> bool:
    return key.startswith("__")


def _decode_extension(ref: str, loader: ClassLoader) -> Extension:
    """Instantiate an extension by registered name or by import path."""
    if ref in _extension_registry:
        ext_cls = _extension_registry[ref]
    elif "." in ref or ":" in ref:
        ext_cls = loader.load(ref)
    else:
        raise ValueError(f"Unknown extension: '{ref}'")
    if not issubclass(ext_cls, Extension):
        raise ValueError(f"Not an extension: '{ref}'")
    logger.debug("Decoding extension '%s' -> %s", ref, ext_cls.__name__)
    return ext_cls()


def _parse_properties(data: dict[str, Any]) -> dict[str, str]:
    """Parse property blocks from a build block.

    HCL2 structure for property blocks:
        {"property": [{"some.key": {"value": "x"}}, ...]}
    """
    properties: dict[str, str] = {}
    for prop_block in data.get("property", []):
        for key, attrs in prop_block.items():
            if _is_meta(key):
                continue
            properties[key] = str(attrs["value"])
    return properties


def _build_build(name: str, data: dict[str, Any], loader: ClassLoader) -> Build:
    """Build a single Build instance from parsed HCL data."""
    logger.debug("Building build '%s'", name)
    kwargs: dict[str, Any] = {
        "name": name,
        "extensions": [_decode_extension(ref, loader) for ref in data.get("extensions", [])],
        "properties": _parse_properties(data),
    }
    for key, value in data.items():
        if key not in _STRUCTURAL_KEYS and not _is_meta(key):
            kwargs[key] = value
    return Build(**kwargs)


class Workspace(Mapping[str, Build]):
    """Accumulates parsed build files and resolves builds on access."""

    def __init__(
        self,
        *,
        context: dict[str, Any] | None = None,
        loader: ClassLoader | None = None,
    ) -> None:
        self._context = context
        self._loader = loader if loader is not None else ImportClassLoader()
        self._pending: dict[str, dict[str, Any]] = {}

    def load(self, file: str | Path) -> None:
        """Parse a single build file.

        Raises ValueError if a build name is already loaded.
        """
        data = hcl.load(Path(file), context=self._context)
        for block in data.get("build", []):
            for name, build_data in block.items():
                if _is_meta(name):
                    continue
                if name in self._pending:
                    raise ValueError(f"Duplicate build: '{name}'")
                logger.debug("Found build '%s'", name)
                self._pending[name] = build_data

    def scan(self, path: str | Path, *, recurse: bool = True) -> None:
        """Load every .hcl file under ``path`` in sorted order."""
        root = Path(path)
        files = root.rglob("*.hcl") if recurse else root.glob("*.hcl")
        for file in sorted(files):
            self.load(file)

    def _resolve(self, name: str) -> Build:
        return _build_build(name, self._pending[name], self._loader)

    def __getitem__(self, name: str) -> Build:
        return self._resolve(name)

    def __contains__(self, name: object) -> bool:
        return name in self._pending

    def __iter__(self) -> Iterator[str]:
        return iter(self._pending)

    def __len__(self) -> int:
        return len(self._pending)

    @overload
    def get(self, name: str) -> Build | None: ...
    @overload
    def get(self, name: str, default: Build) -> Build: ...
    def get(self, name: str, default: Any = None) -> Build | None:
        if name not in self._pending:
            return default
        return self._resolve(name)

    def filter(self, names: Iterable[str]) -> list[Build]:
        """Return builds matching the given names, preserving input order."""
        return [self._resolve(n) for n in names if n in self._pending]

    def __repr__(self) -> str:
        return f"Workspace(builds={len(self._pending)})"
