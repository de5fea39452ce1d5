"""Tests for arthur.classpath."""

from __future__ import annotations

import sys
from abc import ABC

import pytest

from arthur.api import annotate
from arthur.classpath import ImportClassLoader, ModuleIndex
from arthur.errors import ClassResolutionError


class Scoped:
    """Marker used by the index tests."""


class Service(ABC):
    pass


@annotate(Scoped())
class Repository(Service):
    class Nested(Service):
        pass

    @annotate(Scoped())
    def save(self):
        pass

    def load(self):
        pass


class Plain:
    pass


def _index() -> ModuleIndex:
    return ModuleIndex([sys.modules[__name__]])


class TestImportClassLoader:
    def test_dotted_name(self):
        assert ImportClassLoader().load(f"{__name__}.Repository") is Repository

    def test_colon_name(self):
        assert ImportClassLoader().load(f"{__name__}:Repository.Nested") is Repository.Nested

    def test_dotted_nested(self):
        assert ImportClassLoader().load(f"{__name__}.Repository.Nested") is Repository.Nested

    def test_missing_module(self):
        with pytest.raises(ClassResolutionError) as exc:
            ImportClassLoader().load("no_such_module.Thing")
        assert exc.value.name == "no_such_module.Thing"

    def test_missing_attribute(self):
        with pytest.raises(ClassResolutionError) as exc:
            ImportClassLoader().load(f"{__name__}.Missing")
        assert isinstance(exc.value.__cause__, AttributeError)

    def test_not_a_class(self):
        with pytest.raises(ClassResolutionError):
            ImportClassLoader().load(f"{__name__}._index")

    def test_bare_name(self):
        with pytest.raises(ClassResolutionError):
            ImportClassLoader().load("Repository")


class TestModuleIndex:
    def test_indexes_nested_classes(self):
        classes = _index().classes
        assert Repository in classes
        assert Repository.Nested in classes

    def test_skips_imported_classes(self):
        assert ABC not in _index().classes

    def test_accepts_module_names(self):
        assert Repository in ModuleIndex([__name__]).classes

    def test_find_annotated_classes(self):
        assert _index().find_annotated_classes(Scoped) == [Repository]

    def test_find_annotated_methods(self):
        assert _index().find_annotated_methods(Scoped) == [Repository.save]

    def test_find_implementations(self):
        found = _index().find_implementations(Service)
        assert Repository in found
        assert Repository.Nested in found
        assert Service not in found
        assert Plain not in found

    def test_empty_index(self):
        assert ModuleIndex().find_annotated_classes(Scoped) == []
