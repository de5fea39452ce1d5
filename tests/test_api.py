"""Tests for arthur.api."""

from __future__ import annotations

from arthur.api import RegisterClass, annotate, annotations_of, find_annotation, register_class


class Other:
    pass


class TestAnnotate:
    def test_class_markers(self):
        marker = Other()

        @annotate(marker)
        class Target:
            pass

        assert annotations_of(Target) == (marker,)

    def test_stacked_markers(self):
        @annotate(Other())
        @register_class(all_public_methods=True)
        class Target:
            pass

        assert len(annotations_of(Target)) == 2

    def test_not_inherited(self):
        @register_class()
        class Parent:
            pass

        class Child(Parent):
            pass

        assert annotations_of(Child) == ()

    def test_function_markers(self):
        @annotate(Other())
        def handler():
            pass

        assert isinstance(annotations_of(handler)[0], Other)

    def test_find_annotation(self):
        @register_class(all=True)
        class Target:
            pass

        assert find_annotation(Target, RegisterClass) == RegisterClass(all=True)
        assert find_annotation(Target, Other) is None

    def test_objects_without_dict(self):
        assert annotations_of(1) == ()
