"""Tests for arthur.predicates."""

from __future__ import annotations

import re

import pytest

from arthur.predicates import PredicateType, create_predicate, includes_excludes


class TestPredicateType:
    def test_equals(self):
        assert PredicateType.EQUALS.test("a.B", "a.B")
        assert not PredicateType.EQUALS.test("a.B", "a.BC")

    def test_starts_with(self):
        assert PredicateType.STARTS_WITH.test("org.apache.", "org.apache.cxf.Bus")
        assert not PredicateType.STARTS_WITH.test("org.apache.", "com.acme.Bus")

    def test_matches_full_string(self):
        assert PredicateType.MATCHES.test(r"org\..*\.Bus", "org.apache.Bus")
        assert not PredicateType.MATCHES.test(r"apache", "org.apache.Bus")

    def test_invalid_pattern_raises(self):
        with pytest.raises(re.error):
            PredicateType.MATCHES.compile("(")


class TestCreatePredicate:
    def test_none_value(self):
        assert create_predicate(None, PredicateType.EQUALS) is None

    def test_empty_value(self):
        assert create_predicate("", PredicateType.EQUALS) is None

    def test_tokens_trimmed(self):
        predicate = create_predicate("  a ,b  ", PredicateType.EQUALS)
        assert predicate("a")
        assert predicate("b")
        assert not predicate(" a ")

    def test_empty_tokens_discarded(self):
        predicate = create_predicate(",a,,", PredicateType.STARTS_WITH)
        assert predicate("abc")
        assert not predicate("")


class TestIncludesExcludes:
    @pytest.mark.parametrize(
        ("includes", "excludes", "value", "expected"),
        [
            ("a,b", None, "a", True),
            ("a,b", None, "c", False),
            (None, "a", "a", False),
            (None, "a", "z", True),
            (None, None, "anything", True),
            ("a", "a", "a", True),
            ("a", "b", "c", False),
            ("a", "b", "b", False),
        ],
    )
    def test_combination(self, includes, excludes, value, expected):
        accept = includes_excludes(
            create_predicate(includes, PredicateType.EQUALS),
            create_predicate(excludes, PredicateType.EQUALS),
        )
        assert accept(value) is expected

    def test_excludes_not_consulted_on_include_match(self):
        consulted = []

        def excludes(value):
            consulted.append(value)
            return True

        accept = includes_excludes(lambda v: v == "a", excludes)
        assert accept("a") is True
        assert consulted == []
