"""Build string matchers from comma-separated property values."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import TypeAlias

logger = logging.getLogger(__name__)

Predicate: TypeAlias = Callable[[str], bool]


class PredicateType(Enum):
    """How a configured token is compared against a candidate string."""

    EQUALS = "equals"
    STARTS_WITH = "starts_with"
    MATCHES = "matches"

    def compile(self, token: str) -> Predicate:
        """Return a matcher for a single token."""
        match self:
            case PredicateType.EQUALS:
                return lambda value: value == token
            case PredicateType.STARTS_WITH:
                return lambda value: value.startswith(token)
            case PredicateType.MATCHES:
                pattern = re.compile(token)
                return lambda value: pattern.fullmatch(value) is not None

    def test(self, token: str, value: str) -> bool:
        return self.compile(token)(value)


def create_predicate(value: str | None, kind: PredicateType) -> Predicate | None:
    """OR-combine every non-blank token of ``value``.

    Returns ``None`` when there is nothing to match, which is distinct from a
    predicate that rejects everything.
    """
    if value is None:
        return None
    matchers = [kind.compile(token) for token in (t.strip() for t in value.split(",")) if token]
    if not matchers:
        return None
    logger.debug("Compiled %d %s matcher(s) from '%s'", len(matchers), kind.name, value)
    return lambda candidate: any(matcher(candidate) for matcher in matchers)


def includes_excludes(includes: Predicate | None, excludes: Predicate | None) -> Predicate:
    """Combine allow and deny lists; a match in ``includes`` always wins."""

    def _test(value: str) -> bool:
        if includes is not None and includes(value):
            return True
        if excludes is not None and excludes(value):
            return False
        return includes is None

    return _test
