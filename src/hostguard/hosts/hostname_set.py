"""HostnameSet: membership-only pattern sets, e.g. block lists.

Same grammar and same trie as HostSet, but patterns carry no address:
match() answers with the pattern that matched. NullHostnameSet adds the
absent state and a JSON form of null or a list of pattern strings.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from hostguard.domain.types import Hostname, JSONValue, Pattern
from hostguard.errors import InvalidValueType
from hostguard.strings.trie import DomainPatternTrie

log = logging.getLogger(__name__)


class HostnameSet:
    """Immutable set of host patterns with wildcard-subdomain matching.

    Usage:
        blocked = HostnameSet(["*.ads.example", "tracker.example:443"])
        blocked.match("x.ads.example")   # "*.ads.example"
        blocked.match("example.org")     # None
    """

    __slots__ = ("_trie", "_patterns")

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        trie = DomainPatternTrie()
        kept: dict[Pattern, None] = {}
        spellings: dict[Pattern, str] = {}
        for pattern in patterns:
            displaced = trie.insert(pattern)
            canonical = pattern.lower()
            if canonical in spellings and spellings[canonical] != pattern:
                log.warning(
                    "host pattern %r collides with earlier pattern %r as %r",
                    pattern, spellings[canonical], canonical,
                )
            spellings[canonical] = pattern
            if displaced is not None:
                log.warning(
                    "host pattern %r replaces equivalent pattern %r",
                    pattern, displaced,
                )
                del kept[displaced]
            kept[canonical] = None
        self._trie = trie
        self._patterns = kept

    def match(self, hostname: Hostname) -> Pattern | None:
        """Return the canonical pattern that matches hostname, or None."""
        return self._trie.lookup(hostname)

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, str) and pattern.lower() in self._patterns

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HostnameSet):
            return NotImplemented
        return set(self._patterns) == set(other._patterns)

    def __hash__(self) -> int:
        return hash(frozenset(self._patterns))

    def __repr__(self) -> str:
        return f"HostnameSet({list(self._patterns)!r})"


@dataclass(frozen=True, slots=True)
class NullHostnameSet:
    """Either no pattern list (patterns is None) or a complete HostnameSet."""
    patterns: HostnameSet | None = None

    @property
    def valid(self) -> bool:
        return self.patterns is not None

    @classmethod
    def from_obj(cls, obj: JSONValue) -> NullHostnameSet:
        """Decode an already-parsed JSON value (None or a list of strings)."""
        if obj is None:
            return cls()
        if not isinstance(obj, list):
            raise InvalidValueType(None, obj)
        for index, item in enumerate(obj):
            if not isinstance(item, str):
                raise InvalidValueType(f"[{index}]", item)
        return cls(HostnameSet(obj))

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> NullHostnameSet:
        return cls.from_obj(json.loads(data))

    def to_obj(self) -> list[str] | None:
        if self.patterns is None:
            return None
        return sorted(self.patterns)

    def to_json(self) -> str:
        return json.dumps(self.to_obj(), separators=(",", ":"))

    def match(self, hostname: Hostname) -> Pattern | None:
        if self.patterns is None:
            return None
        return self.patterns.match(hostname)
