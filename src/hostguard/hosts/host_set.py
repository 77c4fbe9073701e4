"""HostSet: host patterns mapped to the addresses they resolve to.

A HostSet owns a DomainPatternTrie plus a side table from canonical
(lower-cased) pattern to Address. The trie answers "which pattern
matches this hostname"; the side table answers "what does it point to".

Construction is all-or-nothing. Every key is validated and inserted
into a fresh trie; the first bad pattern raises InvalidPatternSyntax
and no HostSet exists. Once built, a HostSet is never mutated, so it
can be shared across threads without locks. To reload, build a new
one and swap the reference.

Usage:
    hosts = HostSet({
        "example.com": Address.parse("10.0.0.1"),
        "*.example.com": Address.parse("10.0.0.2:8080"),
    })
    hosts.match("API.example.com")   # Address(ips=(10.0.0.2,), port=8080)
    hosts.match("other.org")         # None
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from hostguard.domain.address import Address
from hostguard.domain.types import Hostname, Pattern
from hostguard.strings.trie import DomainPatternTrie

log = logging.getLogger(__name__)


def _lower_keys(source: Mapping[str, Address]) -> dict[Pattern, Address]:
    """Fold keys to lower case. On collision the later key wins."""
    result: dict[Pattern, Address] = {}
    for key, value in source.items():
        canonical = key.lower()
        if canonical in result:
            log.warning(
                "host pattern %r collides with an earlier key as %r; "
                "keeping the later value", key, canonical,
            )
        result[canonical] = value
    return result


class HostSet:
    """Immutable pattern -> Address lookup with wildcard subdomains."""

    __slots__ = ("_trie", "_source")

    def __init__(self, source: Mapping[str, Address] | None = None) -> None:
        table = _lower_keys(source or {})
        trie = DomainPatternTrie()
        for pattern in list(table):
            displaced = trie.insert(pattern)
            if displaced is not None:
                log.warning(
                    "host pattern %r replaces equivalent pattern %r",
                    pattern, displaced,
                )
                del table[displaced]
        self._trie = trie
        self._source = table
        log.debug(
            "built host set: %d patterns, %d trie nodes",
            len(table), trie.node_count(),
        )

    def match(self, hostname: Hostname) -> Address | None:
        """Return the Address of the best-matching pattern, or None.

        hostname may carry a ":port"; it only matches patterns with the
        same port. "No match" is a normal result, never an error.
        """
        pattern = self._trie.lookup(hostname)
        if pattern is None:
            return None
        return self._source[pattern]

    def get(self, pattern: str) -> Address | None:
        """Address stored under this exact pattern (case-insensitive)."""
        return self._source.get(pattern.lower())

    def to_dict(self) -> dict[Pattern, Address]:
        """A copy of the canonical pattern -> Address table."""
        return dict(self._source)

    def node_count(self) -> int:
        return self._trie.node_count()

    def __len__(self) -> int:
        return len(self._source)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._source)

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, str) and pattern.lower() in self._source

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HostSet):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(frozenset(self._source.items()))

    def __repr__(self) -> str:
        return f"HostSet({self._source!r})"
