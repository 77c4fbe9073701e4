"""Label-level trie over reversed host patterns with subdomain wildcards.

Patterns are split into labels and reversed before insertion so the
TLD sits nearest the root: "api.example.com" becomes
["com", "example", "api"]. Suffixes shared by many patterns share nodes.

Each node may carry:
    patterns  -- exact patterns ending here, keyed by port (None = no port)
    wildcard  -- a distinguished child holding "*." patterns rooted here

Unlike a per-segment wildcard, the "*" here absorbs ONE OR MORE
remaining labels: "*.example.com" matches "a.example.com" and
"a.b.example.com", but not "example.com" itself.

Lookup walks exact children from the root, remembering the deepest
wildcard passed while labels were still left to consume. A full exact
descent wins; otherwise the deepest wildcard does. One pass, O(labels).

The trie has no delete. Build it completely, then only read from it;
concurrent lookups need no locking.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from hostguard.strings.patterns import split_hostname, split_pattern


@dataclass(slots=True)
class TrieNode:
    """A node in the pattern trie.

    children maps a lower-cased label to the next node.
    patterns maps a port (None for portless) to the canonical pattern
    string that terminates here.
    """
    children: dict[str, TrieNode] = field(default_factory=dict)
    patterns: dict[int | None, str] = field(default_factory=dict)
    wildcard: TrieNode | None = None


class DomainPatternTrie:
    """Best-match index of host patterns.

    Usage:
        trie = DomainPatternTrie()
        trie.insert("*.example.com")
        trie.insert("api.example.com")

        trie.lookup("api.example.com")    # "api.example.com"
        trie.lookup("a.b.example.com")    # "*.example.com"
        trie.lookup("example.com")        # None
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._pattern_count = 0

    @property
    def pattern_count(self) -> int:
        return self._pattern_count

    def insert(self, pattern: str) -> str | None:
        """Insert a pattern, validating it first.

        Returns the previously stored pattern when another spelling of
        the same slot was already present ("*example.com" vs
        "*.example.com", ":080" vs ":80"), else None. Re-inserting the
        identical pattern returns None.

        Raises InvalidPatternSyntax for a malformed pattern; the trie is
        unchanged in that case.
        """
        parts = split_pattern(pattern)
        canonical = pattern.lower()

        node = self._root
        for label in reversed(parts.labels):
            child = node.children.get(label)
            if child is None:
                child = node.children[label] = TrieNode()
            node = child
        if parts.wildcard:
            if node.wildcard is None:
                node.wildcard = TrieNode()
            node = node.wildcard

        previous = node.patterns.get(parts.port)
        node.patterns[parts.port] = canonical
        if previous is None:
            self._pattern_count += 1
            return None
        return previous if previous != canonical else None

    def lookup(self, hostname: str) -> str | None:
        """Return the canonical pattern that best matches hostname, or None.

        An exact descent over every label beats any wildcard; among
        wildcards, the one closest to the leaves (longest suffix) wins.
        Ports must agree, except that the bare "*" also takes queries
        with a port when no "*:port" entry claims them.
        Never raises for odd input; it simply does not match.
        """
        labels, port = split_hostname(hostname)
        node = self._root
        best: str | None = None
        if labels and port is not None and node.wildcard is not None:
            # a bare "*" matches any host, whatever its port
            best = node.wildcard.patterns.get(None)
        for label in reversed(labels):
            if node.wildcard is not None:
                hit = node.wildcard.patterns.get(port)
                if hit is not None:
                    best = hit
            child = node.children.get(label)
            if child is None:
                return best
            node = child
        hit = node.patterns.get(port)
        return hit if hit is not None else best

    def __contains__(self, pattern: object) -> bool:
        """True if this exact pattern (case-insensitively) was inserted."""
        if not isinstance(pattern, str):
            return False
        try:
            parts = split_pattern(pattern)
        except ValueError:
            return False
        node: TrieNode | None = self._root
        for label in reversed(parts.labels):
            node = node.children.get(label)
            if node is None:
                return False
        if parts.wildcard:
            node = node.wildcard
            if node is None:
                return False
        return node.patterns.get(parts.port) == pattern.lower()

    def node_count(self) -> int:
        """Count nodes, wildcard children included (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
            if node.wildcard is not None:
                stack.append(node.wildcard)
        return count
