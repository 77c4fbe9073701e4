"""Host pattern grammar and the pattern trie."""

from hostguard.strings.patterns import (
    VALID_HOST_PATTERN,
    PatternParts,
    split_hostname,
    split_pattern,
    validate_pattern,
)
from hostguard.strings.trie import DomainPatternTrie

__all__ = [
    "VALID_HOST_PATTERN",
    "DomainPatternTrie",
    "PatternParts",
    "split_hostname",
    "split_pattern",
    "validate_pattern",
]
