"""Host pattern grammar and the label splitting shared by index and queries.

Grammar (the whole string must match):

    ("*" "."?)? (label ("." label)*)? (":" port)?

    label = [A-Za-z0-9] | [A-Za-z0-9][A-Za-z0-9-]*[A-Za-z0-9]
    port  = 1-5 decimal digits

Examples of valid patterns:
    "example.com"          -- exact host
    "*.example.com"        -- any subdomain of example.com
    "example.com:443"      -- exact host, port 443 only
    "*"                    -- any non-empty hostname
    "*:80"                 -- any hostname on port 80
    "10.0.0.1"             -- bare IPv4 literal

Both patterns and query hostnames are reduced to the same shape before
they touch the trie: a tuple of labels in written order (leftmost
first) and an optional integer port. An exact IP host, in a pattern or
a query, stays a single label, so "*.0.1" never matches "10.0.0.1".
A wildcard suffix is split on dots even when it spells an IP.
"""
from __future__ import annotations

import re
from ipaddress import ip_address
from typing import NamedTuple

from hostguard.errors import InvalidPatternSyntax

_LABEL = r"(?:[A-Za-z0-9]|[A-Za-z0-9][A-Za-z0-9\-]*[A-Za-z0-9])"

# Compiled once at import; read-only afterwards.
VALID_HOST_PATTERN = re.compile(
    rf"(\*\.?)?((?:{_LABEL}\.)*{_LABEL})?(:[0-9]{{1,5}})?"
)


class PatternParts(NamedTuple):
    """A validated pattern broken into index coordinates."""
    wildcard: bool
    labels: tuple[str, ...]
    port: int | None


def validate_pattern(pattern: str) -> None:
    """Raise InvalidPatternSyntax unless the entire string fits the grammar."""
    if VALID_HOST_PATTERN.fullmatch(pattern) is None:
        raise InvalidPatternSyntax(pattern)


def _host_labels(host: str) -> tuple[str, ...]:
    if not host:
        return ()
    try:
        ip_address(host)
    except ValueError:
        return tuple(host.split("."))
    return (host,)


def split_pattern(pattern: str) -> PatternParts:
    """Validate and split a pattern. The result is lower-cased.

    "*example.com" (no dot after the star) is read as "*.example.com".
    A wildcard suffix is always a label chain, even when it spells an
    IP ("*.10.0.0.1" matches "a.10.0.0.1"); only exact hosts keep an IP
    literal as one label.
    """
    m = VALID_HOST_PATTERN.fullmatch(pattern)
    if m is None:
        raise InvalidPatternSyntax(pattern)
    star, host, port = m.groups()
    host = (host or "").lower()
    if star is not None:
        labels = tuple(host.split(".")) if host else ()
    else:
        labels = _host_labels(host)
    return PatternParts(
        wildcard=star is not None,
        labels=labels,
        port=int(port[1:]) if port else None,
    )


def _query_port(text: str) -> int | None:
    if 0 < len(text) <= 5 and text.isascii() and text.isdigit():
        return int(text)
    return None


def split_hostname(hostname: str) -> tuple[tuple[str, ...], int | None]:
    """Split a query "host[:port]" into (labels, port), lower-cased.

    Queries are not validated. Anything that does not end in a short
    numeric ":port" is all host. Brackets around an IPv6 host and one
    trailing dot are dropped.
    """
    hostname = hostname.lower()
    if hostname.startswith("["):
        host, _, rest = hostname[1:].partition("]")
        port = _query_port(rest[1:]) if rest.startswith(":") else None
        return (host,), port

    head, sep, tail = hostname.rpartition(":")
    port = _query_port(tail) if sep and ":" not in head else None
    if port is not None:
        hostname = head
    if hostname.endswith("."):
        hostname = hostname[:-1]
    return _host_labels(hostname), port
