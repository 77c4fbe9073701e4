"""Errors raised while building host sets from configuration.

Every failure here is a deterministic input-validation failure. Nothing
is retried and nothing is partially built: construction either returns
a complete object or raises one of these.
"""
from __future__ import annotations

from typing import Any


class HostConfigError(ValueError):
    """Base class for host configuration failures."""


class InvalidPatternSyntax(HostConfigError):
    """Raised when a host pattern does not match the pattern grammar."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"invalid host pattern '{pattern}'")
        self.pattern = pattern


class InvalidAddressFormat(HostConfigError):
    """Raised when an address string is not 'ip' or 'ip:port'."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"invalid address '{text}': {reason}")
        self.text = text


class ConflictingPorts(HostConfigError):
    """Raised when one key lists addresses with two different ports."""

    def __init__(self, key: str, first: int, second: int) -> None:
        super().__init__(
            f"conflicting ports for host {key}: {first} and {second}"
        )
        self.key = key
        self.ports = (first, second)


class InvalidValueType(HostConfigError):
    """Raised when a JSON value has the wrong shape.

    key is None when the document itself is neither an object nor null.
    """

    def __init__(self, key: str | None, value: Any) -> None:
        kind = type(value).__name__
        if key is None:
            message = f"host set must be a JSON object or null, got {kind}"
        else:
            message = f"invalid host value type for {key}: {kind}"
        super().__init__(message)
        self.key = key
        self.value = value
