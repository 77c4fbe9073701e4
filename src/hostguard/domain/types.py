"""Shared type aliases used across the package."""
from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Any, TypeAlias

Pattern: TypeAlias = str       # canonical (lower-cased) host pattern
Hostname: TypeAlias = str      # query text, "host" or "host:port"
IPAddress: TypeAlias = IPv4Address | IPv6Address
JSONValue: TypeAlias = Any     # whatever json.loads() produced
