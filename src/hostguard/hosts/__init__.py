"""Host sets: pattern -> address tables and pattern-only block lists."""

from hostguard.hosts.host_set import HostSet
from hostguard.hosts.hostname_set import HostnameSet, NullHostnameSet
from hostguard.hosts.nullable import NullHostSet

__all__ = [
    "HostSet",
    "HostnameSet",
    "NullHostSet",
    "NullHostnameSet",
]
