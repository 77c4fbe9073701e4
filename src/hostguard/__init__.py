"""hostguard: match hostnames against allow/deny host pattern lists.

    from hostguard import Address, HostSet

    hosts = HostSet({"*.example.com": Address.parse("10.0.0.2:8080")})
    hosts.match("api.example.com")
"""
from hostguard.domain import Address
from hostguard.errors import (
    ConflictingPorts,
    HostConfigError,
    InvalidAddressFormat,
    InvalidPatternSyntax,
    InvalidValueType,
)
from hostguard.hosts import HostnameSet, HostSet, NullHostnameSet, NullHostSet
from hostguard.strings import DomainPatternTrie, validate_pattern

__all__ = [
    "Address",
    "ConflictingPorts",
    "DomainPatternTrie",
    "HostConfigError",
    "HostSet",
    "HostnameSet",
    "InvalidAddressFormat",
    "InvalidPatternSyntax",
    "InvalidValueType",
    "NullHostSet",
    "NullHostnameSet",
    "validate_pattern",
]
