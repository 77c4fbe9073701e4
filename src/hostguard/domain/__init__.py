"""Value types for host matching.

Re-exports the public types:
    from hostguard.domain import Address, Pattern, Hostname
"""
from hostguard.domain.address import MAX_PORT, Address
from hostguard.domain.types import Hostname, IPAddress, JSONValue, Pattern

__all__ = [
    "MAX_PORT",
    "Address",
    "Hostname",
    "IPAddress",
    "JSONValue",
    "Pattern",
]
