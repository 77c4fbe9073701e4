"""Shared fixtures for host set tests."""
from __future__ import annotations

import pytest

from hostguard.domain.address import Address
from hostguard.hosts.host_set import HostSet

SOURCE = {
    "example.com": Address.parse("10.0.0.1"),
    "*.example.com": Address.parse("10.0.0.2"),
    "api.example.com:443": Address.parse("10.0.0.3:8443"),
    "*.internal.example.com": Address.of("10.1.0.1", "10.1.0.2", port=5432),
    "localhost": Address.parse("127.0.0.1"),
    "10.9.9.9": Address.parse("192.168.0.9"),
    "*:8080": Address.parse("[::1]:8080"),
}


@pytest.fixture
def source() -> dict[str, Address]:
    return dict(SOURCE)


@pytest.fixture
def hosts(source) -> HostSet:
    return HostSet(source)
