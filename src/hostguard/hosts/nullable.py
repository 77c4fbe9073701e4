"""NullHostSet: a HostSet that may be absent, with its JSON form.

JSON shape:
    null
    | {"<pattern>": "<ip>[:<port>]" | ["<ip>[:<port>]", ...], ...}

null decodes to the absent state and absent encodes back to null.
A list under one key merges into a single Address; the first nonzero
port seen becomes the port for all of them and any other nonzero port
raises ConflictingPorts.

Encoding emits one string for a single IP, a list for several, and
drops entries with no IPs. Keys are sorted, so output is stable, but
decode(encode(x)) is not byte-identical for reordered lists or empty
entries; neither affects matching.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from hostguard.domain.address import Address
from hostguard.domain.types import Hostname, JSONValue
from hostguard.errors import ConflictingPorts, InvalidValueType
from hostguard.hosts.host_set import HostSet

log = logging.getLogger(__name__)


def _decode_list(key: str, items: list[JSONValue]) -> Address:
    ips = []
    port = 0
    for item in items:
        if not isinstance(item, str):
            raise InvalidValueType(key, item)
        address = Address.parse(item)
        if port == 0:
            port = address.port
        elif address.port != 0 and address.port != port:
            raise ConflictingPorts(key, port, address.port)
        ips.extend(address.ips)
    return Address(ips=tuple(ips), port=port)


def _decode_value(key: str, value: JSONValue) -> Address:
    if isinstance(value, str):
        return Address.parse(value)
    if isinstance(value, list):
        return _decode_list(key, value)
    raise InvalidValueType(key, value)


@dataclass(frozen=True, slots=True)
class NullHostSet:
    """Either no host configuration (hosts is None) or a complete HostSet."""
    hosts: HostSet | None = None

    @property
    def valid(self) -> bool:
        return self.hosts is not None

    @classmethod
    def from_mapping(cls, source: Mapping[str, Address]) -> NullHostSet:
        """Factory: a present NullHostSet built from pattern -> Address."""
        return cls(HostSet(source))

    @classmethod
    def from_obj(cls, obj: JSONValue) -> NullHostSet:
        """Decode an already-parsed JSON value (None or a dict)."""
        if obj is None:
            return cls()
        if not isinstance(obj, dict):
            raise InvalidValueType(None, obj)
        source = {key: _decode_value(key, value) for key, value in obj.items()}
        log.debug("decoded %d host entries", len(source))
        return cls(HostSet(source))

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> NullHostSet:
        """Decode JSON text. Malformed JSON raises json.JSONDecodeError."""
        return cls.from_obj(json.loads(data))

    def to_obj(self) -> dict[str, str | list[str]] | None:
        """JSON-ready value: None when absent, else pattern -> str | list."""
        if self.hosts is None:
            return None
        result: dict[str, str | list[str]] = {}
        for pattern, address in self.hosts.to_dict().items():
            value = address.to_json_value()
            if value is not None:
                result[pattern] = value
        return result

    def to_json(self) -> str:
        return json.dumps(self.to_obj(), sort_keys=True, separators=(",", ":"))

    def match(self, hostname: Hostname) -> Address | None:
        """HostSet.match(), or None when absent."""
        if self.hosts is None:
            return None
        return self.hosts.match(hostname)
