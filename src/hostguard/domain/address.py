"""Address: the resolved target a host pattern points at.

An Address is one or more IP literals sharing a single optional port.
Port 0 means "no port constraint"; a nonzero port applies to every IP
in the value, so one Address never mixes ports.

Text forms:
    "10.0.0.1"            -- one IP, no port
    "10.0.0.1:8080"       -- one IP with port
    "[2001:db8::1]:443"   -- IPv6 with port (brackets required)
    "2001:db8::1"         -- bare IPv6, no port

Multi-IP values have no single text form; format_each() renders one
string per IP and the JSON adapter emits them as a list.
"""
from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv6Address, ip_address

from hostguard.domain.types import IPAddress
from hostguard.errors import InvalidAddressFormat

MAX_PORT = 65535


def _split_host_port(text: str) -> tuple[str, str | None]:
    """Split "host:port" into its parts. Port is None when absent.

    A string with more than one colon and no brackets is a bare IPv6
    literal, not a host with a port.
    """
    if text.startswith("["):
        end = text.find("]")
        if end < 0:
            raise InvalidAddressFormat(text, "missing ']' in address")
        host, rest = text[1:end], text[end + 1:]
        if not rest:
            return host, None
        if not rest.startswith(":"):
            raise InvalidAddressFormat(text, "unexpected text after ']'")
        return host, rest[1:]

    host, sep, port = text.rpartition(":")
    if not sep or ":" in host:
        return text, None
    return host, port


def _parse_port(text: str, port: str) -> int:
    if not (port.isascii() and port.isdigit()):
        raise InvalidAddressFormat(text, f"port '{port}' is not a decimal integer")
    value = int(port)
    if value > MAX_PORT:
        raise InvalidAddressFormat(text, f"port {value} out of range")
    return value


def _join(ip: IPAddress, port: int) -> str:
    if port == 0:
        return str(ip)
    if isinstance(ip, IPv6Address):
        return f"[{ip}]:{port}"
    return f"{ip}:{port}"


@dataclass(frozen=True, slots=True)
class Address:
    """Resolved IPs plus an optional shared port.

    Frozen: a HostSet hands out its stored instances directly from
    match(), and callers cannot change what the set holds.
    """
    ips: tuple[IPAddress, ...] = ()
    port: int = 0

    def __post_init__(self) -> None:
        """Coerce textual IPs and check the port range."""
        try:
            ips = tuple(ip_address(ip) for ip in self.ips)
        except ValueError as exc:
            raise InvalidAddressFormat(str(list(self.ips)), str(exc)) from exc
        if not 0 <= self.port <= MAX_PORT:
            raise InvalidAddressFormat(str(self.port), "port out of range")
        object.__setattr__(self, "ips", ips)

    @classmethod
    def of(cls, *ips: str | IPAddress, port: int = 0) -> Address:
        """Factory: Address.of("10.0.0.1", "10.0.0.2", port=80)."""
        return cls(ips=tuple(ips), port=port)

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse "ip" or "ip:port" into a single-IP Address.

        Only IP literals are accepted; hostnames are not resolved here.
        Raises InvalidAddressFormat for anything else.
        """
        host, port = _split_host_port(text)
        port_value = 0 if port is None else _parse_port(text, port)
        try:
            ip = ip_address(host)
        except ValueError as exc:
            raise InvalidAddressFormat(text, "not an IP address") from exc
        return cls(ips=(ip,), port=port_value)

    def format(self) -> str:
        """Inverse of parse() for a single-IP Address."""
        if len(self.ips) != 1:
            raise ValueError(
                f"format() needs exactly one IP, got {len(self.ips)}; "
                "use format_each()"
            )
        return _join(self.ips[0], self.port)

    def format_each(self) -> list[str]:
        """One "ip" or "ip:port" string per IP, in order."""
        return [_join(ip, self.port) for ip in self.ips]

    def to_json_value(self) -> str | list[str] | None:
        """JSON form: a string for one IP, a list for several, None for none."""
        if not self.ips:
            return None
        if len(self.ips) == 1:
            return self.format()
        return self.format_each()

    def __str__(self) -> str:
        return ",".join(self.format_each())
