"""Records describing a domain and the hosts found under it."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HostInfo:
    """A host name together with the addresses it resolved to."""

    hostname: str
    addresses: list[str] = field(default_factory=list)


@dataclass
class DomainInfo:
    """Everything gathered about one domain."""

    domain: str
    ptr: str | None = None
    ping_resolve: str | None = None
    hosts: list[HostInfo] = field(default_factory=list)


def build_domain(domain: str) -> DomainInfo:
    """Return an empty record for ``domain``."""
    return DomainInfo(domain=domain)