"""Lookup of a domain and its usual service hosts."""

from __future__ import annotations

from .addresses import get_addresses

_PREFIXES = ("www", "mail", "ftp", "webmail")


def candidate_hosts(domain: str) -> list[str]:
    """Return the domain followed by its common service host names."""
    return [domain, *(f"{prefix}.{domain}" for prefix in _PREFIXES)]


def lookup_domain(domain: str) -> str:
    """Return a text report of the addresses of every candidate host."""
    return "".join(
        f"Host: {host}\n{get_addresses(host)}\n" for host in candidate_hosts(domain)
    )