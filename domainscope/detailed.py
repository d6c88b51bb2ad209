"""Lookup that also reports the PTR of the first address and how ping resolves."""

from __future__ import annotations

import ipaddress
import subprocess

_UNRESOLVED = "No resuelve"


def _run(cmd: list[str]) -> str:
    result = subprocess.run(cmd, capture_output=True, check=False)
    return result.stdout.decode("utf-8", "replace")


def _is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def parse_ping_resolve(output: str) -> str:
    """Return the address in parentheses on the last ``PING`` line of ``output``."""
    resolved = _UNRESOLVED
    for line in output.splitlines():
        if not line.startswith("PING"):
            continue
        start = line.find("(")
        end = line.find(")")
        if start != -1 and end != -1:
            resolved = line[start + 1 : end]
    return resolved


def _describe_host(host: str) -> str:
    try:
        stdout = _run(["dig", "+short", host])
    except OSError as error:
        return f"Host: {host}\nError: {error}\n\n"

    lines = stdout.splitlines()
    if not lines:
        return f"Host: {host}\nNo encontrado\n\n"

    report = f"Host: {host}\n"
    ips = [line.strip() for line in lines if _is_ip(line.strip())]
    report += "".join(f"Address: {ip}\n" for ip in ips)

    if ips:
        try:
            ptr = _run(["dig", "+short", "-x", ips[0]]).strip()
        except OSError:
            ptr = ""
        if ptr:
            report += f"PTR: {ptr}\n"

        try:
            resolved = parse_ping_resolve(_run(["ping", "-c", "1", host]))
        except OSError:
            resolved = _UNRESOLVED
        report += f"Ping Resolve: {resolved}\n"

    return report + "\n"


def lookup_domain(domain: str) -> str:
    """Return a detailed text report for the domain and its service hosts."""
    hosts = [domain, *(f"{p}.{domain}" for p in ("www", "mail", "ftp", "webmail"))]
    return "".join(_describe_host(host) for host in hosts)