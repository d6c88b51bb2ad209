"""Forward lookups of a host through ``dig``."""

from __future__ import annotations

import ipaddress
import subprocess

from .ptr import get_ptr


def _is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def get_addresses(host: str) -> str:
    """Return a text report of the addresses of ``host`` and the PTR of the first."""
    try:
        result = subprocess.run(["dig", "+short", host], capture_output=True, check=False)
    except OSError as error:
        return f"Error: {error}\n"

    stdout = result.stdout.decode("utf-8", "replace")
    ips = [line.strip() for line in stdout.splitlines() if _is_ip(line.strip())]

    report = "".join(f"Address: {ip}\n" for ip in ips)
    if ips:
        report += get_ptr(ips[0])
    else:
        report += "PTR: no definido\nNo resuelve\n"
    return report