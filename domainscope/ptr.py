"""Reverse (PTR) lookups through ``dig``."""

from __future__ import annotations

import subprocess


def get_ptr(ip: str) -> str:
    """Return a text report of the PTR records for ``ip``."""
    try:
        result = subprocess.run(
            ["dig", "+short", "-x", ip], capture_output=True, check=False
        )
    except OSError as error:
        return f"PTR error: {error}\n"

    stdout = result.stdout.decode("utf-8", "replace")
    names = [line.strip() for line in stdout.splitlines() if line.strip()]
    if not names:
        return "PTR: no definido\n"
    return "PTR:\n" + "".join(f" - {name}\n" for name in names)