"""A single ping of a host."""

from __future__ import annotations

import subprocess


def ping_domain(domain: str) -> str:
    """Ping ``domain`` once and return the output as text."""
    try:
        result = subprocess.run(
            ["ping", "-c", "1", domain], capture_output=True, check=False
        )
    except OSError as error:
        return f"No se pudo ejecutar ping: {error}"

    if result.returncode == 0:
        return result.stdout.decode("utf-8", "replace").strip()
    stderr = result.stderr.decode("utf-8", "replace").strip()
    return f"Error al hacer ping:\n{stderr}"