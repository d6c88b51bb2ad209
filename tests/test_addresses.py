import subprocess
from unittest import mock

from domainscope.addresses import get_addresses


def _fake_dig(forward=b"", reverse=b""):
    calls = []

    def run(cmd, **kwargs):
        calls.append(list(cmd))
        stdout = reverse if "-x" in cmd else forward
        return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr=b"")

    return run, calls


def test_lists_addresses_and_ptr_of_first_only():
    run, calls = _fake_dig(
        forward=b"alias.example.com.\n192.0.2.1\n192.0.2.2\n",
        reverse=b"host.example.com.\n",
    )
    with mock.patch("subprocess.run", side_effect=run):
        text = get_addresses("www.example.com")
    assert text == (
        "Address: 192.0.2.1\nAddress: 192.0.2.2\nPTR:\n - host.example.com.\n"
    )
    assert calls == [
        ["dig", "+short", "www.example.com"],
        ["dig", "+short", "-x", "192.0.2.1"],
    ]


def test_names_without_addresses_do_not_resolve():
    run, calls = _fake_dig(forward=b"alias.example.com.\n")
    with mock.patch("subprocess.run", side_effect=run):
        text = get_addresses("ftp.example.com")
    assert text == "PTR: no definido\nNo resuelve\n"
    assert len(calls) == 1


def test_ipv6_addresses_are_accepted():
    run, _ = _fake_dig(forward=b"2001:db8::1\n")
    with mock.patch("subprocess.run", side_effect=run):
        text = get_addresses("example.com")
    assert text.startswith("Address: 2001:db8::1\n")
    assert text.endswith("PTR: no definido\n")


def test_missing_dig_is_reported_in_text():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError(2, "missing")):
        text = get_addresses("example.com")
    assert text.startswith("Error: ")
    assert "Address:" not in text