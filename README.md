# domainscope

`domainscope` is a small terminal tool for taking a quick look at a domain's DNS.
You type a domain name. It then queries the domain itself and four common hosts
under it: `www.`, `mail.`, `ftp.` and `webmail.`. For each host it shows:

- every IPv4 or IPv6 address that `dig +short` returns, as `Address: ...` lines;
- the reverse DNS (PTR) names of the first address found;
- `PTR: no definido` and `No resuelve` when the host has no address.

## Requirements

- Python 3.10 or later.
- The `dig` command on your `PATH`.
- The `ping` command, for `ping_domain` and the detailed lookup.
- A terminal that supports curses, which covers most POSIX systems.

## Installation

```
pip install .
```

## Usage

Start the interactive interface:

```
domainscope
```

- Type a domain such as `example.com` and press **Enter** to look it up.
- Press **Backspace** to delete a character.
- Press **Esc** to quit.

The report of the last lookup is shown below the input box.

## Use as a library

```python
from domainscope.dns import candidate_hosts, lookup_domain
from domainscope.ptr import get_ptr
from domainscope.ping import ping_domain

print(candidate_hosts("example.com"))
print(lookup_domain("example.com"))
print(get_ptr("192.0.2.1"))
print(ping_domain("example.com"))
```

- `domainscope.dns.candidate_hosts(domain)` returns the domain followed by its
  `www.`, `mail.`, `ftp.` and `webmail.` hosts.
- `domainscope.dns.lookup_domain(domain)` returns the text report for all of them.
- `domainscope.addresses.get_addresses(host)` returns the report for one host.
- `domainscope.ptr.get_ptr(ip)` returns the PTR names of an address, one per line.
- `domainscope.ping.ping_domain(domain)` pings a host once and returns the output
  of `ping`, or its error text if the ping fails.

These functions return their reports as text. When `dig` or `ping` cannot be
started, the error is written into the report instead of being raised.

`domainscope.detailed.lookup_domain` produces a different report. For each host
it prints `No encontrado` when `dig` returns nothing. For the first address it
adds the output of `dig +short -x` as a `PTR:` line. It also adds a
`Ping Resolve:` line with the address that `ping -c 1` resolves the host to.
`domainscope.detailed.parse_ping_resolve` pulls that address out of `ping`
output.

`domainscope.app.AppState` holds the typed input and the last report. It can be
driven without a terminal, and its lookup function can be replaced.

Hosts and their addresses can be held in memory with
`domainscope.domain_info.build_domain`, `DomainInfo` and `HostInfo`.

## Limitations

- The interactive interface uses only the plain report from
  `domainscope.dns.lookup_domain`. The detailed report is available only from
  Python.
- Lookups run one host at a time and block the interface until they finish.
- Results are not saved. `DomainInfo` and `HostInfo` are not filled in by the
  lookups.

## Running the tests

```
pip install ".[test]"
pytest
```