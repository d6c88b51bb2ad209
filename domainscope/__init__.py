"""Look up a domain's common hosts, their addresses and reverse DNS names."""

__version__ = "0.1.0"