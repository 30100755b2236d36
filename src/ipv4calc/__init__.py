"""ipv4calc: IPv4 address, netmask and network facts calculator."""

__version__ = "0.1.0"
