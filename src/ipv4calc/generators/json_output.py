"""JSON output of the calculator results.

Absent values are emitted as null rather than "N/A".
"""

from __future__ import annotations

import json

from ipv4calc.models.addressing import IPv4Address, IPv4Interface


def _dotted(address: IPv4Address | None) -> str | None:
    return None if address is None else str(address)


def _binary(address: IPv4Address | None) -> str | None:
    return None if address is None else address.to_binary()


def build_record(iface: IPv4Interface, *, binary: bool = False) -> dict:
    """Collect the calculator results into a JSON-serialisable dict."""
    network_class = iface.network_class
    record = {
        "address": str(iface.address),
        "netmask": _dotted(iface.netmask),
        "prefix_length": iface.prefix_length,
        "wildcard": _dotted(iface.wildcard_mask),
        "network": _dotted(iface.network_address),
        "broadcast": _dotted(iface.broadcast_address),
        "host_min": _dotted(iface.first_host),
        "host_max": _dotted(iface.last_host),
        "hosts": iface.hosts_in_network,
        "network_class": None if network_class is None else network_class.value,
    }
    if binary:
        record["binary"] = {
            "address": iface.address.to_binary(),
            "netmask": _binary(iface.netmask),
            "wildcard": _binary(iface.wildcard_mask),
            "network": _binary(iface.network_address),
            "broadcast": _binary(iface.broadcast_address),
            "host_min": _binary(iface.first_host),
            "host_max": _binary(iface.last_host),
        }
    return record


def generate_json(
    iface: IPv4Interface,
    *,
    binary: bool = False,
    color: bool = False,
) -> str:
    """Render the calculator results as indented JSON.

    ``color`` is accepted for a uniform generator signature and ignored.
    """
    return json.dumps(build_record(iface, binary=binary), indent=2)
