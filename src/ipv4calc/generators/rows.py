"""The rows every text renderer consumes.

Each row is a (label, value, binary) triple of plain strings in a fixed
order. This is the only place absent values turn into "N/A"; the model
itself always reports them as None.
"""

from __future__ import annotations

from dataclasses import dataclass

from ipv4calc.models.addressing import IPv4Address, IPv4Interface, NetworkClass
from ipv4calc.utils.terminal import GREEN, colorize

NOT_APPLICABLE = "N/A"

LABELS = (
    "Address",
    "Netmask",
    "Wildcard",
    "Network",
    "Broadcast",
    "HostMin",
    "HostMax",
    "Hosts/Net",
)


@dataclass(frozen=True)
class Row:
    """One line of calculator output.

    Attributes:
        label: Row name, one of LABELS.
        value: Display value, or "N/A".
        binary: Binary form of the value, "N/A" when the value is absent,
            or None for rows that never have one (Hosts/Net).
    """

    label: str
    value: str
    binary: str | None = None


def _dotted(address: IPv4Address | None) -> str:
    return NOT_APPLICABLE if address is None else str(address)


def _binary(address: IPv4Address | None) -> str:
    return NOT_APPLICABLE if address is None else address.to_binary()


def _network_binary(
    network: IPv4Address | None,
    network_class: NetworkClass | None,
    color: bool,
) -> str:
    """Binary network address with the class-identifying bits highlighted."""
    if network is None:
        return NOT_APPLICABLE
    bits = network.to_binary()
    if network_class is None:
        return bits
    split = network_class.leading_bits
    return colorize(bits[:split], GREEN, color) + bits[split:]


def build_rows(iface: IPv4Interface, *, color: bool = False) -> list[Row]:
    """Build the calculator rows for an address.

    >>> [(r.label, r.value) for r in build_rows(IPv4Interface('10.0.0.1'))][:4]
    [('Address', '10.0.0.1'), ('Netmask', '255.0.0.0 = 8'), ('Wildcard', '0.255.255.255'), ('Network', '10.0.0.0/8 Class A')]
    """
    netmask = iface.netmask
    prefix_length = iface.prefix_length
    network = iface.network_address
    network_class = iface.network_class
    hosts = iface.hosts_in_network

    if netmask is None:
        netmask_value = NOT_APPLICABLE
    else:
        netmask_value = f"{netmask} = {prefix_length}"

    network_value = _dotted(network)
    if prefix_length is not None:
        network_value += f"/{prefix_length}"
    if network_class is None:
        network_value += " " + NOT_APPLICABLE
    else:
        network_value += " " + colorize(str(network_class), GREEN, color)

    return [
        Row("Address", str(iface.address), iface.address.to_binary()),
        Row("Netmask", netmask_value, _binary(netmask)),
        Row("Wildcard", _dotted(iface.wildcard_mask), _binary(iface.wildcard_mask)),
        Row("Network", network_value, _network_binary(network, network_class, color)),
        Row("Broadcast", _dotted(iface.broadcast_address), _binary(iface.broadcast_address)),
        Row("HostMin", _dotted(iface.first_host), _binary(iface.first_host)),
        Row("HostMax", _dotted(iface.last_host), _binary(iface.last_host)),
        Row("Hosts/Net", NOT_APPLICABLE if hosts is None else str(hosts)),
    ]
