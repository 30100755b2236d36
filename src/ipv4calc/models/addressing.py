"""IPv4 address model: addresses, prefix specs, and derived network facts."""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from ipv4calc.errors import InvalidAddress, InvalidMask, InvalidPrefix
from ipv4calc.utils.ip import (
    ALL_ONES,
    int_to_octets,
    is_contiguous_mask,
    octets_to_int,
    popcount,
    prefix_to_mask,
    to_binary,
    to_dotted,
)

IPV4_PATTERN = (
    r'^((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}'
    r'(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$'
)
IPV4_RE = re.compile(IPV4_PATTERN)

_INVALID_ADDRESS_MESSAGE = (
    "Address provided is not a valid IPv4 address. Provide either 4 bytes, "
    "or a string representation of the address in dot-decimal notation"
)


def is_dotted_quad(text: str) -> bool:
    """Check a string against the dot-decimal IPv4 pattern.

    >>> is_dotted_quad('192.168.1.100')
    True
    >>> is_dotted_quad('999.1.1.1')
    False
    >>> is_dotted_quad('10.0.0.1\\n')
    False
    """
    return IPV4_RE.fullmatch(text) is not None


@dataclass(frozen=True, order=True)
class IPv4Address:
    """An immutable IPv4 address held as four octets.

    Also used for every other 4-byte quantity the calculator derives:
    masks, wildcards, network and broadcast addresses, host bounds.
    """

    octets: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        octets = tuple(self.octets)
        if len(octets) != 4:
            raise InvalidAddress(_INVALID_ADDRESS_MESSAGE)
        for octet in octets:
            if isinstance(octet, bool) or not isinstance(octet, int) or not 0 <= octet <= 255:
                raise InvalidAddress(_INVALID_ADDRESS_MESSAGE)
        object.__setattr__(self, 'octets', octets)

    @classmethod
    def parse(cls, text: str) -> IPv4Address:
        """Parse a dot-decimal string.

        >>> IPv4Address.parse('192.168.1.100')
        IPv4Address('192.168.1.100')
        >>> IPv4Address.parse('010.001.0.1')
        IPv4Address('10.1.0.1')
        """
        if not isinstance(text, str) or not is_dotted_quad(text):
            raise InvalidAddress(_INVALID_ADDRESS_MESSAGE)
        return cls(tuple(int(part) for part in text.split('.')))

    @classmethod
    def from_bytes(cls, raw: Sequence[int]) -> IPv4Address:
        """Build from exactly four raw byte values.

        >>> IPv4Address.from_bytes(b'\\n\\x00\\x00\\x01')
        IPv4Address('10.0.0.1')
        """
        return cls(tuple(raw))

    @classmethod
    def from_int(cls, value: int) -> IPv4Address:
        """Build from a 32-bit integer.

        >>> IPv4Address.from_int(0xFFFFFF00)
        IPv4Address('255.255.255.0')
        """
        return cls(int_to_octets(value & ALL_ONES))

    def to_int(self) -> int:
        return octets_to_int(self.octets)

    @property
    def first_octet(self) -> int:
        return self.octets[0]

    def to_binary(self) -> str:
        """Render as four zero-padded 8-bit groups.

        >>> IPv4Address.parse('255.255.255.0').to_binary()
        '11111111.11111111.11111111.00000000'
        """
        return to_binary(self.octets)

    def __invert__(self) -> IPv4Address:
        return IPv4Address.from_int(~self.to_int())

    def __and__(self, other: IPv4Address) -> IPv4Address:
        return IPv4Address.from_int(self.to_int() & other.to_int())

    def __or__(self, other: IPv4Address) -> IPv4Address:
        return IPv4Address.from_int(self.to_int() | other.to_int())

    def __str__(self) -> str:
        return to_dotted(self.octets)

    def __repr__(self) -> str:
        return f"IPv4Address({str(self)!r})"


def _coerce_address(value: IPv4Address | str | Sequence[int]) -> IPv4Address:
    if isinstance(value, IPv4Address):
        return value
    if isinstance(value, str):
        return IPv4Address.parse(value)
    try:
        return IPv4Address.from_bytes(value)
    except TypeError as e:
        raise InvalidAddress(_INVALID_ADDRESS_MESSAGE) from e


# ---------------------------------------------------------------------------
# Prefix specs: exactly one canonical form, converted on demand.
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PrefixLength:
    """A prefix given as a CIDR length.

    >>> PrefixLength(24).mask
    IPv4Address('255.255.255.0')
    """

    length: int

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidPrefix(f"A CIDR must be an integer, got {self.length!r}")
        if not 0 <= self.length <= 32:
            raise InvalidPrefix(
                f"A CIDR must be comprised between 0 and 32, got {self.length}"
            )

    @property
    def prefix_length(self) -> int:
        return self.length

    @property
    def mask(self) -> IPv4Address:
        return IPv4Address.from_int(prefix_to_mask(self.length))


@dataclass(frozen=True)
class Netmask:
    """A prefix given as a dot-decimal subnet mask.

    Only masks whose one-bits form a single high-order run are accepted,
    so the prefix length (the population count) always describes the
    same network the mask does.

    >>> Netmask.from_value('255.255.240.0').prefix_length
    20
    """

    address: IPv4Address

    def __post_init__(self) -> None:
        if not is_contiguous_mask(self.address.to_int()):
            raise InvalidMask(
                f"Provided mask is not valid. {self.address} is not a contiguous netmask"
            )

    @classmethod
    def from_value(cls, value: Netmask | IPv4Address | str | Sequence[int] | None) -> Netmask:
        """Build a Netmask from any accepted mask representation."""
        if isinstance(value, Netmask):
            return value
        if value is None:
            raise InvalidMask("Provided mask is not valid")
        if isinstance(value, str):
            if not is_dotted_quad(value):
                raise InvalidMask(f"Provided mask is not valid: {value!r}")
            return cls(IPv4Address.parse(value))
        if isinstance(value, IPv4Address):
            return cls(value)
        try:
            return cls(IPv4Address.from_bytes(value))
        except (InvalidAddress, TypeError) as e:
            raise InvalidMask(
                "Provided mask is not valid. It must consist of 4 bytes"
            ) from e

    @property
    def prefix_length(self) -> int:
        return popcount(self.address.to_int())

    @property
    def mask(self) -> IPv4Address:
        return self.address


PrefixSpec = Union[PrefixLength, Netmask]


# ---------------------------------------------------------------------------
# Classful defaults
# ---------------------------------------------------------------------------

class NetworkClass(enum.Enum):
    """Historical address class, identified by the leading bits."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"  # Multicast
    E = "E"  # Reserved

    @property
    def leading_bits(self) -> int:
        """Number of leading bits that identify the class (A=1 ... D/E=4)."""
        return _LEADING_BITS[self]

    def __str__(self) -> str:
        return f"Class {self.value}"


_LEADING_BITS = {
    NetworkClass.A: 1,
    NetworkClass.B: 2,
    NetworkClass.C: 3,
    NetworkClass.D: 4,
    NetworkClass.E: 4,
}


@dataclass(frozen=True)
class ClassfulDefault:
    """The class and default prefix implied by an address' first octet."""

    network_class: NetworkClass | None
    prefix_length: int | None

    @property
    def mask(self) -> IPv4Address | None:
        if self.prefix_length is None:
            return None
        return PrefixLength(self.prefix_length).mask


_CLASSFUL_DEFAULTS: tuple[tuple[range, ClassfulDefault], ...] = (
    (range(0, 127), ClassfulDefault(NetworkClass.A, 8)),
    (range(127, 128), ClassfulDefault(None, None)),  # Loopback
    (range(128, 192), ClassfulDefault(NetworkClass.B, 16)),
    (range(192, 224), ClassfulDefault(NetworkClass.C, 24)),
    (range(224, 240), ClassfulDefault(NetworkClass.D, None)),
    (range(240, 256), ClassfulDefault(NetworkClass.E, None)),
)


def classful_default(first_octet: int) -> ClassfulDefault:
    """Look up the classful default for a first octet.

    >>> classful_default(10)
    ClassfulDefault(network_class=<NetworkClass.A: 'A'>, prefix_length=8)
    >>> classful_default(127)
    ClassfulDefault(network_class=None, prefix_length=None)
    >>> classful_default(230).prefix_length is None
    True
    """
    for octets, default in _CLASSFUL_DEFAULTS:
        if first_octet in octets:
            return default
    raise InvalidAddress(f"First octet out of range: {first_octet!r}")


# ---------------------------------------------------------------------------
# Address model
# ---------------------------------------------------------------------------

class IPv4Interface:
    """An IPv4 address paired with an optional prefix spec.

    The address is fixed at construction. The prefix can be changed at any
    time through ``prefix_length`` or ``netmask``; whichever was written last
    wins, and the other is derived from it. Without an explicit prefix the
    classful default of the address applies.

    Every derived query returns None instead of raising when it does not
    apply (no effective prefix, or a /31 or /32 edge case).

    >>> iface = IPv4Interface('192.168.1.100', 24)
    >>> str(iface.network_address), str(iface.broadcast_address)
    ('192.168.1.0', '192.168.1.255')
    >>> iface.hosts_in_network
    254
    """

    def __init__(
        self,
        address: IPv4Address | str | Sequence[int],
        prefix: PrefixSpec | int | None = None,
    ) -> None:
        self._address = _coerce_address(address)
        self._prefix: PrefixSpec | None = None
        if isinstance(prefix, (PrefixLength, Netmask)):
            self._prefix = prefix
        elif prefix is not None:
            self.prefix_length = prefix

    @property
    def address(self) -> IPv4Address:
        return self._address

    @property
    def prefix_spec(self) -> PrefixSpec | None:
        """The explicitly set prefix, or None when the classful default applies."""
        return self._prefix

    @property
    def classful_default(self) -> ClassfulDefault:
        return classful_default(self._address.first_octet)

    # -- prefix accessors ---------------------------------------------------

    @property
    def prefix_length(self) -> int | None:
        if self._prefix is not None:
            return self._prefix.prefix_length
        return self.classful_default.prefix_length

    @prefix_length.setter
    def prefix_length(self, value: int) -> None:
        if value is None:
            raise InvalidPrefix("A CIDR is required")
        self._prefix = PrefixLength(value)

    @property
    def netmask(self) -> IPv4Address | None:
        if self._prefix is not None:
            return self._prefix.mask
        return self.classful_default.mask

    @netmask.setter
    def netmask(self, value: Netmask | IPv4Address | str | Sequence[int]) -> None:
        self._prefix = Netmask.from_value(value)

    # -- edge cases ---------------------------------------------------------

    @property
    def is_point_to_point(self) -> bool:
        """True for a /31 link (RFC 3021): both addresses are hosts."""
        return self.prefix_length == 31

    @property
    def is_host_prefix(self) -> bool:
        """True for a /32: the address is the only host."""
        return self.prefix_length == 32

    # -- derived facts ------------------------------------------------------

    @property
    def wildcard_mask(self) -> IPv4Address | None:
        mask = self.netmask
        if mask is None:
            return None
        return ~mask

    @property
    def network_address(self) -> IPv4Address | None:
        if self.is_point_to_point or self.is_host_prefix:
            return None
        mask = self.netmask
        if mask is None:
            return None
        return self._address & mask

    @property
    def broadcast_address(self) -> IPv4Address | None:
        if self.is_point_to_point or self.is_host_prefix:
            return None
        wildcard = self.wildcard_mask
        if wildcard is None:
            return None
        return self._address | wildcard

    @property
    def first_host(self) -> IPv4Address | None:
        if self.is_host_prefix:
            return self._address
        mask = self.netmask
        if mask is None:
            return None
        value = self._address.to_int() & mask.to_int()
        if not self.is_point_to_point:
            value += 1
        return IPv4Address.from_int(value)

    @property
    def last_host(self) -> IPv4Address | None:
        if self.is_host_prefix:
            return self._address
        wildcard = self.wildcard_mask
        if wildcard is None:
            return None
        value = self._address.to_int() | wildcard.to_int()
        if not self.is_point_to_point:
            value -= 1
        return IPv4Address.from_int(value)

    @property
    def hosts_in_network(self) -> int | None:
        prefix_length = self.prefix_length
        if prefix_length is None:
            return None
        if self.is_point_to_point:
            return 2
        if self.is_host_prefix:
            return 1
        return 2 ** (32 - prefix_length) - 2

    @property
    def network_class(self) -> NetworkClass | None:
        return self.classful_default.network_class

    def to_binary(self) -> str:
        return self._address.to_binary()

    def __str__(self) -> str:
        prefix_length = self.prefix_length
        if prefix_length is None:
            return str(self._address)
        return f"{self._address}/{prefix_length}"

    def __repr__(self) -> str:
        return f"IPv4Interface({str(self._address)!r}, {self._prefix!r})"
