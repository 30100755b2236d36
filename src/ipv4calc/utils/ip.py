"""32-bit helpers shared by the address model and the renderers."""

from __future__ import annotations

from collections.abc import Sequence

ALL_ONES = 0xFFFFFFFF


def octets_to_int(octets: Sequence[int]) -> int:
    """Pack four octets into a 32-bit integer, big-endian.

    >>> octets_to_int((192, 168, 1, 100))
    3232235876
    >>> octets_to_int((0, 0, 0, 1))
    1
    """
    value = 0
    for octet in octets:
        value = (value << 8) | octet
    return value


def int_to_octets(value: int) -> tuple[int, int, int, int]:
    """Split a 32-bit integer into four octets, big-endian.

    >>> int_to_octets(3232235876)
    (192, 168, 1, 100)
    >>> int_to_octets(0xFFFFFF00)
    (255, 255, 255, 0)
    """
    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def prefix_to_mask(prefix_length: int) -> int:
    """Return the 32-bit mask with the top ``prefix_length`` bits set.

    >>> hex(prefix_to_mask(24))
    '0xffffff00'
    >>> prefix_to_mask(0)
    0
    >>> hex(prefix_to_mask(32))
    '0xffffffff'
    """
    return (ALL_ONES << (32 - prefix_length)) & ALL_ONES


def popcount(value: int) -> int:
    """Count the set bits of a 32-bit value.

    >>> popcount(0xFFFFFF00)
    24
    >>> popcount(0xFF00FF00)
    16
    """
    return bin(value & ALL_ONES).count('1')


def is_contiguous_mask(mask: int) -> bool:
    """True if the set bits of ``mask`` form one high-order run.

    >>> is_contiguous_mask(0xFFFFFF00)
    True
    >>> is_contiguous_mask(0)
    True
    >>> is_contiguous_mask(0xFF00FF00)
    False
    """
    inverted = ~mask & ALL_ONES
    # A wildcard of a contiguous mask is 2^k - 1.
    return inverted & (inverted + 1) == 0


def to_binary(octets: Sequence[int]) -> str:
    """Render octets as dot-separated, zero-padded 8-bit groups.

    >>> to_binary((192, 168, 1, 0))
    '11000000.10101000.00000001.00000000'
    """
    return '.'.join(f'{octet:08b}' for octet in octets)


def to_dotted(octets: Sequence[int]) -> str:
    """Render octets in dot-decimal notation.

    >>> to_dotted((10, 0, 0, 1))
    '10.0.0.1'
    """
    return '.'.join(str(octet) for octet in octets)
