"""Error types raised by the address model.

All of them are raised at construction or mutation time. Derived
queries never raise; they return None when a value does not apply.
"""

from __future__ import annotations


class AddressError(ValueError):
    """Base class for invalid address model input."""


class InvalidAddress(AddressError):
    """A string is not dot-decimal IPv4, or a byte sequence is not 4 octets."""


class InvalidPrefix(AddressError):
    """A prefix length is missing, not an integer, or outside [0, 32]."""


class InvalidMask(AddressError):
    """A subnet mask is missing, not 4 octets, or not a contiguous run of ones."""
