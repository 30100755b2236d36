"""Data models for IPv4 address calculations."""

from ipv4calc.models.addressing import (
    ClassfulDefault,
    IPv4Address,
    IPv4Interface,
    Netmask,
    NetworkClass,
    PrefixLength,
    PrefixSpec,
    classful_default,
)

__all__ = [
    "ClassfulDefault",
    "IPv4Address",
    "IPv4Interface",
    "Netmask",
    "NetworkClass",
    "PrefixLength",
    "PrefixSpec",
    "classful_default",
]
