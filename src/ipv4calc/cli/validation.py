"""argparse ``type=`` validators for the command-line arguments.

Invalid input is rejected here with a targeted message, before any
address model is built.
"""

from __future__ import annotations

import argparse

from ipv4calc.models.addressing import is_dotted_quad


def ipv4_address(value: str) -> str:
    """Accept a dot-decimal IPv4 address string."""
    if not is_dotted_quad(value):
        raise argparse.ArgumentTypeError(
            f"Sorry. '{value}' is not a valid IPv4 address."
        )
    return value


def cidr(value: str) -> int:
    """Accept a prefix length between 0 and 32 included."""
    try:
        parsed = int(value)
    except ValueError:
        parsed = None
    if parsed is None or not 0 <= parsed <= 32:
        raise argparse.ArgumentTypeError(
            f"Sorry. '{value}' is not a valid CIDR.\n"
            "A valid CIDR is a number between 0 and 32 included."
        )
    return parsed


def netmask(value: str) -> str:
    """Accept a dot-decimal subnet mask string."""
    if not is_dotted_quad(value):
        raise argparse.ArgumentTypeError(
            f"Sorry. '{value}' is not a valid netmask."
        )
    return value
