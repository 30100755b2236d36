"""CLI entry point for ipv4calc.

Usage:
    ipv4calc ADDRESS [-c CIDR | -m NETMASK] [-b] [--format FORMAT]
"""

from __future__ import annotations

import argparse
import sys

from ipv4calc.cli.validation import cidr, ipv4_address, netmask
from ipv4calc.errors import AddressError
from ipv4calc.generators.base import FORMATS, get_generator
from ipv4calc.models.addressing import IPv4Interface
from ipv4calc.utils.terminal import COLOR_MODES, RED, colorize, use_color

ADDRESS_DESCRIPTION = "An IPv4 address in dot-decimal notation, e.g. 192.168.1.100"
CIDR_DESCRIPTION = "A netmask in CIDR notation (only the digits), e.g. 24"
NETMASK_DESCRIPTION = "A netmask in dot-decimal notation, e.g. 255.255.255.0"
BINARY_DESCRIPTION = "Show binary representation"


def _load_config(args: argparse.Namespace):
    """Load display config, handling errors."""
    from ipv4calc.config import load_config

    try:
        return load_config(args.config)
    except FileNotFoundError:
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: invalid config: {e}", file=sys.stderr)
        sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipv4calc",
        description="Gives various information related to an IPv4 address.",
    )
    parser.add_argument("address", type=ipv4_address, help=ADDRESS_DESCRIPTION)

    prefix = parser.add_mutually_exclusive_group()
    prefix.add_argument("-c", "--cidr", type=cidr, help=CIDR_DESCRIPTION)
    prefix.add_argument("-m", "--netmask", type=netmask, help=NETMASK_DESCRIPTION)

    parser.add_argument(
        "-b", "--binary", "-v", "--verbose",
        dest="binary", action="store_true", default=None,
        help=BINARY_DESCRIPTION,
    )
    parser.add_argument(
        "--format", choices=FORMATS,
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--color", choices=COLOR_MODES,
        help="Colourise output (default: auto)",
    )
    parser.add_argument(
        "--config",
        help="Path to ipv4calc.toml (default: ./ipv4calc.toml if present)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    config = _load_config(args)

    binary = config.display.binary if args.binary is None else args.binary
    color_mode = args.color or config.display.color
    output_format = args.format or config.display.format
    generate = get_generator(output_format)

    try:
        iface = IPv4Interface(args.address)
        if args.cidr is not None:
            iface.prefix_length = args.cidr
        elif args.netmask is not None:
            iface.netmask = args.netmask
        output = generate(
            iface,
            binary=binary,
            color=use_color(sys.stdout, color_mode),
        )
    except AddressError as e:
        err_color = use_color(sys.stderr, color_mode)
        print(colorize("Something bad happened.", RED, err_color), file=sys.stderr)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
