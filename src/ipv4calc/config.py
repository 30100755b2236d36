"""Load display defaults from ipv4calc.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ipv4calc.generators.base import FORMATS
from ipv4calc.utils.terminal import COLOR_MODES

DEFAULT_CONFIG_NAME = "ipv4calc.toml"


@dataclass
class DisplayConfig:
    """How results are shown when the command line does not say.

    Attributes:
        binary: Show the binary column by default.
        color: One of 'auto', 'always', 'never'.
        format: Output format, 'table' or 'json'.
    """

    binary: bool = False
    color: str = "auto"
    format: str = "table"


@dataclass
class CalcConfig:
    """Full configuration loaded from ipv4calc.toml."""

    display: DisplayConfig = field(default_factory=DisplayConfig)


def _build_display(data: dict) -> DisplayConfig:
    """Build the display config from parsed TOML data."""
    section = data.get("display", {})
    display = DisplayConfig(
        binary=section.get("binary", False),
        color=section.get("color", "auto"),
        format=section.get("format", "table"),
    )
    if not isinstance(display.binary, bool):
        raise ValueError(
            f"display.binary must be true or false, got {display.binary!r}"
        )
    if display.color not in COLOR_MODES:
        raise ValueError(
            f"display.color must be one of {', '.join(COLOR_MODES)}, got {display.color!r}"
        )
    if display.format not in FORMATS:
        raise ValueError(
            f"display.format must be one of {', '.join(FORMATS)}, got {display.format!r}"
        )
    return display


def load_config(config_path: Path | str | None = None) -> CalcConfig:
    """Load configuration from a TOML file.

    If config_path is None, ipv4calc.toml in the current directory is
    used when present; otherwise the built-in defaults apply. An explicit
    path that does not exist raises FileNotFoundError.
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_NAME)
        if not config_path.exists():
            return CalcConfig()
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return CalcConfig(display=_build_display(data))
