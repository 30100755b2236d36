"""Generator protocol: the interface all output renderers implement."""

from __future__ import annotations

from typing import Protocol

from ipv4calc.models.addressing import IPv4Interface

FORMATS = ("table", "json")


class Generator(Protocol):
    """Protocol for output renderers.

    Each generator takes a fully configured IPv4Interface and returns the
    text to print. Generators contain no address arithmetic; everything
    they show is read from the model.
    """

    def __call__(
        self,
        iface: IPv4Interface,
        *,
        binary: bool = False,
        color: bool = False,
    ) -> str:
        ...


def get_generator(name: str) -> Generator | None:
    """Get a generator function by output format name."""
    generators = {
        "table": ("ipv4calc.generators.table", "generate_table"),
        "json": ("ipv4calc.generators.json_output", "generate_json"),
    }
    if name not in generators:
        return None
    module_path, func_name = generators[name]
    import importlib
    mod = importlib.import_module(module_path)
    return getattr(mod, func_name)

