"""Rounded-border text table of the calculator rows.

Two columns (label, value), or three when the binary column is shown.
No header row; every cell is left-aligned and kept as text.
"""

from __future__ import annotations

from tabulate import tabulate

from ipv4calc.generators.rows import Row, build_rows
from ipv4calc.models.addressing import IPv4Interface


def render_rows(rows: list[Row], *, binary: bool = False) -> str:
    """Lay out rows as a bordered table."""
    cells = []
    for row in rows:
        line = [row.label, row.value]
        if binary:
            line.append(row.binary or "")
        cells.append(line)

    return tabulate(
        cells,
        tablefmt="rounded_outline",
        disable_numparse=True,
        colalign=("left",) * len(cells[0]),
    )


def generate_table(
    iface: IPv4Interface,
    *,
    binary: bool = False,
    color: bool = False,
) -> str:
    """Render the calculator table for an address."""
    return render_rows(build_rows(iface, color=color), binary=binary)
