"""Unit-level symmetry breaking: skip runs of interchangeable units.

Within one compatibility list, consecutive units of equal capacity give
combinations that differ only in which identical unit was picked. The table
built here lets a cursor parked at the head of such a run jump straight past
it, so only the first unit of each run is ever visited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from assignment_odometer.types import Unit


@dataclass(frozen=True)
class Shortcut:
    """Jump target for a cursor. target=None means "jump to unassigned"."""

    target: int | None


ShortcutRow = tuple[Optional[Shortcut], ...]


def build_shortcut_row(links: Sequence[int], units: Sequence[Unit]) -> ShortcutRow:
    """Shortcuts for one compatibility list, scanned from its end backward.

    Every position inside a run of interchangeable units points at the first
    position after the run (or at unassigned when the run ends the list).
    The last position never carries a shortcut.
    """
    row: list[Shortcut | None] = [None] * len(links)
    last_distinct = Shortcut(None)

    for i in range(len(links) - 2, -1, -1):
        if units[links[i]].interchangeable_with(units[links[i + 1]]):
            row[i] = last_distinct
        else:
            last_distinct = Shortcut(i + 1)

    return tuple(row)


def build_shortcut_table(
    compatibility: Sequence[Sequence[int]],
    units: Sequence[Unit],
) -> list[ShortcutRow]:
    """One shortcut row per request, aligned with its compatibility list."""
    return [build_shortcut_row(links, units) for links in compatibility]
