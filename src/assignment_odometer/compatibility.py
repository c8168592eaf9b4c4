"""Compatibility lists: which units each request could occupy."""

from __future__ import annotations

from typing import Sequence

from assignment_odometer.cursor import BoundedCursor
from assignment_odometer.types import Request, Unit


def build_compatibility(
    requests: Sequence[Request],
    units: Sequence[Unit],
) -> list[tuple[int, ...]]:
    """Filter the unit arena per request, preserving global unit order.

    Both sequences must already be in global order. Entries are indices into
    `units`, so every list is a subsequence of the unit order.
    """
    return [
        tuple(u for u, unit in enumerate(units) if request.fits_in(unit))
        for request in requests
    ]


def build_cursors(compatibility: Sequence[tuple[int, ...]]) -> list[BoundedCursor]:
    """One unassigned cursor per request, bounded by its list length."""
    return [BoundedCursor(max=len(links)) for links in compatibility]


def unsatisfiable(compatibility: Sequence[tuple[int, ...]]) -> list[int]:
    """Indices of requests with no compatible unit at all."""
    return [i for i, links in enumerate(compatibility) if not links]
