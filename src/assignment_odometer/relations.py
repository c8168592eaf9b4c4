"""Relation index: forward-only equivalence and conflict sets per request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from assignment_odometer.types import Request


def are_equivalent(
    first: Request,
    second: Request,
    first_links: Sequence[int],
    second_links: Sequence[int],
) -> bool:
    """Whether two requests are interchangeable for deduplication.

    Identical (start, end, weight) always counts. Overlapping requests with
    exactly the same candidate units also count, even when their windows
    differ; this can prune assignments that are not true permutations.
    """
    if first.same_shape(second):
        return True
    return first.overlaps(second) and tuple(first_links) == tuple(second_links)


@dataclass(frozen=True)
class RelationIndex:
    """Per request i, ascending indices ii > i that are equivalent / in conflict.

    Invariants:
        - Every entry of equivalents[i] and conflicts[i] is greater than i
        - Both are sorted ascending
    """

    equivalents: tuple[tuple[int, ...], ...]
    conflicts: tuple[tuple[int, ...], ...]

    @classmethod
    def build(
        cls,
        requests: Sequence[Request],
        compatibility: Sequence[Sequence[int]],
    ) -> RelationIndex:
        """Scan every ordered pair (i, ii) with ii > i once."""
        equivalents: list[tuple[int, ...]] = []
        conflicts: list[tuple[int, ...]] = []

        for i, request in enumerate(requests):
            similar: list[int] = []
            overlapping: list[int] = []
            for ii in range(i + 1, len(requests)):
                other = requests[ii]
                if are_equivalent(
                    request, other, compatibility[i], compatibility[ii]
                ):
                    similar.append(ii)
                if request.overlaps(other):
                    overlapping.append(ii)
            equivalents.append(tuple(similar))
            conflicts.append(tuple(overlapping))

        return cls(equivalents=tuple(equivalents), conflicts=tuple(conflicts))

    def __len__(self) -> int:
        return len(self.conflicts)
