"""Shared types: Unit, Request, Assignment and EngineStateError."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Unit:
    """A capacity-bounded resource. Holds one request at a time per solution."""

    unit_id: str
    capacity: int

    def interchangeable_with(self, other: Unit) -> bool:
        """Units of equal capacity produce duplicate combinations."""
        return self.capacity == other.capacity


@dataclass(frozen=True)
class Request:
    """A weighted item needing a unit over the half-open window [start, end).

    Invariants:
        - start < end
        - weight >= 0
    """

    request_id: str
    weight: int
    start: int
    end: int

    def fits_in(self, unit: Unit) -> bool:
        return self.weight <= unit.capacity

    def overlaps(self, other: Request) -> bool:
        """Four-way interval test, inclusive of touching boundaries."""
        return not (self.end < other.start or other.end < self.start)

    def same_shape(self, other: Request) -> bool:
        """Identical (start, end, weight); only the id differs."""
        return (self.start, self.end, self.weight) == (
            other.start,
            other.end,
            other.weight,
        )


def unit_order_key(unit: Unit) -> tuple[int, str]:
    """Global unit order: capacity, then id.

    Capacity leads so that interchangeable units sit next to each other in
    every compatibility list.
    """
    return (unit.capacity, unit.unit_id)


def request_order_key(request: Request) -> tuple[int, int, int, str]:
    """Global request order: weight, start, end, then id.

    The first request in this order is the least-significant odometer digit.
    """
    return (request.weight, request.start, request.end, request.request_id)


@dataclass(frozen=True)
class Assignment:
    """One request and the unit it holds in a combination (None = unassigned)."""

    request: Request
    unit: Unit | None

    @property
    def is_assigned(self) -> bool:
        return self.unit is not None


Combination = tuple[Assignment, ...]


class EngineStateError(RuntimeError):
    """Raised when the enumerator lifecycle is used out of order."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot {operation}: {reason}")
