"""Layer 2: Enumerator, the multi-digit odometer over request cursors.

Each request is one digit. The digit at `cursor` is advanced; when it wraps,
the carry moves `cursor` to the next request. After a non-wrapping advance
two pruning rules are applied against higher-indexed requests only (every
lower digit is unassigned at that point):

- conflict: the request shares a unit with an overlapping request;
- symmetry: an equivalent request does not sit strictly below it.

A state surviving both rules is a canonical combination.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from assignment_odometer.compatibility import (
    build_compatibility,
    build_cursors,
    unsatisfiable,
)
from assignment_odometer.cursor import BoundedCursor
from assignment_odometer.relations import RelationIndex
from assignment_odometer.shortcuts import ShortcutRow, build_shortcut_table
from assignment_odometer.types import (
    Assignment,
    Combination,
    EngineStateError,
    Request,
    Unit,
    request_order_key,
    unit_order_key,
)

logger = logging.getLogger(__name__)


class Enumerator:
    """Enumerates canonical assignments of requests to units. Single use.

    Construct, call initialize() once, then alternate step() and
    read_combination() until step() returns True. State is mutated in place;
    to start over, build a new Enumerator from the original inputs.
    """

    def __init__(self, requests: Iterable[Request], units: Iterable[Unit]) -> None:
        self.requests: tuple[Request, ...] = tuple(
            sorted(requests, key=request_order_key)
        )
        self.units: tuple[Unit, ...] = tuple(sorted(units, key=unit_order_key))
        self.cursor = 0

        self.compatibility: list[tuple[int, ...]] = []
        self.cursors: list[BoundedCursor] = []
        self.shortcuts: list[ShortcutRow] = []
        self.relations: RelationIndex | None = None

        self._initialized = False
        self._exhausted = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Build compatibility lists, cursors, relation index and shortcuts.

        Raises EngineStateError if called more than once.
        """
        if self._initialized:
            raise EngineStateError("initialize", "engine is already initialized")

        self.compatibility = build_compatibility(self.requests, self.units)
        self.cursors = build_cursors(self.compatibility)
        self.relations = RelationIndex.build(self.requests, self.compatibility)
        self.shortcuts = build_shortcut_table(self.compatibility, self.units)
        self._initialized = True

        blocked = unsatisfiable(self.compatibility)
        if not self.requests:
            self._exhausted = True
        elif blocked:
            # A request that can never hold a unit empties the whole space.
            self._exhausted = True
            logger.info(
                "No feasible assignment: %d request(s) fit no unit (%s)",
                len(blocked),
                ", ".join(self.requests[i].request_id for i in blocked),
            )

        logger.debug(
            "Initialized enumerator: %d requests, %d units, %d search states",
            len(self.requests),
            len(self.units),
            self.search_space_size,
        )

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def search_space_size(self) -> int:
        """Upper bound on odometer states: product of (list length + 1)."""
        size = 1
        for links in self.compatibility:
            size *= len(links) + 1
        return size

    def _require_initialized(self, operation: str) -> None:
        if not self._initialized:
            raise EngineStateError(operation, "initialize() has not been called")

    # ------------------------------------------------------------------
    # Digit primitives
    # ------------------------------------------------------------------
    def advance_digit(self, r: int) -> bool:
        """Advance request r's cursor, taking a shortcut when one applies.

        Returns True when the digit wrapped back to unassigned.
        """
        cursor = self.cursors[r]
        if cursor.position is not None:
            shortcut = self.shortcuts[r][cursor.position]
            if shortcut is not None:
                return cursor.jump_to(shortcut.target)
        return cursor.advance()

    def unit_index_at(self, r: int) -> int | None:
        """Arena index of the unit request r currently holds, or None."""
        position = self.cursors[r].position
        if position is None:
            return None
        return self.compatibility[r][position]

    def holds_same_unit(self, i: int, ii: int) -> bool:
        """Both requests are assigned and hold the same unit."""
        held = self.unit_index_at(i)
        return held is not None and held == self.unit_index_at(ii)

    def _rank(self, r: int) -> float:
        # Unassigned ranks after every position: it is where a digit lands
        # after its last index.
        position = self.cursors[r].position
        return float("inf") if position is None else position

    # ------------------------------------------------------------------
    # Pruning rules
    # ------------------------------------------------------------------
    def _violates_conflict(self, r: int) -> bool:
        assert self.relations is not None
        for other in self.relations.conflicts[r]:
            if self.holds_same_unit(r, other):
                logger.debug(
                    "Conflict: overlapping %s and %s hold the same unit",
                    self.requests[r].request_id,
                    self.requests[other].request_id,
                )
                return True
        return False

    def _violates_symmetry(self, r: int) -> bool:
        assert self.relations is not None
        rank = self._rank(r)
        for other in self.relations.equivalents[r]:
            if self._rank(other) >= rank:
                logger.debug(
                    "Symmetry: %s duplicates an ordering of equivalent %s",
                    self.requests[r].request_id,
                    self.requests[other].request_id,
                )
                return True
        return False

    # ------------------------------------------------------------------
    # Odometer
    # ------------------------------------------------------------------
    def step(self) -> bool:
        """Advance to the next canonical combination.

        Returns True when the search space is exhausted (terminal; further
        calls keep returning True), False when a new combination is ready
        to be read.

        Raises EngineStateError if initialize() has not been called.
        """
        self._require_initialized("step")
        if self._exhausted:
            return True

        last = len(self.requests) - 1
        while True:
            while self.advance_digit(self.cursor):
                self.cursor += 1
                if self.cursor > last:
                    self._exhausted = True
                    logger.debug("Search space exhausted")
                    return True

            if self._violates_conflict(self.cursor):
                continue
            if self._violates_symmetry(self.cursor):
                continue

            self.cursor = 0
            return False

    def read_combination(self) -> Combination:
        """Snapshot of the current assignment, in global request order.

        Idempotent: calling it twice without a step() in between returns
        equal results.
        """
        self._require_initialized("read_combination")
        combination: list[Assignment] = []
        for r, request in enumerate(self.requests):
            held = self.unit_index_at(r)
            unit = self.units[held] if held is not None else None
            combination.append(Assignment(request=request, unit=unit))
        return tuple(combination)

    def __iter__(self) -> Iterator[Combination]:
        self._require_initialized("enumerate")
        while not self.step():
            yield self.read_combination()

    def enumerate_all(self) -> list[Combination]:
        """Step until exhausted, collecting every accepted combination."""
        combinations = list(self)
        logger.info(
            "Enumerated %d combination(s) for %d request(s) over %d unit(s)",
            len(combinations),
            len(self.requests),
            len(self.units),
        )
        return combinations


def enumerate_combinations(
    requests: Iterable[Request],
    units: Iterable[Unit],
) -> list[Combination]:
    """Construct, initialize and fully enumerate in one call."""
    engine = Enumerator(requests, units)
    engine.initialize()
    return engine.enumerate_all()
