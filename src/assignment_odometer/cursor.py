"""Layer 1: BoundedCursor, one odometer digit.

A cursor is either unassigned (None) or parked at an index in [0, max).
Unassigned is both the initial state and the state a digit lands on after
its last index, so "start" and "carry" share one code path.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoundedCursor:
    """Tri-state cyclic position over a compatibility list of length `max`."""

    max: int
    position: int | None = None

    def advance(self) -> bool:
        """Move one step forward. Returns True when the cursor wrapped.

        None → 0 is not a wrap. k → k+1 while in range, else → None (wrap).
        A cursor with max == 0 wraps on every call and stays unassigned.
        """
        if self.position is None:
            if self.max > 0:
                self.position = 0
                return False
            return True

        nxt = self.position + 1
        if nxt < self.max:
            self.position = nxt
            return False
        self.position = None
        return True

    def jump_to(self, target: int | None) -> bool:
        """Set the cursor directly. Returns True when it lands on unassigned.

        An absent or out-of-range target means "fell off past the end" and
        reports a wrap, exactly like advance() from the last index.
        """
        if target is None or not 0 <= target < self.max:
            self.position = None
            return True
        self.position = target
        return False

    def reset(self) -> None:
        self.position = None

    @property
    def is_assigned(self) -> bool:
        return self.position is not None
