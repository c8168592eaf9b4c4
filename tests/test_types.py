"""Tests for Unit, Request, the global order keys and EngineStateError."""

from __future__ import annotations

import pytest


class TestRequestRelations:
    """fits_in, overlaps and same_shape."""

    @pytest.mark.parametrize(
        "weight, capacity, expected",
        [(2, 2, True), (1, 2, True), (3, 2, False), (0, 0, True)],
    )
    def test_fits_in(self, weight, capacity, expected):
        from assignment_odometer.types import Request, Unit

        assert Request("R", weight, 0, 1).fits_in(Unit("U", capacity)) is expected

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ((2, 4), (3, 5), True),
            ((0, 1), (1, 2), True),   # touching boundaries count
            ((0, 1), (2, 3), False),
            ((0, 10), (3, 4), True),  # containment
            ((5, 6), (0, 1), False),
        ],
    )
    def test_overlaps_is_symmetric(self, a, b, expected):
        from assignment_odometer.types import Request

        first = Request("A", 1, *a)
        second = Request("B", 1, *b)
        assert first.overlaps(second) is expected
        assert second.overlaps(first) is expected

    def test_same_shape_ignores_id(self):
        from assignment_odometer.types import Request

        assert Request("Y", 2, 2, 5).same_shape(Request("Z", 2, 2, 5))
        assert not Request("Y", 2, 2, 5).same_shape(Request("Z", 3, 2, 5))
        assert not Request("Y", 2, 2, 5).same_shape(Request("Z", 2, 2, 6))

    def test_interchangeable_units(self):
        from assignment_odometer.types import Unit

        assert Unit("A", 3).interchangeable_with(Unit("B", 3))
        assert not Unit("A", 3).interchangeable_with(Unit("B", 4))


class TestGlobalOrder:
    """Explicit comparators: units by (capacity, id), requests by (weight, start, end, id)."""

    def test_units_group_by_capacity(self):
        from assignment_odometer.types import Unit, unit_order_key

        units = [Unit("Z", 2), Unit("A", 3), Unit("B", 2), Unit("C", 3)]
        ordered = sorted(units, key=unit_order_key)
        assert [u.unit_id for u in ordered] == ["B", "Z", "A", "C"]

    def test_requests_weight_first(self):
        from assignment_odometer.types import Request, request_order_key

        requests = [
            Request("a", 3, 0, 1),
            Request("b", 2, 5, 6),
            Request("c", 2, 0, 9),
            Request("d", 2, 0, 4),
            Request("e", 2, 0, 4),
        ]
        ordered = sorted(requests, key=request_order_key)
        assert [r.request_id for r in ordered] == ["d", "e", "c", "b", "a"]


class TestFrozen:
    def test_unit_is_immutable(self):
        from assignment_odometer.types import Unit

        unit = Unit("A", 2)
        with pytest.raises(AttributeError):
            unit.capacity = 5  # type: ignore[misc]

    def test_request_is_immutable(self):
        from assignment_odometer.types import Request

        request = Request("Y", 2, 0, 1)
        with pytest.raises(AttributeError):
            request.weight = 5  # type: ignore[misc]


class TestEngineStateError:
    def test_attributes_and_message(self):
        from assignment_odometer.types import EngineStateError

        err = EngineStateError("step", "initialize() has not been called")
        assert err.operation == "step"
        assert err.reason == "initialize() has not been called"
        assert isinstance(err, RuntimeError)
        assert "step" in str(err)
