"""Shared test fixtures and data loading for assignment-odometer.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Scenario files: data/fixtures/scenarios/{name}.json
Problem files:  data/fixtures/problems/{name}.json
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
PROBLEMS_DIR = FIXTURES_DIR / "problems"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def problem_path(name: str) -> Path:
    """Path of a problem file in data/fixtures/problems/."""
    return PROBLEMS_DIR / f"{name}.json"


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
def make_units(spec: list[dict]):
    """Build Units from [{"id": ..., "capacity": ...}, ...]."""
    from assignment_odometer.types import Unit

    return [Unit(u["id"], u["capacity"]) for u in spec]


def make_requests(spec: list[dict]):
    """Build Requests from [{"id", "weight", "start", "end"}, ...]."""
    from assignment_odometer.types import Request

    return [Request(r["id"], r["weight"], r["start"], r["end"]) for r in spec]


def make_engine(spec: dict, initialize: bool = True):
    """Build an Enumerator from a scenario spec with units and requests."""
    from assignment_odometer.enumerator import Enumerator

    engine = Enumerator(make_requests(spec["requests"]), make_units(spec["units"]))
    if initialize:
        engine.initialize()
    return engine


def as_mapping(combination) -> dict[str, str | None]:
    """Combination → {request_id: unit_id or None}, for comparing to JSON."""
    return {
        a.request.request_id: (a.unit.unit_id if a.unit is not None else None)
        for a in combination
    }


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def twin_units():
    """Three interchangeable units of capacity 2."""
    from assignment_odometer.types import Unit

    return [Unit("A", 2), Unit("B", 2), Unit("C", 2)]


@pytest.fixture
def overlapping_pair():
    """Y [2,4) and Z [3,5), both weight 2."""
    from assignment_odometer.types import Request

    return [Request("Y", 2, 2, 4), Request("Z", 2, 3, 5)]
