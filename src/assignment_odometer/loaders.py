"""Data loading utilities for problem definitions and fixtures."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from assignment_odometer.schema import validate_requests, validate_units
from assignment_odometer.types import Request, Unit


@dataclass(frozen=True)
class Problem:
    """A named set of requests and units, in file order."""

    problem_id: str
    requests: tuple[Request, ...]
    units: tuple[Unit, ...]


def parse_problem(data: dict, default_id: str = "problem") -> Problem:
    """Build a Problem from an already-decoded mapping.

    Raises ValueError listing every validation failure.
    """
    units_raw = data.get("units", [])
    requests_raw = data.get("requests", [])
    problem_id = data.get("id", default_id)

    errors = validate_units(units_raw)
    errors.extend(validate_requests(requests_raw))
    if errors:
        raise ValueError(
            f"Validation errors in {problem_id}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    units = tuple(Unit(u["id"], u["capacity"]) for u in units_raw)
    requests = tuple(
        Request(r["id"], r["weight"], r["start"], r["end"]) for r in requests_raw
    )
    return Problem(problem_id, requests, units)


def load_problem_json(path: str | Path) -> Problem:
    """Load a Problem from a JSON fixture file.

    The JSON file must have the format:
    {
        "id": "...",
        "units": [{"id": "A", "capacity": 2}, ...],
        "requests": [{"id": "Y", "weight": 2, "start": 2, "end": 4}, ...]
    }

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    return parse_problem(data, default_id=path.stem)
