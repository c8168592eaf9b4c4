"""Input validation for unit and request definitions."""

from __future__ import annotations


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_units(units: list[dict]) -> list[str]:
    """Validate unit entries. Returns list of error messages (empty = valid).

    Checks:
    - Each entry has a string id and an integer capacity
    - Capacities are non-negative
    - Ids are unique
    """
    errors: list[str] = []
    seen: set[str] = set()

    for i, entry in enumerate(units):
        if not isinstance(entry, dict):
            errors.append(f"Unit {i}: expected object, got {entry!r}")
            continue

        missing = [k for k in ("id", "capacity") if k not in entry]
        if missing:
            errors.append(f"Unit {i}: missing {', '.join(map(repr, missing))}")
            continue

        unit_id = entry["id"]
        if not isinstance(unit_id, str) or not unit_id:
            errors.append(f"Unit {i}: 'id' must be a non-empty string")
        elif unit_id in seen:
            errors.append(f"Unit {i}: duplicate id {unit_id!r}")
        else:
            seen.add(unit_id)

        capacity = entry["capacity"]
        if not _is_int(capacity):
            errors.append(f"Unit {i}: 'capacity' must be an integer, got {capacity!r}")
        elif capacity < 0:
            errors.append(f"Unit {i}: negative capacity {capacity}")

    return errors


def validate_requests(requests: list[dict]) -> list[str]:
    """Validate request entries. Returns list of error messages.

    Checks:
    - Each entry has id, weight, start and end
    - Weight is a non-negative integer
    - The window [start, end) is non-empty
    - Ids are unique
    """
    errors: list[str] = []
    seen: set[str] = set()

    for i, entry in enumerate(requests):
        if not isinstance(entry, dict):
            errors.append(f"Request {i}: expected object, got {entry!r}")
            continue

        missing = [k for k in ("id", "weight", "start", "end") if k not in entry]
        if missing:
            errors.append(f"Request {i}: missing {', '.join(map(repr, missing))}")
            continue

        request_id = entry["id"]
        if not isinstance(request_id, str) or not request_id:
            errors.append(f"Request {i}: 'id' must be a non-empty string")
        elif request_id in seen:
            errors.append(f"Request {i}: duplicate id {request_id!r}")
        else:
            seen.add(request_id)

        weight = entry["weight"]
        if not _is_int(weight):
            errors.append(f"Request {i}: 'weight' must be an integer, got {weight!r}")
        elif weight < 0:
            errors.append(f"Request {i}: negative weight {weight}")

        start, end = entry["start"], entry["end"]
        if not _is_int(start) or not _is_int(end):
            errors.append(
                f"Request {i}: 'start' and 'end' must be integers, "
                f"got [{start!r}, {end!r})"
            )
        elif end <= start:
            errors.append(f"Request {i}: empty window [{start}, {end})")

    return errors
