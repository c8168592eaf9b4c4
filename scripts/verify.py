#!/usr/bin/env python
"""Visual verification report for assignment-odometer.

Run:  uv run python scripts/verify.py [--verbose]

Produces a formatted report showing:
  1. Each enumeration scenario: units, requests, compatibility/shortcut view
  2. Every accepted combination as an input/output table
  3. Expected vs actual counts
  4. Problem files: loaded, enumerated, first combination drawn as a timeline
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"
PROBLEMS = FIXTURES / "problems"

sys.path.insert(0, str(ROOT / "src"))

from assignment_odometer.debug import show_combination, show_compatibility
from assignment_odometer.enumerator import Enumerator
from assignment_odometer.loaders import load_problem_json, parse_problem


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _unit_label(unit) -> str:
    return "-" if unit is None else unit.unit_id


# ---------------------------------------------------------------------------
# Section 1: Enumeration scenarios
# ---------------------------------------------------------------------------
def section_scenarios() -> int:
    banner("ENUMERATION SCENARIOS")
    failures = 0

    for spec in _load(SCENARIOS / "enumerate.json")["scenarios"]:
        heading(f"{spec['id']}: {spec['notes']}")
        problem = parse_problem(spec, default_id=spec["id"])
        engine = Enumerator(problem.requests, problem.units)
        engine.initialize()

        print()
        show_compatibility(engine)
        print()

        combos = engine.enumerate_all()
        headers = ["#"] + [r.request_id for r in engine.requests]
        rows = [
            [str(n)] + [_unit_label(a.unit) for a in combo]
            for n, combo in enumerate(combos, start=1)
        ]
        if rows:
            table(headers, rows)
        else:
            print("    (no combinations)")

        ok = len(combos) == spec["expected_count"]
        failures += not ok
        status = "PASS" if ok else "FAIL"
        print(f"\n    expected {spec['expected_count']}, got {len(combos)}  [{status}]")

    return failures


# ---------------------------------------------------------------------------
# Section 2: Problem files
# ---------------------------------------------------------------------------
def section_problems():
    banner("PROBLEM FILES")

    for path in sorted(PROBLEMS.glob("*.json")):
        heading(path.name)
        try:
            problem = load_problem_json(path)
        except ValueError as e:
            print(f"    rejected: {e}")
            continue

        engine = Enumerator(problem.requests, problem.units)
        engine.initialize()
        combos = engine.enumerate_all()
        print(f"    {len(combos)} combination(s) "
              f"out of {engine.search_space_size - 1} odometer states")
        if combos:
            print()
            show_combination(combos[-1], engine.units)


def main() -> int:
    if "--verbose" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    failures = section_scenarios()
    section_problems()

    banner("SUMMARY")
    print(f"\n    scenario failures: {failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
