"""assignment-odometer: Canonical enumeration of request-to-unit assignments."""

from assignment_odometer.compatibility import build_compatibility, build_cursors
from assignment_odometer.cursor import BoundedCursor
from assignment_odometer.enumerator import Enumerator, enumerate_combinations
from assignment_odometer.loaders import Problem, load_problem_json, parse_problem
from assignment_odometer.relations import RelationIndex
from assignment_odometer.shortcuts import Shortcut, build_shortcut_table
from assignment_odometer.types import (
    Assignment,
    Combination,
    EngineStateError,
    Request,
    Unit,
    request_order_key,
    unit_order_key,
)

__all__ = [
    "Assignment",
    "BoundedCursor",
    "Combination",
    "EngineStateError",
    "Enumerator",
    "Problem",
    "RelationIndex",
    "Request",
    "Shortcut",
    "Unit",
    "build_compatibility",
    "build_cursors",
    "build_shortcut_table",
    "enumerate_combinations",
    "load_problem_json",
    "parse_problem",
    "request_order_key",
    "unit_order_key",
]
