"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations


def show_compatibility(engine: "Enumerator") -> str:  # noqa: F821
    """Print each request's compatibility list with its shortcut table.

    One row per request in global order. Each candidate unit is shown as
    `id(capacity)`; a unit followed by `>k` jumps to position k when
    advanced, `>-` jumps to unassigned. Returns the string and also prints
    to stdout.
    """
    lines: list[str] = []
    lines.append(f"{'request':>12s}  {'w':>3s}  {'window':>9s}  candidates")

    for r, request in enumerate(engine.requests):
        window = f"[{request.start},{request.end})"
        cells: list[str] = []
        for pos, u in enumerate(engine.compatibility[r]):
            unit = engine.units[u]
            cell = f"{unit.unit_id}({unit.capacity})"
            shortcut = engine.shortcuts[r][pos]
            if shortcut is not None:
                cell += ">-" if shortcut.target is None else f">{shortcut.target}"
            cells.append(cell)
        row = " ".join(cells) if cells else "(none)"
        lines.append(
            f"{request.request_id:>12s}  {request.weight:>3d}  {window:>9s}  {row}"
        )

    result = "\n".join(lines)
    print(result)
    return result


def show_combination(
    combination: "Combination",  # noqa: F821
    units: "tuple[Unit, ...]",  # noqa: F821
) -> str:
    """Print ASCII timeline of one combination, one row per unit.

    Legend: '.' = free, 'A'-'Z' = held by a request (one letter per
    request), '*' = two requests on the same slot (should never appear).
    Each char is one time unit, from the earliest start to the latest end.
    Returns the string and also prints to stdout.
    """
    lines: list[str] = []
    label_chars = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    if combination:
        begin = min(a.request.start for a in combination)
        end = max(a.request.end for a in combination)
    else:
        begin = end = 0

    labels: dict[str, str] = {}
    for a in combination:
        labels[a.request.request_id] = label_chars[len(labels) % len(label_chars)]

    for unit in units:
        row = list("." * (end - begin))
        for a in combination:
            if a.unit is None or a.unit.unit_id != unit.unit_id:
                continue
            mark = labels[a.request.request_id]
            for t in range(a.request.start, a.request.end):
                row[t - begin] = mark if row[t - begin] == "." else "*"
        lines.append(f"{unit.unit_id:>8s}({unit.capacity:>3d})  {''.join(row)}")

    unassigned = [a.request.request_id for a in combination if a.unit is None]
    if unassigned:
        lines.append(f"  unassigned: {', '.join(unassigned)}")

    if labels:
        legend_parts = [f"{v}={k}" for k, v in labels.items()]
        lines.append(f"\nLegend: . = free, {', '.join(legend_parts)}")

    result = "\n".join(lines)
    print(result)
    return result
