from typing import Any, List, Sequence

from shardplan.models import ResultRow


def format_plan_line(plan: Any, cost: int) -> str:
    return f"Best Plan: {plan}, Estimated Cost: {cost}"


def format_row(row: ResultRow) -> str:
    """Render a row as ``key: value, `` pairs in sorted key order"""
    return "".join(f"{key}: {row[key]}, " for key in sorted(row))


def format_rows(rows: Sequence[ResultRow], limit: int = 10) -> str:
    """Render a preview of at most ``limit`` rows under a header line"""
    shown = list(rows[: max(limit, 0)])
    lines: List[str] = [f"Query Result (First {limit} Rows):"]
    lines.extend(format_row(row) for row in shown)
    return "\n".join(lines)
