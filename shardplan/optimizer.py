"""
Cost-based plan selection and EXPLAIN reporting
"""

import logging
from typing import Any, Dict, List, Tuple

from shardplan.cost_model import cost_filter, cost_nested_loop, estimate_cost
from shardplan.executor import FilteredNestedLoopJoin
from shardplan.models import PartitionStore
from shardplan.plans import KNOWN_PLANS, Plan
from shardplan.stats import collect_stats

logger = logging.getLogger(__name__)

# Shared constants for display alignment.
PLAN_DISPLAY_WIDTH = 10


def select_plan(store: PartitionStore) -> Tuple[Plan, int]:
    """
    Pick the cheaper of plan1 and plan2.

    plan1 wins only when it is strictly cheaper; equal costs go to plan2.
    """
    plan1_cost = estimate_cost(Plan.PLAN1, store)
    plan2_cost = estimate_cost(Plan.PLAN2, store)
    logger.debug("Plan costs: plan1=%d plan2=%d", plan1_cost, plan2_cost)

    if plan1_cost < plan2_cost:
        return Plan.PLAN1, plan1_cost
    return Plan.PLAN2, plan2_cost


class QueryOptimizer:
    """
    Selects an execution plan for the users/orders join over a fixed store
    """

    def __init__(self, store: PartitionStore) -> None:
        self.store = store

    def estimate_cost(self, plan: Any) -> int:
        """Estimate the cost of a plan against this optimizer's store"""
        return estimate_cost(plan, self.store)

    def optimize_query(self, query: str) -> Tuple[Plan, int]:
        """
        Choose the best plan for a query.

        The query text is not parsed; both plans answer the same join.

        Raises:
            ValueError: If query is not a non-empty string
        """
        if not query or not isinstance(query, str):
            raise ValueError("Query must be a non-empty string")

        query = query.strip()
        if not query:
            raise ValueError("Query cannot be empty")

        plan, cost = select_plan(self.store)
        logger.info("Optimized query %s... -> %s (cost %d)", query[:50], plan, cost)
        return plan, cost


def _join_work(store: PartitionStore) -> Dict[str, int]:
    """Nested-loop comparisons each plan performs, for reporting only"""
    min_quantity = FilteredNestedLoopJoin.min_quantity
    plan1_work = 0
    plan2_work = 0
    for node in store:
        plan1_work += cost_nested_loop(len(node.users), len(node.orders))
        qualifying = sum(1 for order in node.orders if order.quantity > min_quantity)
        plan2_work += cost_filter(len(node.orders)) + cost_nested_loop(qualifying, len(node.users))
    return {Plan.PLAN1.value: plan1_work, Plan.PLAN2.value: plan2_work}


def explain_plan(store: PartitionStore) -> Dict[str, Any]:
    """Generate an EXPLAIN report of the plan decision for a store"""
    statistics: List[Dict[str, int]] = []
    for node_idx, node_stats in enumerate(collect_stats(store)):
        statistics.append(
            {
                "node": node_idx,
                "users": node_stats["users"].row_count,
                "orders": node_stats["orders"].row_count,
                "distinct_order_users": node_stats["orders"].distinct_count("user_id"),
            }
        )

    costs = {plan.value: estimate_cost(plan, store) for plan in KNOWN_PLANS}
    selected_plan, selected_cost = select_plan(store)

    return {
        "nodes": len(store),
        "statistics": statistics,
        "costs": costs,
        "selected_plan": selected_plan.value,
        "selected_cost": selected_cost,
        "tie_break": costs[Plan.PLAN1.value] == costs[Plan.PLAN2.value],
        "join_work": _join_work(store),
    }


def format_explain_output(explain_result: Dict[str, Any]) -> str:
    """Format EXPLAIN result as readable table"""

    def truncate(value: Any, max_len: int) -> str:
        s = str(value) if value is not None else "N/A"
        if len(s) > max_len:
            return s[: max_len - 3] + "..."
        return s

    lines = []
    lines.append("=" * 70)
    lines.append("QUERY EXECUTION PLAN")
    lines.append("=" * 70)
    lines.append(f"Nodes: {explain_result.get('nodes', 0)}")
    lines.append("")

    lines.append("┌─ PARTITIONS ──────────────────────────────────────────────────────┐")
    for s in explain_result.get("statistics", []):
        lines.append(
            f"│ Node {s.get('node', 0):<4} Users: {s.get('users', 0):<8} "
            f"Orders: {s.get('orders', 0):<8} Order users: {s.get('distinct_order_users', 0):<8}│"
        )
    lines.append("└───────────────────────────────────────────────────────────────────┘")
    lines.append("")

    costs = explain_result.get("costs", {})
    work = explain_result.get("join_work", {})
    lines.append("┌─ COST ESTIMATES ──────────────────────────────────────────────────┐")
    for plan in KNOWN_PLANS:
        lines.append(
            f"│ {truncate(plan.value, PLAN_DISPLAY_WIDTH):<{PLAN_DISPLAY_WIDTH}} "
            f"Cost: {costs.get(plan.value, 'N/A')!s:<12} "
            f"Join work: {work.get(plan.value, 'N/A')!s:<12}             │"
        )
    lines.append("└───────────────────────────────────────────────────────────────────┘")
    lines.append("")

    lines.append("┌─ SELECTION ───────────────────────────────────────────────────────┐")
    lines.append(
        f"│ Plan: {truncate(explain_result.get('selected_plan', 'N/A'), PLAN_DISPLAY_WIDTH):<{PLAN_DISPLAY_WIDTH}} "
        f"Cost: {explain_result.get('selected_cost', 'N/A')!s:<12} "
        f"Tie-break: {str(explain_result.get('tie_break', False)):<6}             │"
    )
    lines.append("└───────────────────────────────────────────────────────────────────┘")

    return "\n".join(lines)
