# cost_model.py
import logging
import sys
from typing import Any

from shardplan.models import PartitionStore
from shardplan.plans import Plan

logger = logging.getLogger(__name__)

# Cost of a plan that must never be chosen.
MAX_COST = sys.maxsize


def cost_scan(rows):
    """Cost for scanning a table"""
    return rows

def cost_filter(rows):
    """Cost for filtering rows"""
    return rows
def cost_nested_loop(outer_rows, inner_rows):
    """
    Simple nested-loop cost model:
    - scan outer once
    - for each outer row, scan all inner rows
    => cost ~ outer_rows + outer_rows * inner_rows
    """
    return outer_rows + outer_rows * inner_rows


def estimate_cost(plan: Any, store: PartitionStore) -> int:
    """
    Estimate the cost of a plan over the whole store.

    plan1 scans every user, plan2 scans every order. The estimate is the
    total row count of the scanned table across all nodes. Unrecognised
    plans cost MAX_COST so they always lose the comparison.
    """
    parsed = Plan.parse(plan)
    if parsed is Plan.PLAN1:
        return sum(cost_scan(len(node.users)) for node in store)
    if parsed is Plan.PLAN2:
        return sum(cost_scan(len(node.orders)) for node in store)

    logger.debug("No cost model for plan %r, returning MAX_COST", plan)
    return MAX_COST
