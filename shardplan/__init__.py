import logging

from shardplan.cost_model import MAX_COST, estimate_cost
from shardplan.datagen import generate_store
from shardplan.executor import execute
from shardplan.models import RESULT_FIELDS, Node, Order, PartitionStore, ResultRow, User
from shardplan.optimizer import QueryOptimizer, explain_plan, format_explain_output, select_plan
from shardplan.plans import KNOWN_PLANS, Plan

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # data model
    "Node",
    "Order",
    "PartitionStore",
    "RESULT_FIELDS",
    "ResultRow",
    "User",
    # plans
    "KNOWN_PLANS",
    "Plan",
    # core
    "MAX_COST",
    "estimate_cost",
    "execute",
    "select_plan",
    "QueryOptimizer",
    # reporting
    "explain_plan",
    "format_explain_output",
    # data generation
    "generate_store",
]
