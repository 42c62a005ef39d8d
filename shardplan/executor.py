"""
Plan execution over partitioned data.

Each plan is a per-node strategy. Nodes are processed in store order and
rows never pair a user with an order from a different node.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List

from shardplan.models import Node, PartitionStore, ResultRow, make_row
from shardplan.plans import Plan

logger = logging.getLogger(__name__)


class JoinStrategy(ABC):
    """Base strategy for answering the users/orders join on one node"""

    name = "base"

    @abstractmethod
    def execute_node(self, node: Node) -> Iterator[ResultRow]:
        """Yield the rows produced by a single node"""
        pass

    def execute(self, store: PartitionStore) -> List[ResultRow]:
        result: List[ResultRow] = []
        for node_idx, node in enumerate(store):
            before = len(result)
            result.extend(self.execute_node(node))
            logger.debug(
                "Node %d produced %d rows with %s", node_idx, len(result) - before, self.name
            )
        return result


class NestedLoopJoin(JoinStrategy):
    """
    plan1: outer loop over users, inner loop over orders.

    Row order is node order, then user order, then order order.
    """

    name = "nested_loop_join"

    def execute_node(self, node: Node) -> Iterator[ResultRow]:
        for user in node.users:
            for order in node.orders:
                if user.user_id == order.user_id:
                    yield make_row(user, order)


class FilteredNestedLoopJoin(JoinStrategy):
    """
    plan2: outer loop over orders with quantity > 1, inner loop over users.

    The quantity filter runs before the join probe.
    """

    name = "filtered_nested_loop_join"
    min_quantity = 1

    def execute_node(self, node: Node) -> Iterator[ResultRow]:
        for order in node.orders:
            if order.quantity <= self.min_quantity:
                continue
            for user in node.users:
                if user.user_id == order.user_id:
                    yield make_row(user, order)


STRATEGIES: Dict[Plan, JoinStrategy] = {
    Plan.PLAN1: NestedLoopJoin(),
    Plan.PLAN2: FilteredNestedLoopJoin(),
}


def execute(plan: Any, store: PartitionStore) -> List[ResultRow]:
    """Run a plan against the store; unknown plans produce no rows"""
    parsed = Plan.parse(plan)
    strategy = STRATEGIES.get(parsed)
    if strategy is None:
        logger.warning("Unknown plan %r, returning empty result", plan)
        return []

    logger.info("Executing %s with %s over %d nodes", parsed, strategy.name, len(store))
    result = strategy.execute(store)
    logger.info("Done executing %s: %d rows", parsed, len(result))
    return result
