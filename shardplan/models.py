"""
Partitioned in-memory data model: users and orders spread over nodes
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence

# Field order of a result row; every row carries all of them.
RESULT_FIELDS = ("user_id", "name", "age", "order_id", "product", "quantity")

ResultRow = Dict[str, str]


@dataclass(frozen=True)
class User:
    user_id: int
    name: str
    age: int


@dataclass(frozen=True)
class Order:
    order_id: int
    user_id: int
    product: str
    quantity: int


@dataclass
class Node:
    """A single partition holding its own users and orders"""

    users: List[User] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)


class PartitionStore:
    """
    Ordered sequence of nodes.

    The store is read-only to the optimizer and executor; only the data
    provider appends to node collections while building it.
    """

    def __init__(self, nodes: Sequence[Node] = ()) -> None:
        self.nodes: List[Node] = list(nodes)

    @classmethod
    def empty(cls, num_nodes: int) -> "PartitionStore":
        """Create a store with ``num_nodes`` empty nodes"""
        return cls([Node() for _ in range(num_nodes)])

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def total_users(self) -> int:
        return sum(len(node.users) for node in self.nodes)

    def total_orders(self) -> int:
        return sum(len(node.orders) for node in self.nodes)

    def __repr__(self) -> str:
        return (
            f"PartitionStore(nodes={len(self.nodes)}, "
            f"users={self.total_users()}, orders={self.total_orders()})"
        )


def make_row(user: User, order: Order) -> ResultRow:
    """Render a joined user/order pair as a text row"""
    return {
        "user_id": str(user.user_id),
        "name": user.name,
        "age": str(user.age),
        "order_id": str(order.order_id),
        "product": order.product,
        "quantity": str(order.quantity),
    }
