"""
Seeded random data generation for partitioned stores
"""

import logging
from typing import Optional

import numpy as np

from shardplan.models import Order, PartitionStore, User

logger = logging.getLogger(__name__)

FIRST_NAMES = ["Alice", "Bob", "Charlie", "David", "Eve", "Frank", "Grace", "Hank", "Ivy", "Jack"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez"]
PRODUCTS = ["Laptop", "Phone", "Tablet", "Monitor", "Keyboard", "Mouse", "Printer", "Headphones", "Camera", "Speaker"]

MIN_AGE = 18
MAX_AGE = 67
MIN_QUANTITY = 1
MAX_QUANTITY = 5


def random_name(rng: np.random.Generator) -> str:
    return f"{FIRST_NAMES[rng.integers(len(FIRST_NAMES))]} {LAST_NAMES[rng.integers(len(LAST_NAMES))]}"


def random_product(rng: np.random.Generator) -> str:
    return PRODUCTS[rng.integers(len(PRODUCTS))]


def generate_store(
    num_nodes: int,
    num_users: int,
    num_orders: int,
    seed: Optional[int] = None,
) -> PartitionStore:
    """
    Build a store of random users and orders.

    Record ``i`` (1-based) of each table lands on node ``i % num_nodes``.
    Orders reference a uniformly drawn user id, which may live on another
    node.

    Args:
        num_nodes: Number of partitions, at least 1
        num_users: Number of users to create
        num_orders: Number of orders to create
        seed: RNG seed; the same seed always yields the same store

    Raises:
        ValueError: If the sizes cannot produce a well-formed store
    """
    if num_nodes < 1:
        raise ValueError("num_nodes must be at least 1")
    if num_users < 0 or num_orders < 0:
        raise ValueError("num_users and num_orders must be non-negative")
    if num_orders > 0 and num_users == 0:
        raise ValueError("Cannot generate orders without users to reference")

    rng = np.random.default_rng(seed)
    store = PartitionStore.empty(num_nodes)

    for i in range(1, num_users + 1):
        user = User(i, random_name(rng), int(rng.integers(MIN_AGE, MAX_AGE + 1)))
        store[i % num_nodes].users.append(user)

    for i in range(1, num_orders + 1):
        order = Order(
            i,
            int(rng.integers(1, num_users + 1)),
            random_product(rng),
            int(rng.integers(MIN_QUANTITY, MAX_QUANTITY + 1)),
        )
        store[i % num_nodes].orders.append(order)

    logger.info(
        "Generated %d users and %d orders across %d nodes (seed=%s)",
        num_users,
        num_orders,
        num_nodes,
        seed,
    )
    return store
