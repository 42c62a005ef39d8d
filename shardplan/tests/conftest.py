"""
Shared fixtures: the small hand-built stores used across the test suite
"""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from shardplan.datagen import generate_store
from shardplan.models import Node, Order, PartitionStore, User


@pytest.fixture
def single_user_store():
    """One node, one user, two orders for that user (quantities 1 and 3)"""
    return PartitionStore([
        Node(
            users=[User(1, "Ann", 30)],
            orders=[Order(1, 1, "Pen", 1), Order(2, 1, "Pen", 3)],
        )
    ])


@pytest.fixture
def empty_node_store():
    return PartitionStore([Node()])


@pytest.fixture
def split_store():
    """User 1 on node 0, its only order on node 1"""
    return PartitionStore([
        Node(users=[User(1, "Ann", 30)]),
        Node(orders=[Order(1, 1, "Pen", 2)]),
    ])


@pytest.fixture
def random_store():
    return generate_store(num_nodes=4, num_users=100, num_orders=200, seed=42)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SHARDPLAN_* variables so settings fall back to defaults"""
    for key in list(os.environ):
        if key.startswith("SHARDPLAN_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
