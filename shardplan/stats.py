from dataclasses import asdict
from typing import Any, Dict, List, Sequence

from shardplan.models import PartitionStore


class TableStats:
    def __init__(self):
        self.row_count = 0
        self.distinct = {}  # column_name -> set of distinct values

    def distinct_count(self, column: str) -> int:
        return len(self.distinct.get(column, ()))


def analyze(records: Sequence[Any]) -> TableStats:
    stats = TableStats()
    for record in records:
        stats.row_count += 1
        for col, val in asdict(record).items():
            stats.distinct.setdefault(col, set()).add(val)
    return stats


def collect_stats(store: PartitionStore) -> List[Dict[str, TableStats]]:
    """Per-node statistics for the users and orders tables"""
    return [
        {"users": analyze(node.users), "orders": analyze(node.orders)}
        for node in store
    ]
