from typing import Optional

import matplotlib.pyplot as plt

from shardplan.cost_model import estimate_cost
from shardplan.models import PartitionStore
from shardplan.plans import KNOWN_PLANS


def plot_store(store: PartitionStore, output_file: Optional[str] = None):
    """Bar charts of per-node row counts and of the estimated plan costs."""
    node_labels = [f"node {idx}" for idx in range(len(store))]
    user_counts = [len(node.users) for node in store]
    order_counts = [len(node.orders) for node in store]

    fig, (ax_nodes, ax_costs) = plt.subplots(1, 2, figsize=(12, 5))

    positions = range(len(node_labels))
    width = 0.4
    ax_nodes.bar([p - width / 2 for p in positions], user_counts, width, label="users", color="#4CAF50")
    ax_nodes.bar([p + width / 2 for p in positions], order_counts, width, label="orders", color="#FF9800")
    ax_nodes.set_xticks(list(positions))
    ax_nodes.set_xticklabels(node_labels)
    ax_nodes.set_ylabel("Rows")
    ax_nodes.set_title("Rows per Node")
    ax_nodes.legend()
    ax_nodes.grid(axis="y", linestyle="--", alpha=0.3)

    plan_labels = [plan.value for plan in KNOWN_PLANS]
    costs = [estimate_cost(plan, store) for plan in KNOWN_PLANS]
    bars = ax_costs.bar(plan_labels, costs, color=["#4CAF50", "#FF9800"])
    ax_costs.set_ylabel("Estimated Cost")
    ax_costs.set_title("Plan Cost Estimates")
    for bar in bars:
        yval = bar.get_height()
        ax_costs.text(bar.get_x() + bar.get_width() / 2, yval, f"{yval:,.0f}",
                      va="bottom", ha="center", fontweight="bold")
    ax_costs.grid(axis="y", linestyle="--", alpha=0.3)

    fig.tight_layout()

    if output_file:
        fig.savefig(output_file)
        print(f"Graph saved to {output_file}")
    else:
        plt.show()
    return fig
