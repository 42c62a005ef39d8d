#!/usr/bin/env python3
"""
Demo script for cost-based plan selection
Shows how the selected plan changes as the users/orders balance shifts
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shardplan import execute, explain_plan, format_explain_output, generate_store, select_plan
from shardplan.formatting import format_rows


def demo_plan_selection():
    """Run the optimizer over stores with different table sizes"""

    print("shardplan Plan Selection Demo")
    print("=" * 60)

    shapes = [
        (100, 200, "more orders than users"),
        (200, 100, "more users than orders"),
        (150, 150, "equal sizes (tie)"),
    ]

    for num_users, num_orders, label in shapes:
        store = generate_store(num_nodes=4, num_users=num_users, num_orders=num_orders, seed=7)
        plan, cost = select_plan(store)
        rows = execute(plan, store)
        print(f"\n{label}: {store}")
        print(f"   Selected {plan} (cost {cost}), {len(rows)} rows")

    print("\nEXPLAIN for the first store:")
    store = generate_store(num_nodes=4, num_users=100, num_orders=200, seed=7)
    print(format_explain_output(explain_plan(store)))

    plan, _ = select_plan(store)
    print()
    print(format_rows(execute(plan, store), limit=5))


if __name__ == "__main__":
    try:
        demo_plan_selection()
    except KeyboardInterrupt:
        print("\n\nWarning: Demo interrupted by user")
    except Exception as e:
        print(f"\nError: Demo failed: {e}")
        sys.exit(1)
