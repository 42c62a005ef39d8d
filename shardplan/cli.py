"""
Command-line entry point: generate a partitioned dataset, pick a plan and run it
"""

import argparse
import logging
import sys
from typing import List, Optional

from shardplan.config import Settings
from shardplan.datagen import generate_store
from shardplan.executor import execute
from shardplan.formatting import format_plan_line, format_rows
from shardplan.optimizer import QueryOptimizer, explain_plan, format_explain_output
from shardplan.plans import Plan

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "SELECT * FROM users JOIN orders ON users.user_id = orders.user_id"


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shardplan",
        description="Estimate, select and execute a join plan over partitioned data.",
    )
    parser.add_argument("--nodes", type=int, default=settings.num_nodes)
    parser.add_argument("--users", type=int, default=settings.num_users)
    parser.add_argument("--orders", type=int, default=settings.num_orders)
    parser.add_argument("--seed", type=int, default=settings.seed)
    parser.add_argument("--limit", type=int, default=settings.preview_rows,
                        help="Number of result rows to print")
    parser.add_argument("--plan", type=str, default=None,
                        help="Execute this plan id instead of the selected one")
    parser.add_argument("--explain", action="store_true",
                        help="Print the EXPLAIN report for the plan decision")
    parser.add_argument("--plot", type=str, default=None, metavar="FILE",
                        help="Save a chart of node sizes and plan costs")
    parser.add_argument("--query", type=str, default=DEFAULT_QUERY)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", e)
        return 2

    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    try:
        store = generate_store(args.nodes, args.users, args.orders, seed=args.seed)
        optimizer = QueryOptimizer(store)

        if args.plan is None:
            plan, cost = optimizer.optimize_query(args.query)
        else:
            plan = Plan.parse(args.plan)
            cost = optimizer.estimate_cost(plan)
            logger.info("Using requested plan %r -> %s", args.plan, plan)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    print(format_plan_line(plan, cost))

    if args.explain:
        print(format_explain_output(explain_plan(store)))

    if args.plot:
        from shardplan.visualize import plot_store

        plot_store(store, args.plot)

    result = execute(plan, store)
    print(format_rows(result, args.limit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
