"""
Integration tests: select a plan, then execute it on the same store
"""

from shardplan import execute, select_plan
from shardplan.plans import Plan


class TestIntegration:
    """Full optimize-then-execute flow on the hand-built stores"""

    def test_single_user_store(self, single_user_store):
        plan, cost = select_plan(single_user_store)
        assert (plan, cost) == (Plan.PLAN1, 1)

        rows = execute(plan, single_user_store)
        assert [row["order_id"] for row in rows] == ["1", "2"]
        assert [row["order_id"] for row in execute(Plan.PLAN2, single_user_store)] == ["2"]

    def test_empty_node_store(self, empty_node_store):
        plan, cost = select_plan(empty_node_store)
        assert (plan, cost) == (Plan.PLAN2, 0)
        assert execute(plan, empty_node_store) == []

    def test_split_store(self, split_store):
        plan, _ = select_plan(split_store)
        # one user and one order: tie, plan2 chosen
        assert plan is Plan.PLAN2
        assert execute(plan, split_store) == []
        assert execute(Plan.PLAN1, split_store) == []

    def test_random_store(self, random_store):
        plan, cost = select_plan(random_store)
        rows = execute(plan, random_store)

        assert (plan, cost) == (Plan.PLAN1, 100)
        assert rows == execute(plan, random_store)
