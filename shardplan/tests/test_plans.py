"""
Unit tests for plans.py and formatting.py
"""

import pytest

from shardplan.formatting import format_plan_line, format_row, format_rows
from shardplan.models import Order, User, make_row
from shardplan.plans import KNOWN_PLANS, Plan


class TestPlan:
    """Test suite for Plan parsing"""

    def test_parse_known_ids(self):
        assert Plan.parse("plan1") is Plan.PLAN1
        assert Plan.parse("plan2") is Plan.PLAN2

    def test_parse_passes_members_through(self):
        for plan in Plan:
            assert Plan.parse(plan) is plan

    @pytest.mark.parametrize("value", ["plan3", "Plan1", " plan1", "unknown", "", None, 2])
    def test_parse_unknown(self, value):
        assert Plan.parse(value) is Plan.UNKNOWN

    def test_known_plans(self):
        assert KNOWN_PLANS == (Plan.PLAN1, Plan.PLAN2)
        assert all(plan.is_known() for plan in KNOWN_PLANS)
        assert not Plan.UNKNOWN.is_known()
        assert str(Plan.PLAN2) == "plan2"


class TestFormatting:
    """Test suite for console formatting"""

    def test_plan_line(self):
        assert format_plan_line(Plan.PLAN1, 25) == "Best Plan: plan1, Estimated Cost: 25"

    def test_row_keys_sorted(self):
        row = make_row(User(1, "Ann", 30), Order(2, 1, "Pen", 3))
        assert format_row(row) == (
            "age: 30, name: Ann, order_id: 2, product: Pen, quantity: 3, user_id: 1, "
        )

    def test_rows_limited(self):
        rows = [make_row(User(1, "Ann", 30), Order(i, 1, "Pen", 2)) for i in range(15)]
        lines = format_rows(rows, limit=10).splitlines()

        assert lines[0] == "Query Result (First 10 Rows):"
        assert len(lines) == 11

    def test_rows_fewer_than_limit(self):
        rows = [make_row(User(1, "Ann", 30), Order(1, 1, "Pen", 2))]
        assert len(format_rows(rows, limit=10).splitlines()) == 2
        assert format_rows([], limit=3) == "Query Result (First 3 Rows):"
