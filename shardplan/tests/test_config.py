"""
Unit tests for config.py - environment-driven settings
"""

import pytest

from shardplan.config import Settings


class TestSettings:
    """Test suite for Settings.from_env"""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings == Settings(
            num_nodes=4,
            num_users=100,
            num_orders=200,
            seed=None,
            preview_rows=10,
            log_level="INFO",
        )

    def test_reads_prefixed_variables(self):
        settings = Settings.from_env({
            "SHARDPLAN_NODES": "2",
            "SHARDPLAN_USERS": "10",
            "SHARDPLAN_ORDERS": "30",
            "SHARDPLAN_SEED": "99",
            "SHARDPLAN_PREVIEW_ROWS": "5",
            "SHARDPLAN_LOG_LEVEL": "debug",
        })
        assert settings.num_nodes == 2
        assert settings.num_users == 10
        assert settings.num_orders == 30
        assert settings.seed == 99
        assert settings.preview_rows == 5
        assert settings.log_level == "DEBUG"

    def test_blank_value_uses_default(self):
        assert Settings.from_env({"SHARDPLAN_SEED": "  "}).seed is None

    def test_rejects_non_integer(self):
        with pytest.raises(ValueError, match="SHARDPLAN_NODES"):
            Settings.from_env({"SHARDPLAN_NODES": "four"})

    def test_reads_process_environment(self, clean_env):
        clean_env.setenv("SHARDPLAN_USERS", "7")
        assert Settings.from_env().num_users == 7
