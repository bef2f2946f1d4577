"""
Settings Tests.

This module tests environment-driven configuration.
"""

from __future__ import annotations

import pytest

from taskboard.constants import DEFAULT_USER_ID
from taskboard.exceptions import TaskboardConfigurationError
from taskboard.settings import Settings


pytestmark = [pytest.mark.unit]


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        """Test an empty environment gives the defaults."""
        settings = Settings.from_env({})

        assert settings.user_id == DEFAULT_USER_ID
        assert settings.seed_demo_data is True
        assert settings.port == 5000
        assert settings.api_prefix == "/api"
        assert settings.log_level == "INFO"

    def test_overrides(self):
        """Test every variable is read."""
        settings = Settings.from_env({
            "TASKBOARD_USER_ID": "alice",
            "TASKBOARD_SEED_DEMO_DATA": "off",
            "TASKBOARD_HOST": "0.0.0.0",
            "TASKBOARD_PORT": "8080",
            "TASKBOARD_API_PREFIX": "v2/",
            "TASKBOARD_LOG_LEVEL": "debug",
        })

        assert settings.user_id == "alice"
        assert settings.seed_demo_data is False
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.api_prefix == "/v2"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("env", [
        {"TASKBOARD_PORT": "eighty"},
        {"TASKBOARD_PORT": "70000"},
        {"TASKBOARD_LOG_LEVEL": "chatty"},
        {"TASKBOARD_SEED_DEMO_DATA": "maybe"},
        {"TASKBOARD_USER_ID": ""},
    ])
    def test_invalid_values(self, env: dict[str, str]):
        """Test bad values raise a configuration error."""
        with pytest.raises(TaskboardConfigurationError):
            Settings.from_env(env)
