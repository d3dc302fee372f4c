"""Tests for DispatchConfig."""

import os
from unittest import mock

import pytest

from notifer.config import DEFAULT_BASE_URL, DispatchConfig


class TestDispatchConfig:
    def test_defaults_from_empty_environment(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            config = DispatchConfig.from_env()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_seconds == 30.0
        assert config.proxy_url is None
        assert config.strict_variables is False
        assert not config.sentry_enabled

    def test_values_from_environment(self):
        env = {
            "NOTIFER_BASE_URL": "https://notifer.internal/",
            "NOTIFER_TIMEOUT_SECONDS": "5",
            "NOTIFER_PROXY_URL": "http://proxy:3128",
            "NOTIFER_STRICT_VARIABLES": "true",
            "SENTRY_DSN": "https://key@sentry.example/1",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = DispatchConfig.from_env()

        assert config.base_url == "https://notifer.internal"
        assert config.timeout_seconds == 5.0
        assert config.proxy_url == "http://proxy:3128"
        assert config.strict_variables is True
        assert config.sentry_enabled

    def test_blank_proxy_ignored(self):
        assert DispatchConfig(proxy_url="  ").proxy_url is None

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            DispatchConfig(timeout_seconds=0)

    def test_empty_base_url(self):
        with pytest.raises(ValueError):
            DispatchConfig(base_url="")
