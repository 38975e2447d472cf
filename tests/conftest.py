"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides controlled environment variable stores for all tests
"""

import os
from unittest.mock import patch

import pytest

TEST_PREFIX = "EVP_TEST_"


@pytest.fixture
def test_env_vars():
    """Provide test environment variables."""
    return {
        f"{TEST_PREFIX}PORT": "20080",
        f"{TEST_PREFIX}HOSTNAME": "127.0.0.1",
        f"{TEST_PREFIX}EMPTY": "",
        f"{TEST_PREFIX}FLAG_TRUE": "True",
        f"{TEST_PREFIX}FLAG_FALSE": "f",
        f"{TEST_PREFIX}FLAG_BAD": "maybe",
        f"{TEST_PREFIX}RATE": "-111.6test",
        f"{TEST_PREFIX}WORD": "test",
    }


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Mock environment variables for testing."""
    with patch.dict(os.environ, test_env_vars, clear=False):
        yield test_env_vars


@pytest.fixture
def set_env(monkeypatch):
    """Set a single environment variable for the duration of a test."""

    def _set(name: str, value: str) -> str:
        monkeypatch.setenv(name, value)
        return name

    return _set


@pytest.fixture
def missing_name(monkeypatch):
    """Provide a variable name guaranteed to be absent from the environment."""
    name = f"{TEST_PREFIX}DOES_NOT_EXIST"
    monkeypatch.delenv(name, raising=False)
    return name
