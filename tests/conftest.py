"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any worker imports so the settings
singleton never points at a real platform.
"""

import os
import sys

# Ensure the worker package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["PLATFORM_URL"] = "https://acme.jfrog.io"
os.environ["PLATFORM_ACCESS_TOKEN"] = "test-token"
os.environ["REPORT_TYPE"] = "violations"
os.environ["CLEAN_REPORTS"] = "false"

import pytest  # noqa: E402

from tests.mocks.xray import XRAY, FakeXray  # noqa: E402


@pytest.fixture
def fake_xray():
    """Empty Xray stub; tests register the routes they need."""
    return FakeXray()


@pytest.fixture
def list_path():
    return f"{XRAY}/reports"


@pytest.fixture
def violations_path():
    return f"{XRAY}/reports/violations"


@pytest.fixture
def vulnerabilities_path():
    return f"{XRAY}/reports/vulnerabilities"
