"""
Pytest Configuration and Fixtures

This module provides:
- Project root on sys.path so `main` and `notbuiltyet` import without install
- Shared fixtures for all tests
- Test category markers
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import test configuration
from tests.test_config import CONFIG, TEST_DATA, get_raw_issues, make_issue


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def raw_issues():
    """Provide the sample raw issues (fresh copy per test)."""
    return get_raw_issues()


@pytest.fixture
def scenario_issue():
    """A single vetted issue matching the end-to-end scenario."""
    return make_issue(number=42, body=TEST_DATA["scenario_body"], votes=2, title="Issue title")


@pytest.fixture
def full_issue():
    """An issue with every template section filled in."""
    return make_issue(number=7, body=TEST_DATA["full_body"], votes=5)


@pytest.fixture
def make_response():
    """Factory for mocked requests.Response objects."""
    def _make(json_data=None, status_code=200, reason="OK"):
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        response.ok = 200 <= status_code < 400
        response.json.return_value = json_data if json_data is not None else []
        return response
    return _make


@pytest.fixture
def mock_client(raw_issues):
    """Provide a mock issues client answering the three label queries."""
    from notbuiltyet.sources import GitHubIssuesClient

    client = Mock(spec=GitHubIssuesClient)
    client.fetch_issues.return_value = raw_issues
    client.count_by_label.side_effect = lambda label: {"being-built": 2, "launched": 1}[label]
    return client


@pytest.fixture
def env_config(monkeypatch):
    """Patch the CLI's configuration to valid values."""
    monkeypatch.setattr("main.GITHUB_TOKEN", CONFIG["token"])
    monkeypatch.setattr("main.GITHUB_REPOSITORY", CONFIG["repository"])
    return CONFIG


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

# Unit test modules are tagged by area so run_tests.py can select them with -m
MODULE_MARKERS = {
    "test_markdown": "parsing",
    "test_fields": "parsing",
    "test_mapper": "parsing",
    "test_sources": "client",
    "test_pipeline": "build",
    "test_output": "build",
}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "cli_behavior: CLI interface tests"
    )
    config.addinivalue_line(
        "markers", "end_to_end: Full builds through the real client with mocked HTTP"
    )
    config.addinivalue_line(
        "markers", "parsing: Markdown, field extraction and mapping unit tests"
    )
    config.addinivalue_line(
        "markers", "client: GitHub issues client unit tests"
    )
    config.addinivalue_line(
        "markers", "build: Pipeline and JSON writer unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Apply the area marker of each unit test module."""
    for item in items:
        marker = MODULE_MARKERS.get(item.path.stem)
        if marker:
            item.add_marker(marker)
