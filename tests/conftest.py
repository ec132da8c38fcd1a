"""Test configuration and fixtures."""

import pytest
from prometheus_client import CollectorRegistry

from gh_issue_exporter.github_client.models import RepoRef


@pytest.fixture
def registry() -> CollectorRegistry:
    """Isolated Prometheus registry."""
    return CollectorRegistry()


@pytest.fixture
def repos() -> list[RepoRef]:
    """Three configured repositories."""
    return [
        RepoRef(owner="acme", name="widgets"),
        RepoRef(owner="acme", name="gadgets"),
        RepoRef(owner="other", name="tools"),
    ]
