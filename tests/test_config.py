"""Tests for environment configuration."""

import os
from unittest.mock import patch

import pytest

from gh_issue_exporter.config import (
    ExporterSettings,
    parse_repositories,
    resolve_auth_token,
    resolve_label_filter,
    resolve_poll_interval,
    resolve_repository_list,
)
from gh_issue_exporter.errors import ConfigError
from gh_issue_exporter.github_client.models import RepoRef


class TestParseRepositories:
    """Test parse_repositories."""

    def test_multiple_pairs(self) -> None:
        """Test parsing two owner/name pairs keeps order."""
        assert parse_repositories("a/b,c/d") == [
            RepoRef(owner="a", name="b"),
            RepoRef(owner="c", name="d"),
        ]

    def test_single_pair(self) -> None:
        """Test parsing a single repository."""
        assert parse_repositories("acme/widgets") == [
            RepoRef(owner="acme", name="widgets")
        ]

    def test_strips_whitespace(self) -> None:
        """Test whitespace around entries is ignored."""
        assert parse_repositories("a/b, c/d") == [
            RepoRef(owner="a", name="b"),
            RepoRef(owner="c", name="d"),
        ]

    @pytest.mark.parametrize(
        "raw,bad_entry",
        [
            ("a", "a"),
            ("a/b,c", "c"),
            ("a/b/c", "a/b/c"),
            ("/b", "/b"),
            ("a/", "a/"),
            ("a/b,", ""),
        ],
    )
    def test_malformed_entry(self, raw: str, bad_entry: str) -> None:
        """Test malformed entries are rejected with the offending entry."""
        with pytest.raises(ConfigError, match="repository is invalid") as exc_info:
            parse_repositories(raw)
        assert exc_info.value.entry == bad_entry


class TestResolvePollInterval:
    """Test resolve_poll_interval."""

    def test_default(self) -> None:
        """Test the default interval is 300 seconds."""
        assert resolve_poll_interval({}) == 300

    def test_empty_value_uses_default(self) -> None:
        """Test an empty value behaves like an unset one."""
        assert resolve_poll_interval({"POLL_INTERVAL_SECONDS": ""}) == 300

    def test_override(self) -> None:
        """Test an explicit interval."""
        assert resolve_poll_interval({"POLL_INTERVAL_SECONDS": "60"}) == 60

    def test_zero_is_accepted(self) -> None:
        """Test zero is a valid non-negative interval."""
        assert resolve_poll_interval({"POLL_INTERVAL_SECONDS": "0"}) == 0

    def test_non_numeric(self) -> None:
        """Test a non-numeric value is rejected."""
        with pytest.raises(ConfigError, match="must be an integer"):
            resolve_poll_interval({"POLL_INTERVAL_SECONDS": "abc"})

    def test_negative(self) -> None:
        """Test a negative value is rejected."""
        with pytest.raises(ConfigError, match="must not be negative"):
            resolve_poll_interval({"POLL_INTERVAL_SECONDS": "-1"})

    def test_legacy_name(self) -> None:
        """Test the legacy variable name is read as a fallback."""
        assert resolve_poll_interval({"GITHUB_API_INTERVAL": "30"}) == 30

    @patch.dict(os.environ, {"POLL_INTERVAL_SECONDS": "42"}, clear=True)
    def test_reads_process_environment(self) -> None:
        """Test os.environ is used when no mapping is given."""
        assert resolve_poll_interval() == 42


class TestResolveRequiredValues:
    """Test token, repository list and label resolution."""

    def test_auth_token(self) -> None:
        """Test resolving the token."""
        assert resolve_auth_token({"AUTH_TOKEN": "secret"}) == "secret"

    def test_auth_token_missing(self) -> None:
        """Test a missing token is a missing-credential error."""
        with pytest.raises(ConfigError, match="missing credential") as exc_info:
            resolve_auth_token({})
        assert exc_info.value.variable == "AUTH_TOKEN"

    def test_auth_token_empty(self) -> None:
        """Test an empty token is rejected."""
        with pytest.raises(ConfigError):
            resolve_auth_token({"AUTH_TOKEN": ""})

    def test_auth_token_legacy_fallback(self) -> None:
        """Test GITHUB_TOKEN is used when AUTH_TOKEN is unset."""
        assert resolve_auth_token({"GITHUB_TOKEN": "legacy"}) == "legacy"

    def test_auth_token_primary_wins(self) -> None:
        """Test AUTH_TOKEN takes precedence over the legacy name."""
        env = {"AUTH_TOKEN": "primary", "GITHUB_TOKEN": "legacy"}
        assert resolve_auth_token(env) == "primary"

    def test_repository_list(self) -> None:
        """Test resolving the raw repository list."""
        assert resolve_repository_list({"REPOSITORY_LIST": "a/b"}) == "a/b"

    def test_repository_list_missing(self) -> None:
        """Test a missing repository list is a missing-value error."""
        with pytest.raises(ConfigError, match="missing required value"):
            resolve_repository_list({})

    def test_label_filter_unset(self) -> None:
        """Test an unset label means no filter."""
        assert resolve_label_filter({}) == ""

    def test_label_filter(self) -> None:
        """Test resolving a label filter."""
        assert resolve_label_filter({"LABEL_FILTER": "bug"}) == "bug"


class TestExporterSettings:
    """Test ExporterSettings.from_env."""

    def test_from_env_defaults(self) -> None:
        """Test building settings with only required values."""
        settings = ExporterSettings.from_env(
            {"AUTH_TOKEN": "t", "REPOSITORY_LIST": "acme/widgets"}
        )
        assert settings.auth_token == "t"
        assert settings.repositories == [RepoRef(owner="acme", name="widgets")]
        assert settings.label == ""
        assert settings.poll_interval == 300
        assert settings.metrics_port == 8080
        assert settings.metrics_address == "0.0.0.0"
        assert settings.github_api_url == "https://api.github.com"
        assert settings.log_level == "INFO"

    def test_from_env_overrides(self) -> None:
        """Test optional values are read."""
        settings = ExporterSettings.from_env(
            {
                "AUTH_TOKEN": "t",
                "REPOSITORY_LIST": "a/b,c/d",
                "LABEL_FILTER": "bug",
                "POLL_INTERVAL_SECONDS": "10",
                "METRICS_PORT": "9100",
                "METRICS_ADDRESS": "127.0.0.1",
                "GITHUB_API_URL": "https://ghe.example.com/api/v3",
                "LOG_LEVEL": "debug",
            }
        )
        assert len(settings.repositories) == 2
        assert settings.label == "bug"
        assert settings.poll_interval == 10
        assert settings.metrics_port == 9100
        assert settings.metrics_address == "127.0.0.1"
        assert settings.github_api_url == "https://ghe.example.com/api/v3"
        assert settings.log_level == "DEBUG"

    def test_token_not_in_repr(self) -> None:
        """Test the token is hidden from the settings repr."""
        settings = ExporterSettings.from_env(
            {"AUTH_TOKEN": "supersecret", "REPOSITORY_LIST": "a/b"}
        )
        assert "supersecret" not in repr(settings)

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_invalid_port(self, port: str) -> None:
        """Test invalid metrics ports are rejected."""
        with pytest.raises(ConfigError, match="METRICS_PORT"):
            ExporterSettings.from_env(
                {"AUTH_TOKEN": "t", "REPOSITORY_LIST": "a/b", "METRICS_PORT": port}
            )

    def test_invalid_log_level(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            ExporterSettings.from_env(
                {"AUTH_TOKEN": "t", "REPOSITORY_LIST": "a/b", "LOG_LEVEL": "chatty"}
            )

    def test_malformed_repositories(self) -> None:
        """Test repository parsing errors surface from from_env."""
        with pytest.raises(ConfigError, match="repository is invalid"):
            ExporterSettings.from_env({"AUTH_TOKEN": "t", "REPOSITORY_LIST": "oops"})
