"""Environment-based configuration for the exporter."""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from .errors import ConfigError
from .github_client.client import DEFAULT_BASE_URL
from .github_client.models import RepoRef

DEFAULT_POLL_INTERVAL_SECONDS = 300
DEFAULT_METRICS_PORT = 8080
DEFAULT_METRICS_ADDRESS = "0.0.0.0"

# Variable names used by earlier releases, read when the primary name is unset
LEGACY_NAMES = {
    "AUTH_TOKEN": "GITHUB_TOKEN",
    "REPOSITORY_LIST": "GITHUB_REPOSITORIES",
    "LABEL_FILTER": "GITHUB_LABEL",
    "POLL_INTERVAL_SECONDS": "GITHUB_API_INTERVAL",
}


def _lookup(name: str, env: Mapping[str, str] | None) -> tuple[str, str]:
    """Return ``(variable, value)`` honouring the legacy fallback name."""
    env = os.environ if env is None else env
    value = env.get(name, "")
    if value:
        return name, value

    legacy = LEGACY_NAMES.get(name)
    if legacy and env.get(legacy):
        return legacy, env[legacy]
    return name, ""


def resolve_poll_interval(env: Mapping[str, str] | None = None) -> int:
    """Resolve the poll interval in seconds.

    Returns:
        Interval from POLL_INTERVAL_SECONDS, or 300 when unset

    Raises:
        ConfigError: If the value is not a non-negative integer
    """
    variable, raw = _lookup("POLL_INTERVAL_SECONDS", env)
    if not raw:
        return DEFAULT_POLL_INTERVAL_SECONDS

    try:
        interval = int(raw.strip())
    except ValueError as e:
        raise ConfigError(
            f"{variable} must be an integer number of seconds, got '{raw}'",
            variable=variable,
        ) from e

    if interval < 0:
        raise ConfigError(
            f"{variable} must not be negative, got {interval}", variable=variable
        )
    return interval


def resolve_auth_token(env: Mapping[str, str] | None = None) -> str:
    """Resolve the GitHub token from AUTH_TOKEN."""
    variable, token = _lookup("AUTH_TOKEN", env)
    if not token:
        raise ConfigError(
            f"missing credential: environment variable {variable} is not set",
            variable=variable,
        )
    return token


def resolve_repository_list(env: Mapping[str, str] | None = None) -> str:
    """Resolve the raw comma-separated repository list from REPOSITORY_LIST."""
    variable, raw = _lookup("REPOSITORY_LIST", env)
    if not raw:
        raise ConfigError(
            f"missing required value: environment variable {variable} is not set",
            variable=variable,
        )
    return raw


def resolve_label_filter(env: Mapping[str, str] | None = None) -> str:
    """Resolve the optional label filter; empty string means no filter."""
    return _lookup("LABEL_FILTER", env)[1]


def parse_repositories(raw: str) -> list[RepoRef]:
    """Parse ``owner/name`` pairs separated by commas.

    Args:
        raw: Repository list, e.g. ``"acme/widgets,acme/gadgets"``

    Returns:
        RepoRef objects in configuration order

    Raises:
        ConfigError: If any entry is not exactly two non-empty segments
    """
    repositories = []
    for entry in raw.split(","):
        parts = entry.strip().split("/")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ConfigError(
                f"repository is invalid: '{entry}' (expected owner/name)",
                variable="REPOSITORY_LIST",
                entry=entry,
            )
        repositories.append(RepoRef(owner=parts[0], name=parts[1]))
    return repositories


def _resolve_port(env: Mapping[str, str] | None) -> int:
    raw = (os.environ if env is None else env).get("METRICS_PORT", "")
    if not raw:
        return DEFAULT_METRICS_PORT
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigError(
            f"METRICS_PORT must be an integer, got '{raw}'", variable="METRICS_PORT"
        ) from e
    if not 0 < port < 65536:
        raise ConfigError(
            f"METRICS_PORT out of range: {port}", variable="METRICS_PORT"
        )
    return port


def _resolve_log_level(env: Mapping[str, str] | None) -> str:
    level = (os.environ if env is None else env).get("LOG_LEVEL", "") or "INFO"
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown LOG_LEVEL '{level}'", variable="LOG_LEVEL")
    return level


class ExporterSettings(BaseModel):
    """Resolved exporter configuration."""

    auth_token: str = Field(..., repr=False)
    repositories: list[RepoRef]
    label: str = ""
    poll_interval: int = Field(DEFAULT_POLL_INTERVAL_SECONDS, ge=0)
    metrics_port: int = DEFAULT_METRICS_PORT
    metrics_address: str = DEFAULT_METRICS_ADDRESS
    github_api_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ExporterSettings":
        """Build settings from environment variables.

        Raises:
            ConfigError: If a required value is missing or malformed
        """
        source = os.environ if env is None else env
        return cls(
            auth_token=resolve_auth_token(env),
            repositories=parse_repositories(resolve_repository_list(env)),
            label=resolve_label_filter(env),
            poll_interval=resolve_poll_interval(env),
            metrics_port=_resolve_port(env),
            metrics_address=source.get("METRICS_ADDRESS") or DEFAULT_METRICS_ADDRESS,
            github_api_url=source.get("GITHUB_API_URL") or DEFAULT_BASE_URL,
            log_level=_resolve_log_level(env),
        )
