"""Exception types raised by the exporter."""

from .github_client.models import RepoRef


class ExporterError(Exception):
    """Base class for exporter failures."""


class ConfigError(ExporterError):
    """Missing or malformed configuration value."""

    def __init__(
        self, message: str, variable: str | None = None, entry: str | None = None
    ):
        super().__init__(message)
        self.variable = variable
        self.entry = entry


class FetchError(ExporterError):
    """An issue-tracker call failed while fetching a repository."""

    def __init__(self, message: str, repository: RepoRef, page: int):
        super().__init__(message)
        self.repository = repository
        self.page = page
