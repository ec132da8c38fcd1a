"""Pydantic models for GitHub issue data used by the exporter.

These models hold the subset of GitHub's REST API issue structure that the
exporter republishes as metrics.
API Reference: https://docs.github.com/en/rest/issues/issues
"""

from pydantic import BaseModel, ConfigDict, Field


class RepoRef(BaseModel):
    """Reference to a single repository, parsed from configuration."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner (user or org)")
    name: str = Field(..., min_length=1, description="Repository name")

    @property
    def full_name(self) -> str:
        """Return the ``owner/name`` form used in metric labels."""
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class IssueRecord(BaseModel):
    """GitHub issue as fetched for one polling cycle.

    Maps to the fields of the GitHub REST API Issue object that end up in
    the exported gauge.
    """

    number: int = Field(..., description="Issue number within the repository")
    labels: list[str] = Field(
        default_factory=list, description="Label names in API order"
    )
    author: str = Field(..., description="Login of the issue author")
    url: str = Field(
        ..., description="Canonical API URL (.../repos/<owner>/<name>/issues/<n>)"
    )
    repository: RepoRef | None = Field(
        None, description="Repository the issue was fetched from"
    )


class IssuePage(BaseModel):
    """One page of issues returned by the issue tracker."""

    issues: list[IssueRecord] = Field(default_factory=list)
    next_page: int = Field(0, ge=0, description="Next page number, 0 when exhausted")
