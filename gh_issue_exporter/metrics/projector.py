"""Projection of fetched issues into gauge label sets."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from ..github_client.models import IssueRecord

LABEL_NAMES = ("number", "label", "author", "repo")


class LabelTuple(BaseModel):
    """Label values of one exported series; the series value is always 1."""

    model_config = ConfigDict(frozen=True)

    number: str
    label: str
    author: str
    repo: str

    def as_labels(self) -> dict[str, str]:
        return self.model_dump()


def repo_from_url(url: str) -> str:
    """Derive ``owner/name`` from an issue API URL.

    ``https://api.github.com/repos/<owner>/<name>/issues/<n>`` split on ``/``
    puts the owner at index 4 and the repository name at index 5.

    Raises:
        ValueError: If the URL has too few path segments
    """
    segments = url.split("/")
    if len(segments) < 6:
        raise ValueError(f"Cannot derive repository from issue URL '{url}'")
    return f"{segments[4]}/{segments[5]}"


def project_issue(issue: IssueRecord) -> LabelTuple:
    if issue.repository is not None:
        repo = issue.repository.full_name
    else:
        repo = repo_from_url(issue.url)

    return LabelTuple(
        number=str(issue.number),
        label=",".join(issue.labels),
        author=issue.author,
        repo=repo,
    )


def project(issues: Iterable[IssueRecord]) -> list[LabelTuple]:
    """Map each issue to one label tuple, preserving input order."""
    return [project_issue(issue) for issue in issues]
