"""Shared builders for exporter tests."""

from gh_issue_exporter.github_client.models import IssuePage, IssueRecord


def make_issue(
    number: int,
    labels: list[str] | None = None,
    author: str = "alice",
    owner: str = "acme",
    name: str = "widgets",
) -> IssueRecord:
    """Build an issue record as the GitHub client would return it."""
    return IssueRecord(
        number=number,
        labels=labels or [],
        author=author,
        url=f"https://api.github.com/repos/{owner}/{name}/issues/{number}",
    )


class FakeIssueSource:
    """In-memory issue tracker keyed by ``owner/name`` and page number."""

    def __init__(
        self,
        pages: dict[str, list[IssuePage]],
        failures: dict[str, Exception] | None = None,
        page_failures: dict[tuple[str, int], Exception] | None = None,
    ):
        self.pages = pages
        self.failures = failures or {}
        self.page_failures = page_failures or {}
        self.calls: list[tuple[str, str, str, int, int]] = []

    def list_issues_by_repo(
        self, owner: str, name: str, label: str, page: int, per_page: int
    ) -> IssuePage:
        self.calls.append((owner, name, label, page, per_page))
        key = f"{owner}/{name}"
        if key in self.failures:
            raise self.failures[key]
        if (key, page) in self.page_failures:
            raise self.page_failures[(key, page)]
        return self.pages[key][page - 1]
