"""Paginated issue collection across the configured repositories."""

import logging
from collections.abc import Sequence
from typing import Protocol

from .errors import FetchError
from .github_client.client import MAX_PER_PAGE
from .github_client.models import IssuePage, IssueRecord, RepoRef

logger = logging.getLogger(__name__)


class IssueSource(Protocol):
    """Anything that can list one page of a repository's issues."""

    def list_issues_by_repo(
        self, owner: str, name: str, label: str, page: int, per_page: int
    ) -> IssuePage: ...


class IssueFetcher:
    """Collects every matching issue for a list of repositories."""

    def __init__(self, source: IssueSource, per_page: int = MAX_PER_PAGE):
        self.source = source
        self.per_page = min(per_page, MAX_PER_PAGE)

    def fetch_repository(self, repo: RepoRef, label: str) -> list[IssueRecord]:
        """Follow the page cursor for one repository until it is exhausted.

        Raises:
            FetchError: On the first failed page request
        """
        issues: list[IssueRecord] = []
        page = 1
        pages = 0
        while True:
            try:
                result = self.source.list_issues_by_repo(
                    repo.owner, repo.name, label, page, self.per_page
                )
            except Exception as e:
                raise FetchError(
                    f"failed to get GitHub issues for {repo} (page {page}): {e}",
                    repository=repo,
                    page=page,
                ) from e

            pages += 1
            issues.extend(
                issue.model_copy(update={"repository": repo}) for issue in result.issues
            )
            if result.next_page == 0:
                break
            page = result.next_page

        logger.debug(f"Collected {len(issues)} issues from {repo} in {pages} page(s)")
        return issues

    def fetch_all_issues(
        self, repos: Sequence[RepoRef], label: str = ""
    ) -> list[IssueRecord]:
        """Fetch all matching issues, in configuration order.

        Args:
            repos: Repositories to poll
            label: Label filter, empty for none

        Returns:
            Concatenated issues of every repository

        Raises:
            FetchError: If any page request fails; no partial result is returned
        """
        issues: list[IssueRecord] = []
        for repo in repos:
            issues.extend(self.fetch_repository(repo, label))
        return issues
