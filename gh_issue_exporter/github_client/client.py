"""GitHub API client using PyGitHub."""

import logging
import re
from typing import Any
from urllib.parse import parse_qs, urlparse

from github import Auth, Github

from .models import IssuePage, IssueRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
MAX_PER_PAGE = 100

_LINK_RE = re.compile(r'<([^>]+)>\s*;\s*rel="([^"]+)"')


def parse_next_page(link_header: str | None) -> int:
    """Extract the next page number from a GitHub ``Link`` header.

    Args:
        link_header: Raw ``Link`` header value, or None

    Returns:
        Page number of the ``rel="next"`` link, or 0 when there is none
    """
    if not link_header:
        return 0

    for url, rel in _LINK_RE.findall(link_header):
        if rel != "next":
            continue
        pages = parse_qs(urlparse(url).query).get("page")
        if pages and pages[0].isdigit():
            return int(pages[0])
    return 0


class GitHubClient:
    """Thin issue-listing client on top of PyGitHub's requester."""

    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token
            base_url: REST API root, override for GitHub Enterprise
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.base_url = base_url.rstrip("/")
        self.github = Github(
            auth=Auth.Token(token), base_url=self.base_url, per_page=MAX_PER_PAGE
        )

    def _convert_issue(self, raw: dict[str, Any]) -> IssueRecord:
        """Convert a raw REST issue payload to our model."""
        user = raw.get("user") or {}
        return IssueRecord(
            number=raw["number"],
            labels=[label["name"] for label in raw.get("labels") or []],
            author=user.get("login", ""),
            url=raw["url"],
        )

    def list_issues_by_repo(
        self,
        owner: str,
        name: str,
        label: str = "",
        page: int = 1,
        per_page: int = MAX_PER_PAGE,
    ) -> IssuePage:
        """List one page of open issues for a repository.

        Args:
            owner: Repository owner
            name: Repository name
            label: Label to filter by, empty for no filter
            page: 1-based page number
            per_page: Page size, capped at 100

        Returns:
            IssuePage with the converted issues and the next page number

        Raises:
            github.GithubException: If the API call fails
        """
        parameters: dict[str, Any] = {
            "state": "open",
            "per_page": min(per_page, MAX_PER_PAGE),
            "page": page,
        }
        if label:
            parameters["labels"] = label

        headers, data = self.github.requester.requestJsonAndCheck(
            "GET", f"{self.base_url}/repos/{owner}/{name}/issues", parameters=parameters
        )

        issues = [self._convert_issue(raw) for raw in data or []]
        next_page = parse_next_page(headers.get("link"))
        logger.debug(
            f"Fetched {len(issues)} issues from {owner}/{name} page {page} "
            f"(next page: {next_page})"
        )
        return IssuePage(issues=issues, next_page=next_page)
