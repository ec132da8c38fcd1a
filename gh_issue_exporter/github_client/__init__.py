"""GitHub client package for API interaction."""

from .client import GitHubClient, parse_next_page
from .models import IssuePage, IssueRecord, RepoRef

__all__ = [
    "GitHubClient",
    "IssuePage",
    "IssueRecord",
    "RepoRef",
    "parse_next_page",
]
