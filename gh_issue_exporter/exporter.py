"""One fetch, project and publish cycle."""

import logging
import time
from collections.abc import Sequence

from .fetcher import IssueFetcher
from .github_client.models import RepoRef
from .metrics.projector import project
from .metrics.publisher import SnapshotPublisher

logger = logging.getLogger(__name__)


class IssueExporter:
    """Ties the fetcher to the publisher for the configured repositories."""

    def __init__(
        self,
        fetcher: IssueFetcher,
        publisher: SnapshotPublisher,
        repositories: Sequence[RepoRef],
        label: str = "",
    ):
        self.fetcher = fetcher
        self.publisher = publisher
        self.repositories = list(repositories)
        self.label = label

    def run_cycle(self) -> int:
        """Run one cycle and return the number of published series.

        The gauge is only reset once every repository has been fetched, so a
        failing cycle leaves the previous snapshot in place.

        Raises:
            FetchError: If fetching any repository fails
        """
        started = time.monotonic()
        issues = self.fetcher.fetch_all_issues(self.repositories, self.label)
        count = self.publisher.publish(project(issues))
        logger.info(
            f"Cycle finished: {count} series from {len(self.repositories)} "
            f"repositories in {time.monotonic() - started:.2f}s"
        )
        return count
