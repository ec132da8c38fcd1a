"""Ownership of the exported issue gauge."""

import logging
import threading
from collections.abc import Iterable

from prometheus_client import CollectorRegistry, Gauge, generate_latest

from .projector import LABEL_NAMES, LabelTuple

logger = logging.getLogger(__name__)

METRIC_NAMESPACE = "github_issue"
METRIC_SUBSYSTEM = "prometheus_exporter"
METRIC_NAME = "issue_count"


class SnapshotPublisher:
    """Replaces the exported series set wholesale on every publish.

    The gauge lives in its own registry, shared with the HTTP endpoint that
    serves it. Individual series updates are atomic; the clear-then-set
    sequence is not, so a scrape that lands mid-publish can see a partial set.
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.gauge = Gauge(
            METRIC_NAME,
            "Number of issues",
            labelnames=LABEL_NAMES,
            namespace=METRIC_NAMESPACE,
            subsystem=METRIC_SUBSYSTEM,
            registry=self.registry,
        )
        self._lock = threading.Lock()
        self._series: dict[tuple[str, ...], LabelTuple] = {}

    def publish(self, tuples: Iterable[LabelTuple]) -> int:
        """Clear every exported series and set one series per tuple to 1.

        Returns:
            Number of distinct series exported
        """
        with self._lock:
            self.gauge.clear()
            series: dict[tuple[str, ...], LabelTuple] = {}
            for item in tuples:
                self.gauge.labels(**item.as_labels()).set(1)
                series[(item.number, item.label, item.author, item.repo)] = item
            self._series = series

        logger.info(f"Published {len(series)} issue series")
        return len(series)

    def series(self) -> list[LabelTuple]:
        """Return the label tuples of the last published snapshot."""
        with self._lock:
            return list(self._series.values())

    def render(self) -> str:
        """Render the registry in the Prometheus text exposition format."""
        return generate_latest(self.registry).decode("utf-8")
