"""Main CLI entry point."""

import logging
import signal

import typer
from prometheus_client import start_http_server
from rich.console import Console

from ..config import ExporterSettings
from ..errors import ConfigError, ExporterError
from ..exporter import IssueExporter
from ..fetcher import IssueFetcher
from ..github_client.client import GitHubClient
from ..logging_config import configure_logging
from ..metrics.publisher import SnapshotPublisher
from ..scheduler import PollScheduler
from .options import INTERVAL_OPTION, LABEL_OPTION, POLL_ON_START_OPTION, PORT_OPTION

app = typer.Typer(
    name="gh-issue-exporter",
    help="Export open GitHub issues as Prometheus metrics",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
logger = logging.getLogger(__name__)


def _load_settings(**overrides: object) -> ExporterSettings:
    try:
        settings = ExporterSettings.from_env()
    except ConfigError as e:
        console.print(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    updates = {key: value for key, value in overrides.items() if value is not None}
    return settings.model_copy(update=updates)


def build_exporter(settings: ExporterSettings) -> IssueExporter:
    """Wire the GitHub client, fetcher and publisher for ``settings``."""
    client = GitHubClient(settings.auth_token, base_url=settings.github_api_url)
    return IssueExporter(
        fetcher=IssueFetcher(client),
        publisher=SnapshotPublisher(),
        repositories=settings.repositories,
        label=settings.label,
    )


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def serve(
    port: int | None = PORT_OPTION,
    interval: int | None = INTERVAL_OPTION,
    label: str | None = LABEL_OPTION,
    poll_on_start: bool = POLL_ON_START_OPTION,
) -> None:
    """Serve /metrics and poll GitHub on a fixed interval.

    Required environment:
        AUTH_TOKEN       GitHub token
        REPOSITORY_LIST  Comma-separated owner/name pairs

    Any failed polling cycle terminates the process with exit code 1.
    """
    settings = _load_settings(metrics_port=port, poll_interval=interval, label=label)
    configure_logging(settings.log_level)

    exporter = build_exporter(settings)
    start_http_server(
        settings.metrics_port,
        addr=settings.metrics_address,
        registry=exporter.publisher.registry,
    )

    repos = ", ".join(str(repo) for repo in settings.repositories)
    console.print(
        f"📡 Serving /metrics on {settings.metrics_address}:{settings.metrics_port}"
    )
    console.print(
        f"🔍 Polling {repos} every {settings.poll_interval}s"
        + (f" (label: {settings.label})" if settings.label else "")
    )

    scheduler = PollScheduler(
        exporter.run_cycle,
        settings.poll_interval,
        run_immediately=poll_on_start,
    )
    signal.signal(signal.SIGTERM, lambda signum, frame: scheduler.stop())

    try:
        scheduler.run()
    except ExporterError as e:
        logger.critical(f"Polling cycle failed: {e}")
        console.print(f"❌ Polling cycle failed: {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("Interrupted, shutting down")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def snapshot(label: str | None = LABEL_OPTION) -> None:
    """Run a single polling cycle and print the resulting metrics."""
    settings = _load_settings(label=label)
    configure_logging(settings.log_level)

    exporter = build_exporter(settings)
    try:
        count = exporter.run_cycle()
    except ExporterError as e:
        console.print(f"❌ Polling cycle failed: {e}")
        raise typer.Exit(1)

    console.print(
        exporter.publisher.render(), markup=False, highlight=False, soft_wrap=True
    )
    console.print(f"✅ {count} issue series")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_issue_exporter import __version__

    console.print(f"GitHub Issue Exporter v{__version__}")


if __name__ == "__main__":
    app()
