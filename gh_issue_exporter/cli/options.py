"""Shared CLI option definitions."""

import typer

PORT_OPTION = typer.Option(
    None,
    "--port",
    "-p",
    min=1,
    max=65535,
    help="Port for the /metrics endpoint (env: METRICS_PORT)",
)

INTERVAL_OPTION = typer.Option(
    None,
    "--interval",
    "-i",
    min=0,
    help="Seconds between polls (env: POLL_INTERVAL_SECONDS)",
)

LABEL_OPTION = typer.Option(
    None, "--label", "-l", help="Only export issues with this label (env: LABEL_FILTER)"
)

POLL_ON_START_OPTION = typer.Option(
    False, "--poll-on-start", help="Run the first cycle immediately"
)
