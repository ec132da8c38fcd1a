"""Process-wide logging setup."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr at ``level``; safe to call more than once."""
    root = logging.getLogger()
    if not any(getattr(h, "_gh_issue_exporter", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gh_issue_exporter = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level.upper())

    # PyGithub logs every request at DEBUG
    logging.getLogger("github").setLevel(max(root.level, logging.INFO))
