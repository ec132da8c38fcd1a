"""Prometheus exporter for open GitHub issues."""

__version__ = "0.1.0"
