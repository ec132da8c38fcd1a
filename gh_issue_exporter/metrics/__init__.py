"""Metric projection and publishing."""

from .projector import LABEL_NAMES, LabelTuple, project, repo_from_url
from .publisher import SnapshotPublisher

__all__ = [
    "LABEL_NAMES",
    "LabelTuple",
    "SnapshotPublisher",
    "project",
    "repo_from_url",
]
