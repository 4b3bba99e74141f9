"""Data models for torrent post-processing."""

from autosubber.models.job import TorrentJob
from autosubber.models.metadata import MetadataRecord, Rating
from autosubber.models.subtitle import (
    SubtitleEntry,
    SubtitleFile,
    SubtitleResult,
    SubtitleStatus,
)
from autosubber.models.result import JobResult, JobStatus

__all__ = [
    "TorrentJob",
    "MetadataRecord",
    "Rating",
    "SubtitleEntry",
    "SubtitleFile",
    "SubtitleResult",
    "SubtitleStatus",
    "JobResult",
    "JobStatus",
]
