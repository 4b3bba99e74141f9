"""Job result model."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from autosubber.config.settings import LibraryCategory
from autosubber.models.job import TorrentJob
from autosubber.models.metadata import MetadataRecord
from autosubber.models.subtitle import SubtitleResult


class JobStatus(str, Enum):
    """Terminal state reached by a job."""

    PARSE_FAILED = "parse_failed"
    METADATA_FAILED = "metadata_failed"
    DRY_RUN = "dry_run"
    MOVED = "moved"
    MOVE_FAILED = "move_failed"


@dataclass
class JobResult:
    """
    Result of processing a single torrent job.

    Attributes:
        job: The processed job.
        status: Terminal state.
        title: Title parsed from the release name.
        year: Year parsed from the release name.
        metadata: OMDb record, when the lookup succeeded.
        category: Library classification.
        destination: Target folder path.
        subtitle: Subtitle outcome (live runs only).
        error: Message for failed states.
    """

    job: TorrentJob
    status: JobStatus
    title: str = ''
    year: str = ''
    metadata: Optional[MetadataRecord] = None
    category: Optional[LibraryCategory] = None
    destination: Optional[Path] = None
    subtitle: Optional[SubtitleResult] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Check if the job reached a non-failure terminal state."""
        return self.status in (JobStatus.MOVED, JobStatus.DRY_RUN)
