"""Post-download processing pipeline."""

from autosubber.pipeline.subtitles import SubtitleFetcher
from autosubber.pipeline.orchestrator import JobOrchestrator

__all__ = [
    "SubtitleFetcher",
    "JobOrchestrator",
]
