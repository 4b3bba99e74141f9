"""Orchestration of a single post-download job."""

from typing import Optional

from loguru import logger

from autosubber.api.exceptions import APIError
from autosubber.api.omdb_client import OmdbClient
from autosubber.api.opensubtitles_client import OpenSubtitlesClient
from autosubber.classification.destination import build_destination_path, classify
from autosubber.classification.name_parser import parse_torrent_name
from autosubber.config.manager import AppConfig
from autosubber.filesystem.file_ops import move_folder
from autosubber.models.job import TorrentJob
from autosubber.models.result import JobResult, JobStatus
from autosubber.models.subtitle import SubtitleStatus
from autosubber.pipeline.subtitles import SubtitleFetcher
from autosubber.ui.console import ConsoleUI


class JobOrchestrator:
    """
    Runs one torrent job through parse, lookup, classification and move.

    Parse, metadata and move failures end the job with a failed JobResult
    instead of raising; a missing subtitle never stops the move.
    """

    def __init__(
        self,
        config: AppConfig,
        metadata_client: OmdbClient,
        subtitle_fetcher: SubtitleFetcher,
        console: Optional[ConsoleUI] = None
    ):
        self.config = config
        self.metadata_client = metadata_client
        self.subtitle_fetcher = subtitle_fetcher
        self.console = console or ConsoleUI()

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        console: Optional[ConsoleUI] = None
    ) -> "JobOrchestrator":
        """Wire the provider clients from the application configuration."""
        subtitle_client = OpenSubtitlesClient(
            api_key=config.opensubtitles_api_key,
            username=config.opensubtitles_username,
            password=config.opensubtitles_password,
            user_agent=config.user_agent,
        )
        return cls(
            config,
            OmdbClient(api_key=config.omdb_api_key),
            SubtitleFetcher(
                subtitle_client,
                language=config.subtitle_language,
                timeout=config.subtitle_timeout,
            ),
            console,
        )

    def run(self, job: TorrentJob, dry_run: bool = False) -> JobResult:
        """
        Process a job.

        Arguments:
            job: The download to organize.
            dry_run: If True, print the intended move and touch nothing.

        Returns:
            JobResult with the terminal status and intermediate data.
        """
        logger.info(f"Job {job.torrent_id}: {job.torrent_name} in {job.torrent_path}")

        title, year = parse_torrent_name(job.torrent_name)
        if not title or not year:
            message = f"Could not parse movie title or year from torrent name: {job.torrent_name}"
            logger.warning(message)
            self.console.print_error(message)
            return JobResult(job, JobStatus.PARSE_FAILED, error=message)

        try:
            record = self.metadata_client.fetch(title, year)
        except APIError as e:
            message = f"Error fetching data from OMDb: {e}"
            logger.error(message)
            self.console.print_error(message)
            return JobResult(job, JobStatus.METADATA_FAILED, title=title, year=year, error=message)

        self.console.print_info(
            f"Title: {record.title}, Year: {record.year}, Rated: {record.rated}, Type: {record.type}"
        )

        category = classify(record)
        destination = build_destination_path(record, job.torrent_name, self.config.library_dirs)
        result = JobResult(
            job,
            JobStatus.DRY_RUN,
            title=title,
            year=year,
            metadata=record,
            category=category,
            destination=destination,
        )
        logger.info(f"Classified as {category.value}: {destination}")

        if dry_run:
            move_folder(job.source_path, destination, dry_run=True)
            self.console.print_simulation(f"would move {job.source_path} to {destination}")
            return result

        result.subtitle = self.subtitle_fetcher.ensure_subtitle(record, job.source_path)
        self._report_subtitle(result)

        try:
            move_folder(job.source_path, destination)
        except OSError as e:
            message = f"Error moving folder: {e}"
            logger.error(message)
            self.console.print_error(message)
            result.status = JobStatus.MOVE_FAILED
            result.error = message
            return result

        self.console.print_success(f"Moved {job.source_path} to {destination}")
        result.status = JobStatus.MOVED
        return result

    def _report_subtitle(self, result: JobResult) -> None:
        subtitle = result.subtitle
        if subtitle.status is SubtitleStatus.ATTACHED:
            self.console.print_success(f"Downloaded subtitles, saved as {subtitle.path}")
        elif subtitle.status is SubtitleStatus.ALREADY_PRESENT:
            self.console.print_info(f"Subtitle already exists: {subtitle.path}")
        else:
            self.console.print_warning(f"Error downloading subtitles: {subtitle.reason}")
