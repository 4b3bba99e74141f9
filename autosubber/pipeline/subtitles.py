"""Best-effort subtitle fetching."""

from pathlib import Path

from loguru import logger

from autosubber.api.exceptions import APIError, APIResponseError
from autosubber.api.opensubtitles_client import Deadline, OpenSubtitlesClient
from autosubber.config.settings import DEFAULT_SUBTITLE_LANGUAGE, SUBTITLE_TIMEOUT_SECONDS
from autosubber.filesystem.file_ops import subtitle_path_for, write_subtitle
from autosubber.models.metadata import MetadataRecord
from autosubber.models.subtitle import SubtitleResult


class SubtitleFetcher:
    """
    Ensures a subtitle file exists beside a download.

    Takes the first file of the first search result, without ranking.
    Failures never propagate: they come back as a skipped SubtitleResult.
    """

    def __init__(
        self,
        client: OpenSubtitlesClient,
        language: str = DEFAULT_SUBTITLE_LANGUAGE,
        timeout: float = SUBTITLE_TIMEOUT_SECONDS
    ) -> None:
        self.client = client
        self.language = language
        self.timeout = timeout

    def ensure_subtitle(self, record: MetadataRecord, media_path: Path) -> SubtitleResult:
        """
        Fetch a subtitle for a title unless one is already there.

        Args:
            record: OMDb metadata (imdb_id is the search key).
            media_path: Path of the downloaded media.

        Returns:
            SubtitleResult describing what happened.
        """
        srt_path = subtitle_path_for(media_path)

        if srt_path.exists():
            logger.info(f"Subtitle already exists for: {record.title}, skipping")
            return SubtitleResult.already_present(srt_path)

        try:
            content = self._download(record)
        except APIError as e:
            logger.warning(f"Subtitle fetch failed for {record.title}: {e}")
            return SubtitleResult.skipped(srt_path, str(e))

        try:
            write_subtitle(srt_path, content)
        except OSError as e:
            logger.error(f"Error writing subtitle file {srt_path}: {e}")
            return SubtitleResult.skipped(srt_path, f"error writing subtitle file: {e}")

        return SubtitleResult.attached(srt_path)

    def _download(self, record: MetadataRecord) -> bytes:
        """Run login, search and download under a single deadline."""
        deadline = Deadline(self.timeout)

        if not self.client.is_authenticated:
            self.client.login(deadline)

        logger.info(f"Searching subtitles for: {record.title}")
        entries = self.client.search_subtitles(record.imdb_id, self.language, deadline)
        if not entries:
            raise APIResponseError(f"no subtitles found for movie: {record.title}")

        files = entries[0].files
        if not files:
            raise APIResponseError(f"no files found for subtitle: {record.title}")

        link = self.client.request_download(files[0].file_id, deadline)
        return self.client.fetch_content(link, deadline)
