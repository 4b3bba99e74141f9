"""OMDb (Open Movie Database) API client."""

import urllib.parse
from typing import Optional

import requests
from loguru import logger

from autosubber.api.exceptions import (
    APIConfigurationError,
    APIConnectionError,
    APIResponseError,
)
from autosubber.config.settings import (
    OMDB_API_KEY_VAR,
    OMDB_BASE_URL,
    REQUEST_TIMEOUT_SECONDS,
)
from autosubber.models.metadata import MetadataRecord


class OmdbClient:
    """
    Client for the OMDb API.

    Looks up a single title by exact name and year.

    Attributes:
        api_key: OMDb API key, sent as the ``apikey`` query parameter.
        base_url: Endpoint URL.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = OMDB_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def build_url(self, title: str, year: str) -> str:
        """
        Build the lookup URL for a title.

        Args:
            title: Title to look up.
            year: Release year.

        Returns:
            Full URL with encoded query parameters.
        """
        query_params = urllib.parse.urlencode({
            't': title,
            'y': year,
            'apikey': self.api_key,
        })
        return f'{self.base_url}?{query_params}'

    def fetch(self, title: str, year: str) -> MetadataRecord:
        """
        Fetch metadata for a title.

        Args:
            title: Title parsed from the release name.
            year: Year parsed from the release name.

        Returns:
            Decoded MetadataRecord.

        Raises:
            APIConfigurationError: No API key configured.
            APIConnectionError: Request could not be completed.
            APIResponseError: Body is not a JSON object, or OMDb reported an error.
        """
        if not self.api_key:
            raise APIConfigurationError([OMDB_API_KEY_VAR])

        url = self.build_url(title, year)
        logger.debug(f"OMDb lookup: t={title!r} y={year!r}")

        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            # requests puts the full URL, apikey included, in its messages
            raise APIConnectionError(f"OMDb request failed: {type(e).__name__}") from e

        # OMDb reports failures in the body, whatever the status code
        try:
            payload = response.json()
        except ValueError as e:
            raise APIResponseError(
                f"Invalid OMDb response (HTTP {response.status_code}): {e}"
            ) from e

        if not isinstance(payload, dict):
            raise APIResponseError(f"Unexpected OMDb response: {payload!r}")

        record = MetadataRecord.from_api(payload)
        if record.is_error:
            raise APIResponseError(f"OMDb API error: {record.error}")

        logger.info(f"OMDb match: {record.title} ({record.year}) rated={record.rated!r} type={record.type!r}")
        return record
