"""API clients for OMDb and OpenSubtitles."""

from autosubber.api.exceptions import (
    APIError,
    APIConfigurationError,
    APIConnectionError,
    APIResponseError,
)
from autosubber.api.omdb_client import OmdbClient
from autosubber.api.opensubtitles_client import (
    Deadline,
    OpenSubtitlesClient,
    normalize_imdb_id,
)

__all__ = [
    "APIError",
    "APIConfigurationError",
    "APIConnectionError",
    "APIResponseError",
    "OmdbClient",
    "Deadline",
    "OpenSubtitlesClient",
    "normalize_imdb_id",
]
