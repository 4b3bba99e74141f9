"""Configuration settings and constants for the autosubber package."""

from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet


class LibraryCategory(str, Enum):
    """Classification keys for the four Plex library trees."""

    CHILD_MOVIE = "child-movie"
    CHILD_SERIES = "child-series"
    ADULT_MOVIE = "adult-movie"
    ADULT_SERIES = "adult-series"


# Default library directories
DEFAULT_KIDS_MOVIES_DIR = Path('/var/lib/plexmediaserver/Movies')
DEFAULT_KIDS_TV_DIR = Path('/var/lib/plexmediaserver/TV')
DEFAULT_ADULT_MOVIES_DIR = Path('/var/lib/plexmediaserver/adult/Movies')
DEFAULT_ADULT_TV_DIR = Path('/var/lib/plexmediaserver/adult/TV')

DEFAULT_LIBRARY_DIRS: Dict[LibraryCategory, Path] = {
    LibraryCategory.CHILD_MOVIE: DEFAULT_KIDS_MOVIES_DIR,
    LibraryCategory.CHILD_SERIES: DEFAULT_KIDS_TV_DIR,
    LibraryCategory.ADULT_MOVIE: DEFAULT_ADULT_MOVIES_DIR,
    LibraryCategory.ADULT_SERIES: DEFAULT_ADULT_TV_DIR,
}

# Environment variables overriding the library directories
LIBRARY_DIR_ENV_VARS: Dict[LibraryCategory, str] = {
    LibraryCategory.CHILD_MOVIE: "AUTOSUBBER_KIDS_MOVIES_DIR",
    LibraryCategory.CHILD_SERIES: "AUTOSUBBER_KIDS_TV_DIR",
    LibraryCategory.ADULT_MOVIE: "AUTOSUBBER_ADULT_MOVIES_DIR",
    LibraryCategory.ADULT_SERIES: "AUTOSUBBER_ADULT_TV_DIR",
}

# Required credentials, in the order they are reported when missing
OMDB_API_KEY_VAR = "OMDB_API_KEY"
OPENSUBTITLES_API_KEY_VAR = "OPENSUBTITLES_API_KEY"
OPENSUBTITLES_USERNAME_VAR = "OPENSUBTITLES_USERNAME"
OPENSUBTITLES_PASSWORD_VAR = "OPENSUBTITLES_PASSWORD"

REQUIRED_ENV_VARS = (
    OMDB_API_KEY_VAR,
    OPENSUBTITLES_API_KEY_VAR,
    OPENSUBTITLES_USERNAME_VAR,
    OPENSUBTITLES_PASSWORD_VAR,
)

SUBTITLE_LANGUAGE_VAR = "AUTOSUBBER_SUBTITLE_LANGUAGE"

# Ratings considered suitable for the kids libraries
CHILD_APPROPRIATE_RATINGS: FrozenSet[str] = frozenset({"G", "PG"})

# Metadata provider
OMDB_BASE_URL = 'http://www.omdbapi.com/'

# Subtitle provider
OPENSUBTITLES_BASE_URL = 'https://api.opensubtitles.com/api/v1'
OPENSUBTITLES_USER_AGENT = 'AutoSubber v1.0.0'
DEFAULT_SUBTITLE_LANGUAGE = 'en'
SUBTITLE_EXTENSION = '.srt'

# Deadline shared by every subtitle provider call of one job, in seconds
SUBTITLE_TIMEOUT_SECONDS: float = 30.0

# Request timeout in seconds
REQUEST_TIMEOUT_SECONDS: int = 10

# Logging
DEFAULT_LOG_FILE = 'autosubber.log'
LOG_ROTATION = '10 MB'
LOG_RETENTION = '7 days'
