"""Configuration loading from the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from autosubber.api.exceptions import APIConfigurationError
from autosubber.config.settings import (
    DEFAULT_LIBRARY_DIRS,
    DEFAULT_SUBTITLE_LANGUAGE,
    LIBRARY_DIR_ENV_VARS,
    LibraryCategory,
    OMDB_API_KEY_VAR,
    OPENSUBTITLES_API_KEY_VAR,
    OPENSUBTITLES_PASSWORD_VAR,
    OPENSUBTITLES_USER_AGENT,
    OPENSUBTITLES_USERNAME_VAR,
    REQUIRED_ENV_VARS,
    SUBTITLE_LANGUAGE_VAR,
    SUBTITLE_TIMEOUT_SECONDS,
)


@dataclass(frozen=True)
class AppConfig:
    """
    Process-wide configuration, built once at startup.

    Attributes:
        omdb_api_key: OMDb API key.
        opensubtitles_api_key: OpenSubtitles consumer key.
        opensubtitles_username: OpenSubtitles account username.
        opensubtitles_password: OpenSubtitles account password.
        library_dirs: Library directory for each classification.
        subtitle_language: Language code used for subtitle searches.
        subtitle_timeout: Deadline for the subtitle provider calls, in seconds.
        user_agent: User-Agent sent to OpenSubtitles.
    """

    omdb_api_key: str
    opensubtitles_api_key: str
    opensubtitles_username: str
    opensubtitles_password: str
    library_dirs: Dict[LibraryCategory, Path] = field(
        default_factory=lambda: dict(DEFAULT_LIBRARY_DIRS)
    )
    subtitle_language: str = DEFAULT_SUBTITLE_LANGUAGE
    subtitle_timeout: float = SUBTITLE_TIMEOUT_SECONDS
    user_agent: str = OPENSUBTITLES_USER_AGENT


def load_environment(env_file: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file without overriding the real environment.

    Args:
        env_file: Explicit .env path (default: search from the working directory).

    Returns:
        True if a .env file was found and loaded.
    """
    if env_file is not None:
        return load_dotenv(dotenv_path=env_file)
    return load_dotenv()


def find_missing_credentials(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    List required credentials that are absent or empty.

    Args:
        environ: Environment mapping (default: os.environ).

    Returns:
        Missing variable names, in declaration order.
    """
    env = os.environ if environ is None else environ
    return [name for name in REQUIRED_ENV_VARS if not env.get(name)]


def load_library_dirs(environ: Mapping[str, str]) -> Dict[LibraryCategory, Path]:
    """Resolve the four library directories, applying environment overrides."""
    library_dirs = {}
    for category, default in DEFAULT_LIBRARY_DIRS.items():
        override = environ.get(LIBRARY_DIR_ENV_VARS[category])
        library_dirs[category] = Path(override) if override else default
    return library_dirs


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build the application configuration.

    Args:
        environ: Environment mapping (default: os.environ).

    Returns:
        Populated AppConfig.

    Raises:
        APIConfigurationError: A required credential is missing.
    """
    env = os.environ if environ is None else environ

    missing = find_missing_credentials(env)
    if missing:
        logger.error(f"Missing credentials: {', '.join(missing)}")
        raise APIConfigurationError(missing)

    return AppConfig(
        omdb_api_key=env[OMDB_API_KEY_VAR],
        opensubtitles_api_key=env[OPENSUBTITLES_API_KEY_VAR],
        opensubtitles_username=env[OPENSUBTITLES_USERNAME_VAR],
        opensubtitles_password=env[OPENSUBTITLES_PASSWORD_VAR],
        library_dirs=load_library_dirs(env),
        subtitle_language=env.get(SUBTITLE_LANGUAGE_VAR) or DEFAULT_SUBTITLE_LANGUAGE,
    )
