"""Configuration and CLI handling."""

from autosubber.config.settings import (
    LibraryCategory,
    DEFAULT_LIBRARY_DIRS,
    REQUIRED_ENV_VARS,
    SUBTITLE_TIMEOUT_SECONDS,
)
from autosubber.config.cli import (
    USAGE,
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
)
from autosubber.config.manager import (
    AppConfig,
    load_environment,
    find_missing_credentials,
    load_library_dirs,
    load_config,
)

__all__ = [
    "LibraryCategory",
    "DEFAULT_LIBRARY_DIRS",
    "REQUIRED_ENV_VARS",
    "SUBTITLE_TIMEOUT_SECONDS",
    "USAGE",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
    "AppConfig",
    "load_environment",
    "find_missing_credentials",
    "load_library_dirs",
    "load_config",
]
