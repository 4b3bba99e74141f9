"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from autosubber.config.settings import DEFAULT_LOG_FILE
from autosubber.models.job import TorrentJob

USAGE = "Usage: autosubber [--dry-run] <TorrentID> <Torrent Name> <Torrent Path>"


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        positional: Positional arguments as given (TorrentID, name, path).
        dry_run: If True, print the intended move without doing anything.
        debug: If True, enable debug logging.
        log_file: Log file path.
    """

    positional: List[str]
    dry_run: bool = False
    debug: bool = False
    log_file: Path = Path(DEFAULT_LOG_FILE)

    @property
    def has_job(self) -> bool:
        """Check if enough positional arguments were given to describe a job."""
        return len(self.positional) >= 3

    def to_job(self) -> TorrentJob:
        """
        Build the TorrentJob from the first three positional arguments.

        Raises:
            ValueError: Fewer than three positional arguments.
        """
        if not self.has_job:
            raise ValueError(USAGE)
        torrent_id, torrent_name, torrent_path = self.positional[:3]
        return TorrentJob(
            torrent_id=torrent_id,
            torrent_name=torrent_name,
            torrent_path=Path(torrent_path),
        )


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Positional arguments are collected loosely so that a short argument
    list can be answered with the usage line and a zero exit status.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='autosubber',
        usage='%(prog)s [--dry-run] <TorrentID> <Torrent Name> <Torrent Path>',
        description="""
        Classifies a finished download with OMDb, fetches English subtitles
        from OpenSubtitles and moves the folder into the matching Plex library.
        """,
        epilog="""
        Torrent clients should put -- before the three job arguments, so that
        a torrent name starting with '-' is not read as an option:
        autosubber --dry-run -- 42 -Some.Movie.2020- /downloads
        """
    )

    parser.add_argument(
        'positional',
        nargs='*',
        metavar='ARG',
        help="torrent id, torrent name and torrent path"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="simulation mode - print the intended move, no subtitles, no file changes"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    parser.add_argument(
        '--log-file',
        default=DEFAULT_LOG_FILE,
        help=f"log file path (default: {DEFAULT_LOG_FILE})"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """Convert argparse Namespace to CLIArgs dataclass."""
    return CLIArgs(
        positional=list(namespace.positional),
        dry_run=namespace.dry_run,
        debug=namespace.debug,
        log_file=Path(namespace.log_file),
    )
