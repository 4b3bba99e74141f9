"""Entry point for the autosubber package.

Meant to be called by the torrent client once a download completes.
Run with: python -m autosubber [--dry-run] <TorrentID> <Torrent Name> <Torrent Path>
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger
from rich.markup import escape

from autosubber.api.exceptions import APIConfigurationError
from autosubber.config import (
    USAGE,
    CLIArgs,
    args_to_cli_args,
    load_config,
    load_environment,
    parse_arguments,
)
from autosubber.config.settings import DEFAULT_LOG_FILE, LOG_RETENTION, LOG_ROTATION
from autosubber.models.job import TorrentJob
from autosubber.pipeline import JobOrchestrator
from autosubber.ui import ConsoleUI


def setup_logging(debug: bool = False, log_file: Path = Path(DEFAULT_LOG_FILE)) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, show debug messages on stderr.
        log_file: Rotating log file path.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        str(log_file),
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="DEBUG",
    )


def display_job(job: TorrentJob, cli_args: CLIArgs, console: ConsoleUI) -> None:
    """
    Display the job header.

    Args:
        job: Job about to run.
        cli_args: Parsed CLI arguments.
        console: Console UI instance.
    """
    mode_status = "[yellow]SIMULATION[/yellow]" if cli_args.dry_run else "[green]Normal[/green]"

    console.print_panel(
        f"TorrentID: [cyan]{escape(str(job.torrent_id))}[/cyan]\n"
        f"Torrent Name: [cyan]{escape(str(job.torrent_name))}[/cyan]\n"
        f"Torrent Path: [cyan]{escape(str(job.torrent_path))}[/cyan]\n"
        f"Mode: {mode_status}",
        title="AutoSubber",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        1 when credentials are missing, 0 otherwise (job failures included).
    """
    cli_args = args_to_cli_args(parse_arguments(argv))
    setup_logging(cli_args.debug, cli_args.log_file)
    console = ConsoleUI()

    load_environment()
    try:
        config = load_config()
    except APIConfigurationError as e:
        console.print_error(str(e))
        return 1

    if not cli_args.has_job:
        console.print(USAGE, markup=False)
        return 0

    job = cli_args.to_job()
    display_job(job, cli_args, console)

    result = JobOrchestrator.from_config(config, console).run(job, dry_run=cli_args.dry_run)
    logger.info(f"Job {job.torrent_id} finished: {result.status.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
