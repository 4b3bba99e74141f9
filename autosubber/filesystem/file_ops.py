"""File operations for moving downloads and writing subtitles."""

import shutil
from pathlib import Path

from loguru import logger

from autosubber.config.settings import SUBTITLE_EXTENSION


def subtitle_path_for(media_path: Path) -> Path:
    """
    Derive the subtitle location for a media path.

    The last extension is replaced by ``.srt``; a name without extension
    gets ``.srt`` appended.

    Examples:
        >>> subtitle_path_for(Path("/downloads/Some.Movie.2020.1080p"))
        PosixPath('/downloads/Some.Movie.2020.srt')
    """
    return Path(media_path).with_suffix(SUBTITLE_EXTENSION)


def write_subtitle(path: Path, content: bytes) -> Path:
    """
    Write subtitle content to disk.

    Raises:
        OSError: The file could not be written.
    """
    path.write_bytes(content)
    logger.info(f"Subtitle written: {path} ({len(content)} bytes)")
    return path


def move_folder(source: Path, destination: Path, dry_run: bool = False) -> None:
    """
    Move a downloaded folder into a library directory.

    The library directory is created when missing; an existing destination
    is never overwritten.

    Args:
        source: Folder to move.
        destination: Final folder path (library directory / release name).
        dry_run: If True, only log the operation.

    Raises:
        FileNotFoundError: Source does not exist.
        FileExistsError: Destination already exists.
        OSError: The move itself failed.
    """
    if dry_run:
        logger.info(f'SIMULATION - Move: {source} -> {destination}')
        return

    if not source.exists():
        raise FileNotFoundError(f"Source not found: {source}")

    # shutil.move would nest the folder inside an existing destination
    if destination.exists():
        raise FileExistsError(f"Destination already exists: {destination}")

    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.move(str(source), str(destination))
    logger.info(f'Folder moved: {source} -> {destination}')
