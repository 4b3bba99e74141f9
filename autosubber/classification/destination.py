"""Library classification from OMDb rating and media type."""

from pathlib import Path
from typing import Mapping

from autosubber.config.settings import (
    CHILD_APPROPRIATE_RATINGS,
    DEFAULT_LIBRARY_DIRS,
    LibraryCategory,
)
from autosubber.models.metadata import MetadataRecord


def is_child_appropriate(rating: str) -> bool:
    """Only an exact "G" or "PG" rating counts as suitable for children."""
    return rating in CHILD_APPROPRIATE_RATINGS


def classify(record: MetadataRecord) -> LibraryCategory:
    """
    Map a metadata record to its library category.

    Args:
        record: OMDb metadata.

    Returns:
        One of the four LibraryCategory values.
    """
    if is_child_appropriate(record.rated):
        if record.is_movie:
            return LibraryCategory.CHILD_MOVIE
        return LibraryCategory.CHILD_SERIES

    if record.is_movie:
        return LibraryCategory.ADULT_MOVIE
    return LibraryCategory.ADULT_SERIES


def destination_directory(
    record: MetadataRecord,
    library_dirs: Mapping[LibraryCategory, Path] = DEFAULT_LIBRARY_DIRS
) -> Path:
    """Return the library directory a record belongs to."""
    return Path(library_dirs[classify(record)])


def build_destination_path(
    record: MetadataRecord,
    torrent_name: str,
    library_dirs: Mapping[LibraryCategory, Path] = DEFAULT_LIBRARY_DIRS
) -> Path:
    """
    Build the final folder path, keeping the original release name.

    Args:
        record: OMDb metadata.
        torrent_name: Release name (folder name).
        library_dirs: Category to directory mapping.

    Returns:
        Destination path of the moved folder.
    """
    return destination_directory(record, library_dirs) / torrent_name
