"""Release name parsing and library classification."""

from autosubber.classification.name_parser import (
    RELEASE_NAME_PATTERN,
    parse_torrent_name,
)
from autosubber.classification.destination import (
    is_child_appropriate,
    classify,
    destination_directory,
    build_destination_path,
)

__all__ = [
    "RELEASE_NAME_PATTERN",
    "parse_torrent_name",
    "is_child_appropriate",
    "classify",
    "destination_directory",
    "build_destination_path",
]
