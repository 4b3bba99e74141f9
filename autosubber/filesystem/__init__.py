"""Filesystem operations for post-processing."""

from autosubber.filesystem.file_ops import (
    subtitle_path_for,
    write_subtitle,
    move_folder,
)

__all__ = [
    "subtitle_path_for",
    "write_subtitle",
    "move_folder",
]
