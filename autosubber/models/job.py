"""Torrent job model."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TorrentJob:
    """
    One completed download handed over by the torrent client.

    Attributes:
        torrent_id: Client-side identifier, only used for logging.
        torrent_name: Release name, also the name of the downloaded folder.
        torrent_path: Directory containing the downloaded folder.
    """

    torrent_id: str
    torrent_name: str
    torrent_path: Path

    @property
    def source_path(self) -> Path:
        """Full path of the downloaded folder."""
        return Path(self.torrent_path) / self.torrent_name
