"""Subtitle search results and fetch outcome."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional


@dataclass(frozen=True)
class SubtitleFile:
    """Downloadable file attached to a subtitle entry."""

    file_id: int
    file_name: str = ''


@dataclass(frozen=True)
class SubtitleEntry:
    """One OpenSubtitles search hit."""

    subtitle_id: str = ''
    language: str = ''
    files: List[SubtitleFile] = field(default_factory=list)

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "SubtitleEntry":
        """Build an entry from an item of the search response ``data`` list."""
        attributes = item.get("attributes") or {}
        files = [
            SubtitleFile(file_id=int(f["file_id"]), file_name=str(f.get("file_name") or ''))
            for f in attributes.get("files") or []
            if f.get("file_id") is not None
        ]
        return cls(
            subtitle_id=str(attributes.get("subtitle_id") or item.get("id") or ''),
            language=str(attributes.get("language") or ''),
            files=files,
        )


class SubtitleStatus(str, Enum):
    """Outcome of a best-effort subtitle fetch."""

    ATTACHED = "attached"
    ALREADY_PRESENT = "already_present"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SubtitleResult:
    """
    Result of ensuring a subtitle exists beside a download.

    Attributes:
        status: What happened.
        path: Subtitle file location (set for every status).
        reason: Why the subtitle was skipped.
    """

    status: SubtitleStatus
    path: Optional[Path] = None
    reason: Optional[str] = None

    @classmethod
    def attached(cls, path: Path) -> "SubtitleResult":
        return cls(SubtitleStatus.ATTACHED, path)

    @classmethod
    def already_present(cls, path: Path) -> "SubtitleResult":
        return cls(SubtitleStatus.ALREADY_PRESENT, path)

    @classmethod
    def skipped(cls, path: Optional[Path], reason: str) -> "SubtitleResult":
        return cls(SubtitleStatus.SKIPPED, path, reason)

    @property
    def available(self) -> bool:
        """True when a subtitle file sits beside the media."""
        return self.status is not SubtitleStatus.SKIPPED
