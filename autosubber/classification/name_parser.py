"""Release name parsing."""

import re
from typing import Tuple

# Shortest leading title, optional separators, optional parentheses around a 4-digit year
RELEASE_NAME_PATTERN = re.compile(r'^(.*?)[\s._-]*\(?(\d{4})\)?')


def parse_torrent_name(torrent_name: str) -> Tuple[str, str]:
    """
    Extract a title and year from a torrent release name.

    The first 4-digit group is taken as the year, without checking that it
    is plausible. Dots in the title are turned into spaces.

    Args:
        torrent_name: Raw release name.

    Returns:
        Tuple (title, year), or ("", "") if no 4-digit group is found.

    Examples:
        >>> parse_torrent_name("Some.Movie.2020.1080p")
        ('Some Movie', '2020')
        >>> parse_torrent_name("Some Movie (1999) [BluRay]")
        ('Some Movie', '1999')
    """
    match = RELEASE_NAME_PATTERN.search(torrent_name)
    if not match:
        return "", ""

    title = match.group(1).replace('.', ' ').strip()
    return title, match.group(2)
