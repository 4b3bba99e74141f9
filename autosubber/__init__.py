"""
AutoSubber - torrent post-processing for a Plex library.

Handles one finished download per run:
- Parses title and year from the release name
- Classifies it with OMDb (movie or series, kids or adult rating)
- Fetches an English subtitle from OpenSubtitles
- Moves the folder into the matching library directory
"""

__version__ = "1.0.0"
