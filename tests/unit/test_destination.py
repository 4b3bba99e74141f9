"""Tests for library classification."""

import pytest
from pathlib import Path

from autosubber.classification.destination import (
    is_child_appropriate,
    classify,
    destination_directory,
    build_destination_path,
)
from autosubber.config.settings import LibraryCategory
from autosubber.models.metadata import MetadataRecord


class TestIsChildAppropriate:
    """Tests for is_child_appropriate function."""

    @pytest.mark.parametrize("rating", ["G", "PG"])
    def test_child_ratings(self, rating):
        """G and PG are suitable for children."""
        assert is_child_appropriate(rating) is True

    @pytest.mark.parametrize("rating", ["", "PG-13", "R", "NR", "Unrated", "TV-Y", "pg", "N/A"])
    def test_other_ratings(self, rating):
        """Anything else is not, case-sensitive."""
        assert is_child_appropriate(rating) is False


class TestClassify:
    """Truth table of classify."""

    @pytest.mark.parametrize("rated,media_type,expected", [
        ("PG", "movie", LibraryCategory.CHILD_MOVIE),
        ("G", "movie", LibraryCategory.CHILD_MOVIE),
        ("PG", "series", LibraryCategory.CHILD_SERIES),
        ("R", "movie", LibraryCategory.ADULT_MOVIE),
        ("NR", "series", LibraryCategory.ADULT_SERIES),
        ("", "movie", LibraryCategory.ADULT_MOVIE),
        ("G", "episode", LibraryCategory.CHILD_SERIES),
    ])
    def test_truth_table(self, rated, media_type, expected):
        """Rating and type select one of four categories."""
        record = MetadataRecord(rated=rated, type=media_type)
        assert classify(record) is expected

    def test_deterministic(self):
        """Same record always gives the same category."""
        record = MetadataRecord(rated="PG-13", type="movie")
        assert {classify(record) for _ in range(5)} == {LibraryCategory.ADULT_MOVIE}


class TestDestinationDirectory:
    """Tests for destination_directory and build_destination_path."""

    @pytest.mark.parametrize("rated,media_type,expected", [
        ("PG", "movie", Path("/var/lib/plexmediaserver/Movies")),
        ("PG", "series", Path("/var/lib/plexmediaserver/TV")),
        ("R", "movie", Path("/var/lib/plexmediaserver/adult/Movies")),
        ("NR", "series", Path("/var/lib/plexmediaserver/adult/TV")),
        ("", "movie", Path("/var/lib/plexmediaserver/adult/Movies")),
    ])
    def test_default_directories(self, rated, media_type, expected):
        """Default mapping points at the Plex library trees."""
        record = MetadataRecord(rated=rated, type=media_type)
        assert destination_directory(record) == expected

    def test_custom_mapping(self, library_dirs):
        """A configured mapping is honoured."""
        record = MetadataRecord(rated="R", type="series")
        assert destination_directory(record, library_dirs) == library_dirs[LibraryCategory.ADULT_SERIES]

    def test_build_destination_keeps_release_name(self):
        """The folder keeps its original release name."""
        record = MetadataRecord(rated="PG", type="movie")
        result = build_destination_path(record, "Some.Movie.2020.1080p")
        assert result == Path("/var/lib/plexmediaserver/Movies/Some.Movie.2020.1080p")
