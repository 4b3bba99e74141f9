"""Tests for release name parsing."""

import pytest

from autosubber.classification.name_parser import parse_torrent_name


class TestParseTorrentName:
    """Tests for parse_torrent_name function."""

    def test_dotted_release_name(self):
        """Dots in the title become spaces."""
        assert parse_torrent_name("Some.Movie.2020.1080p") == ("Some Movie", "2020")

    def test_parenthesized_year(self):
        """Year in parentheses is accepted."""
        assert parse_torrent_name("Some Movie (1999)") == ("Some Movie", "1999")

    def test_space_separated_year(self):
        """Year separated by a space is accepted."""
        assert parse_torrent_name("Some Movie 1999 720p") == ("Some Movie", "1999")

    def test_sample_names(self, sample_release_names):
        """All sample release names parse to the expected pair."""
        for name, expected in sample_release_names.items():
            assert parse_torrent_name(name) == expected

    def test_title_is_trimmed(self):
        """Surrounding whitespace is removed from the title."""
        assert parse_torrent_name("  Spaced Out   2001") == ("Spaced Out", "2001")

    def test_first_year_wins(self):
        """The first 4-digit group is the year."""
        assert parse_torrent_name("Blade.Runner.2049.2017.2160p") == ("Blade Runner", "2049")

    def test_title_starting_with_digits(self):
        """A title made of digits is consumed as the year."""
        assert parse_torrent_name("1917.2019.1080p") == ("", "1917")

    def test_resolution_taken_as_year(self):
        """A 4-digit resolution is the first 4-digit group."""
        assert parse_torrent_name("Untitled.1080p.WEB") == ("Untitled", "1080")

    def test_implausible_year_accepted(self):
        """No plausibility check on the digits."""
        assert parse_torrent_name("Odd.Name.0000") == ("Odd Name", "0000")

    @pytest.mark.parametrize("name", [
        "No.Year.Here.720p",
        "Short.123",
        "",
    ])
    def test_no_year_returns_empty(self, name):
        """Names without a 4-digit group give empty strings."""
        assert parse_torrent_name(name) == ("", "")
