"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from autosubber.config.manager import AppConfig
from autosubber.config.settings import LibraryCategory


@pytest.fixture
def sample_release_names():
    """Sample release names with their expected (title, year)."""
    return {
        "Some.Movie.2020.1080p": ("Some Movie", "2020"),
        "The.Matrix.1999.MULTi.1080p.BluRay.x264-GROUP": ("The Matrix", "1999"),
        "Inception (2010) [1080p]": ("Inception", "2010"),
        "Blade_Runner_(1982)": ("Blade_Runner", "1982"),
        "Up - 2009 - 720p": ("Up", "2009"),
    }


@pytest.fixture
def omdb_movie_payload():
    """OMDb response for a PG movie."""
    return {
        "Title": "Some Movie",
        "Year": "2020",
        "Rated": "PG",
        "Released": "14 Feb 2020",
        "Runtime": "101 min",
        "Genre": "Animation, Family",
        "Director": "Jane Doe",
        "Plot": "Something happens.",
        "Ratings": [
            {"Source": "Internet Movie Database", "Value": "7.1/10"},
            {"Source": "Rotten Tomatoes", "Value": "88%"},
        ],
        "imdbRating": "7.1",
        "imdbID": "tt0133093",
        "Type": "movie",
        "Response": "True",
    }


@pytest.fixture
def omdb_error_payload():
    """OMDb response for an unknown title."""
    return {"Response": "False", "Error": "Movie not found!"}


@pytest.fixture
def library_dirs(tmp_path):
    """Four library directories created under tmp_path."""
    dirs = {
        LibraryCategory.CHILD_MOVIE: tmp_path / "plex" / "Movies",
        LibraryCategory.CHILD_SERIES: tmp_path / "plex" / "TV",
        LibraryCategory.ADULT_MOVIE: tmp_path / "plex" / "adult" / "Movies",
        LibraryCategory.ADULT_SERIES: tmp_path / "plex" / "adult" / "TV",
    }
    for path in dirs.values():
        path.mkdir(parents=True)
    return dirs


@pytest.fixture
def app_config(library_dirs):
    """AppConfig pointing at temporary library directories."""
    return AppConfig(
        omdb_api_key="omdb_key",
        opensubtitles_api_key="os_key",
        opensubtitles_username="user",
        opensubtitles_password="secret",
        library_dirs=library_dirs,
    )


@pytest.fixture
def credentials_env():
    """Environment with every required credential."""
    return {
        "OMDB_API_KEY": "omdb_key",
        "OPENSUBTITLES_API_KEY": "os_key",
        "OPENSUBTITLES_USERNAME": "user",
        "OPENSUBTITLES_PASSWORD": "secret",
    }
