"""Tests for file operations."""

import pytest
from pathlib import Path

from autosubber.filesystem.file_ops import (
    move_folder,
    subtitle_path_for,
    write_subtitle,
)


class TestSubtitlePathFor:
    """Tests for subtitle_path_for function."""

    def test_replaces_extension(self):
        """Last extension is replaced by .srt."""
        assert subtitle_path_for(Path("/media/movie.mkv")) == Path("/media/movie.srt")

    def test_release_folder_name(self):
        """A dotted release name loses its last dotted segment."""
        result = subtitle_path_for(Path("/downloads/Some.Movie.2020.1080p"))
        assert result == Path("/downloads/Some.Movie.2020.srt")

    def test_no_extension(self):
        """.srt is appended when there is no extension."""
        assert subtitle_path_for(Path("/downloads/Movie")) == Path("/downloads/Movie.srt")


class TestWriteSubtitle:
    """Tests for write_subtitle function."""

    def test_writes_content(self, tmp_path):
        """Content is written as bytes."""
        path = tmp_path / "movie.srt"

        result = write_subtitle(path, b"1\nHello\n")

        assert result == path
        assert path.read_bytes() == b"1\nHello\n"

    def test_missing_directory(self, tmp_path):
        """Writing into a missing directory raises OSError."""
        with pytest.raises(OSError):
            write_subtitle(tmp_path / "nope" / "movie.srt", b"x")


class TestMoveFolder:
    """Tests for move_folder function."""

    def test_moves_folder(self, tmp_path):
        """Moves the folder with its content."""
        source = tmp_path / "downloads" / "Some.Movie.2020.1080p"
        source.mkdir(parents=True)
        (source / "movie.mkv").write_text("video content")
        library = tmp_path / "Movies"
        library.mkdir()
        dest = library / source.name

        move_folder(source, dest)

        assert not source.exists()
        assert (dest / "movie.mkv").read_text() == "video content"

    def test_dry_run_does_not_move(self, tmp_path):
        """Dry run does not move the folder."""
        source = tmp_path / "source"
        source.mkdir()
        dest = tmp_path / "dest"

        move_folder(source, dest, dry_run=True)

        assert source.exists()
        assert not dest.exists()

    def test_missing_source(self, tmp_path):
        """Missing source raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            move_folder(tmp_path / "nonexistent", tmp_path / "dest")

    def test_existing_destination(self, tmp_path):
        """Existing destination is not overwritten."""
        source = tmp_path / "source"
        source.mkdir()
        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "keep.txt").touch()

        with pytest.raises(FileExistsError):
            move_folder(source, dest)

        assert source.exists()
        assert (dest / "keep.txt").exists()

    def test_creates_library_directory(self, tmp_path):
        """Creates the library directory if needed."""
        source = tmp_path / "source"
        source.mkdir()
        dest = tmp_path / "no_library" / "source"

        move_folder(source, dest)

        assert dest.is_dir()
        assert not source.exists()
