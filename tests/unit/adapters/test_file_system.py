"""
Tests unitaires pour l'adaptateur systeme de fichiers.
"""

import io
from pathlib import Path

from mediorg.adapters.file_system import FileSystemAdapter, PathFile, StreamFile


class TestPathFile:
    """Tests pour le fichier adosse a un chemin."""

    def test_name_and_path(self, write_file) -> None:
        path = write_file("Movie.2020.mkv")
        local = PathFile(path)

        assert local.name == "Movie.2020.mkv"
        assert local.path == path
        assert local.stem == "Movie.2020"
        assert local.extension == ".mkv"

    def test_open_reads_content(self, write_file) -> None:
        local = PathFile(write_file("Movie.mkv", b"content"))
        with local.open() as handle:
            assert handle.read() == b"content"

    def test_equality_by_path(self, tmp_path: Path) -> None:
        assert PathFile(tmp_path / "a.mkv") == PathFile(tmp_path / "a.mkv")
        assert PathFile(tmp_path / "a.mkv") != PathFile(tmp_path / "b.mkv")


class TestStreamFile:
    """Tests pour le fichier sans chemin."""

    def test_has_no_path(self) -> None:
        assert StreamFile("Movie.mkv", b"data").path is None

    def test_bytes_can_be_read_twice(self) -> None:
        local = StreamFile("Movie.mkv", b"data")
        with local.open() as first, local.open() as second:
            assert first.read() == b"data"
            assert second.read() == b"data"

    def test_opener_callable(self) -> None:
        local = StreamFile("Movie.mkv", lambda: io.BytesIO(b"from opener"))
        with local.open() as handle:
            assert handle.read() == b"from opener"


class TestListMediaFiles:
    """Tests pour le parcours recursif des repertoires."""

    def test_lists_videos_recursively_sorted(self, tmp_path: Path, write_file) -> None:
        write_file("b/Second.mkv")
        write_file("a/First.mp4")
        write_file("notes.txt")

        result = list(FileSystemAdapter().list_media_files(tmp_path))

        assert [p.name for p in result] == ["First.mp4", "Second.mkv"]

    def test_subtitles_only_on_request(self, tmp_path: Path, write_file) -> None:
        write_file("Movie.mkv")
        write_file("Movie.en.srt")
        adapter = FileSystemAdapter()

        without = [p.name for p in adapter.list_media_files(tmp_path)]
        with_subs = [p.name for p in adapter.list_media_files(tmp_path, True)]

        assert without == ["Movie.mkv"]
        assert sorted(with_subs) == ["Movie.en.srt", "Movie.mkv"]

    def test_ignores_samples_and_symlinks(self, tmp_path: Path, write_file) -> None:
        real = write_file("Movie.mkv")
        write_file("Movie.sample.mkv")
        (tmp_path / "Link.mkv").symlink_to(real)

        result = [p.name for p in FileSystemAdapter().list_media_files(tmp_path)]

        assert result == ["Movie.mkv"]

    def test_extension_case_insensitive(self, tmp_path: Path, write_file) -> None:
        write_file("MOVIE.MKV")
        result = list(FileSystemAdapter().list_media_files(tmp_path))
        assert len(result) == 1
