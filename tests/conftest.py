"""
Fixtures pytest partagees pour les tests MediOrg.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock du parser de noms de fichiers (IFilenameParser)
- Settings de test avec chemins temporaires
- Fabriques de fichiers locaux et de medias
"""

from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import pytest

from mediorg.adapters.file_system import PathFile, StreamFile
from mediorg.config import Settings
from mediorg.core.entities.media import Episode, Movie
from mediorg.core.ports.parser import IFilenameParser
from mediorg.core.value_objects import Metadata, MediaType, ParsedFilename


@pytest.fixture
def mock_filename_parser() -> MagicMock:
    """
    Mock de IFilenameParser pour les tests.

    Retourne un ParsedFilename basique par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFilenameParser)

    def default_parse(filename: str, type_hint: Optional[MediaType] = None) -> ParsedFilename:
        """Parse basique qui utilise le type_hint ou MOVIE."""
        title = Path(filename).stem
        media_type = type_hint if type_hint else MediaType.MOVIE
        return ParsedFilename(title=title, media_type=media_type)

    mock.parse.side_effect = default_parse
    return mock


@pytest.fixture
def write_file(tmp_path: Path):
    """Fabrique de fichiers sur disque : write_file("a/b.mkv", b"data") -> Path."""

    def _write(relative: str, content: bytes = b"video") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def local_movie(write_file) -> Movie:
    """Film local adosse a un vrai fichier."""
    path = write_file(
        "downloads/Movie.Name.2020.1080p.BluRay.x264-GROUP.mkv", b"movie-bytes"
    )
    return Movie(
        file=PathFile(path),
        metadata=Metadata.parse(path.stem),
        title="Movie Name",
        year=2020,
    )


@pytest.fixture
def local_episode(write_file) -> Episode:
    """Episode local adosse a un vrai fichier."""
    path = write_file(
        "downloads/Show.Name.S01E02.720p.HDTV.x264-GRP.mkv", b"episode-bytes"
    )
    return Episode(
        file=PathFile(path),
        metadata=Metadata.parse(path.stem),
        show="Show Name",
        season=1,
        episode=2,
    )


@pytest.fixture
def stream_movie() -> Movie:
    """Film local sans chemin (flux en memoire)."""
    return Movie(
        file=StreamFile("Stream.Movie.2019.720p.WEB-DL.mkv", b"stream-bytes"),
        metadata=Metadata.parse("Stream.Movie.2019.720p.WEB-DL"),
        title="Stream Movie",
        year=2019,
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour une mediatheque isolee par test.
    """
    return Settings(
        _env_file=None,
        movies_dir=tmp_path / "library" / "Movies",
        tvshows_dir=tmp_path / "library" / "TV Shows",
        log_file=tmp_path / "test.log",
    )
