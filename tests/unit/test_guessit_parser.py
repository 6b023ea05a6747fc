"""
Tests unitaires pour GuessitFilenameParser.

Valide le parsing de l'identite (titre, annee, saison, episode) des noms
de fichiers video avec guessit, avec et sans type hint.
"""

import pytest

from mediorg.adapters.parsing.guessit_parser import GuessitFilenameParser
from mediorg.core.value_objects.parsed_info import MediaType


@pytest.fixture
def parser() -> GuessitFilenameParser:
    """Instance du parser pour les tests."""
    return GuessitFilenameParser()


class TestGuessitFilenameParserMovies:
    """Tests pour le parsing de noms de fichiers de films."""

    def test_basic_movie_parsing(self, parser: GuessitFilenameParser) -> None:
        """Film basique avec annee et tags techniques."""
        result = parser.parse("Inception.2010.1080p.BluRay.x264-SPARKS.mkv")

        assert result.title == "Inception"
        assert result.year == 2010
        assert result.media_type == MediaType.MOVIE
        assert result.season is None
        assert result.episode is None

    def test_movie_with_multi_word_title(self, parser: GuessitFilenameParser) -> None:
        """Les points du titre deviennent des espaces."""
        result = parser.parse("The.Dark.Knight.2008.720p.BluRay.mkv")

        assert result.title == "The Dark Knight"
        assert result.year == 2008

    def test_movie_type_hint(self, parser: GuessitFilenameParser) -> None:
        """Avec un type hint MOVIE, le resultat est un film."""
        result = parser.parse("Star.Wars.Episode.IV.1977.mkv", MediaType.MOVIE)

        assert result.media_type == MediaType.MOVIE
        assert "Star Wars" in result.title


class TestGuessitFilenameParserEpisodes:
    """Tests pour le parsing de noms de fichiers d'episodes."""

    def test_basic_episode_parsing(self, parser: GuessitFilenameParser) -> None:
        """Episode au format SxxEyy."""
        result = parser.parse("Breaking.Bad.S01E02.720p.HDTV.x264-GRP.mkv")

        assert result.title == "Breaking Bad"
        assert result.media_type == MediaType.EPISODE
        assert result.season == 1
        assert result.episode == 2

    def test_double_episode_keeps_first(self, parser: GuessitFilenameParser) -> None:
        """Un double episode garde le premier numero."""
        result = parser.parse("Show.S02E03E04.mkv")

        assert result.season == 2
        assert result.episode == 3

    def test_full_path_uses_parent_folders(self, parser: GuessitFilenameParser) -> None:
        """Le chemin complet permet de retrouver la serie depuis les repertoires."""
        result = parser.parse(
            "/media/Breaking Bad/Season 2/Breaking.Bad.S02E05.mkv",
            MediaType.EPISODE,
        )

        assert result.title == "Breaking Bad"
        assert result.season == 2
        assert result.episode == 5
