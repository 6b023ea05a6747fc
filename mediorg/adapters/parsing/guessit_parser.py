"""
Implementation du parser de noms de fichiers avec guessit.

Ce module fournit GuessitFilenameParser qui implemente IFilenameParser
pour extraire l'identite (titre, annee, saison, episode) des noms de
fichiers video.
"""

from typing import Any, Optional

from guessit import guessit

from mediorg.core.ports.parser import IFilenameParser
from mediorg.core.value_objects.parsed_info import MediaType, ParsedFilename


class GuessitFilenameParser(IFilenameParser):
    """
    Parser de noms de fichiers utilisant la bibliotheque guessit.

    Accepte un nom de fichier seul ou un chemin complet : dans ce cas
    guessit exploite aussi les repertoires parents ("Show/Season 1/01.mkv").
    """

    def parse(
        self, filename: str, type_hint: Optional[MediaType] = None
    ) -> ParsedFilename:
        """
        Parse un nom de fichier video et extrait son identite.

        Args:
            filename: Nom ou chemin du fichier a parser
            type_hint: Type de media attendu. Si fourni, force guessit
                       a utiliser ce type.

        Returns:
            ParsedFilename avec les informations extraites.
        """
        options = self._build_options(type_hint)
        result = guessit(filename, options)
        return self._map_to_parsed_filename(result, type_hint)

    def _build_options(self, type_hint: Optional[MediaType]) -> dict[str, Any]:
        """
        Construit le dictionnaire d'options pour guessit.

        Args:
            type_hint: Type de media attendu

        Returns:
            Dictionnaire d'options pour guessit
        """
        options: dict[str, Any] = {}

        if type_hint == MediaType.MOVIE:
            options["type"] = "movie"
        elif type_hint == MediaType.EPISODE:
            options["type"] = "episode"
        # UNKNOWN ou None: laisser guessit deviner

        return options

    def _map_to_parsed_filename(
        self, result: dict[str, Any], type_hint: Optional[MediaType]
    ) -> ParsedFilename:
        """
        Mappe le resultat guessit vers un ParsedFilename.

        Args:
            result: Dictionnaire retourne par guessit
            type_hint: Type de media attendu (pour override si fourni)

        Returns:
            ParsedFilename avec les informations mappees
        """
        if type_hint is not None and type_hint != MediaType.UNKNOWN:
            media_type = type_hint
        else:
            media_type = self._map_type(result.get("type"))

        episode_title = result.get("episode_title")

        return ParsedFilename(
            title=self._extract_title(result),
            year=self._first_int(result.get("year")),
            media_type=media_type,
            season=self._first_int(result.get("season")),
            episode=self._first_int(result.get("episode")),
            episode_title=str(episode_title) if episode_title else None,
        )

    def _extract_title(self, result: dict[str, Any]) -> str:
        """
        Extrait le titre depuis le resultat guessit.

        Args:
            result: Dictionnaire retourne par guessit

        Returns:
            Titre extrait, ou "Unknown" en dernier recours
        """
        title = result.get("title")
        if title:
            return str(title)
        alternative = result.get("alternative_title")
        if isinstance(alternative, list):
            alternative = alternative[0] if alternative else None
        return str(alternative) if alternative else "Unknown"

    def _map_type(self, guessit_type: Optional[str]) -> MediaType:
        """
        Mappe le type guessit vers MediaType.

        Args:
            guessit_type: Type retourne par guessit ("movie", "episode", etc.)

        Returns:
            MediaType correspondant
        """
        if guessit_type == "movie":
            return MediaType.MOVIE
        elif guessit_type == "episode":
            return MediaType.EPISODE
        else:
            return MediaType.UNKNOWN

    def _first_int(self, value: Any) -> Optional[int]:
        """
        Retourne le premier entier d'une valeur guessit.

        guessit retourne une liste pour les multi-episodes (S01E01E02)
        ou les multi-saisons.
        """
        if value is None:
            return None
        if isinstance(value, list):
            if not value:
                return None
            value = value[0]
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
