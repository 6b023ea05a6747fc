"""
Construction des medias locaux depuis les fichiers decouverts.

MediaFactory inspecte l'extension du fichier :
- sous-titre : Subtitle, avec la langue lue dans l'avant-dernier segment
  du nom ("Show.S01E02.en.srt" -> en)
- video : Movie ou Episode provisoire. Les metadonnees de release viennent
  de l'extracteur de tags, l'identite du parser de noms de fichiers. La
  variante reste provisoire : l'etape de scraping/fusion la confirme ou
  echoue avec TypeMismatchError.
"""

from typing import Optional

from babelfish import Language, LanguageReverseError
from loguru import logger

from mediorg.core.entities.media import Episode, Media, Movie, Subtitle
from mediorg.core.errors import ParseError
from mediorg.core.ports.local_file import ILocalFile
from mediorg.core.ports.parser import IFilenameParser
from mediorg.core.value_objects.metadata import Metadata
from mediorg.core.value_objects.parsed_info import MediaType
from mediorg.utils.constants import (
    HEARING_IMPAIRED_MARKERS,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)

_UNDETERMINED = Language("und")


def _language_or_none(token: str) -> Optional[Language]:
    try:
        return Language.fromietf(token)
    except (ValueError, LanguageReverseError):
        return None


def parse_subtitle_language(filename: str) -> tuple[Language, bool]:
    """
    Extrait la langue et le flag malentendant d'un nom de sous-titre.

    Args:
        filename: Nom du fichier (ex: "Show.S01E02.en.srt", "Movie.fr.sdh.srt")

    Returns:
        Tuple (langue, hearing_impaired)

    Raises:
        ParseError: Si aucun segment de langue n'est present ou reconnu
    """
    parts = filename.split(".")
    if len(parts) < 2:
        raise ParseError(f"error parsing subtitle file: {filename}")

    token = parts[-2]
    hearing_impaired = False
    language = None
    # "hi" est aussi le code du hindi : marqueur seulement si une langue le precede
    if token.lower() in HEARING_IMPAIRED_MARKERS and len(parts) >= 3:
        language = _language_or_none(parts[-3])
        hearing_impaired = language is not None

    if language is None:
        try:
            language = Language.fromietf(token)
        except (ValueError, LanguageReverseError) as e:
            raise ParseError(f"unknown subtitle language '{token}': {filename}") from e

    if language == _UNDETERMINED:
        raise ParseError(f"undetermined subtitle language: {filename}")

    return language, hearing_impaired


class MediaFactory:
    """
    Fabrique des medias locaux.

    Sans etat apres construction, peut etre utilisee comme singleton.
    """

    def __init__(self, filename_parser: IFilenameParser) -> None:
        """
        Args:
            filename_parser: Implementation de IFilenameParser pour l'identite
        """
        self._parser = filename_parser

    def create(self, file: ILocalFile) -> Media:
        """
        Construit le media correspondant a un fichier local.

        Raises:
            ParseError: Extension inconnue ou nom de sous-titre invalide
        """
        extension = file.extension.lower()
        if extension in SUBTITLE_EXTENSIONS:
            return self.create_subtitle(file)
        if extension in VIDEO_EXTENSIONS:
            return self.create_video(file)
        raise ParseError(f"unsupported media file: {file.name}")

    def create_subtitle(self, file: ILocalFile) -> Subtitle:
        """Construit un Subtitle depuis le nom du fichier."""
        if file.extension.lower() not in SUBTITLE_EXTENSIONS:
            raise ParseError(f"parsing non subtitle file as subtitle: {file.name}")
        language, hearing_impaired = parse_subtitle_language(file.name)
        return Subtitle(
            file=file, language=language, hearing_impaired=hearing_impaired
        )

    def create_video(self, file: ILocalFile) -> Movie | Episode:
        """
        Construit un Movie ou un Episode provisoire.

        Le nom de release analyse par l'extracteur de tags est le nom du
        fichier sans extension.
        """
        metadata = Metadata.parse(file.stem)
        parsed = self._parser.parse(file.name)

        if parsed.media_type == MediaType.EPISODE:
            media: Movie | Episode = Episode(
                file=file,
                metadata=metadata,
                show=parsed.title,
                season=parsed.season or 0,
                episode=parsed.episode or 0,
                episode_title=parsed.episode_title or "",
                year=parsed.year or 0,
            )
        else:
            media = Movie(
                file=file,
                metadata=metadata,
                title=parsed.title,
                year=parsed.year or 0,
            )

        logger.debug(f"Media local construit: {file.name} -> {media.kind} '{media}'")
        return media
