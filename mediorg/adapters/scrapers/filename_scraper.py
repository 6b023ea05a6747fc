"""
Scraper hors ligne base sur le chemin complet du fichier.

Le nom de fichier seul est souvent ambigu ("01.mkv", "Film.mkv") alors que
les repertoires parents portent l'information manquante
("Show/Season 2/01.mkv", "Film (1999)/Film.mkv"). Ce scraper relance le
parser sur le chemin complet pour resoudre l'identite canonique.
"""

from mediorg.core.entities.media import Episode, Media, Movie
from mediorg.core.errors import MediaNotSupportedError
from mediorg.core.ports.parser import IFilenameParser
from mediorg.core.ports.scraper import IScraper
from mediorg.core.value_objects.parsed_info import MediaType


class FilenameScraper(IScraper):
    """
    Resout l'identite d'un film ou d'un episode depuis son chemin.

    Le media retourne ne porte que l'identite : pas de fichier ni de
    metadonnees techniques, la fusion les reprend du media local.
    """

    def __init__(self, filename_parser: IFilenameParser) -> None:
        self._parser = filename_parser

    @property
    def source(self) -> str:
        return "filename"

    def scrape(self, media: Media) -> Media:
        """
        Raises:
            MediaNotSupportedError: Sous-titre, ou fichier sans chemin
        """
        if media.as_subtitle() is not None:
            raise MediaNotSupportedError("subtitles are not scraped from filenames")
        if media.file is None or media.file.path is None:
            raise MediaNotSupportedError(f"media has no path to scrape: {media}")

        episode = media.as_episode()
        type_hint = MediaType.EPISODE if episode is not None else MediaType.MOVIE
        parsed = self._parser.parse(str(media.file.path), type_hint)

        if episode is not None:
            return Episode(
                show=parsed.title,
                season=parsed.season if parsed.season is not None else episode.season,
                episode=parsed.episode if parsed.episode is not None else episode.episode,
                episode_title=parsed.episode_title or "",
                year=parsed.year or 0,
            )
        return Movie(title=parsed.title, year=parsed.year or 0)
