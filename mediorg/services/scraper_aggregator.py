"""
Agregation ordonnee des scrapers de metadonnees.

Les scrapers sont essayes dans l'ordre de configuration. Le premier qui
repond l'emporte, les suivants ne sont pas consultes : pas de vote ni de
fusion multi-sources.
"""

from typing import Sequence

from loguru import logger

from mediorg.core.entities.media import Media
from mediorg.core.errors import MediaNotSupportedError, NoScraperError
from mediorg.core.ports.scraper import IScraper


class ScraperAggregator:
    """
    Essaie une liste ordonnee de scrapers pour un media.

    - MediaNotSupportedError : scraper non applicable, on passe au suivant
    - toute autre exception : propagee immediatement a l'appelant
    - premier resultat : retourne sans consulter les scrapers restants
    - liste epuisee : NoScraperError
    """

    def __init__(self, scrapers: Sequence[IScraper]) -> None:
        self._scrapers = tuple(scrapers)

    @property
    def scrapers(self) -> tuple[IScraper, ...]:
        return self._scrapers

    def scrape(self, media: Media) -> Media:
        """
        Resout l'identite canonique d'un media.

        Args:
            media: Media local

        Returns:
            Media distant retourne par le premier scraper applicable

        Raises:
            NoScraperError: Aucun scraper n'a pu traiter le media
        """
        for scraper in self._scrapers:
            try:
                scraped = scraper.scrape(media)
            except MediaNotSupportedError:
                logger.debug(f"Scraper {scraper.source} non applicable: {media}")
                continue
            logger.debug(f"Media resolu par {scraper.source}: {scraped}")
            return scraped
        raise NoScraperError(f"no scrapers to use for media: {media}")
