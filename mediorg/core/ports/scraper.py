"""
Interface port pour les scrapers de metadonnees.

Un scraper resout l'identite canonique d'un media (titre, annee, serie,
saison, episode) depuis une source externe. Les implementations reseau
(TMDB, TVDB...) vivent hors du coeur ; le coeur ne connait que ce contrat.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mediorg.core.entities.media import Media


class IScraper(ABC):
    """
    Interface d'un scraper de metadonnees.

    Contrat :
    - retourne un nouveau media de la meme famille (film/episode) avec
      l'identite resolue
    - leve MediaNotSupportedError si le type de media n'est pas gere,
      ce qui permet a l'agregateur de passer au scraper suivant
    - toute autre exception interrompt l'agregation
    """

    @abstractmethod
    def scrape(self, media: "Media") -> "Media":
        """
        Resout l'identite canonique d'un media.

        Args:
            media: Media local a identifier

        Retourne:
            Media distant (ephemere, consomme par la fusion)

        Raises:
            MediaNotSupportedError: Type de media non gere par ce scraper
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Identifiant de la source (ex: 'filename', 'tmdb')."""
        ...
