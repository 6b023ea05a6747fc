"""
Interface port pour le parsing de noms de fichiers.

Interface abstraite definissant le contrat pour extraire l'identite
(titre, annee, saison, episode) d'un nom de fichier video.
"""

from abc import ABC, abstractmethod
from typing import Optional

from mediorg.core.value_objects.parsed_info import MediaType, ParsedFilename


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de fichiers video.

    L'implementation utilise la bibliotheque guessit.
    """

    @abstractmethod
    def parse(
        self, filename: str, type_hint: Optional[MediaType] = None
    ) -> ParsedFilename:
        """
        Parse un nom de fichier video et extrait son identite.

        Args:
            filename: Nom du fichier, ou chemin complet pour exploiter
                      aussi les noms des repertoires parents
            type_hint: Indication du type de media attendu

        Retourne:
            ParsedFilename avec les informations extraites.
            Le champ title est toujours renseigne.
        """
        ...
