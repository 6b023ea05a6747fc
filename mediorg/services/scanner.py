"""
Service de scan de la mediatheque.

Orchestre la decouverte des fichiers media en coordonnant le systeme de
fichiers et la fabrique de medias : un media local par fichier trouve.
"""

from pathlib import Path

from loguru import logger

from mediorg.adapters.file_system import FileSystemAdapter, PathFile
from mediorg.core.entities.media import Media
from mediorg.core.errors import ParseError
from mediorg.services.media_factory import MediaFactory


class ScannerService:
    """
    Service orchestrant le scan d'un repertoire racine.

    Coordonne:
    - Le systeme de fichiers pour lister les fichiers media
    - La fabrique de medias pour construire les medias locaux
    """

    def __init__(
        self,
        file_system: FileSystemAdapter,
        media_factory: MediaFactory,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Adaptateur de parcours du systeme de fichiers
            media_factory: Fabrique des medias locaux
        """
        self._file_system = file_system
        self._media_factory = media_factory

    def find_media(self, root: Path, include_subtitles: bool = False) -> list[Media]:
        """
        Recherche les fichiers media sous un repertoire racine.

        Un fichier dont le nom ne peut pas etre interprete (ParseError)
        est ignore avec un avertissement.

        Args:
            root: Repertoire racine a parcourir
            include_subtitles: Inclure les fichiers de sous-titres

        Returns:
            Liste des medias locaux, dans l'ordre des chemins

        Raises:
            FileNotFoundError: Si le repertoire racine n'existe pas
        """
        root = Path(root)
        if not self._file_system.exists(root):
            raise FileNotFoundError(f"media root not found: {root}")

        media_list: list[Media] = []
        for path in self._file_system.list_media_files(root, include_subtitles):
            try:
                media_list.append(self._media_factory.create(PathFile(path)))
            except ParseError as e:
                logger.warning(f"Fichier ignore: {path} ({e})")

        logger.info(f"{len(media_list)} media(s) trouve(s) dans {root}")
        return media_list
