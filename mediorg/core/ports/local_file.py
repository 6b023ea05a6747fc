"""
Interface port pour l'acces a un fichier media local.

Un fichier local expose toujours un nom et un flux d'octets. Le chemin
sur le disque est optionnel : un fichier sans chemin (flux en memoire,
archive, upload) ne peut etre que copie.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional


class ILocalFile(ABC):
    """
    Interface d'un fichier media local.

    Les strategies move, symlink et hardlink exigent un chemin concret ;
    la strategie copy se contente du flux retourne par open().
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Nom du fichier (avec extension, sans repertoire)."""
        ...

    @abstractmethod
    def open(self) -> BinaryIO:
        """
        Ouvre le contenu du fichier en lecture binaire.

        L'appelant est responsable de la fermeture du flux
        (utilisation recommandee dans un bloc with).
        """
        ...

    @property
    def path(self) -> Optional[Path]:
        """Chemin concret sur le disque, ou None si le fichier n'en a pas."""
        return None

    @property
    def stem(self) -> str:
        """Nom sans la derniere extension."""
        return Path(self.name).stem

    @property
    def extension(self) -> str:
        """Derniere extension, avec le point (ex: ".mkv")."""
        return Path(self.name).suffix
