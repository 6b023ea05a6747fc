"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementations concretes de ILocalFile (fichier sur disque, flux en memoire)
et utilitaires de parcours des repertoires pour le scan de la mediatheque.
"""

import io
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional

from mediorg.core.ports.local_file import ILocalFile
from mediorg.utils.constants import (
    IGNORED_PATTERNS,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)


class PathFile(ILocalFile):
    """
    Fichier local adosse a un chemin concret.

    Supporte toutes les strategies de lien (copy, move, symlink, hardlink).
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def open(self) -> BinaryIO:
        return self._path.open("rb")

    def __repr__(self) -> str:
        return f"PathFile({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathFile):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)


class StreamFile(ILocalFile):
    """
    Fichier local sans chemin, dont le contenu est fourni par un flux.

    Seule la strategie copy est applicable.

    Args:
        name: Nom du fichier (avec extension)
        opener: Fonction retournant un nouveau flux binaire a chaque appel,
                ou contenu en octets
    """

    def __init__(self, name: str, opener: Callable[[], BinaryIO] | bytes) -> None:
        self._name = name
        if isinstance(opener, bytes):
            content = opener
            self._opener: Callable[[], BinaryIO] = lambda: io.BytesIO(content)
        else:
            self._opener = opener

    @property
    def name(self) -> str:
        return self._name

    def open(self) -> BinaryIO:
        return self._opener()

    def __repr__(self) -> str:
        return f"StreamFile({self._name!r})"


class FileSystemAdapter:
    """
    Parcours du systeme de fichiers reel pour trouver les medias.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def list_media_files(
        self,
        directory: Path,
        include_subtitles: bool = False,
    ) -> Iterator[Path]:
        """
        Liste les fichiers media dans un repertoire (recursif).

        Filtre:
        - Par extension (VIDEO_EXTENSIONS, et SUBTITLE_EXTENSIONS si demande)
        - Exclut les symlinks
        - Exclut les fichiers contenant IGNORED_PATTERNS

        Les chemins sont produits dans l'ordre alphabetique pour un
        traitement deterministe.

        Args:
            directory: Repertoire a scanner
            include_subtitles: Inclure aussi les fichiers de sous-titres

        Yields:
            Chemins vers les fichiers media valides
        """
        extensions = VIDEO_EXTENSIONS
        if include_subtitles:
            extensions = extensions | SUBTITLE_EXTENSIONS

        for path in sorted(directory.rglob("*")):
            # Ignorer les symlinks (deja lies par un traitement precedent)
            if path.is_symlink():
                continue

            if path.is_dir():
                continue

            if path.suffix.lower() not in extensions:
                continue

            # Verifier les patterns ignores (insensible a la casse)
            filename_lower = path.name.lower()
            if any(pattern in filename_lower for pattern in IGNORED_PATTERNS):
                continue

            yield path
