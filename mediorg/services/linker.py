"""
Service de placement des fichiers a leur destination.

Quatre strategies de lien, choisies par configuration :
- copy : copie du flux d'octets vers un fichier temporaire voisin, substitue
  atomiquement ; fonctionne meme sans chemin source
- move : deplacement atomique (os.replace), copie intermediaire si la
  destination est sur un autre systeme de fichiers
- symlink : lien symbolique vers le chemin source
- hardlink : lien physique vers le chemin source

Le remplacement d'une destination existante (force) ne supprime jamais
l'ancien fichier avant que le nouveau soit pret : le nouveau fichier est
cree a cote sous un nom temporaire puis substitue atomiquement.
"""

import errno
import os
import shutil
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

from loguru import logger

from mediorg.core.errors import MediaExistsError, PathUnavailableError
from mediorg.core.ports.local_file import ILocalFile


class LinkAction(str, Enum):
    """Strategie de placement d'un fichier renomme."""

    COPY = "copy"
    MOVE = "move"
    SYMLINK = "symlink"
    HARDLINK = "hardlink"


@dataclass(frozen=True)
class LinkStrategy:
    """
    Strategie de lien resolue.

    Attributs:
        action: Action configuree
        requires_path: La strategie a besoin d'un chemin source concret
        overwrites: La strategie remplace elle-meme une destination existante
                    de maniere atomique
        apply: Fonction (fichier local, destination) -> None
    """

    action: LinkAction
    requires_path: bool
    overwrites: bool
    apply: Callable[[ILocalFile, Path], None]


def _temp_sibling(destination: Path) -> Path:
    return destination.with_name(f".{destination.name}.{uuid.uuid4().hex}.tmp")


def copy_media(local: ILocalFile, destination: Path) -> None:
    """
    Copie le contenu du fichier local vers la destination.

    La destination n'apparait qu'une fois la copie complete : une lecture
    interrompue ne laisse jamais de fichier tronque dans la mediatheque.
    """
    temp = _temp_sibling(destination)
    try:
        with local.open() as source, temp.open("wb") as out:
            shutil.copyfileobj(source, out)
        os.replace(temp, destination)
    except Exception:
        if temp.exists():
            temp.unlink()
        raise
    logger.debug(f"Media copie: {destination}")


def move_media(local: ILocalFile, destination: Path) -> None:
    """
    Deplace le fichier local vers la destination.

    os.replace est atomique sur un meme systeme de fichiers et ecrase une
    destination existante. Entre systemes de fichiers differents, le fichier
    est copie sous un nom temporaire, substitue, puis la source est supprimee.
    """
    source = local.path
    try:
        os.replace(source, destination)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        temp = _temp_sibling(destination)
        try:
            shutil.copy2(source, temp)
            os.replace(temp, destination)
        except Exception:
            if temp.exists():
                temp.unlink()
            raise
        source.unlink()
    logger.debug(f"Media deplace: {destination}")


def symlink_media(local: ILocalFile, destination: Path) -> None:
    """Cree un lien symbolique absolu vers le fichier local."""
    os.symlink(os.path.abspath(local.path), destination)
    logger.debug(f"Media lie (symlink): {destination}")


def hardlink_media(local: ILocalFile, destination: Path) -> None:
    """Cree un lien physique vers le fichier local."""
    os.link(local.path, destination)
    logger.debug(f"Media lie (hardlink): {destination}")


# Registre en lecture seule, consulte une seule fois a la construction d'un Linker
STRATEGIES: Mapping[LinkAction, LinkStrategy] = MappingProxyType({
    LinkAction.COPY: LinkStrategy(LinkAction.COPY, False, True, copy_media),
    LinkAction.MOVE: LinkStrategy(LinkAction.MOVE, True, True, move_media),
    LinkAction.SYMLINK: LinkStrategy(LinkAction.SYMLINK, True, False, symlink_media),
    LinkAction.HARDLINK: LinkStrategy(LinkAction.HARDLINK, True, False, hardlink_media),
})


def _same_file(source: Path, destination: Path) -> bool:
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False


class Linker:
    """
    Place un fichier local a sa destination selon la strategie configuree.

    Utilisation:
        linker = Linker(LinkAction.HARDLINK)
        linker.rename(local_file, Path("/library/Movies/Film (2020).mkv"), force=False)
    """

    def __init__(self, action: LinkAction | str) -> None:
        """
        Args:
            action: Strategie de lien (enum ou sa valeur texte)

        Raises:
            ValueError: Si l'action est inconnue
        """
        self._strategy = STRATEGIES[LinkAction(action)]

    @property
    def action(self) -> LinkAction:
        return self._strategy.action

    def rename(self, local: ILocalFile, destination: Path, force: bool = False) -> Path:
        """
        Place le fichier local a la destination.

        Operations:
        1. Destination existante sans force (ou deja ce fichier) : MediaExistsError
        2. Verification du chemin source si la strategie en a besoin
        3. Creation des repertoires parents
        4. Application de la strategie, par substitution atomique si la
           destination existe

        Aucune modification du disque n'a lieu avant l'etape 3.

        Args:
            local: Fichier local a placer
            destination: Chemin de destination complet
            force: Remplacer une destination existante

        Returns:
            Le chemin de destination.

        Raises:
            MediaExistsError: Destination deja presente et force=False,
                              ou destination identique a la source
            PathUnavailableError: Strategie exigeant un chemin sur un fichier sans chemin
            OSError: Echec de l'operation sur le systeme de fichiers
        """
        destination = Path(destination)
        source = local.path
        exists = os.path.lexists(destination)

        if exists and source is not None and _same_file(source, destination):
            raise MediaExistsError(destination)
        if exists and not force:
            raise MediaExistsError(destination)
        if self._strategy.requires_path and source is None:
            raise PathUnavailableError(self.action.value, local.name)

        destination.parent.mkdir(parents=True, exist_ok=True)

        if not exists or self._strategy.overwrites:
            self._strategy.apply(local, destination)
        else:
            self._replace(local, destination)
        return destination

    def _replace(self, local: ILocalFile, destination: Path) -> None:
        """Cree le nouveau fichier a cote de la destination puis le substitue."""
        temp = _temp_sibling(destination)
        try:
            self._strategy.apply(local, temp)
            os.replace(temp, destination)
        except Exception:
            if os.path.lexists(temp):
                temp.unlink()
            raise
        logger.debug(f"Media existant remplace: {destination}")
