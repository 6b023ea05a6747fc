"""
Exceptions du domaine MediOrg.

Toutes les erreurs metier derivent de MediorgError, ce qui permet a
l'orchestrateur de distinguer un echec de traitement d'un media (erreur
attendue, classee skip/abort selon la politique) d'un bug de programmation.
"""

from pathlib import Path
from typing import Optional


class MediorgError(Exception):
    """Classe de base des erreurs du domaine."""


class ParseError(MediorgError):
    """Nom de fichier impossible a interpreter (locale de sous-titre absente, extension inconnue)."""


class TypeMismatchError(MediorgError):
    """
    Fusion de deux medias de variantes differentes.

    Attributes:
        local_kind: Variante du media local ("movie", "episode")
        remote_kind: Variante du media distant
    """

    def __init__(self, local_kind: str, remote_kind: str) -> None:
        self.local_kind = local_kind
        self.remote_kind = remote_kind
        super().__init__(
            f"cannot merge {local_kind} with {remote_kind}"
        )


class UnsupportedOperationError(MediorgError):
    """Operation non supportee par ce type de media (fusion ou telechargement d'un sous-titre)."""


class MediaNotSupportedError(MediorgError):
    """Le scraper ne sait pas traiter ce type de media : l'agregateur passe au suivant."""


class NoScraperError(MediorgError):
    """Aucun scraper n'a pu traiter le media."""


class UnknownMediaError(MediorgError):
    """Le media fusionne n'est ni un film ni un episode."""


class TemplateError(MediorgError):
    """Template de nommage invalide (champ inconnu, acces attribut/index, format incorrect)."""


class TemplateMissingError(MediorgError):
    """Aucun template configure pour cette variante de media."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"missing template for {kind}")


class MediaExistsError(MediorgError):
    """
    Le fichier destination existe deja et le renommage n'est pas force.

    Condition recuperable : aucun changement n'a ete fait sur le disque.

    Attributes:
        destination: Chemin deja occupe
    """

    def __init__(self, destination: Path) -> None:
        self.destination = destination
        super().__init__(f"media already exists: {destination}")


class PathUnavailableError(MediorgError):
    """
    Strategie de lien necessitant un chemin source, sur un fichier qui n'en a pas.

    Attributes:
        action: Nom de la strategie demandee (move, symlink, hardlink)
        name: Nom du fichier source
    """

    def __init__(self, action: str, name: Optional[str] = None) -> None:
        self.action = action
        self.name = name
        super().__init__(f"can't {action} media without a path: {name}")
