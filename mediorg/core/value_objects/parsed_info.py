"""
Objets valeur pour les informations de parsing de noms de fichiers.

Objets valeur immutables representant l'identite extraite d'un nom de
fichier video (guessit) et la classification du type de media.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaType(Enum):
    """Type de media detecte depuis le nom de fichier.

    Valeurs:
        MOVIE: Film (long-metrage)
        EPISODE: Episode de serie TV (avec saison/episode)
        UNKNOWN: Type non determine
    """

    MOVIE = "movie"
    EPISODE = "episode"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedFilename:
    """
    Identite extraite du parsing d'un nom de fichier video.

    Les informations techniques (codec, resolution...) ne sont pas
    portees ici : elles relevent de Metadata et de l'extracteur de tags.

    Attributs:
        title: Titre du film ou de la serie (obligatoire)
        year: Annee de sortie (optionnel)
        media_type: Type de media detecte (MOVIE, EPISODE, UNKNOWN)
        season: Numero de saison pour les series
        episode: Numero d'episode pour les series
        episode_title: Titre de l'episode
    """

    title: str
    year: Optional[int] = None
    media_type: MediaType = MediaType.UNKNOWN
    season: Optional[int] = None
    episode: Optional[int] = None
    episode_title: Optional[str] = None
