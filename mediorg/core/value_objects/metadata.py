"""
Objet valeur pour les metadonnees de release.

Metadata regroupe les attributs techniques extraits d'un nom de release
(groupe, codec, qualite, source, tags libres). Il est construit une seule
fois depuis une chaine brute et n'est jamais modifie ensuite.
"""

from dataclasses import dataclass
from typing import Any

from mediorg.core import tag_extractor
from mediorg.core.value_objects.release_tags import CodecTag, QualityTag, SourceTag


@dataclass(frozen=True)
class Metadata:
    """
    Metadonnees techniques d'une release.

    Attributs :
        group : Groupe de release ("" si inconnu)
        codec : Codec video
        quality : Resolution
        source : Origine de la release
        tags : Tous les mots-cles reconnus, dans l'ordre d'apparition
    """

    group: str = ""
    codec: CodecTag = CodecTag.UNKNOWN
    quality: QualityTag = QualityTag.UNKNOWN
    source: SourceTag = SourceTag.UNKNOWN
    tags: tuple[str, ...] = ()

    @classmethod
    def parse(cls, release_name: str) -> "Metadata":
        """
        Construit les metadonnees depuis un nom de release.

        Args:
            release_name: Nom de release sans chemin ni extension

        Returns:
            Metadata avec les champs extraits (UNKNOWN/vide si absents).
        """
        return cls(
            group=tag_extractor.group(release_name),
            codec=tag_extractor.codec(release_name),
            quality=tag_extractor.quality(release_name),
            source=tag_extractor.source(release_name),
            tags=tag_extractor.tags(release_name),
        )

    def to_dict(self) -> dict[str, Any]:
        """Vue JSON des metadonnees (sans les tags libres)."""
        return {
            "group": self.group,
            "codec": self.codec.value,
            "quality": self.quality.value,
            "source": self.source.value,
        }

    def __str__(self) -> str:
        return ",".join(
            [self.group, self.codec.value, self.quality.value, self.source.value]
        )
